"""Sample data for exercising the paginated product list."""

import random

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_admin.infra.logging import get_logger
from catalog_admin.models import Category, Product
from catalog_admin.schemas.common import TestDataResult

logger = get_logger(__name__)

SAMPLE_CATEGORIES = ("Electronics", "Books", "Clothing", "Sports", "Food")
MIN_PRODUCTS = 25
TARGET_PRODUCTS = 30


async def _count_products(db: AsyncSession) -> int:
    return int((await db.execute(select(func.count()).select_from(Product))).scalar_one())


async def create_test_data(db: AsyncSession, rng: random.Random | None = None) -> TestDataResult:
    """Seed sample categories and products.

    Categories are added only when none exist. Products are topped up to
    TARGET_PRODUCTS only when fewer than MIN_PRODUCTS exist, each assigned a
    random category.

    Args:
        db: Database session
        rng: Random source for category assignment

    Returns:
        Success envelope with the final product count, or the error message
    """
    rng = rng or random.Random()

    try:
        categories = list((await db.execute(select(Category).order_by(Category.id))).scalars().all())
        if not categories:
            db.add_all([Category(name=name) for name in SAMPLE_CATEGORIES])
            await db.commit()
            categories = list((await db.execute(select(Category).order_by(Category.id))).scalars().all())
            logger.info("Sample categories created", count=len(categories))

        existing = await _count_products(db)
        if existing < MIN_PRODUCTS:
            db.add_all(
                [
                    Product(name=f"Test Product {i}", category_id=rng.choice(categories).id)
                    for i in range(existing + 1, TARGET_PRODUCTS + 1)
                ]
            )
            await db.commit()
            logger.info("Sample products created", count=TARGET_PRODUCTS - existing)

        total = await _count_products(db)
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("Test data creation failed", error=str(e))
        return TestDataResult(success=False, error=str(e))

    return TestDataResult(
        success=True,
        message=f"Test data created successfully! Total products: {total}",
    )
