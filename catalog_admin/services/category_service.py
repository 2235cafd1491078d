"""Category CRUD operations.

Each write touches a single row and commits immediately. Storage failures are
rolled back and re-raised as StoreError carrying the driver message.
"""

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_admin.core.errors import CategoryInUseError, NotFoundError, StoreError
from catalog_admin.infra.logging import get_logger
from catalog_admin.models import Category, Product
from catalog_admin.schemas.category import CategoryForm

logger = get_logger(__name__)


async def list_categories(db: AsyncSession) -> list[Category]:
    rows = await db.execute(select(Category).order_by(Category.id))
    return list(rows.scalars().all())


async def get_category(db: AsyncSession, category_id: int | None) -> Category:
    """Fetch a category or raise NotFoundError."""
    if category_id is None:
        raise NotFoundError("Category")
    row = await db.get(Category, category_id)
    if row is None:
        raise NotFoundError("Category", category_id)
    return row


async def count_products(db: AsyncSession, category_id: int) -> int:
    stmt = select(func.count()).select_from(Product).where(Product.category_id == category_id)
    return int((await db.execute(stmt)).scalar_one())


async def create_category(db: AsyncSession, form: CategoryForm) -> Category:
    form.require_valid()

    row = Category(name=form.name)
    try:
        db.add(row)
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.warning("Category create failed", error=str(e))
        raise StoreError(f"Error: {e}") from e

    logger.info("Category created", category_id=row.id)
    return row


async def update_category(db: AsyncSession, category_id: int, form: CategoryForm) -> Category:
    """Rename a category.

    Raises:
        NotFoundError: the hidden form id disagrees with the path or the row is gone
        FormValidationError: the name is blank or too long
        StoreError: the write failed
    """
    if form.id is not None and form.id != category_id:
        raise NotFoundError("Category", category_id)

    row = await get_category(db, category_id)
    form.require_valid()

    try:
        row.name = form.name
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.warning("Category update failed", category_id=category_id, error=str(e))
        raise StoreError(f"Error updating category: {e}") from e

    logger.info("Category updated", category_id=category_id)
    return row


async def delete_category(db: AsyncSession, category_id: int) -> bool:
    """Delete a category that no product references.

    Returns:
        True if a row was deleted, False if it did not exist

    Raises:
        CategoryInUseError: products still belong to the category
    """
    row = await db.get(Category, category_id)
    if row is None:
        logger.info("Category already absent", category_id=category_id)
        return False

    in_use = await count_products(db, category_id)
    if in_use:
        raise CategoryInUseError(category_id, in_use)

    try:
        await db.delete(row)
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.warning("Category delete failed", category_id=category_id, error=str(e))
        raise StoreError(f"Error deleting category: {e}") from e

    logger.info("Category deleted", category_id=category_id)
    return True
