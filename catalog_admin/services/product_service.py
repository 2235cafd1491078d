"""Product CRUD operations and the paginated listing."""

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from catalog_admin.core.errors import FormValidationError, NotFoundError, StoreError
from catalog_admin.core.pagination import Pagination
from catalog_admin.infra.logging import get_logger
from catalog_admin.models import Category, Product
from catalog_admin.schemas.product import CategoryOption, ProductForm, ProductPage, ProductRead

logger = get_logger(__name__)


async def list_products(db: AsyncSession, page: int, page_size: int) -> ProductPage:
    """Return one page of products ordered by id.

    ``page`` is clamped into the available range, so any integer is accepted.
    """
    total = int((await db.execute(select(func.count()).select_from(Product))).scalar_one())
    pagination = Pagination.build(page, total, page_size)

    stmt = (
        select(Product.id, Product.name, Product.category_id, Category.name.label("category_name"))
        .join(Category, Product.category_id == Category.id)
        .order_by(Product.id)
        .offset(pagination.offset)
        .limit(pagination.page_size)
    )
    rows = (await db.execute(stmt)).all()

    logger.debug(
        "Products listed",
        requested_page=page,
        page=pagination.current_page,
        total_pages=pagination.total_pages,
        total_records=total,
    )
    return ProductPage(
        items=[ProductRead.model_validate(r._asdict()) for r in rows],
        pagination=pagination,
    )


async def get_product(db: AsyncSession, product_id: int | None) -> Product:
    """Fetch a product with its category, or raise NotFoundError."""
    if product_id is None:
        raise NotFoundError("Product")
    stmt = (
        select(Product)
        .options(selectinload(Product.category))
        .where(Product.id == product_id)
    )
    row = (await db.execute(stmt)).scalars().first()
    if row is None:
        raise NotFoundError("Product", product_id)
    return row


async def category_options(db: AsyncSession) -> list[CategoryOption]:
    rows = await db.execute(select(Category.id, Category.name).order_by(Category.name))
    return [CategoryOption.model_validate(r._asdict()) for r in rows.all()]


async def _require_category(db: AsyncSession, category_id: int) -> None:
    if await db.get(Category, category_id) is None:
        raise FormValidationError("Selected category does not exist")


async def create_product(db: AsyncSession, form: ProductForm) -> Product:
    form.require_valid()
    await _require_category(db, form.category_id)

    row = Product(name=form.name, category_id=form.category_id)
    try:
        db.add(row)
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.warning("Product create failed", error=str(e))
        raise StoreError(f"Error: {e}") from e

    logger.info("Product created", product_id=row.id, category_id=row.category_id)
    return row


async def update_product(db: AsyncSession, product_id: int, form: ProductForm) -> Product:
    """Rename a product and/or move it to another category.

    Raises:
        NotFoundError: the hidden form id disagrees with the path or the row is gone
        FormValidationError: invalid name or category
        StoreError: the write failed
    """
    if form.id is not None and form.id != product_id:
        raise NotFoundError("Product", product_id)

    row = await get_product(db, product_id)
    form.require_valid()
    await _require_category(db, form.category_id)

    try:
        row.name = form.name
        row.category_id = form.category_id
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.warning("Product update failed", product_id=product_id, error=str(e))
        raise StoreError(f"Error updating product: {e}") from e

    logger.info("Product updated", product_id=product_id, category_id=row.category_id)
    return row


async def delete_product(db: AsyncSession, product_id: int) -> bool:
    """Delete a product.

    Returns:
        True if a row was deleted, False if it did not exist
    """
    row = await db.get(Product, product_id)
    if row is None:
        logger.info("Product already absent", product_id=product_id)
        return False

    try:
        await db.delete(row)
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.warning("Product delete failed", product_id=product_id, error=str(e))
        raise StoreError(f"Error deleting product: {e}") from e

    logger.info("Product deleted", product_id=product_id)
    return True
