"""Tests for product service operations."""

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_admin.core.errors import FormValidationError, NotFoundError, StoreError
from catalog_admin.models import Category, Product
from catalog_admin.schemas import ProductForm
from catalog_admin.services import product_service


async def _product_count(session: AsyncSession) -> int:
    return (await session.execute(select(func.count()).select_from(Product))).scalar_one()


def _fail_commits(monkeypatch, session: AsyncSession, message: str) -> None:
    async def failing_commit():
        raise OperationalError("COMMIT", {}, Exception(message))

    monkeypatch.setattr(session, "commit", failing_commit)


class TestListProducts:
    @pytest.mark.asyncio
    async def test_empty_store(self, db_session: AsyncSession):
        page = await product_service.list_products(db_session, page=1, page_size=10)

        assert page.items == []
        assert page.pagination.total_pages == 1
        assert page.pagination.total_records == 0

    @pytest.mark.asyncio
    async def test_first_page(self, db_session: AsyncSession, make_products):
        await make_products(25)

        page = await product_service.list_products(db_session, page=1, page_size=10)

        assert [p.name for p in page.items] == [f"Item {i}" for i in range(1, 11)]
        assert page.items[0].category_name == "Electronics"
        assert page.pagination.total_pages == 3
        assert page.pagination.total_records == 25

    @pytest.mark.asyncio
    async def test_last_partial_page(self, db_session: AsyncSession, make_products):
        await make_products(25)

        page = await product_service.list_products(db_session, page=3, page_size=10)

        assert [p.name for p in page.items] == [f"Item {i}" for i in range(21, 26)]

    @pytest.mark.asyncio
    async def test_page_past_end_is_clamped(self, db_session: AsyncSession, make_products):
        await make_products(12)

        page = await product_service.list_products(db_session, page=50, page_size=10)

        assert page.pagination.current_page == 2
        assert len(page.items) == 2

    @pytest.mark.asyncio
    async def test_page_below_one_is_clamped(self, db_session: AsyncSession, make_products):
        await make_products(3)

        page = await product_service.list_products(db_session, page=-1, page_size=10)

        assert page.pagination.current_page == 1
        assert len(page.items) == 3


class TestCreateProduct:
    @pytest.mark.asyncio
    async def test_creates_row(self, db_session: AsyncSession, category: Category):
        form = ProductForm(name="Phone", category_id=str(category.id))
        row = await product_service.create_product(db_session, form)

        assert row.id is not None
        assert row.category_id == category.id

    @pytest.mark.asyncio
    async def test_blank_name_writes_nothing(self, db_session: AsyncSession, category: Category):
        with pytest.raises(FormValidationError, match="Product name is required"):
            await product_service.create_product(
                db_session, ProductForm(name="", category_id=str(category.id))
            )

        assert await _product_count(db_session) == 0

    @pytest.mark.asyncio
    async def test_requires_category(self, db_session: AsyncSession):
        with pytest.raises(FormValidationError, match="Please select a category"):
            await product_service.create_product(db_session, ProductForm(name="Phone"))

    @pytest.mark.asyncio
    async def test_unknown_category_writes_nothing(self, db_session: AsyncSession):
        with pytest.raises(FormValidationError, match="does not exist"):
            await product_service.create_product(
                db_session, ProductForm(name="Phone", category_id="77")
            )

        assert await _product_count(db_session) == 0

    @pytest.mark.asyncio
    async def test_store_failure_becomes_store_error(
        self, db_session: AsyncSession, category: Category, monkeypatch
    ):
        _fail_commits(monkeypatch, db_session, "disk I/O error")

        with pytest.raises(StoreError) as exc_info:
            await product_service.create_product(
                db_session, ProductForm(name="Phone", category_id=str(category.id))
            )

        assert exc_info.value.message.startswith("Error: ")
        assert "disk I/O error" in exc_info.value.message
        assert await _product_count(db_session) == 0


class TestGetProduct:
    @pytest.mark.asyncio
    async def test_loads_category(self, db_session: AsyncSession, product: Product):
        row = await product_service.get_product(db_session, product.id)

        assert row.category.name == "Electronics"

    @pytest.mark.asyncio
    async def test_missing_row(self, db_session: AsyncSession):
        with pytest.raises(NotFoundError):
            await product_service.get_product(db_session, 5)


class TestUpdateProduct:
    @pytest.mark.asyncio
    async def test_moves_to_other_category(self, db_session: AsyncSession, product: Product):
        books = Category(name="Books")
        db_session.add(books)
        await db_session.commit()

        form = ProductForm(id=str(product.id), name="Notebook", category_id=str(books.id))
        await product_service.update_product(db_session, product.id, form)

        name, category_id = (
            await db_session.execute(
                select(Product.name, Product.category_id).where(Product.id == product.id)
            )
        ).one()
        assert name == "Notebook"
        assert category_id == books.id

    @pytest.mark.asyncio
    async def test_mismatched_form_id_is_not_found(self, db_session: AsyncSession, product: Product):
        form = ProductForm(id="999", name="Notebook", category_id=str(product.category_id))
        with pytest.raises(NotFoundError):
            await product_service.update_product(db_session, product.id, form)

    @pytest.mark.asyncio
    async def test_invalid_category(self, db_session: AsyncSession, product: Product):
        form = ProductForm(name="Laptop", category_id="0")
        with pytest.raises(FormValidationError):
            await product_service.update_product(db_session, product.id, form)

    @pytest.mark.asyncio
    async def test_store_failure_keeps_old_values(
        self, db_session: AsyncSession, product: Product, monkeypatch
    ):
        _fail_commits(monkeypatch, db_session, "database is locked")
        form = ProductForm(id=str(product.id), name="Notebook", category_id=str(product.category_id))

        with pytest.raises(StoreError) as exc_info:
            await product_service.update_product(db_session, product.id, form)

        assert exc_info.value.message.startswith("Error updating product: ")
        assert "database is locked" in exc_info.value.message
        name = (
            await db_session.execute(select(Product.name).where(Product.id == product.id))
        ).scalar_one()
        assert name == "Laptop"


class TestDeleteProduct:
    @pytest.mark.asyncio
    async def test_deletes(self, db_session: AsyncSession, product: Product):
        assert await product_service.delete_product(db_session, product.id) is True
        assert await _product_count(db_session) == 0

    @pytest.mark.asyncio
    async def test_missing_row_is_noop(self, db_session: AsyncSession):
        assert await product_service.delete_product(db_session, 3) is False


@pytest.mark.asyncio
async def test_category_options_sorted_by_name(db_session: AsyncSession):
    db_session.add_all([Category(name="Sports"), Category(name="Books")])
    await db_session.commit()

    options = await product_service.category_options(db_session)

    assert [o.name for o in options] == ["Books", "Sports"]
