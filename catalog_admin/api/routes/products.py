"""Product pages: paginated list, details, create, edit, delete.

Also exposes the sample-data seeding action as a JSON endpoint.
"""

from typing import Annotated

from fastapi import APIRouter, Form, Query, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.responses import Response

from catalog_admin.api.deps import DbSession, PageSize
from catalog_admin.api.templating import render
from catalog_admin.core.errors import CatalogError, FormValidationError, StoreError
from catalog_admin.core.pagination import parse_page
from catalog_admin.infra.logging import get_logger
from catalog_admin.schemas.common import TestDataResult
from catalog_admin.schemas.product import ProductForm, ProductRead
from catalog_admin.services import create_test_data, product_service

router = APIRouter()
logger = get_logger(__name__)

INDEX_URL = "/products"


def _redirect_to_index() -> RedirectResponse:
    return RedirectResponse(url=INDEX_URL, status_code=status.HTTP_303_SEE_OTHER)


async def _render_form(
    request: Request,
    db: AsyncSession,
    template: str,
    form: ProductForm,
    exc: CatalogError | None = None,
) -> Response:
    """Render a product form with the category select list."""
    context = {
        "form": form,
        "categories": await product_service.category_options(db),
    }
    if exc is None:
        return render(request, template, context)
    context["error"] = exc.message
    return render(request, template, context, status_code=exc.status_code)


@router.get("", response_class=HTMLResponse, name="product_index")
async def index(
    request: Request,
    db: DbSession,
    page_size: PageSize,
    page: Annotated[str | None, Query()] = None,
) -> Response:
    product_page = await product_service.list_products(
        db, page=parse_page(page), page_size=page_size
    )
    return render(
        request,
        "products/index.html",
        {"products": product_page.items, "pagination": product_page.pagination},
    )


@router.get("/details/{product_id:int}", response_class=HTMLResponse, name="product_details")
async def details(request: Request, product_id: int, db: DbSession) -> Response:
    row = await product_service.get_product(db, product_id)
    return render(request, "products/details.html", {"product": ProductRead.from_row(row)})


@router.get("/create", response_class=HTMLResponse, name="product_create")
async def create_form(request: Request, db: DbSession) -> Response:
    return await _render_form(request, db, "products/create.html", ProductForm())


@router.post("/create", response_class=HTMLResponse)
async def create_submit(
    request: Request,
    db: DbSession,
    name: Annotated[str | None, Form()] = None,
    category_id: Annotated[str | None, Form()] = None,
) -> Response:
    form = ProductForm(name=name, category_id=category_id)
    try:
        await product_service.create_product(db, form)
    except (FormValidationError, StoreError) as e:
        return await _render_form(request, db, "products/create.html", form, e)
    return _redirect_to_index()


@router.get("/edit/{product_id:int}", response_class=HTMLResponse, name="product_edit")
async def edit_form(request: Request, product_id: int, db: DbSession) -> Response:
    row = await product_service.get_product(db, product_id)
    form = ProductForm(id=row.id, name=row.name, category_id=row.category_id)
    return await _render_form(request, db, "products/edit.html", form)


@router.post("/edit/{product_id:int}", response_class=HTMLResponse)
async def edit_submit(
    request: Request,
    product_id: int,
    db: DbSession,
    id: Annotated[str | None, Form()] = None,
    name: Annotated[str | None, Form()] = None,
    category_id: Annotated[str | None, Form()] = None,
) -> Response:
    form = ProductForm(id=id, name=name, category_id=category_id)
    try:
        await product_service.update_product(db, product_id, form)
    except (FormValidationError, StoreError) as e:
        form.id = product_id
        return await _render_form(request, db, "products/edit.html", form, e)
    return _redirect_to_index()


@router.get("/delete/{product_id:int}", response_class=HTMLResponse, name="product_delete")
async def delete_confirm(request: Request, product_id: int, db: DbSession) -> Response:
    row = await product_service.get_product(db, product_id)
    return render(request, "products/delete.html", {"product": ProductRead.from_row(row)})


@router.post("/delete/{product_id:int}", response_class=HTMLResponse)
async def delete_submit(request: Request, product_id: int, db: DbSession) -> Response:
    try:
        await product_service.delete_product(db, product_id)
    except StoreError as e:
        row = await product_service.get_product(db, product_id)
        return render(
            request,
            "products/delete.html",
            {"product": ProductRead.from_row(row), "error": e.message},
            status_code=e.status_code,
        )
    return _redirect_to_index()


@router.get(
    "/create-test-data",
    response_model=TestDataResult,
    response_model_exclude_none=True,
    summary="Seed sample categories and products",
)
async def seed(db: DbSession) -> TestDataResult:
    """Create sample data for trying out pagination."""
    result = await create_test_data(db)
    logger.info("Test data requested", success=result.success)
    return result
