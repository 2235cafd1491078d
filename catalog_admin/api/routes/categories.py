"""Category pages: list, details, create, edit, delete."""

from typing import Annotated

from fastapi import APIRouter, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from starlette.responses import Response

from catalog_admin.api.deps import DbSession
from catalog_admin.api.templating import render
from catalog_admin.core.errors import (
    CatalogError,
    CategoryInUseError,
    FormValidationError,
    StoreError,
)
from catalog_admin.infra.logging import get_logger
from catalog_admin.schemas.category import CategoryForm, CategoryRead
from catalog_admin.services import category_service

router = APIRouter()
logger = get_logger(__name__)

INDEX_URL = "/categories"


def _redirect_to_index() -> RedirectResponse:
    return RedirectResponse(url=INDEX_URL, status_code=status.HTTP_303_SEE_OTHER)


def _form_error(request: Request, template: str, form: CategoryForm, exc: CatalogError) -> Response:
    return render(
        request,
        template,
        {"form": form, "error": exc.message},
        status_code=exc.status_code,
    )


@router.get("", response_class=HTMLResponse, name="category_index")
async def index(request: Request, db: DbSession) -> Response:
    rows = await category_service.list_categories(db)
    return render(
        request,
        "categories/index.html",
        {"categories": [CategoryRead.model_validate(r) for r in rows]},
    )


@router.get("/details/{category_id:int}", response_class=HTMLResponse, name="category_details")
async def details(request: Request, category_id: int, db: DbSession) -> Response:
    row = await category_service.get_category(db, category_id)
    product_count = await category_service.count_products(db, category_id)
    return render(
        request,
        "categories/details.html",
        {"category": CategoryRead.model_validate(row), "product_count": product_count},
    )


@router.get("/create", response_class=HTMLResponse, name="category_create")
async def create_form(request: Request) -> Response:
    return render(request, "categories/create.html", {"form": CategoryForm()})


@router.post("/create", response_class=HTMLResponse)
async def create_submit(
    request: Request,
    db: DbSession,
    name: Annotated[str | None, Form()] = None,
) -> Response:
    form = CategoryForm(name=name)
    try:
        await category_service.create_category(db, form)
    except (FormValidationError, StoreError) as e:
        return _form_error(request, "categories/create.html", form, e)
    return _redirect_to_index()


@router.get("/edit/{category_id:int}", response_class=HTMLResponse, name="category_edit")
async def edit_form(request: Request, category_id: int, db: DbSession) -> Response:
    row = await category_service.get_category(db, category_id)
    return render(
        request,
        "categories/edit.html",
        {"form": CategoryForm(id=row.id, name=row.name)},
    )


@router.post("/edit/{category_id:int}", response_class=HTMLResponse)
async def edit_submit(
    request: Request,
    category_id: int,
    db: DbSession,
    id: Annotated[str | None, Form()] = None,
    name: Annotated[str | None, Form()] = None,
) -> Response:
    form = CategoryForm(id=id, name=name)
    try:
        await category_service.update_category(db, category_id, form)
    except (FormValidationError, StoreError) as e:
        form.id = category_id
        return _form_error(request, "categories/edit.html", form, e)
    return _redirect_to_index()


@router.get("/delete/{category_id:int}", response_class=HTMLResponse, name="category_delete")
async def delete_confirm(request: Request, category_id: int, db: DbSession) -> Response:
    row = await category_service.get_category(db, category_id)
    product_count = await category_service.count_products(db, category_id)
    return render(
        request,
        "categories/delete.html",
        {"category": CategoryRead.model_validate(row), "product_count": product_count},
    )


@router.post("/delete/{category_id:int}", response_class=HTMLResponse)
async def delete_submit(request: Request, category_id: int, db: DbSession) -> Response:
    try:
        await category_service.delete_category(db, category_id)
    except (CategoryInUseError, StoreError) as e:
        row = await category_service.get_category(db, category_id)
        logger.info("Category delete refused", category_id=category_id, reason=e.message)
        return render(
            request,
            "categories/delete.html",
            {
                "category": CategoryRead.model_validate(row),
                "product_count": await category_service.count_products(db, category_id),
                "error": e.message,
            },
            status_code=e.status_code,
        )
    return _redirect_to_index()
