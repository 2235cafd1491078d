"""FastAPI dependencies for dependency injection."""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_admin.config import settings
from catalog_admin.infra.database import get_db_session


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session for the lifetime of one request."""
    async with get_db_session() as session:
        yield session


def get_page_size() -> int:
    """Product list page size from settings."""
    return settings.page_size


# Type aliases for cleaner annotations
DbSession = Annotated[AsyncSession, Depends(get_db)]
PageSize = Annotated[int, Depends(get_page_size)]
