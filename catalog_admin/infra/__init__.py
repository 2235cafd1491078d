"""Infrastructure - Database and logging."""

from catalog_admin.infra.database import (
    close_db_engine,
    create_tables,
    get_db_session,
    verify_db_connection,
)
from catalog_admin.infra.logging import bind_request_context, get_logger, setup_logging

__all__ = [
    "get_db_session",
    "close_db_engine",
    "create_tables",
    "verify_db_connection",
    "setup_logging",
    "bind_request_context",
    "get_logger",
]
