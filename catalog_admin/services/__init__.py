"""Services - Category and product operations."""

from catalog_admin.services import category_service, product_service
from catalog_admin.services.seeding import create_test_data

__all__ = ["category_service", "product_service", "create_test_data"]
