"""Catalog Admin - Category and Product administration web application."""

__version__ = "0.1.0"
