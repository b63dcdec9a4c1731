# Database modules

from .catalog import catalog_db, CatalogDatabase
from .bundles import bundle_db, BundleDatabase

__all__ = [
    "catalog_db",
    "CatalogDatabase",
    "bundle_db",
    "BundleDatabase",
]
