"""
Catalog module for the healing texts system.
Holds the immutable, process-lifetime collection of healing quotes.
"""

from .models import QuoteRecord
from .store import CatalogStore, catalog_store, ALL_CATEGORIES

__all__ = ['QuoteRecord', 'CatalogStore', 'catalog_store', 'ALL_CATEGORIES']
