"""Runtime components: pagination, classification, hydration and transport.

The query executor lives in ``runtime.query`` and is imported from there;
it depends on the table declarations, which in turn depend on this package.
"""

from .classifier import ErrorClassifier, is_not_found_error
from .hydrator import FromKey, FromListing, HydrateSource, ResourceHydrator
from .pagination import CursorPaginator, extract_url_offset
from .table_registry import TableRegistration, TableRegistry, get_table_registry

__all__ = [
    "CursorPaginator",
    "ErrorClassifier",
    "FromKey",
    "FromListing",
    "HydrateSource",
    "ResourceHydrator",
    "TableRegistration",
    "TableRegistry",
    "extract_url_offset",
    "get_table_registry",
    "is_not_found_error",
]
