from .catalog_loader import CatalogLoadError, builtin_catalog, get_default_catalog, load_filter_catalog
from .sunscreen_batch import BatchResult, SanitationFailure, sanitize_sunscreens, sort_by_brand_product
from .sunscreen_sanitation import SanitationError, sanitize_sunscreen

__all__ = [
    "BatchResult",
    "builtin_catalog",
    "CatalogLoadError",
    "get_default_catalog",
    "load_filter_catalog",
    "SanitationError",
    "SanitationFailure",
    "sanitize_sunscreen",
    "sanitize_sunscreens",
    "sort_by_brand_product",
]
