"""
Sunscreen submission sanitation.

Validates untrusted sunscreen submissions, cleans up product names and
ingredient lists, detects known UV filters from the ingredient list and
merges them with the filters the submitter declared.
"""

from services.sunscreen_sanitation.catalog import FilterCatalog, FilterCatalogEntry
from services.sunscreen_sanitation.detection import (
    IngredientMatch,
    classify_ingredient,
    detect_filters,
    looks_like_uv_filter,
)
from services.sunscreen_sanitation.errors import (
    EmptyIngredientsError,
    EmptyProductNameError,
    InvalidFieldError,
    InvalidSubmissionError,
    MissingFieldError,
    SanitationError,
)
from services.sunscreen_sanitation.field_stripper import (
    strip_brand_from_product,
    strip_spf_pa_from_product,
)
from services.sunscreen_sanitation.ingredients import normalize_ingredients
from services.sunscreen_sanitation.orchestrator import sanitize_sunscreen
from services.sunscreen_sanitation.reconciliation import (
    FilterIndex,
    build_declared_index,
    merge_filters,
)
from services.sunscreen_sanitation.text_utils import normalize, title_case_inci
from services.sunscreen_sanitation.validation import REQUIRED_FIELDS, validate_submission

__all__ = [
    # Main API
    "sanitize_sunscreen",

    # Catalog
    "FilterCatalog",
    "FilterCatalogEntry",

    # Pipeline steps
    "validate_submission",
    "REQUIRED_FIELDS",
    "strip_brand_from_product",
    "strip_spf_pa_from_product",
    "normalize_ingredients",
    "IngredientMatch",
    "classify_ingredient",
    "detect_filters",
    "looks_like_uv_filter",
    "FilterIndex",
    "build_declared_index",
    "merge_filters",

    # Text utilities
    "normalize",
    "title_case_inci",

    # Errors
    "SanitationError",
    "InvalidSubmissionError",
    "MissingFieldError",
    "InvalidFieldError",
    "EmptyIngredientsError",
    "EmptyProductNameError",
]
