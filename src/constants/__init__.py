from constants.uv_filters import UV_FILTERS, UV_FILTER_IGNORE, UV_FILTER_KEYWORDS
from constants.text_patterns import (
    SPF_PATTERN,
    PA_PATTERN,
    LEFTOVER_PUNCTUATION_PATTERN,
    WHITESPACE_RUN_PATTERN,
    BRAND_SEPARATOR_PATTERN,
)

__all__ = [
    "UV_FILTERS",
    "UV_FILTER_IGNORE",
    "UV_FILTER_KEYWORDS",
    "SPF_PATTERN",
    "PA_PATTERN",
    "LEFTOVER_PUNCTUATION_PATTERN",
    "WHITESPACE_RUN_PATTERN",
    "BRAND_SEPARATOR_PATTERN",
]
