"""
Product-name cleanup.

Submitters often repeat the brand at the start of the product name and
append SPF / PA ratings. Both are removed here, each removal reported as a
warning so the caller can review what changed.
"""

import logging
from typing import List

from constants.text_patterns import (
    BRAND_SEPARATOR_PATTERN,
    LEFTOVER_PUNCTUATION_PATTERN,
    PA_PATTERN,
    SPF_PATTERN,
    WHITESPACE_RUN_PATTERN,
)
from models.domain import SanitationWarning
from services.sunscreen_sanitation.text_utils import normalize

logger = logging.getLogger(__name__)


def strip_brand_from_product(product: str, brand: str, warnings: List[SanitationWarning]) -> str:
    """Remove a leading brand name from the product name.

    The original product is returned untouched when it does not start with
    the brand, or when nothing but separators would remain.
    """
    brand_norm = normalize(brand)
    if not brand_norm or not normalize(product).startswith(brand_norm):
        return product

    remainder = product.strip()[len(brand.strip()):]
    remainder = BRAND_SEPARATOR_PATTERN.sub("", remainder).strip()
    if not remainder:
        logger.debug(f"[Sanitize] Keeping product '{product}': only the brand would remain")
        return product

    warnings.append(SanitationWarning.brand_removed(brand))
    logger.debug(f"[Sanitize] Removed brand '{brand}' from product '{product}'")
    return remainder


def strip_spf_pa_from_product(product: str, original: str, warnings: List[SanitationWarning]) -> str:
    """Remove SPF / PA ratings and the punctuation they leave behind.

    ``original`` is the product name as submitted and is what the warning
    reports; the change check compares against ``product`` as it entered
    this step.
    """
    cleaned = SPF_PATTERN.sub("", product)
    cleaned = PA_PATTERN.sub("", cleaned)
    cleaned = LEFTOVER_PUNCTUATION_PATTERN.sub(" ", cleaned)
    cleaned = WHITESPACE_RUN_PATTERN.sub(" ", cleaned).strip()

    if cleaned != product:
        warnings.append(SanitationWarning.spf_pa_removed(original))
        logger.debug(f"[Sanitize] Stripped SPF/PA: '{product}' -> '{cleaned}'")
    return cleaned
