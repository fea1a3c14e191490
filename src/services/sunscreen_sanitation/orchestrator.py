"""
Main entry point for sunscreen sanitation.

``sanitize_sunscreen`` validates a raw submission, then runs the product-name
cleanup, ingredient normalization, filter detection and reconciliation steps
on a private copy. Fatal problems raise a ``SanitationError``; every other
correction is returned as a warning next to the sanitized record.
"""

import logging
from typing import Any, List, Optional

from models.domain import SanitationResult, SanitationWarning
from services.sunscreen_sanitation.catalog import FilterCatalog
from services.sunscreen_sanitation.detection import detect_filters
from services.sunscreen_sanitation.errors import EmptyProductNameError
from services.sunscreen_sanitation.field_stripper import (
    strip_brand_from_product,
    strip_spf_pa_from_product,
)
from services.sunscreen_sanitation.ingredients import normalize_ingredients
from services.sunscreen_sanitation.reconciliation import merge_filters
from services.sunscreen_sanitation.validation import validate_submission

logger = logging.getLogger(__name__)


def sanitize_sunscreen(raw: Any, catalog: Optional[FilterCatalog] = None) -> SanitationResult:
    """Sanitize one submission against ``catalog`` (the default catalog when omitted)."""
    if catalog is None:
        from services.catalog_loader import get_default_catalog
        catalog = get_default_catalog()

    sunscreen = validate_submission(raw)
    warnings: List[SanitationWarning] = []

    submitted_product = sunscreen.product
    product = strip_brand_from_product(sunscreen.product, sunscreen.brand, warnings)
    product = strip_spf_pa_from_product(product, submitted_product, warnings)
    if not product:
        raise EmptyProductNameError(submitted_product)
    sunscreen.product = product

    sunscreen.ingredients = normalize_ingredients(sunscreen.ingredients)

    detected = detect_filters(sunscreen.ingredients, catalog, warnings)
    sunscreen.filters = merge_filters(sunscreen.filters, detected, warnings)

    sunscreen.brand = sunscreen.brand.strip()
    sunscreen.product = sunscreen.product.strip()
    sunscreen.type = sunscreen.type.lower()

    logger.debug(f"[Sanitize] {sunscreen.id}: {len(warnings)} warning(s)")
    return SanitationResult(sunscreen=sunscreen, warnings=warnings)
