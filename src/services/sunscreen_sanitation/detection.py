"""
UV filter detection over a normalized ingredient list.

Each ingredient is classified on its own: ignore-listed names are skipped,
catalog names and aliases resolve to a canonical filter, and anything else
is checked against a small set of chemistry fragments so that unfamiliar
filters are flagged for review instead of silently passing.
"""

import enum
import logging
from typing import Dict, List, Optional, Sequence, Tuple

from models.domain import DetectedFilter, SanitationWarning
from services.sunscreen_sanitation.catalog import FilterCatalog, FilterCatalogEntry
from services.sunscreen_sanitation.text_utils import normalize, title_case_inci

logger = logging.getLogger(__name__)


class IngredientMatch(str, enum.Enum):
    IGNORED = "ignored"
    CATALOG = "catalog"
    HEURISTIC = "heuristic"
    NONE = "none"


def looks_like_uv_filter(ingredient: str, keywords: Sequence[str]) -> bool:
    name = normalize(ingredient)
    return any(k in name for k in keywords)


def classify_ingredient(
    ingredient: str, catalog: FilterCatalog
) -> Tuple[IngredientMatch, Optional[FilterCatalogEntry]]:
    if catalog.is_ignored(ingredient):
        return IngredientMatch.IGNORED, None
    known = catalog.find(ingredient)
    if known:
        return IngredientMatch.CATALOG, known
    if looks_like_uv_filter(ingredient, catalog.keywords):
        return IngredientMatch.HEURISTIC, None
    return IngredientMatch.NONE, None


def detect_filters(
    ingredients: Sequence[str],
    catalog: FilterCatalog,
    warnings: List[SanitationWarning],
) -> Dict[str, DetectedFilter]:
    """Return detected filters keyed by normalized canonical name, in first-seen order."""
    detected: Dict[str, DetectedFilter] = {}
    for ingredient in ingredients:
        match, entry = classify_ingredient(ingredient, catalog)
        if match is IngredientMatch.CATALOG:
            detected[normalize(entry.inci)] = DetectedFilter(
                name=title_case_inci(entry.inci),
                category=entry.category,
            )
            logger.debug(f"[Detection] '{ingredient}' -> {entry.inci}")
        elif match is IngredientMatch.HEURISTIC:
            warnings.append(SanitationWarning.unknown_uv_filter(ingredient))
            logger.debug(f"[Detection] '{ingredient}' looks like an unlisted UV filter")
    return detected
