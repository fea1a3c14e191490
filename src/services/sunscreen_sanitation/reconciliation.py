"""
Merging declared filters with filters detected from the ingredient list.

Declared data always wins. Detected filters only fill gaps, and every gap
filled is reported as an inferred-filter warning.
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterator, List, Optional

from models.domain import DetectedFilter, SanitationWarning
from services.sunscreen_sanitation.text_utils import normalize

logger = logging.getLogger(__name__)


class FilterIndex:
    """Filters keyed by case-insensitive name.

    Iteration follows first insertion: re-setting an existing key replaces
    the value but keeps its position.
    """

    def __init__(self) -> None:
        self._items: Dict[str, Any] = {}

    def __contains__(self, key: str) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def set(self, key: str, value: Any) -> None:
        self._items[key] = value

    def values(self) -> List[Any]:
        return list(self._items.values())


def _declared_name(entry: Any) -> Optional[str]:
    if not isinstance(entry, Mapping):
        return None
    name = entry.get("name")
    if not isinstance(name, str) or not name.strip():
        return None
    return name


def build_declared_index(filters: Any) -> FilterIndex:
    """Index the submission's own filter list; later duplicates overwrite earlier ones."""
    index = FilterIndex()
    if not isinstance(filters, (list, tuple)):
        return index
    for entry in filters:
        name = _declared_name(entry)
        if name is None:
            continue
        index.set(normalize(name), entry)
    return index


def merge_filters(
    declared: Any,
    detected: Mapping[str, DetectedFilter],
    warnings: List[SanitationWarning],
) -> List[Any]:
    """Return declared filters followed by newly inferred ones, in detection order."""
    index = build_declared_index(declared)
    for key, found in detected.items():
        if key in index:
            continue
        index.set(key, found.to_dict())
        warnings.append(SanitationWarning.inferred_filter(found.name))
        logger.debug(f"[Sanitize] Inferred filter '{found.name}' from ingredients")
    return index.values()
