"""
Read-only UV filter reference data.

A ``FilterCatalog`` is built once and shared by every pipeline call. Lookups
go through an index keyed by the normalized canonical name and aliases. When
two entries share a normalized name the entry that comes first in catalog
order owns it, so resolution is deterministic even for overlapping aliases.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Sequence, Tuple

from constants.uv_filters import UV_FILTER_KEYWORDS
from services.sunscreen_sanitation.text_utils import normalize


def _aliases(value) -> Tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(value)


@dataclass(frozen=True)
class FilterCatalogEntry:
    inci: str
    category: str
    aliases: Tuple[str, ...] = ()

    @classmethod
    def from_record(cls, record: Mapping) -> "FilterCatalogEntry":
        return cls(
            inci=record["inci"],
            category=record["type"],
            aliases=_aliases(record.get("aka")),
        )

    def names(self) -> Tuple[str, ...]:
        return (self.inci,) + self.aliases


@dataclass(frozen=True)
class FilterCatalog:
    entries: Tuple[FilterCatalogEntry, ...]
    ignore: FrozenSet[str] = frozenset()
    keywords: Tuple[str, ...] = tuple(UV_FILTER_KEYWORDS)
    _index: Dict[str, FilterCatalogEntry] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "ignore", frozenset(normalize(name) for name in self.ignore))
        object.__setattr__(self, "keywords", tuple(k.lower() for k in self.keywords))
        index: Dict[str, FilterCatalogEntry] = {}
        for entry in self.entries:
            for name in entry.names():
                index.setdefault(normalize(name), entry)
        object.__setattr__(self, "_index", index)

    @classmethod
    def build(
        cls,
        records: Iterable[Mapping],
        ignore: Iterable[str] = (),
        keywords: Sequence[str] = UV_FILTER_KEYWORDS,
    ) -> "FilterCatalog":
        return cls(
            entries=tuple(FilterCatalogEntry.from_record(r) for r in records),
            ignore=frozenset(ignore),
            keywords=tuple(keywords),
        )

    def __len__(self) -> int:
        return len(self.entries)

    def is_ignored(self, ingredient: str) -> bool:
        return normalize(ingredient) in self.ignore

    def find(self, ingredient: str) -> Optional[FilterCatalogEntry]:
        """Return the first entry in catalog order whose name or alias matches."""
        return self._index.get(normalize(ingredient))
