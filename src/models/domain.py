import enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


class WarningType(str, enum.Enum):
    BRAND_REMOVED_FROM_PRODUCT = "brand-removed-from-product"
    SPF_PA_REMOVED_FROM_PRODUCT = "spf-pa-removed-from-product"
    UNKNOWN_UV_FILTER = "unknown-uv-filter"
    INFERRED_FILTER = "inferred-filter"


_WARNING_DETAIL_KEYS = {
    WarningType.BRAND_REMOVED_FROM_PRODUCT: "brand",
    WarningType.SPF_PA_REMOVED_FROM_PRODUCT: "original",
    WarningType.UNKNOWN_UV_FILTER: "ingredient",
    WarningType.INFERRED_FILTER: "filter",
}


@dataclass(frozen=True)
class SanitationWarning:
    """A non-fatal correction or inference made while sanitizing a submission."""
    type: WarningType
    value: str

    @property
    def detail_key(self) -> str:
        return _WARNING_DETAIL_KEYS[self.type]

    @classmethod
    def brand_removed(cls, brand: str) -> "SanitationWarning":
        return cls(WarningType.BRAND_REMOVED_FROM_PRODUCT, brand)

    @classmethod
    def spf_pa_removed(cls, original: str) -> "SanitationWarning":
        return cls(WarningType.SPF_PA_REMOVED_FROM_PRODUCT, original)

    @classmethod
    def unknown_uv_filter(cls, ingredient: str) -> "SanitationWarning":
        return cls(WarningType.UNKNOWN_UV_FILTER, ingredient)

    @classmethod
    def inferred_filter(cls, name: str) -> "SanitationWarning":
        return cls(WarningType.INFERRED_FILTER, name)

    def to_dict(self) -> Dict[str, str]:
        return {"type": self.type.value, self.detail_key: self.value}


@dataclass(frozen=True)
class DetectedFilter:
    """A UV filter recognised in the ingredient list via the catalog."""
    name: str
    category: str

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "category": self.category}


@dataclass
class Submission:
    """A validated, privately owned copy of a sunscreen submission.

    ``raw_fields`` keeps every key of the original record (including ones the
    pipeline does not touch, such as ``spf``) so the sanitized output keeps
    the submission's shape and key order.
    """
    id: Any
    brand: str
    product: str
    type: str
    ingredients: List[Any]
    filters: Optional[Any] = None
    raw_fields: Dict[str, Any] = field(default_factory=dict, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        record = dict(self.raw_fields)
        record["id"] = self.id
        record["brand"] = self.brand
        record["product"] = self.product
        record["type"] = self.type
        record["ingredients"] = list(self.ingredients)
        record["filters"] = self.filters
        return record


@dataclass
class SanitationResult:
    """Sanitized submission plus warnings in emission order."""
    sunscreen: Submission
    warnings: List[SanitationWarning] = field(default_factory=list)

    def warning_types(self) -> Tuple[WarningType, ...]:
        return tuple(w.type for w in self.warnings)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sunscreen": self.sunscreen.to_dict(),
            "warnings": [w.to_dict() for w in self.warnings],
        }
