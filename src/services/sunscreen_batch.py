"""Sanitize a list of sunscreen submissions without letting one bad record stop the rest."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from models.domain import SanitationResult
from models.schemas import BatchReportResponse, SanitationFailureReport, SanitizedRecordReport
from services.sunscreen_sanitation import FilterCatalog, SanitationError, sanitize_sunscreen

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SanitationFailure:
    index: int
    id: Optional[Any]
    error: str
    message: str


@dataclass
class BatchResult:
    results: List[SanitationResult] = field(default_factory=list)
    indices: List[int] = field(default_factory=list)
    failures: List[SanitationFailure] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results) + len(self.failures)

    def sanitized_records(self) -> List[Dict[str, Any]]:
        return [r.sunscreen.to_dict() for r in self.results]

    def to_report(self) -> BatchReportResponse:
        records = [
            SanitizedRecordReport(
                index=index,
                id=result.sunscreen.id,
                warnings=[w.to_dict() for w in result.warnings],
            )
            for index, result in zip(self.indices, self.results)
        ]
        failures = [
            SanitationFailureReport(index=f.index, id=f.id, error=f.error, message=f.message)
            for f in self.failures
        ]
        return BatchReportResponse(
            total=self.total,
            sanitized=len(self.results),
            failed=len(self.failures),
            records=records,
            failures=failures,
        )


def _record_id(raw: Any) -> Optional[Any]:
    return raw.get("id") if isinstance(raw, Mapping) else None


def sanitize_sunscreens(records: Iterable[Any], catalog: Optional[FilterCatalog] = None) -> BatchResult:
    batch = BatchResult()
    for index, raw in enumerate(records):
        try:
            result = sanitize_sunscreen(raw, catalog)
        except SanitationError as e:
            failure = SanitationFailure(index, _record_id(raw), type(e).__name__, str(e))
            batch.failures.append(failure)
            logger.warning(f"[Batch] Rejected submission #{index} (id={failure.id}): {e}")
            continue
        batch.results.append(result)
        batch.indices.append(index)
        for warning in result.warnings:
            logger.info(f"[Batch] {result.sunscreen.id}: {warning.type.value} {warning.value!r}")

    logger.info(
        f"[Batch] Sanitized {len(batch.results)}/{batch.total} submissions, "
        f"{len(batch.failures)} rejected"
    )
    return batch


def _sort_key(record: Mapping) -> tuple:
    brand = record.get("brand")
    product = record.get("product")
    return (
        brand.lower() if isinstance(brand, str) else "",
        product.lower() if isinstance(product, str) else "",
    )


def sort_by_brand_product(records: Iterable[Mapping]) -> List[Mapping]:
    """Order records case-insensitively by brand, then product."""
    return sorted(records, key=_sort_key)
