from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class UVFilterEntrySchema(BaseModel):
    inci: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1, description="Filter category, e.g. mineral or chemical")
    aka: List[str] = Field(default_factory=list, description="Alternative names for the filter")


class UVFilterCatalogFile(BaseModel):
    filters: List[UVFilterEntrySchema] = Field(..., min_length=1)
    ignore: List[str] = Field(default_factory=list)
    keywords: Optional[List[str]] = Field(
        default=None,
        description="Heuristic fragments; the built-in fragments are used when omitted",
    )


class SanitizedRecordReport(BaseModel):
    index: int
    id: Optional[Any] = None
    warnings: List[Dict[str, str]]


class SanitationFailureReport(BaseModel):
    index: int
    id: Optional[Any] = None
    error: str
    message: str


class BatchReportResponse(BaseModel):
    total: int
    sanitized: int
    failed: int
    records: List[SanitizedRecordReport]
    failures: List[SanitationFailureReport]
