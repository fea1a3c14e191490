from models.domain import (
    DetectedFilter,
    SanitationResult,
    SanitationWarning,
    Submission,
    WarningType,
)

__all__ = [
    "DetectedFilter",
    "SanitationResult",
    "SanitationWarning",
    "Submission",
    "WarningType",
]
