import copy
from collections.abc import Mapping
from typing import Any

from models.domain import Submission
from services.sunscreen_sanitation.errors import (
    InvalidFieldError,
    InvalidSubmissionError,
    MissingFieldError,
)

REQUIRED_FIELDS = ("id", "brand", "product", "type", "ingredients")
TEXT_FIELDS = ("brand", "product", "type")


def _is_missing(value: Any) -> bool:
    # An empty list still counts as present; it fails later as an empty ingredient list.
    if isinstance(value, (list, tuple)):
        return False
    return not value


def validate_submission(raw: Any) -> Submission:
    """Check required fields and return a private deep copy of the submission.

    Raises on the first violation, in field order: the input must be a
    mapping, every required field must be present and truthy (an empty list
    counts as present), brand, product and type must be text, and
    ingredients must be a list or tuple.
    """
    if raw is None or not isinstance(raw, Mapping):
        raise InvalidSubmissionError()

    for name in REQUIRED_FIELDS:
        if _is_missing(raw.get(name)):
            raise MissingFieldError(name)

    for name in TEXT_FIELDS:
        if not isinstance(raw[name], str):
            raise InvalidFieldError(name, "a string")

    if not isinstance(raw["ingredients"], (list, tuple)):
        raise InvalidFieldError("ingredients", "an array")

    fields = copy.deepcopy(dict(raw))
    return Submission(
        id=fields["id"],
        brand=fields["brand"],
        product=fields["product"],
        type=fields["type"],
        ingredients=list(fields["ingredients"]),
        filters=fields.get("filters"),
        raw_fields=fields,
    )
