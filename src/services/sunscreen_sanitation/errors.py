"""Fatal conditions that stop a submission from being sanitized."""

from typing import Optional


class SanitationError(ValueError):
    """Base class for submissions the pipeline refuses to process."""


class InvalidSubmissionError(SanitationError):
    def __init__(self, message: str = "Invalid sunscreen object"):
        super().__init__(message)


class MissingFieldError(SanitationError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing required field: {field}")


class InvalidFieldError(SanitationError):
    def __init__(self, field: str, expected: str):
        self.field = field
        self.expected = expected
        super().__init__(f"{field} must be {expected}")


class EmptyIngredientsError(SanitationError):
    def __init__(self):
        self.field = "ingredients"
        super().__init__("ingredients array is empty after normalization")


class EmptyProductNameError(SanitationError):
    def __init__(self, original: Optional[str] = None):
        self.field = "product"
        self.original = original
        super().__init__("Product name empty after sanitation")
