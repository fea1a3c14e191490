"""
Text helpers shared by the sanitation steps.

Comparison keys are produced here; stored values are never rewritten by
these helpers.
"""


def normalize(value: str) -> str:
    """Normalize a string for comparison (trimmed, lower-cased)."""
    return value.strip().lower()


def title_case_inci(value: str) -> str:
    """Title-case an INCI name word by word, keeping the original spacing."""
    return " ".join(word[:1].upper() + word[1:] for word in value.lower().split(" "))
