import re

SPF_PATTERN = re.compile(r"\bSPF\s*\d+(?:\+|\b)", re.IGNORECASE)
PA_PATTERN = re.compile(r"\bPA\+{1,4}", re.IGNORECASE)

LEFTOVER_PUNCTUATION_PATTERN = re.compile(r"[()\-–]+")
WHITESPACE_RUN_PATTERN = re.compile(r"\s{2,}")

BRAND_SEPARATOR_PATTERN = re.compile(r"^[\s\-:–]+")
