"""Shared fixtures for sanitation tests."""

import sys
from pathlib import Path

import pytest


def ensure_src_on_path() -> None:
    root = Path(__file__).resolve().parent.parent
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.append(str(src_path))


ensure_src_on_path()

from services.catalog_loader import builtin_catalog
from services.sunscreen_sanitation import FilterCatalog


@pytest.fixture(scope="session")
def catalog() -> FilterCatalog:
    return builtin_catalog()


@pytest.fixture
def small_catalog() -> FilterCatalog:
    return FilterCatalog.build(
        [
            {"inci": "Zinc Oxide", "type": "mineral", "aka": ["zno", "ci 77947"]},
            {"inci": "Butyl Methoxydibenzoylmethane", "type": "chemical", "aka": ["avobenzone"]},
            {"inci": "Ethylhexyl Methoxycinnamate", "type": "chemical", "aka": ["octinoxate"]},
        ],
        ignore=["Benzyl Salicylate"],
        keywords=["cinnamate", "salicylate", "triazine"],
    )


@pytest.fixture
def submission() -> dict:
    return {
        "id": "acme-ultra-sheer",
        "brand": "Acme",
        "product": "Ultra Sheer",
        "type": "Chemical",
        "spf": 50,
        "ingredients": ["Water", "Zinc Oxide", "Glycerin"],
    }
