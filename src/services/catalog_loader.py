"""Builds the UV filter catalog from built-in constants or a YAML/JSON file."""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from constants.uv_filters import UV_FILTERS, UV_FILTER_IGNORE, UV_FILTER_KEYWORDS
from models.schemas import UVFilterCatalogFile
from services.sunscreen_sanitation.catalog import FilterCatalog

logger = logging.getLogger(__name__)


class CatalogLoadError(ValueError):
    pass


def builtin_catalog() -> FilterCatalog:
    return FilterCatalog.build(UV_FILTERS, UV_FILTER_IGNORE, UV_FILTER_KEYWORDS)


def load_filter_catalog(path: Union[str, Path]) -> FilterCatalog:
    """Load a catalog file with ``filters`` (inci/type/aka) and ``ignore`` lists."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"UV filter catalog not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise CatalogLoadError(f"Could not parse catalog {path}: {e}") from e

    try:
        parsed = UVFilterCatalogFile.model_validate(data)
    except ValidationError as e:
        raise CatalogLoadError(f"Invalid catalog {path}: {e}") from e

    keywords = parsed.keywords if parsed.keywords is not None else UV_FILTER_KEYWORDS
    catalog = FilterCatalog.build(
        [entry.model_dump() for entry in parsed.filters],
        parsed.ignore,
        keywords,
    )
    logger.info(f"[Catalog] Loaded {len(catalog)} UV filters from {path}")
    return catalog


@lru_cache(maxsize=1)
def get_default_catalog(path: Optional[str] = None) -> FilterCatalog:
    from config import settings

    path = path or settings.uv_filter_catalog_path
    if path:
        return load_filter_catalog(path)
    return builtin_catalog()


def reload_catalog() -> None:
    get_default_catalog.cache_clear()
