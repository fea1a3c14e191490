from typing import Any, Iterable, List

from services.sunscreen_sanitation.errors import EmptyIngredientsError


def normalize_ingredients(ingredients: Iterable[Any]) -> List[str]:
    """Trim text entries and drop empty or non-text ones."""
    cleaned = [i.strip() if isinstance(i, str) else "" for i in ingredients]
    cleaned = [i for i in cleaned if i]
    if not cleaned:
        raise EmptyIngredientsError()
    return cleaned
