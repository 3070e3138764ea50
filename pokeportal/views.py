# pokeportal/views.py
"""List shaping used by the HTTP layer: search, sort, type filter, navigation."""
from typing import Iterable, List, Optional, Sequence, Tuple

from .models import PokemonSummary

SORT_FIELDS = ("id", "name")
SORT_ORDERS = ("asc", "desc")

def search_and_sort(
    items: Iterable[PokemonSummary],
    query: str = "",
    sort_by: str = "id",
    order: str = "asc",
) -> List[PokemonSummary]:
    """Keeps items whose name contains ``query`` (case-insensitive) and sorts them."""
    if sort_by not in SORT_FIELDS:
        raise ValueError(f"Unsupported sort field: {sort_by!r}")
    if order not in SORT_ORDERS:
        raise ValueError(f"Unsupported sort order: {order!r}")

    needle = query.strip().lower()
    matched = [p for p in items if needle in p.name.lower()] if needle else list(items)

    if sort_by == "name":
        key = lambda p: p.name.lower()
    else:
        key = lambda p: p.id
    return sorted(matched, key=key, reverse=(order == "desc"))

def filter_by_types(items: Iterable[PokemonSummary], types: Sequence[str]) -> List[PokemonSummary]:
    """Keeps items that carry every one of ``types``; no types selected keeps all."""
    wanted = [t.lower() for t in types]
    if not wanted:
        return list(items)
    return [p for p in items if all(t in p.types for t in wanted)]

def available_types(items: Iterable[PokemonSummary]) -> List[str]:
    return sorted({t for p in items for t in p.types})

def neighbors(
    items: Sequence[PokemonSummary], pokemon_id: int
) -> Tuple[Optional[PokemonSummary], Optional[PokemonSummary]]:
    """Previous and next entries around ``pokemon_id`` in the loaded list."""
    for index, pokemon in enumerate(items):
        if pokemon.id == pokemon_id:
            previous = items[index - 1] if index > 0 else None
            following = items[index + 1] if index + 1 < len(items) else None
            return previous, following
    return None, None
