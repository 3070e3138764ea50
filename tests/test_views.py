# tests/test_views.py

import pytest

from pokeportal.models import PokemonSummary
from pokeportal.views import available_types, filter_by_types, neighbors, search_and_sort

ITEMS = [
    PokemonSummary(id=25, name="pikachu", types=["electric"]),
    PokemonSummary(id=1, name="bulbasaur", types=["grass", "poison"]),
    PokemonSummary(id=6, name="charizard", types=["fire", "flying"]),
    PokemonSummary(id=26, name="raichu", types=["electric"]),
    PokemonSummary(id=43, name="oddish", types=["grass", "poison"]),
]


def test_search_matches_substring_case_insensitively():
    result = search_and_sort(ITEMS, query="  CHU ")
    assert [p.name for p in result] == ["pikachu", "raichu"]


def test_empty_query_keeps_everything_sorted_by_id():
    assert [p.id for p in search_and_sort(ITEMS)] == [1, 6, 25, 26, 43]


def test_sort_by_name_descending():
    result = search_and_sort(ITEMS, sort_by="name", order="desc")
    assert [p.name for p in result] == ["raichu", "pikachu", "oddish", "charizard", "bulbasaur"]


def test_search_rejects_unknown_sort_options():
    with pytest.raises(ValueError):
        search_and_sort(ITEMS, sort_by="weight")
    with pytest.raises(ValueError):
        search_and_sort(ITEMS, order="sideways")


def test_filter_requires_every_selected_type():
    assert [p.name for p in filter_by_types(ITEMS, ["grass", "poison"])] == ["bulbasaur", "oddish"]
    assert filter_by_types(ITEMS, ["grass", "fire"]) == []
    assert filter_by_types(ITEMS, []) == ITEMS


def test_available_types_are_unique_and_sorted():
    assert available_types(ITEMS) == ["electric", "fire", "flying", "grass", "poison"]


def test_neighbors_follow_list_order():
    previous, following = neighbors(ITEMS, 6)
    assert previous.id == 1
    assert following.id == 26
    assert neighbors(ITEMS, 25)[0] is None
    assert neighbors(ITEMS, 43)[1] is None
    assert neighbors(ITEMS, 999) == (None, None)
