# tests/conftest.py

import asyncio

import httpx
import pytest

BASE_URL = "https://pokeapi.co/api/v2"


def make_pokemon(pokemon_id, name, types=("normal",), **overrides):
    """Builds a raw /pokemon record shaped like the PokeAPI response."""
    record = {
        "id": pokemon_id,
        "name": name,
        "height": 7,
        "weight": 69,
        "order": pokemon_id,
        "base_experience": 64,
        "sprites": {
            "front_default": f"https://sprites.example/{pokemon_id}.png",
            "front_shiny": None,
            "other": {
                "official-artwork": {"front_default": f"https://artwork.example/{pokemon_id}.png"},
            },
        },
        "types": [
            {"slot": slot, "type": {"name": type_name, "url": "..."}}
            for slot, type_name in enumerate(types, start=1)
        ],
        "abilities": [
            {"slot": 1, "is_hidden": False, "ability": {"name": "overgrow", "url": "..."}},
        ],
        "stats": [
            {"stat": {"name": "hp", "url": "..."}, "base_stat": 45, "effort": 0},
        ],
        "moves": [],
        "species": {"name": name, "url": f"{BASE_URL}/pokemon-species/{pokemon_id}/"},
    }
    record.update(overrides)
    return record


def make_species(species_id, name, **overrides):
    """Builds a raw /pokemon-species record."""
    record = {
        "id": species_id,
        "name": name,
        "color": {"name": "yellow", "url": "..."},
        "habitat": {"name": "forest", "url": "..."},
        "genera": [
            {"genus": "Souris", "language": {"name": "fr", "url": "..."}},
            {"genus": "Mouse Pokémon", "language": {"name": "en", "url": "..."}},
        ],
        "flavor_text_entries": [
            {
                "flavor_text": "When several of\nthese POKéMON\fgather.",
                "language": {"name": "en", "url": "..."},
                "version": {"name": "red", "url": "..."},
            },
        ],
        "is_legendary": False,
        "is_mythical": False,
        "evolution_chain": {"url": f"{BASE_URL}/evolution-chain/10/"},
    }
    record.update(overrides)
    return record


def make_list_page(names, count=None):
    return {
        "count": len(names) if count is None else count,
        "next": None,
        "previous": None,
        "results": [{"name": name, "url": f"{BASE_URL}/pokemon/{name}/"} for name in names],
    }


@pytest.fixture
def pikachu():
    return make_pokemon(25, "pikachu", types=("electric",))


@pytest.fixture
def pikachu_species():
    return make_species(25, "pikachu")


def delayed_response(status_code=200, json=None, until=None):
    """
    Side effect for respx routes that yields to the event loop before answering.

    respx otherwise answers without suspending, so concurrent requests would
    run one after another. With ``until`` (an ``asyncio.Event``) the response
    is held back until the event is set.
    """
    async def side_effect(request):
        if until is not None:
            await until.wait()
        else:
            await asyncio.sleep(0)
        return httpx.Response(status_code, json=json)
    return side_effect
