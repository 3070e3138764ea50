# pokeportal/mapper.py
"""
Pure projections from raw catalog records to the view models.

Nothing in here performs I/O; every function is deterministic in its input.
"""
import re
from typing import Callable, List, Optional, Tuple

from .models import (
    Pokemon, PokemonSpecies, PokemonSummary, PokemonDetail,
    PokemonAbility, PokemonStat, SpriteSet,
)

ENGLISH = "en"

_CONTROL_CHARS = re.compile(r"[\f\n\r]")

def _official_artwork(sprites: SpriteSet) -> Optional[str]:
    if sprites.other and sprites.other.official_artwork:
        return sprites.other.official_artwork.front_default
    return None

def _home(sprites: SpriteSet) -> Optional[str]:
    if sprites.other and sprites.other.home:
        return sprites.other.home.front_default
    return None

def _dream_world(sprites: SpriteSet) -> Optional[str]:
    if sprites.other and sprites.other.dream_world:
        return sprites.other.dream_world.front_default
    return None

def _front_default(sprites: SpriteSet) -> Optional[str]:
    return sprites.front_default

# Highest priority first
SPRITE_PRECEDENCE: Tuple[Callable[[SpriteSet], Optional[str]], ...] = (
    _official_artwork,
    _home,
    _dream_world,
    _front_default,
)

def extract_sprite(pokemon: Pokemon) -> Optional[str]:
    for accessor in SPRITE_PRECEDENCE:
        url = accessor(pokemon.sprites)
        if url is not None:
            return url
    return None

def map_types(pokemon: Pokemon) -> List[str]:
    return [entry.type.name for entry in sorted(pokemon.types, key=lambda t: t.slot)]

def map_abilities(pokemon: Pokemon) -> List[PokemonAbility]:
    return [
        PokemonAbility(name=entry.ability.name, is_hidden=entry.is_hidden)
        for entry in sorted(pokemon.abilities, key=lambda a: a.slot)
    ]

def map_stats(pokemon: Pokemon) -> List[PokemonStat]:
    return [PokemonStat(name=entry.stat.name, value=entry.base_stat) for entry in pokemon.stats]

def sanitize_flavor_text(text: Optional[str]) -> Optional[str]:
    """Replaces every form-feed, newline and carriage return with a single space."""
    if text is None:
        return None
    return _CONTROL_CHARS.sub(" ", text)

def extract_flavor_text(species: PokemonSpecies) -> Optional[str]:
    for entry in species.flavor_text_entries:
        if entry.language.name == ENGLISH:
            return sanitize_flavor_text(entry.flavor_text)
    return None

def extract_genus(species: PokemonSpecies) -> Optional[str]:
    for entry in species.genera:
        if entry.language.name == ENGLISH:
            return entry.genus
    return None

def to_summary(pokemon: Pokemon) -> PokemonSummary:
    return PokemonSummary(
        id=pokemon.id,
        name=pokemon.name,
        sprite=extract_sprite(pokemon),
        types=map_types(pokemon),
    )

def to_detail(pokemon: Pokemon, species: PokemonSpecies) -> PokemonDetail:
    summary = to_summary(pokemon)
    return PokemonDetail(
        id=summary.id,
        name=summary.name,
        sprite=summary.sprite,
        types=summary.types,
        height=pokemon.height,
        weight=pokemon.weight,
        base_experience=pokemon.base_experience,
        abilities=map_abilities(pokemon),
        stats=map_stats(pokemon),
        flavor_text=extract_flavor_text(species),
        habitat=species.habitat.name if species.habitat else None,
        genus=extract_genus(species),
        is_legendary=species.is_legendary,
        is_mythical=species.is_mythical,
    )
