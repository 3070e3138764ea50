# pokeportal/models.py
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

# --- Raw catalog records ---
# These mirror the PokeAPI JSON closely; unknown keys are ignored.

class NamedResource(BaseModel):
    """A ``{name, url}`` reference to another catalog resource."""
    name: str
    url: Optional[str] = None

class FrontSprite(BaseModel):
    front_default: Optional[str] = None

class HomeSprite(FrontSprite):
    front_shiny: Optional[str] = None

class OtherSprites(BaseModel):
    """Alternative artwork sets nested under ``sprites.other``."""
    official_artwork: Optional[FrontSprite] = Field(None, alias='official-artwork')
    home: Optional[HomeSprite] = None
    dream_world: Optional[FrontSprite] = None

    class Config:
        populate_by_name = True

class SpriteSet(BaseModel):
    front_default: Optional[str] = None
    front_shiny: Optional[str] = None
    other: Optional[OtherSprites] = None

class TypeSlot(BaseModel):
    slot: int
    type: NamedResource

class AbilitySlot(BaseModel):
    slot: int
    is_hidden: bool = False
    ability: NamedResource

class StatSlot(BaseModel):
    stat: NamedResource
    base_stat: int
    effort: int = 0

class Pokemon(BaseModel):
    """Full catalog item as returned by ``/pokemon/{id_or_name}``."""
    id: int
    name: str
    height: int = 0
    weight: int = 0
    order: int = 0
    base_experience: Optional[int] = None
    sprites: SpriteSet = Field(default_factory=SpriteSet)
    types: List[TypeSlot] = []
    abilities: List[AbilitySlot] = []
    stats: List[StatSlot] = []
    moves: List[Dict[str, Any]] = [] # Kept raw, nothing downstream reads them
    species: Optional[NamedResource] = None

class FlavorTextEntry(BaseModel):
    flavor_text: str
    language: NamedResource
    version: Optional[NamedResource] = None

class GenusEntry(BaseModel):
    genus: str
    language: NamedResource

class EvolutionChainRef(BaseModel):
    url: str

class PokemonSpecies(BaseModel):
    """Species record as returned by ``/pokemon-species/{id_or_name}``."""
    id: int
    name: str
    color: Optional[NamedResource] = None
    habitat: Optional[NamedResource] = None
    genera: List[GenusEntry] = []
    flavor_text_entries: List[FlavorTextEntry] = []
    is_legendary: bool = False
    is_mythical: bool = False
    evolution_chain: Optional[EvolutionChainRef] = None

class PokemonListResponse(BaseModel):
    """One page of the ``/pokemon`` index."""
    count: int
    next: Optional[str] = None
    previous: Optional[str] = None
    results: List[NamedResource] = []

# --- View models ---

class PokemonAbility(BaseModel):
    name: str = Field(..., description="Name of the ability")
    is_hidden: bool = Field(False, description="Is this a hidden ability")

    class Config:
        frozen = True

class PokemonStat(BaseModel):
    name: str = Field(..., description="Name of the stat (e.g., 'hp', 'attack')")
    value: int = Field(..., description="Base stat value")

    class Config:
        frozen = True

class PokemonSummary(BaseModel):
    """Summary data for a Pokémon, for list and gallery views."""
    id: int = Field(..., description="Pokémon ID")
    name: str = Field(..., description="Pokémon name")
    sprite: Optional[str] = Field(None, description="Best available artwork URL")
    types: Tuple[str, ...] = Field((), description="Type names ordered by slot")

    class Config:
        frozen = True

class PokemonDetail(PokemonSummary):
    """Everything the detail view shows; a detail is also a valid summary."""
    height: int = Field(..., description="Height in decimetres")
    weight: int = Field(..., description="Weight in hectograms")
    base_experience: Optional[int] = None
    abilities: Tuple[PokemonAbility, ...] = ()
    stats: Tuple[PokemonStat, ...] = ()
    flavor_text: Optional[str] = None
    habitat: Optional[str] = None
    genus: Optional[str] = None
    is_legendary: bool = False
    is_mythical: bool = False

    def to_summary(self) -> PokemonSummary:
        return PokemonSummary(id=self.id, name=self.name, sprite=self.sprite, types=self.types)

# --- Store state ---

class ListStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"

class ListParams(BaseModel):
    limit: int
    offset: int

    class Config:
        frozen = True

class StoreState(BaseModel):
    """Read-only snapshot of a ``PokemonStore``."""
    items: Tuple[PokemonSummary, ...] = ()
    total_count: int = 0
    is_list_loading: bool = False
    list_error: Optional[str] = None
    list_params: ListParams
    list_status: ListStatus = ListStatus.IDLE
    summaries_by_id: Dict[int, PokemonSummary] = {}
    details_by_id: Dict[int, PokemonDetail] = {}

    class Config:
        frozen = True
