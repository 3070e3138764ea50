# pokeportal/__init__.py

# Expose the data-access surface for easy import
from .cache import ResponseCache, make_cache_key
from .client import CatalogClient
from .exceptions import (
    PokeAPIError, CatalogConnectionError, UpstreamError, ResourceNotFoundError
)
from .models import PokemonSummary, PokemonDetail, StoreState, ListStatus
from .store import PokemonStore

__all__ = [
    # Transport
    "CatalogClient", "ResponseCache", "make_cache_key",
    # Store
    "PokemonStore",
    # Models
    "PokemonSummary", "PokemonDetail", "StoreState", "ListStatus",
    # Exceptions
    "PokeAPIError", "CatalogConnectionError", "UpstreamError", "ResourceNotFoundError",
]

__version__ = "0.1.0" # Keep version consistent with pyproject.toml
