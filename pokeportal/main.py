# pokeportal/main.py

from fastapi import Depends, FastAPI, HTTPException, Path, Query, Request
from contextlib import asynccontextmanager
import logging
from typing import List

from .client import CatalogClient
from .config import settings
from .exceptions import PokeAPIError, ResourceNotFoundError
from .models import PokemonDetail, PokemonSummary, StoreState
from .store import PokemonStore, extract_error_message
from .views import available_types, filter_by_types, neighbors, search_and_sort

# Configure logging
logger = logging.getLogger(__name__)
logging.basicConfig(level=settings.log_level, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup phase
    logger.info("Application startup...")
    app.state.store = PokemonStore(CatalogClient())
    logger.info("PokeAPI client and Pokemon store initialized.")

    yield # Application runs here

    # Shutdown phase
    logger.info("Application shutdown...")
    await app.state.store.aclose()
    logger.info("Resources cleaned up.")

app = FastAPI(
    title="Poke Portal API",
    description="Browse, search, filter and inspect Pokemon from PokeAPI",
    version="1.0.0",
    lifespan=lifespan,
)

def get_store(request: Request) -> PokemonStore:
    return request.app.state.store

async def _require_list(store: PokemonStore) -> StoreState:
    state = await store.load_list()
    if state.list_error is not None:
        logger.error(f"Pokemon list unavailable: {state.list_error}")
        raise HTTPException(status_code=502, detail=state.list_error)
    return state

def _raise_for_catalog_error(error: PokeAPIError, identifier: str):
    if isinstance(error, ResourceNotFoundError):
        logger.warning(f"Pokémon not found for identifier: '{identifier}'")
        raise HTTPException(
            status_code=404,
            detail=f"Pokémon with ID or name '{identifier}' not found."
        ) from error
    logger.error(f"Catalog request failed for '{identifier}': {error}")
    raise HTTPException(status_code=502, detail=extract_error_message(error)) from error

# --- API Endpoints ---

@app.get("/")
async def read_root(store: PokemonStore = Depends(get_store)):
    """ Basic root endpoint to check if the API is running. """
    return {
        "message": "Welcome to the Poke Portal API!",
        "documentation": "/docs",
        "list_status": store.list_status.value,
    }

@app.get(
    "/api/pokemon",
    summary="Search and Sort the Pokémon List",
    tags=["Pokedex"]
)
async def list_pokemon(
    q: str = Query("", description="Case-insensitive substring of the Pokémon name."),
    sort_by: str = Query("id", pattern="^(id|name)$"),
    order: str = Query("asc", pattern="^(asc|desc)$"),
    store: PokemonStore = Depends(get_store),
):
    state = await _require_list(store)
    items = search_and_sort(state.items, query=q, sort_by=sort_by, order=order)
    logger.info(f"Returning {len(items)} of {len(state.items)} Pokémon for query '{q}'.")
    return {"total_count": state.total_count, "count": len(items), "items": items}

@app.get(
    "/api/gallery",
    summary="Filter the Pokémon List by Type",
    tags=["Pokedex"]
)
async def gallery(
    types: List[str] = Query([], description="Only Pokémon having every listed type."),
    store: PokemonStore = Depends(get_store),
):
    state = await _require_list(store)
    items = filter_by_types(state.items, types)
    return {
        "available_types": available_types(state.items),
        "selected_types": types,
        "count": len(items),
        "items": items,
    }

@app.get(
    "/api/pokemon/{pokemon_id_or_name}/summary",
    response_model=PokemonSummary,
    tags=["Pokemon"]
)
async def get_pokemon_summary(
    pokemon_id_or_name: str = Path(..., examples=["pikachu", "25"]),
    store: PokemonStore = Depends(get_store),
):
    try:
        return await store.get_summary(pokemon_id_or_name)
    except PokeAPIError as e:
        _raise_for_catalog_error(e, pokemon_id_or_name)

@app.get(
    "/api/pokemon/{pokemon_id_or_name}",
    summary="Get Detailed Data for a Specific Pokémon",
    tags=["Pokemon"]
)
async def get_pokemon_details(
    pokemon_id_or_name: str = Path(..., examples=["pikachu", "25"]),
    store: PokemonStore = Depends(get_store),
):
    logger.info(f"Received request for Pokémon details: '{pokemon_id_or_name}'")
    try:
        detail: PokemonDetail = await store.get_detail(pokemon_id_or_name)
    except PokeAPIError as e:
        _raise_for_catalog_error(e, pokemon_id_or_name)

    previous, following = neighbors(store.get_state().items, detail.id)
    return {
        "pokemon": detail,
        "previous_id": previous.id if previous else None,
        "next_id": following.id if following else None,
    }

@app.get("/api/state", response_model=StoreState, tags=["Admin"])
async def read_state(store: PokemonStore = Depends(get_store)):
    return store.get_state()
