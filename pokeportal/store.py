# pokeportal/store.py

import asyncio
import logging
from typing import Dict, Optional, Tuple, Union

from .client import CatalogClient
from .config import settings
from .mapper import to_detail, to_summary
from .models import (
    ListParams, ListStatus, Pokemon, PokemonDetail, PokemonListResponse,
    PokemonSpecies, PokemonSummary, StoreState,
)

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Something went wrong while talking to PokeAPI."

IdOrName = Union[int, str]


def extract_error_message(error: BaseException) -> str:
    message = str(error)
    return message if message else DEFAULT_ERROR_MESSAGE


def _normalize_identifier(id_or_name: IdOrName) -> str:
    return str(id_or_name).strip().lower()


class PokemonStore:
    """
    Session-scoped holder of the loaded catalog and every view model fetched so far.

    The view layer reads through ``get_state()`` and changes state only through
    ``load_list``, ``get_summary`` and ``get_detail``. Each merge replaces a
    whole collection in one assignment, so a snapshot never shows half a merge.
    """

    def __init__(self, client: CatalogClient):
        self.client = client
        self._items: Tuple[PokemonSummary, ...] = ()
        self._total_count = 0
        self._list_status = ListStatus.IDLE
        self._list_error: Optional[str] = None
        # Serializes list loads; a caller arriving mid-load waits, then sees the result
        self._list_lock = asyncio.Lock()
        self._list_params = ListParams(
            limit=settings.default_list_limit, offset=settings.default_list_offset
        )
        self._summaries_by_id: Dict[int, PokemonSummary] = {}
        self._details_by_id: Dict[int, PokemonDetail] = {}

    async def __aenter__(self) -> "PokemonStore":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    @property
    def list_status(self) -> ListStatus:
        return self._list_status

    def get_state(self) -> StoreState:
        return StoreState(
            items=self._items,
            total_count=self._total_count,
            is_list_loading=self._list_status is ListStatus.LOADING,
            list_error=self._list_error,
            list_params=self._list_params,
            list_status=self.list_status,
            summaries_by_id=dict(self._summaries_by_id),
            details_by_id=dict(self._details_by_id),
        )

    # --- Commands ---

    async def _fetch_summary(self, id_or_name: IdOrName) -> PokemonSummary:
        raw = await self.client.fetch_pokemon(_normalize_identifier(id_or_name))
        return to_summary(Pokemon.model_validate(raw))

    async def load_list(
        self,
        limit: int = settings.default_list_limit,
        offset: int = settings.default_list_offset,
    ) -> StoreState:
        """
        Loads the catalog index and a summary for every entry in it.

        The list is loaded once per session: after a successful load this
        returns the current state without touching the network. Concurrent
        calls are serialized; a caller that waited on a successful load gets
        the loaded state. If any single summary fails, nothing is committed and
        the failure is recorded in ``list_error`` instead of being raised.
        """
        if self._list_status is ListStatus.READY:
            logger.debug("Pokemon list already loaded; skipping fetch.")
            return self.get_state()

        async with self._list_lock:
            if self._list_status is ListStatus.READY:
                logger.debug("Pokemon list loaded by a concurrent call; skipping fetch.")
                return self.get_state()
            return await self._load_list_locked(limit, offset)

    async def _load_list_locked(self, limit: int, offset: int) -> StoreState:
        self._list_status = ListStatus.LOADING
        self._list_error = None
        self._list_params = ListParams(limit=limit, offset=offset)
        logger.info(f"Loading Pokemon list (limit={limit}, offset={offset})...")
        status = ListStatus.IDLE
        try:
            raw_page = await self.client.fetch_pokemon_list(limit, offset)
            page = PokemonListResponse.model_validate(raw_page)
            summaries = await asyncio.gather(
                *(self._fetch_summary(result.name) for result in page.results)
            )

            merged = dict(self._summaries_by_id)
            for summary in summaries:
                merged[summary.id] = summary

            self._items = tuple(summaries)
            self._total_count = page.count
            self._summaries_by_id = merged
            logger.info(f"Loaded {len(summaries)} Pokemon summaries (total available: {page.count}).")
            status = ListStatus.READY
        except Exception as e:
            status = ListStatus.FAILED
            self._list_error = extract_error_message(e)
            logger.warning(f"Pokemon list load failed: {self._list_error}")
        finally:
            self._list_status = status
        return self.get_state()

    async def get_summary(self, id_or_name: IdOrName) -> PokemonSummary:
        summary = await self._fetch_summary(id_or_name)
        self._summaries_by_id = {**self._summaries_by_id, summary.id: summary}
        return summary

    async def get_detail(self, id_or_name: IdOrName) -> PokemonDetail:
        identifier = _normalize_identifier(id_or_name)
        raw_pokemon, raw_species = await asyncio.gather(
            self.client.fetch_pokemon(identifier),
            self.client.fetch_pokemon_species(identifier),
        )
        detail = to_detail(
            Pokemon.model_validate(raw_pokemon),
            PokemonSpecies.model_validate(raw_species),
        )
        self._details_by_id = {**self._details_by_id, detail.id: detail}
        self._summaries_by_id = {**self._summaries_by_id, detail.id: detail.to_summary()}
        logger.debug(f"Stored detail for {detail.name} (ID: {detail.id}).")
        return detail
