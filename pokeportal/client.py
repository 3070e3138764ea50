# pokeportal/client.py

import asyncio
import logging
from typing import Any, Dict, Mapping, Optional, Union

import httpx

from .cache import ResponseCache, make_cache_key
from .config import settings
from .exceptions import (
    CatalogConnectionError,
    ResourceNotFoundError,
    UpstreamError,
)

logger = logging.getLogger(__name__)

POKEMON_LIST_ENDPOINT = "/pokemon"
POKEMON_ENDPOINT = "/pokemon/{}"
POKEMON_SPECIES_ENDPOINT = "/pokemon-species/{}"


class CatalogClient:
    """
    Async HTTP client for the PokeAPI catalog with a time-boxed response cache.

    One instance is meant to live for a whole session: it owns the pooled
    ``httpx.AsyncClient`` and the cache table, and both are released by
    ``aclose()``.
    """

    def __init__(
        self,
        base_url: str = settings.pokeapi_base_url,
        timeout: float = settings.request_timeout_seconds,
        default_ttl: float = settings.cache_ttl_seconds,
        dedupe_inflight: bool = settings.dedupe_inflight_requests,
        cache: Optional[ResponseCache] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.default_ttl = default_ttl
        self.dedupe_inflight = dedupe_inflight
        self.cache = cache if cache is not None else ResponseCache()
        self._http = http_client or httpx.AsyncClient(
            base_url=base_url,
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
            headers={"Content-Type": "application/json"},
            limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
        )
        # Requests currently on the wire, keyed like the cache
        self._inflight: Dict[str, asyncio.Future] = {}

    async def __aenter__(self) -> "CatalogClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    @property
    def is_closed(self) -> bool:
        return self._http.is_closed

    async def aclose(self) -> None:
        """Closes the underlying httpx client."""
        if not self._http.is_closed:
            await self._http.aclose()
            logger.info("PokeAPI HTTPX client closed.")

    async def fetch(
        self,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None,
        ttl: Optional[float] = None,
    ) -> Any:
        """
        Fetches raw JSON for ``endpoint``, serving it from the cache when fresh.

        Args:
            endpoint: Path relative to the base URL (e.g. "/pokemon/pikachu").
            params: Optional query parameters; part of the cache key.
            ttl: Maximum age in seconds of a cached payload; defaults to the
                client's default TTL.

        Raises:
            CatalogConnectionError: The request timed out or could not connect.
            ResourceNotFoundError: The catalog answered 404.
            UpstreamError: The catalog answered with any other non-2xx status.
        """
        ttl = self.default_ttl if ttl is None else ttl
        key = make_cache_key(endpoint, params)

        cached = self.cache.get(key, ttl)
        if cached is not None:
            return cached

        if not self.dedupe_inflight:
            return await self._request(key, endpoint, params)

        pending = self._inflight.get(key)
        if pending is None or pending.done():
            pending = asyncio.ensure_future(self._request(key, endpoint, params))
            self._inflight[key] = pending
            pending.add_done_callback(lambda f: self._forget_inflight(key, f))
        else:
            logger.debug(f"Joining in-flight request for key: {key}")
        # One waiter being cancelled must not cancel the request for the others
        return await asyncio.shield(pending)

    def _forget_inflight(self, key: str, future: asyncio.Future) -> None:
        if self._inflight.get(key) is future:
            del self._inflight[key]

    async def _request(
        self, key: str, endpoint: str, params: Optional[Mapping[str, Any]]
    ) -> Any:
        logger.debug(f"Fetching data from PokeAPI: {endpoint} params={params}")
        try:
            response = await self._http.get(endpoint, params=dict(params) if params else None)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            logger.error(f"Request timed out for PokeAPI endpoint: {endpoint}")
            raise CatalogConnectionError(endpoint, "request timed out") from e
        except httpx.HTTPStatusError as e:
            url = str(e.request.url)
            logger.error(f"HTTP error occurred: {e.response.status_code} {e.response.reason_phrase} for url {url!r}")
            if e.response.status_code == 404:
                logger.warning(f"Resource not found at {url!r}")
                raise ResourceNotFoundError(url) from e
            raise UpstreamError(url, e.response.status_code, e.response.reason_phrase) from e
        except httpx.RequestError as e:
            logger.error(f"An error occurred while requesting {endpoint!r}: {e}")
            raise CatalogConnectionError(endpoint, str(e) or type(e).__name__) from e

        try:
            data = response.json()
        except ValueError as e:
            url = str(response.request.url)
            logger.error(f"PokeAPI returned a non-JSON body for url {url!r}: {e}")
            raise UpstreamError(url, response.status_code, "invalid JSON body") from e
        logger.debug(f"Successfully fetched data from {endpoint}, status: {response.status_code}")
        self.cache.set(key, data)
        return data

    # --- Catalog endpoints ---

    async def fetch_pokemon_list(
        self,
        limit: int = settings.default_list_limit,
        offset: int = settings.default_list_offset,
    ) -> Dict[str, Any]:
        return await self.fetch(POKEMON_LIST_ENDPOINT, {"limit": limit, "offset": offset})

    async def fetch_pokemon(self, id_or_name: Union[int, str]) -> Dict[str, Any]:
        return await self.fetch(POKEMON_ENDPOINT.format(id_or_name))

    async def fetch_pokemon_species(self, id_or_name: Union[int, str]) -> Dict[str, Any]:
        return await self.fetch(POKEMON_SPECIES_ENDPOINT.format(id_or_name))
