# pokeportal/exceptions.py
from typing import Optional


class PokeAPIError(Exception):
    """Base class for every failure raised while talking to the catalog."""


class CatalogConnectionError(PokeAPIError):
    """The request never produced a response (timeout, DNS, refused connection)."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Could not reach PokeAPI at {url}: {reason}")


class UpstreamError(PokeAPIError):
    """The catalog answered with a non-success status code."""

    def __init__(self, url: str, status_code: int, reason: Optional[str] = None):
        self.url = url
        self.status_code = status_code
        self.reason = reason
        message = f"PokeAPI returned {status_code}"
        if reason:
            message += f" {reason}"
        super().__init__(f"{message} for {url}")


class ResourceNotFoundError(UpstreamError):
    """The requested name or id does not exist in the catalog (404)."""

    def __init__(self, url: str, reason: Optional[str] = "Not Found"):
        super().__init__(url, 404, reason)
