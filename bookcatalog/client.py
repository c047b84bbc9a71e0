import logging
import sys
from collections.abc import Callable, Mapping
from typing import Any
from urllib.parse import quote

import httpx
from httpx import AsyncClient, Response
from pydantic import BaseModel

from bookcatalog.auth import SessionProvider, get_auth_headers
from bookcatalog.config import API_BASE_URL, API_TIMEOUT
from bookcatalog.errors import CatalogRequestError

logger = logging.getLogger(__name__)

Notifier = Callable[[str], None]


def alert(message: str) -> None:
    """Show a message to the user and return once it has been written."""
    print(message, file=sys.stderr, flush=True)


def segment(value: str) -> str:
    """Escape a value for use as a single path segment."""
    return quote(str(value), safe="")


def dump_payload(payload: BaseModel | Mapping[str, Any]) -> dict:
    """Serialize a request body. Schema instances only send the fields the
    caller set, under their wire names."""
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", by_alias=True, exclude_unset=True)
    return dict(payload)


class CatalogClient:
    """Thin wrapper around httpx.AsyncClient that attaches auth headers and
    turns transport failures into CatalogRequestError."""

    def __init__(
        self,
        http: AsyncClient,
        session_provider: SessionProvider | None = None,
        notifier: Notifier = alert,
    ) -> None:
        self.http = http
        self.session_provider = session_provider
        self.notifier = notifier

    @classmethod
    def from_config(
        cls,
        session_provider: SessionProvider | None = None,
        notifier: Notifier = alert,
        base_url: str = API_BASE_URL,
        timeout: float = API_TIMEOUT,
    ) -> "CatalogClient":
        http = AsyncClient(base_url=base_url, timeout=timeout)
        return cls(http, session_provider=session_provider, notifier=notifier)

    async def request(
        self,
        method: str,
        path: str,
        *,
        error: str,
        auth: bool = False,
        json: Any = None,
    ) -> Response:
        kwargs: dict[str, Any] = {}
        if auth:
            kwargs["headers"] = await get_auth_headers(self.session_provider)
        if json is not None:
            kwargs["json"] = json

        logger.debug("%s %s", method, path)
        try:
            return await self.http.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error("Catalog API error for %s %s: %s", method, path, e)
            raise CatalogRequestError(error) from e

    async def get(self, path: str, *, error: str, auth: bool = False) -> Response:
        return await self.request("GET", path, error=error, auth=auth)

    async def post(self, path: str, *, error: str, json: Any = None) -> Response:
        return await self.request("POST", path, error=error, auth=True, json=json)

    async def put(self, path: str, *, error: str, json: Any = None) -> Response:
        return await self.request("PUT", path, error=error, auth=True, json=json)

    async def delete(self, path: str, *, error: str) -> Response:
        return await self.request("DELETE", path, error=error, auth=True)

    def check(self, resp: Response, error: str) -> None:
        """Raise CatalogRequestError unless the response has a 2xx status."""
        if not resp.is_success:
            logger.warning(
                "%s %s -> %d", resp.request.method, resp.request.url.path, resp.status_code
            )
            raise CatalogRequestError(error)

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> "CatalogClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
