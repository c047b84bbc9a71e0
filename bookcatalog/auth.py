"""Session lookup and request header construction."""

import logging
import os
from dataclasses import dataclass
from typing import Protocol

from bookcatalog.config import ID_TOKEN_ENV
from bookcatalog.errors import NoSessionError

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """Tokens for the signed-in user, as handed out by the identity provider."""

    id_token: str | None = None
    access_token: str | None = None


class SessionProvider(Protocol):
    async def fetch_session(self) -> Session: ...


class StaticSessionProvider:
    """Always returns the same id token."""

    def __init__(self, id_token: str | None) -> None:
        self.id_token = id_token

    async def fetch_session(self) -> Session:
        return Session(id_token=self.id_token)


class EnvSessionProvider:
    """Reads the id token from the environment on every lookup."""

    def __init__(self, var: str = ID_TOKEN_ENV) -> None:
        self.var = var

    async def fetch_session(self) -> Session:
        token = os.environ.get(self.var)
        if not token:
            raise NoSessionError(f"{self.var} is not set")
        return Session(id_token=token)


async def get_auth_headers(provider: SessionProvider | None) -> dict[str, str]:
    """Always returns a valid headers dict. Authorization is added only when
    the provider yields an id token; any lookup failure falls back to the
    anonymous headers."""
    headers = {"Content-Type": "application/json"}

    if provider is None:
        return headers

    try:
        session = await provider.fetch_session()
    except Exception as e:
        logger.debug("No auth session, sending anonymous headers: %s", e)
        return headers

    token = session.id_token if session is not None else None
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers
