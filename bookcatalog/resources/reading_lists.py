import logging
from collections.abc import Mapping
from typing import Any

from httpx import Response

from bookcatalog.client import CatalogClient, dump_payload, segment
from bookcatalog.errors import CatalogRequestError
from bookcatalog.schemas import ReadingListCreate, ReadingListUpdate

logger = logging.getLogger(__name__)


def _server_message(resp: Response) -> str:
    """Pull the message field out of an error body, falling back to the raw text."""
    try:
        data = resp.json()
    except ValueError:
        return resp.text
    if isinstance(data, dict) and data.get("message") is not None:
        return str(data["message"])
    return resp.text


async def get_reading_lists(client: CatalogClient) -> list[dict]:
    error = "Failed to fetch reading lists"
    resp = await client.get("/reading-lists", error=error, auth=True)
    client.check(resp, error)
    return resp.json()


async def create_reading_list(
    client: CatalogClient,
    reading_list: ReadingListCreate | Mapping[str, Any],
) -> dict:
    error = "Failed to create reading list"
    resp = await client.post("/reading-lists", error=error, json=dump_payload(reading_list))
    client.check(resp, error)
    return resp.json()


async def update_reading_list(
    client: CatalogClient,
    list_id: str,
    reading_list: ReadingListUpdate | Mapping[str, Any],
) -> dict:
    """Update a reading list. On failure the server's message is shown to the
    user through the client's notifier before the error is raised."""
    error = "Failed to update reading list"
    resp = await client.put(
        f"/reading-lists/{segment(list_id)}", error=error, json=dump_payload(reading_list)
    )
    if not resp.is_success:
        message = _server_message(resp)
        # Only mutating call that notifies the user; the other paths raise silently.
        logger.warning(
            "Reading list %s update rejected -> %d: %s", list_id, resp.status_code, message
        )
        client.notifier(f"Server says: {message}")
        raise CatalogRequestError(error)
    return resp.json()


async def delete_reading_list(client: CatalogClient, list_id: str) -> bool:
    error = "Failed to delete reading list"
    resp = await client.delete(f"/reading-lists/{segment(list_id)}", error=error)
    client.check(resp, error)
    return True
