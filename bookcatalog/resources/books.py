from collections.abc import Mapping
from typing import Any

from bookcatalog.client import CatalogClient, dump_payload, segment
from bookcatalog.schemas import BookCreate, BookUpdate


async def get_books(client: CatalogClient) -> list[dict]:
    error = "Failed to fetch books"
    resp = await client.get("/books", error=error)
    client.check(resp, error)
    return resp.json()


async def get_book(client: CatalogClient, book_id: str) -> dict | None:
    """Fetch one book. Returns None when the catalog has no book with that id."""
    error = "Failed to fetch book"
    resp = await client.get(f"/books/{segment(book_id)}", error=error)
    if resp.status_code == 404:
        return None
    client.check(resp, error)
    return resp.json()


async def create_book(
    client: CatalogClient,
    book: BookCreate | Mapping[str, Any],
) -> dict:
    error = "Failed to create book"
    resp = await client.post("/books", error=error, json=dump_payload(book))
    client.check(resp, error)
    return resp.json()


async def update_book(
    client: CatalogClient,
    book_id: str,
    book: BookUpdate | Mapping[str, Any],
) -> dict:
    error = "Failed to update book"
    resp = await client.put(f"/books/{segment(book_id)}", error=error, json=dump_payload(book))
    client.check(resp, error)
    return resp.json()


async def delete_book(client: CatalogClient, book_id: str) -> None:
    error = "Failed to delete book"
    resp = await client.delete(f"/books/{segment(book_id)}", error=error)
    client.check(resp, error)
