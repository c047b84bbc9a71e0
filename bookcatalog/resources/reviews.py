from collections.abc import Mapping
from typing import Any

from bookcatalog.client import CatalogClient, dump_payload, segment
from bookcatalog.schemas import ReviewCreate


async def get_reviews(client: CatalogClient, book_id: str) -> list[dict]:
    error = "Failed to fetch reviews"
    resp = await client.get(f"/books/{segment(book_id)}/reviews", error=error)
    client.check(resp, error)
    return resp.json()


async def create_review(
    client: CatalogClient,
    review: ReviewCreate | Mapping[str, Any],
) -> dict:
    """Post a review under the book named by the review's own bookId."""
    body = dump_payload(review)
    book_id = body.get("bookId")
    if not book_id:
        raise ValueError("review has no bookId")

    error = "Failed to create review"
    resp = await client.post(f"/books/{segment(book_id)}/reviews", error=error, json=body)
    client.check(resp, error)
    return resp.json()
