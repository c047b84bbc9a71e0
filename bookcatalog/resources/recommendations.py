from bookcatalog.client import CatalogClient, dump_payload
from bookcatalog.schemas import RecommendationQuery


async def get_recommendations(client: CatalogClient, query: str) -> list[dict]:
    """Ask the catalog for books matching a free-text query. A response
    without a recommendations list means there were no matches."""
    error = "Failed to get recommendations"
    resp = await client.post(
        "/recommendations",
        error=error,
        json=dump_payload(RecommendationQuery(query=query)),
    )
    client.check(resp, error)
    data = resp.json()
    return (data.get("recommendations") if isinstance(data, dict) else None) or []
