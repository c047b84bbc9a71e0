"""In-process fake of the catalog service. Requests go through
httpx.ASGITransport so the client exercises its real transport code."""

from datetime import datetime, timezone

import pytest
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from httpx import ASGITransport, AsyncClient

from bookcatalog.auth import StaticSessionProvider
from bookcatalog.client import CatalogClient


class FakeCatalog:
    def __init__(self) -> None:
        self.books: dict[str, dict] = {}
        self.reading_lists: dict[str, dict] = {}
        self.reviews: dict[str, list[dict]] = {}
        self.recommendations: dict[str, dict | list] = {}
        self.requests: list[dict] = []
        self.force_status: int | None = None
        self.force_body: dict | None = None
        self.force_text: str | None = None
        self._next_id = 0

    def new_id(self, prefix: str) -> str:
        self._next_id += 1
        return f"{prefix}{self._next_id}"

    @property
    def last_request(self) -> dict:
        return self.requests[-1]


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _unauthorized() -> JSONResponse:
    return JSONResponse(status_code=401, content={"message": "Unauthorized"})


def create_fake_app(catalog: FakeCatalog) -> FastAPI:
    app = FastAPI(title="Fake catalog")

    @app.middleware("http")
    async def record_request(request: Request, call_next):
        catalog.requests.append(
            {
                "method": request.method,
                "path": request.url.path,
                "headers": dict(request.headers),
            }
        )
        if catalog.force_status is not None and catalog.force_text is not None:
            return Response(
                content=catalog.force_text, status_code=catalog.force_status, media_type="text/html"
            )
        if catalog.force_status is not None:
            return JSONResponse(status_code=catalog.force_status, content=catalog.force_body)
        return await call_next(request)

    def authorized(request: Request) -> bool:
        return request.headers.get("authorization", "").startswith("Bearer ")

    # --- books ---

    @app.get("/books")
    async def list_books():
        return list(catalog.books.values())

    @app.get("/books/{book_id}")
    async def read_book(book_id: str):
        if book_id not in catalog.books:
            return JSONResponse(status_code=404, content={"message": "Book not found"})
        return catalog.books[book_id]

    @app.post("/books", status_code=201)
    async def add_book(data: dict, request: Request):
        if not authorized(request):
            return _unauthorized()
        book = {**data, "id": catalog.new_id("b")}
        catalog.books[book["id"]] = book
        return book

    @app.put("/books/{book_id}")
    async def edit_book(book_id: str, data: dict, request: Request):
        if not authorized(request):
            return _unauthorized()
        if book_id not in catalog.books:
            return JSONResponse(status_code=404, content={"message": "Book not found"})
        catalog.books[book_id] = {**catalog.books[book_id], **data, "id": book_id}
        return catalog.books[book_id]

    @app.delete("/books/{book_id}")
    async def remove_book(book_id: str, request: Request):
        if not authorized(request):
            return _unauthorized()
        if catalog.books.pop(book_id, None) is None:
            return JSONResponse(status_code=404, content={"message": "Book not found"})
        return Response(status_code=204)

    # --- recommendations ---

    @app.post("/recommendations")
    async def recommend(data: dict, request: Request):
        if not authorized(request):
            return _unauthorized()
        return catalog.recommendations.get(data.get("query"), {})

    # --- reading lists ---

    @app.get("/reading-lists")
    async def list_reading_lists(request: Request):
        if not authorized(request):
            return _unauthorized()
        return list(catalog.reading_lists.values())

    @app.post("/reading-lists", status_code=201)
    async def add_reading_list(data: dict, request: Request):
        if not authorized(request):
            return _unauthorized()
        now = _now()
        reading_list = {
            "items": [],
            **data,
            "id": catalog.new_id("rl"),
            "createdAt": now,
            "updatedAt": now,
        }
        catalog.reading_lists[reading_list["id"]] = reading_list
        return reading_list

    @app.put("/reading-lists/{list_id}")
    async def edit_reading_list(list_id: str, data: dict, request: Request):
        if not authorized(request):
            return _unauthorized()
        if list_id not in catalog.reading_lists:
            return JSONResponse(status_code=404, content={"message": "Reading list not found"})
        if data.get("name") == "":
            return JSONResponse(status_code=400, content={"message": "Name cannot be empty"})
        catalog.reading_lists[list_id] = {
            **catalog.reading_lists[list_id],
            **data,
            "id": list_id,
            "updatedAt": _now(),
        }
        return catalog.reading_lists[list_id]

    @app.delete("/reading-lists/{list_id}")
    async def remove_reading_list(list_id: str, request: Request):
        if not authorized(request):
            return _unauthorized()
        if catalog.reading_lists.pop(list_id, None) is None:
            return JSONResponse(status_code=404, content={"message": "Reading list not found"})
        return Response(status_code=204)

    # --- reviews ---

    @app.get("/books/{book_id}/reviews")
    async def list_reviews(book_id: str):
        return catalog.reviews.get(book_id, [])

    @app.post("/books/{book_id}/reviews", status_code=201)
    async def add_review(book_id: str, data: dict, request: Request):
        if not authorized(request):
            return _unauthorized()
        review = {**data, "id": catalog.new_id("r"), "createdAt": _now()}
        catalog.reviews.setdefault(book_id, []).append(review)
        return review

    return app


@pytest.fixture
def catalog():
    return FakeCatalog()


@pytest.fixture
async def http(catalog):
    transport = ASGITransport(app=create_fake_app(catalog))
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def notices():
    return []


@pytest.fixture
def client(http, notices):
    """Catalog client signed in with id token "T"."""
    return CatalogClient(http, session_provider=StaticSessionProvider("T"), notifier=notices.append)


@pytest.fixture
def anon_client(http, notices):
    return CatalogClient(http, notifier=notices.append)
