from bookcatalog.auth import (
    EnvSessionProvider,
    Session,
    SessionProvider,
    StaticSessionProvider,
    get_auth_headers,
)
from bookcatalog.client import CatalogClient, alert
from bookcatalog.errors import CatalogRequestError, NoSessionError
from bookcatalog.resources.books import create_book, delete_book, get_book, get_books, update_book
from bookcatalog.resources.reading_lists import (
    create_reading_list,
    delete_reading_list,
    get_reading_lists,
    update_reading_list,
)
from bookcatalog.resources.recommendations import get_recommendations
from bookcatalog.resources.reviews import create_review, get_reviews

__all__ = [
    "CatalogClient",
    "CatalogRequestError",
    "EnvSessionProvider",
    "NoSessionError",
    "Session",
    "SessionProvider",
    "StaticSessionProvider",
    "alert",
    "create_book",
    "create_reading_list",
    "create_review",
    "delete_book",
    "delete_reading_list",
    "get_auth_headers",
    "get_book",
    "get_books",
    "get_reading_lists",
    "get_recommendations",
    "get_reviews",
    "update_book",
    "update_reading_list",
]
