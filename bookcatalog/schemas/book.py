from bookcatalog.schemas import CatalogModel


class BookCreate(CatalogModel):
    title: str
    author: str
    isbn: str | None = None
    publisher: str | None = None
    page_count: int | None = None
    year_published: int | None = None
    genre: str | None = None
    description: str | None = None
    cover_url: str | None = None


class BookUpdate(CatalogModel):
    title: str | None = None
    author: str | None = None
    isbn: str | None = None
    publisher: str | None = None
    page_count: int | None = None
    year_published: int | None = None
    genre: str | None = None
    description: str | None = None
    cover_url: str | None = None
