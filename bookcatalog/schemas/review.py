from pydantic import Field

from bookcatalog.schemas import CatalogModel


class ReviewCreate(CatalogModel):
    book_id: str
    rating: float | None = Field(None, ge=0.0, le=5.0)
    comment: str | None = None
    user_name: str | None = None
