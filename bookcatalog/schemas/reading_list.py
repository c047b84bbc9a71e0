from pydantic import Field

from bookcatalog.schemas import CatalogModel


class ReadingListCreate(CatalogModel):
    name: str
    description: str | None = None
    items: list[dict] = Field(default_factory=list)


class ReadingListUpdate(CatalogModel):
    name: str | None = None
    description: str | None = None
    items: list[dict] | None = None
