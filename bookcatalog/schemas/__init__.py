from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CatalogModel(BaseModel):
    """Base for catalog records: snake_case attributes, camelCase on the wire,
    unknown server fields kept as-is."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


from bookcatalog.schemas.book import BookCreate, BookUpdate  # noqa: E402
from bookcatalog.schemas.reading_list import ReadingListCreate, ReadingListUpdate  # noqa: E402
from bookcatalog.schemas.recommendation import RecommendationQuery  # noqa: E402
from bookcatalog.schemas.review import ReviewCreate  # noqa: E402

__all__ = [
    "CatalogModel",
    "BookCreate",
    "BookUpdate",
    "ReadingListCreate",
    "ReadingListUpdate",
    "RecommendationQuery",
    "ReviewCreate",
]
