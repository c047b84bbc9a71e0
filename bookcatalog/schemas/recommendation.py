from bookcatalog.schemas import CatalogModel


class RecommendationQuery(CatalogModel):
    query: str
