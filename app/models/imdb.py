"""
IMDb GraphQL Request Models
Immutable persisted-query body sent for every Top Picks fetch
"""
from pydantic import BaseModel, ConfigDict
from app.core.config import settings

TOP_PICKS_OPERATION = "TopPicksTab"
TOP_PICKS_SHA256 = "df290897e7878eb47c42b3fc06701793cb2c9701c620872794325c201a4e2502"


class TopPicksVariables(BaseModel):
    model_config = ConfigDict(frozen=True)

    first: int = 48
    includeUserRating: bool = True
    locale: str = "en-GB"


class PersistedQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    sha256Hash: str = TOP_PICKS_SHA256
    version: int = 1


class QueryExtensions(BaseModel):
    model_config = ConfigDict(frozen=True)

    persistedQuery: PersistedQuery = PersistedQuery()


class GraphQLRequest(BaseModel):
    """GraphQL request identified by a pinned query hash"""
    model_config = ConfigDict(frozen=True)

    operationName: str = TOP_PICKS_OPERATION
    variables: TopPicksVariables = TopPicksVariables()
    extensions: QueryExtensions = QueryExtensions()


# Built once at import from settings
TOP_PICKS_REQUEST = GraphQLRequest(
    variables=TopPicksVariables(
        first=settings.IMDB_PAGE_SIZE,
        locale=settings.IMDB_LOCALE,
    )
)
