"""
IMDb GraphQL Client
Fetches the user's Top Picks with their session cookie and maps them to Stremio metas
"""
import aiohttp
import asyncio
import logging
from typing import List, Dict, Optional, Any
from pydantic import ValidationError
from app.core.config import settings
from app.core.errors import UpstreamAPIError, UpstreamAuthRequired, UpstreamUnreachable
from app.models.imdb import TOP_PICKS_REQUEST
from app.models.stremio import MetaPreview

logger = logging.getLogger(__name__)

SERIES_TITLE_TYPES = {"tvSeries", "tvMiniSeries"}

# Heuristic: IMDb error wording is not a stable contract
AUTH_MARKERS = ("auth", "login")


def _get(data: Any, *path: str) -> Any:
    """Walk nested dicts, returning None as soon as a step is missing"""
    for key in path:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


def title_genres(title: Dict[str, Any]) -> List[str]:
    """Genre display strings attached to a title, in upstream order"""
    genres = []
    for entry in _get(title, "titleGenres", "genres") or []:
        text = _get(entry, "genre", "text")
        if isinstance(text, str) and text:
            genres.append(text)
    return genres


def title_to_meta(edge: Dict[str, Any]) -> Optional[MetaPreview]:
    """
    Convert one recommendation edge into a Stremio MetaPreview

    Args:
        edge: Upstream edge ({"node": {"title": {...}}})

    Returns:
        MetaPreview, or None when the edge carries no usable title
    """
    title = _get(edge, "node", "title")
    if not isinstance(title, dict) or not title.get("id"):
        return None

    title_type = _get(title, "titleType", "id")
    name = (
        _get(title, "titleText", "text")
        or _get(title, "originalTitleText", "text")
        or "IMDb title"
    )

    return MetaPreview(
        id=title["id"],
        type="series" if title_type in SERIES_TITLE_TYPES else "movie",
        name=name,
        poster=_get(title, "primaryImage", "url") or "",
        year=_get(title, "releaseYear", "year"),
        genres=title_genres(title),
        imdbRating=_get(title, "ratingsSummary", "aggregateRating"),
    )


def edges_to_metas(edges: List[Dict[str, Any]]) -> List[MetaPreview]:
    """Map edges to metas, dropping unusable ones and keeping upstream order"""
    metas = []
    for edge in edges:
        try:
            meta = title_to_meta(edge)
        except ValidationError as e:
            logger.debug(f"Skipping malformed title edge: {e}")
            continue
        if meta is not None:
            metas.append(meta)
    return metas


def extract_genres(edges: List[Dict[str, Any]]) -> List[str]:
    """Distinct genre strings across all edges, sorted"""
    genres = set()
    for edge in edges:
        title = _get(edge, "node", "title")
        if isinstance(title, dict):
            genres.update(title_genres(title))
    return sorted(genres)


def filter_metas(
    metas: List[MetaPreview],
    media_type: str,
    genre: Optional[str] = None
) -> List[MetaPreview]:
    """
    Keep metas of the requested type, optionally matching a genre

    Genre matching is case-insensitive exact equality against any of the
    item's genres.
    """
    result = [meta for meta in metas if meta.type == media_type]
    if genre:
        wanted = genre.lower()
        result = [
            meta for meta in result
            if any(g.lower() == wanted for g in meta.genres)
        ]
    return result


def extract_edges(payload: Any) -> List[Dict[str, Any]]:
    """
    Pull the recommendation edges out of a GraphQL payload

    Raises:
        UpstreamAuthRequired: no edges and an error mentions auth/login
        UpstreamAPIError: no edges and any other error list
    """
    edges = _get(payload, "data", "titleRecommendations", "edges") or []
    errors = _get(payload, "errors")

    if not edges and errors:
        messages = ", ".join(
            str(error.get("message", "")) if isinstance(error, dict) else str(error)
            for error in errors
        )
        lowered = messages.lower()
        if any(marker in lowered for marker in AUTH_MARKERS):
            raise UpstreamAuthRequired()
        raise UpstreamAPIError(messages)

    return edges


class IMDbClient:
    """Async client for the IMDb GraphQL API"""

    def __init__(self):
        self.session: Optional[aiohttp.ClientSession] = None

    async def get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session"""
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=settings.IMDB_TIMEOUT)
            )
        return self.session

    async def close(self):
        """Close aiohttp session"""
        if self.session and not self.session.closed:
            await self.session.close()

    async def _request(self, cookie: str) -> Any:
        """
        POST the Top Picks persisted query once, without retries

        Args:
            cookie: Raw Cookie header value

        Returns:
            Decoded JSON payload

        Raises:
            UpstreamUnreachable: timeout, transport error, non-2xx or non-JSON body
        """
        headers = {
            "Cookie": cookie,
            "User-Agent": settings.IMDB_USER_AGENT,
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

        try:
            session = await self.get_session()
            async with session.post(
                settings.IMDB_GRAPHQL_URL,
                json=TOP_PICKS_REQUEST.model_dump(),
                headers=headers,
            ) as response:
                if not 200 <= response.status < 300:
                    raise UpstreamUnreachable(
                        response.reason or "unexpected status",
                        status=response.status,
                    )
                return await response.json(content_type=None)

        except asyncio.TimeoutError as e:
            raise UpstreamUnreachable(
                f"timeout of {settings.IMDB_TIMEOUT:g}s exceeded"
            ) from e
        except aiohttp.ClientResponseError as e:
            raise UpstreamUnreachable(e.message, status=e.status) from e
        except aiohttp.ClientError as e:
            raise UpstreamUnreachable(str(e)) from e
        except ValueError as e:
            raise UpstreamUnreachable(f"invalid JSON body: {e}") from e

    async def fetch_top_picks(self, cookie: str) -> List[Dict[str, Any]]:
        """
        Fetch the raw Top Picks edges for a cookie

        An empty list means the account has no picks; failures raise an
        UpstreamError subclass.
        """
        payload = await self._request(cookie)
        edges = extract_edges(payload)
        logger.debug(f"IMDb returned {len(edges)} top picks")
        return edges

    async def fetch_metas(self, cookie: str) -> List[MetaPreview]:
        """Fetch Top Picks and map them to metas"""
        return edges_to_metas(await self.fetch_top_picks(cookie))

    async def fetch_genres(self, cookie: str) -> List[str]:
        """Fetch Top Picks and return their sorted distinct genres"""
        return extract_genres(await self.fetch_top_picks(cookie))
