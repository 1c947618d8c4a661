"""
Manifest Endpoint
Returns the Stremio addon manifest with the user's genres as catalog filters
"""
import logging
from fastapi import APIRouter, Depends, Response
from app.api.dependencies import credential_segment
from app.core.errors import UpstreamError
from app.models.stremio import build_manifest
from app.services.imdb import IMDbClient
from app.utils.credential import decode_credential

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/manifest.json")
@router.get("/{credential}/manifest.json")
async def get_manifest(
    response: Response,
    segment: str = Depends(credential_segment)
):
    """
    Return addon manifest

    Without a credential the base manifest is served. With one, the id is
    suffixed with the credential segment and the genre options are filled
    from the user's current Top Picks (left empty if IMDb cannot be read).
    """
    # Genre options change with the user's picks
    response.headers["Cache-Control"] = "no-cache, no-store, must-revalidate"

    cookie = decode_credential(segment)
    if not cookie:
        return build_manifest().model_dump()

    genres = []
    client = IMDbClient()
    try:
        genres = await client.fetch_genres(cookie)
    except UpstreamError as e:
        logger.warning(f"Failed to fetch genres for manifest: {e.message}")
    finally:
        await client.close()

    manifest = build_manifest(segment, genres)

    logger.info(f"Manifest generated with {len(genres)} genre options")

    return manifest.model_dump()
