"""
Catalog Endpoint
Returns the user's IMDb Top Picks as a Stremio catalog
"""
from typing import Dict
from fastapi import APIRouter, Depends, Path
from app.api.dependencies import catalog_extras, credential_segment
from app.core.errors import AddonError, ErrorKind, UpstreamError
from app.models.stremio import CATALOG_ID, CatalogResponse
from app.services.imdb import IMDbClient, filter_metas
from app.utils.credential import decode_credential
import logging

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/catalog/{type}/{id}.json")
@router.get("/catalog/{type}/{id}/{extras}.json")
@router.get("/{credential}/catalog/{type}/{id}.json")
@router.get("/{credential}/catalog/{type}/{id}/{extras}.json")
async def get_catalog(
    type: str = Path(..., description="Content type: movie or series"),
    id: str = Path(..., description="Catalog ID"),
    extras: Dict[str, str] = Depends(catalog_extras),
    segment: str = Depends(credential_segment)
):
    """
    Return catalog of Top Picks

    Args:
        type: "movie" or "series"; any other type yields no items
        id: Catalog identifier (must start with "imdb-top-picks")
        extras: Parsed "key=value,..." segment; "genre" filters the items
    """
    if not id.startswith(CATALOG_ID):
        raise AddonError("Unknown catalog", ErrorKind.NOT_FOUND)

    cookie = decode_credential(segment)
    if not cookie:
        raise AddonError(
            "Missing IMDb cookie – generate URL via root page.",
            ErrorKind.MISSING_CREDENTIAL,
        )

    client = IMDbClient()
    try:
        metas = await client.fetch_metas(cookie)
    except UpstreamError as e:
        logger.error(f"[catalog] {e.kind.value}: {e.message}")
        raise
    finally:
        await client.close()

    metas = filter_metas(metas, type, extras.get("genre"))

    logger.info(f"Catalog {type}/{id} returned {len(metas)} items")

    return CatalogResponse(metas=metas).model_dump(exclude_none=True)


# Registered after get_catalog: any other path under /catalog/
@router.get("/{credential}/catalog/{rest:path}", include_in_schema=False)
@router.get("/catalog/{rest:path}", include_in_schema=False)
async def unknown_catalog(rest: str, segment: str = Depends(credential_segment)):
    raise AddonError("Unknown catalog", ErrorKind.NOT_FOUND)
