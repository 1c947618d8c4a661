"""
Meta Endpoint
Serves placeholder metas; details are left to other addons
"""
from fastapi import APIRouter, Depends, Path
from app.api.dependencies import credential_segment
from app.core.config import settings
from app.core.errors import AddonError, ErrorKind
from app.models.stremio import MetaResponse, MetaStub
from app.utils.routing import is_imdb_id

router = APIRouter()

POSTER_URL = "https://img.omdbapi.com/?i={imdb_id}&apikey={api_key}"


@router.get("/{credential}/meta/{type}/{file:path}")
@router.get("/meta/{type}/{file:path}")
async def get_meta(
    type: str = Path(..., description="Content type"),
    file: str = Path(..., description="IMDb title id, usually with a .json suffix"),
    segment: str = Depends(credential_segment)
):
    """Return a minimal meta for an IMDb id without any upstream lookup"""
    imdb_id = file.split("/")[0]
    if imdb_id.endswith(".json"):
        imdb_id = imdb_id[:-len(".json")]

    if not is_imdb_id(imdb_id):
        raise AddonError("Bad IMDb id", ErrorKind.BAD_META_ID)

    meta = MetaStub(
        id=imdb_id,
        type=type,
        name=f"IMDb title {imdb_id}",
        poster=POSTER_URL.format(imdb_id=imdb_id, api_key=settings.OMDB_API_KEY),
    )
    return MetaResponse(meta=meta).model_dump()
