"""
Stremio Protocol Models
Pydantic models for Stremio addon protocol
"""
from pydantic import BaseModel, Field
from typing import List, Optional, Literal

BASE_MANIFEST_ID = "community.imdb-top-picks"
CATALOG_ID = "imdb-top-picks"


class CatalogExtra(BaseModel):
    """Extra filter parameter offered by a catalog"""
    name: str
    options: List[str] = Field(default_factory=list)
    isRequired: bool = False


class ManifestCatalog(BaseModel):
    """Catalog definition in manifest"""
    type: Literal["movie", "series"]
    id: str = CATALOG_ID
    name: str
    extra: List[CatalogExtra] = Field(default_factory=list)
    extraSupported: List[str] = ["genre"]


class Manifest(BaseModel):
    """Stremio addon manifest"""
    id: str = BASE_MANIFEST_ID
    version: str = "2.0.0"
    name: str = "IMDb Top Picks"
    description: str = 'Personalized IMDb "Top Picks" for your account.'

    resources: List[str] = ["catalog", "meta"]
    types: List[str] = ["movie", "series"]
    idPrefixes: List[str] = ["tt"]

    catalogs: List[ManifestCatalog]

    behaviorHints: dict = {
        "configurable": False,
    }


class MetaPreview(BaseModel):
    """Catalog item (poster) metadata"""
    id: str  # IMDb title id
    type: Literal["movie", "series"]
    name: str
    poster: str = ""
    year: Optional[int] = None
    genres: List[str] = Field(default_factory=list)
    posterShape: str = "poster"
    imdbRating: Optional[float] = None


class CatalogResponse(BaseModel):
    """Catalog endpoint response"""
    metas: List[MetaPreview]


class MetaStub(BaseModel):
    """Placeholder meta served without an upstream lookup"""
    id: str
    type: str
    name: str
    poster: str


class MetaResponse(BaseModel):
    """Meta endpoint response"""
    meta: MetaStub


def build_manifest(segment: str = "", genres: Optional[List[str]] = None) -> Manifest:
    """
    Build a fresh manifest for one request

    Args:
        segment: Credential path segment; appended to the id when present
        genres: Options for the catalogs' genre extra

    Returns:
        Manifest whose id is stable for a given segment
    """
    options = genres or []
    catalogs = [
        ManifestCatalog(
            type=media_type,
            name=name,
            extra=[CatalogExtra(name="genre", options=list(options))],
        )
        for media_type, name in (
            ("movie", "IMDB Top Picks – Movies"),
            ("series", "IMDB Top Picks – Series"),
        )
    ]
    manifest_id = f"{BASE_MANIFEST_ID}.{segment}" if segment else BASE_MANIFEST_ID
    return Manifest(id=manifest_id, catalogs=catalogs)
