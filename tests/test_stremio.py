"""
Tests for Stremio protocol models
"""
from app.models.stremio import BASE_MANIFEST_ID, MetaPreview, build_manifest
from app.models.imdb import TOP_PICKS_REQUEST


def test_base_manifest():
    """Test manifest without credential keeps the base id"""
    manifest = build_manifest()

    assert manifest.id == BASE_MANIFEST_ID
    assert [c.type for c in manifest.catalogs] == ["movie", "series"]
    assert all(c.id == "imdb-top-picks" for c in manifest.catalogs)
    assert all(c.extra[0].options == [] for c in manifest.catalogs)
    assert manifest.behaviorHints == {"configurable": False}


def test_manifest_with_segment_and_genres():
    """Test per-user id and genre options"""
    manifest = build_manifest("c2Vzc2lvbj0x", ["Action", "Drama"])
    data = manifest.model_dump()

    assert data["id"] == "community.imdb-top-picks.c2Vzc2lvbj0x"
    for catalog in data["catalogs"]:
        assert catalog["extra"] == [
            {"name": "genre", "options": ["Action", "Drama"], "isRequired": False}
        ]
        assert catalog["extraSupported"] == ["genre"]


def test_manifests_do_not_share_state():
    """Test building one manifest leaves the next untouched"""
    genres = ["Action"]
    first = build_manifest("user1", genres)
    genres.append("Drama")
    first.catalogs[0].extra[0].options.append("Horror")

    second = build_manifest()

    assert first.catalogs[1].extra[0].options == ["Action"]
    assert second.id == BASE_MANIFEST_ID
    assert second.catalogs[0].extra[0].options == []


def test_meta_preview_omits_missing_optionals():
    """Test absent year and rating are left out of the JSON body"""
    meta = MetaPreview(id="tt0000001", type="movie", name="Untitled")

    data = meta.model_dump(exclude_none=True)

    assert data == {
        "id": "tt0000001",
        "type": "movie",
        "name": "Untitled",
        "poster": "",
        "genres": [],
        "posterShape": "poster",
    }


def test_top_picks_request_body():
    """Test the persisted query body"""
    body = TOP_PICKS_REQUEST.model_dump()

    assert body == {
        "operationName": "TopPicksTab",
        "variables": {"first": 48, "includeUserRating": True, "locale": "en-GB"},
        "extensions": {
            "persistedQuery": {
                "sha256Hash": "df290897e7878eb47c42b3fc06701793cb2c9701c620872794325c201a4e2502",
                "version": 1,
            }
        },
    }
