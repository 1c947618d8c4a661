"""
Test configuration and fixtures
"""
import pytest


def _make_edge(
    imdb_id,
    name,
    title_type="movie",
    genres=(),
    year=None,
    rating=None,
    poster=None
):
    """Build one Top Picks edge in the shape IMDb GraphQL returns"""
    title = {
        "id": imdb_id,
        "titleText": {"text": name},
        "originalTitleText": {"text": name},
        "titleType": {"id": title_type},
        "titleGenres": {"genres": [{"genre": {"text": g}} for g in genres]},
    }
    if year is not None:
        title["releaseYear"] = {"year": year}
    if rating is not None:
        title["ratingsSummary"] = {"aggregateRating": rating}
    if poster is not None:
        title["primaryImage"] = {"url": poster}
    return {"node": {"title": title}}


@pytest.fixture
def make_edge():
    """Factory for custom Top Picks edges"""
    return _make_edge


@pytest.fixture
def sample_cookie():
    """Sample IMDb Cookie header with realistic fake values"""
    return "session-id=131-1234567-7654321; ubid-main=130-7654321-1234567; at-main=Atza|IwEBIFakeToken+/="


@pytest.fixture
def sample_edges():
    """Sample Top Picks edges: two movies, one mini-series, one series"""
    return [
        _make_edge(
            "tt0137523", "Fight Club",
            genres=["Drama"], year=1999, rating=8.8,
            poster="https://m.media-amazon.com/images/M/fightclub.jpg",
        ),
        _make_edge(
            "tt0468569", "The Dark Knight",
            genres=["Action", "Crime", "Drama"], year=2008, rating=9.0,
        ),
        _make_edge(
            "tt0903747", "Breaking Bad", title_type="tvSeries",
            genres=["Crime", "Drama", "Thriller"], year=2008, rating=9.5,
        ),
        _make_edge(
            "tt0795176", "Planet Earth", title_type="tvMiniSeries",
            genres=["Documentary", "Family"], year=2006, rating=9.4,
        ),
    ]


@pytest.fixture
def sample_payload(sample_edges):
    """Successful GraphQL payload"""
    return {"data": {"titleRecommendations": {"edges": sample_edges}}}
