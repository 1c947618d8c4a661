"""
Tests for routing helpers
"""
from app.utils.routing import is_credential_segment, parse_extras, is_imdb_id


def test_credential_segment_recognition():
    """Test which first segments are taken as credentials"""
    assert is_credential_segment("c2Vzc2lvbi1pZD0x") is True
    assert is_credential_segment("") is False
    assert is_credential_segment(None) is False
    assert is_credential_segment("manifest.json") is False
    assert is_credential_segment("index.html") is False


def test_route_heads_are_not_credentials():
    """Test route names are never mistaken for credentials"""
    assert is_credential_segment("catalog") is False
    assert is_credential_segment("meta") is False
    assert is_credential_segment("health") is False


def test_parse_extras():
    """Test comma separated key=value parsing"""
    assert parse_extras("genre=Action") == {"genre": "Action"}
    assert parse_extras("genre=Sci-Fi,skip=0") == {"genre": "Sci-Fi", "skip": "0"}


def test_parse_extras_empty_and_malformed():
    """Test missing segments and pairs without '='"""
    assert parse_extras(None) == {}
    assert parse_extras("") == {}
    assert parse_extras("genre") == {}
    assert parse_extras("=Action,genre=Drama") == {"genre": "Drama"}


def test_is_imdb_id():
    """Test IMDb title id format check"""
    assert is_imdb_id("tt1234567") is True
    assert is_imdb_id("tt1") is True
    assert is_imdb_id("abc123") is False
    assert is_imdb_id("tt") is False
    assert is_imdb_id("tt123x") is False
    assert is_imdb_id("tt123\n") is False
