"""
Tests for the credential codec
"""
import pytest
from app.utils.credential import encode_credential, decode_credential, decode_credential_bytes


def test_encode_decode_cookie(sample_cookie):
    """Test a cookie survives the trip through the URL"""
    segment = encode_credential(sample_cookie)

    assert segment
    assert decode_credential(segment) == sample_cookie


def test_encoded_segment_is_path_safe():
    """Test the segment uses the URL-safe alphabet without padding or dots"""
    # 0xfb 0xff forces '+' and '/' in the standard alphabet
    segment = encode_credential(b"\xfb\xff\xfe")

    assert "+" not in segment
    assert "/" not in segment
    assert "=" not in segment
    assert "." not in segment
    assert segment == "-__-"


@pytest.mark.parametrize("raw", [b"a", b"ab", b"abc", b"abcd"])
def test_padding_is_stripped_and_restored(raw):
    """Test every padding length decodes back"""
    segment = encode_credential(raw)

    assert not segment.endswith("=")
    assert decode_credential_bytes(segment) == raw


def test_arbitrary_bytes_roundtrip():
    """Test every non-NUL byte value round-trips"""
    raw = bytes(range(1, 256))

    assert decode_credential_bytes(encode_credential(raw)) == raw


def test_unicode_roundtrip():
    """Test non-ASCII cookie text round-trips"""
    raw = "lang=français; name=日本"

    assert decode_credential(encode_credential(raw)) == raw


def test_decode_missing_segment():
    """Test a missing segment means no credential instead of an error"""
    assert decode_credential("") == ""
    assert decode_credential(None) == ""
    assert decode_credential_bytes(None) == b""


def test_decode_malformed_segment():
    """Test undecodable segments are treated as no credential"""
    assert decode_credential("a") == ""
    assert decode_credential("ümlaut") == ""
