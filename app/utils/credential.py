"""
Credential Codec
Carries the raw IMDb cookie header inside the addon URL as a base64url segment
"""
import base64
import binascii
from typing import Optional, Union


def encode_credential(raw: Union[str, bytes]) -> str:
    """
    Encode a raw cookie header into a URL path segment

    Args:
        raw: Cookie header value (text is UTF-8 encoded first)

    Returns:
        Base64url string with the trailing '=' padding stripped
    """
    if isinstance(raw, str):
        raw = raw.encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def decode_credential_bytes(segment: Optional[str]) -> bytes:
    """
    Decode a path segment back into the raw cookie bytes

    Args:
        segment: Base64url segment, padded or not

    Returns:
        Cookie bytes, or b"" when the segment is missing or undecodable
    """
    if not segment:
        return b""

    padded = segment + "=" * (-len(segment) % 4)
    try:
        return base64.urlsafe_b64decode(padded.encode("ascii"))
    except (binascii.Error, UnicodeEncodeError, ValueError):
        return b""


def decode_credential(segment: Optional[str]) -> str:
    """Decode a path segment into the cookie header text ("" means no credential)"""
    return decode_credential_bytes(segment).decode("utf-8", errors="replace")
