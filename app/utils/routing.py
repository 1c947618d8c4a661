"""
Routing Helpers
Credential segment recognition, extras parsing and id checks for addon URLs
"""
import re
from typing import Dict, Optional

# First path segments that always name a route, never a credential.
# "health" has its own route; reserving it keeps "/health/..." paths from
# being read as a user segment.
RESERVED_HEADS = {"catalog", "meta", "health"}

IMDB_ID_PATTERN = re.compile(r"tt\d+")


def is_credential_segment(segment: Optional[str]) -> bool:
    """
    Decide whether the first path segment carries a credential

    A credential segment is non-empty, contains no '.' (which would make it
    a file-like route such as "manifest.json") and is not a route name.
    """
    return bool(segment) and "." not in segment and segment not in RESERVED_HEADS


def parse_extras(extras: Optional[str]) -> Dict[str, str]:
    """
    Parse an extras path segment into a mapping

    "genre=Action,skip=0" -> {"genre": "Action", "skip": "0"}

    Pairs without '=' are ignored; values are taken literally.
    """
    if not extras:
        return {}

    parsed = {}
    for pair in extras.split(","):
        key, sep, value = pair.partition("=")
        if sep and key:
            parsed[key] = value
    return parsed


def is_imdb_id(value: str) -> bool:
    return IMDB_ID_PATTERN.fullmatch(value) is not None
