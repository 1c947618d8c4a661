"""
Request Dependencies
Resolve the credential segment and extras carried in the addon URL
"""
from typing import Dict
from fastapi import Request
from app.core.errors import RouteNotFound
from app.utils.routing import is_credential_segment, parse_extras


def credential_segment(request: Request) -> str:
    """
    Return the credential segment of the path ("" when the route has none)

    A first segment that cannot be a credential (e.g. it contains a dot)
    means the whole path matches no addon route.
    """
    segment = request.path_params.get("credential", "")
    if segment and not is_credential_segment(segment):
        raise RouteNotFound()
    return segment


def catalog_extras(request: Request) -> Dict[str, str]:
    """Parse the optional extras segment of a catalog path"""
    return parse_extras(request.path_params.get("extras"))
