"""
Preflight and Fallback Endpoints
CORS preflight for every path, plain-text 404 for everything unrouted
"""
from fastapi import APIRouter, Response
from app.core.errors import RouteNotFound

router = APIRouter()

PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


@router.options("/{path:path}")
async def preflight(path: str):
    return Response(status_code=204, headers=PREFLIGHT_HEADERS)


# Registered last: catches every GET no other route matched
@router.get("/{path:path}", include_in_schema=False)
async def not_found(path: str):
    raise RouteNotFound()
