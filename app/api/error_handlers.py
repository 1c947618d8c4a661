"""
Error Handlers
Render AddonError subclasses with the status code of their kind
"""
import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from app.core.errors import AddonError, RouteNotFound

logger = logging.getLogger(__name__)


def error_response(exc: AddonError):
    """Map an error to its response; unknown routes answer in plain text"""
    if isinstance(exc, RouteNotFound):
        return PlainTextResponse(exc.message, status_code=exc.status_code)
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


def register_error_handlers(app: FastAPI) -> None:
    """Register addon error handlers on the FastAPI app"""

    @app.exception_handler(AddonError)
    async def addon_error_handler(request: Request, exc: AddonError):
        logger.debug(f"{exc.kind.value} on {request.url.path}: {exc.message}")
        return error_response(exc)
