"""
Health Check Endpoint
"""
from fastapi import APIRouter
from app.core.config import settings
from app.models.stremio import Manifest

router = APIRouter()


@router.get("/health")
async def health_check():
    """Health check endpoint for monitoring"""
    return {
        "status": "healthy",
        "version": Manifest.model_fields["version"].default,
        "base_url": settings.BASE_URL,
    }
