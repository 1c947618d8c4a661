"""
Server entry point
Run with: python main.py  (or: uvicorn main:app)
"""
import uvicorn
from app.core.app import create_app
from app.core.config import settings

app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
