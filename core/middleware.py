from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.settings import settings


def setup_middleware(app: FastAPI) -> None:
    """Attach CORS so the single-page frontend can call the API from another origin."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
