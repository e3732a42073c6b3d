"""Main FastAPI application."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from healthcare_translator import __version__
from healthcare_translator.config import settings
from healthcare_translator.core.translation import TranslationService
from healthcare_translator.api.v1.routes import cache, languages, translation

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(translation_service: Optional[TranslationService] = None) -> FastAPI:
    """Create the API application.

    Args:
        translation_service: Service to serve requests with; built from
            settings at startup when omitted
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        # Startup: one shared service (and cache) for the whole process
        service = translation_service or TranslationService.from_settings(settings)
        app.state.translation_service = service
        logger.info(
            "Translation service started (backend %s, %d languages)",
            "configured" if service.backend_configured else "offline",
            len(service.registry),
        )

        yield
        # Shutdown: nothing persisted, the cache dies with the process
        app.state.translation_service = None

    app = FastAPI(
        title=settings.app_name,
        description="Context-aware healthcare translation API with offline fallback",
        version=__version__,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(languages.router, prefix="/api/v1", tags=["languages"])
    app.include_router(translation.router, prefix="/api/v1", tags=["translation"])
    app.include_router(cache.router, prefix="/api/v1", tags=["cache"])

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {"message": "Healthcare Translator API", "version": __version__}

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        service = getattr(app.state, "translation_service", None)
        return {
            "status": "healthy",
            "backend_configured": bool(service and service.backend_configured),
        }

    return app


app = create_app()


def run() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "healthcare_translator.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
