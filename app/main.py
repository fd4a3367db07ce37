"""
Main FastAPI application with startup events and middleware configuration.
"""

from dotenv import load_dotenv
from fastapi import FastAPI

from app.config.settings import settings
from app.config.database import get_movie_store
from app.utils.cors import install_cors
from app.utils.logger import get_logger, log_info, log_error
from app.views import movie_views

logger = get_logger(__name__)
load_dotenv()

app = FastAPI(
    title=settings.app_name,
    description="In-memory movies catalogue for the browser demo",
    version=settings.app_version,
)

app.include_router(movie_views.router, tags=["movies"])

install_cors(app)


@app.on_event("startup")
async def startup_event():
    """
    Startup event handler.
    Seed the movie store from the JSON fixture.
    """
    try:
        log_info(logger, f"Starting {settings.app_name} v{settings.app_version}")
        count = get_movie_store().load_fixture(settings.movies_fixture)
        log_info(logger, "Movie store seeded", {"movies": count})
        log_info(logger, f"server listening on http://localhost:{settings.port}")
    except (OSError, ValueError) as e:
        log_error(logger, "Failed to initialize application", {"error": str(e)})
        raise


@app.get("/health", tags=["health"])
async def health_check() -> dict:
    """
    Application health check endpoint.

    Returns:
        Dictionary indicating application health status.
    """
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": settings.app_version,
        "movies": len(get_movie_store()),
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
