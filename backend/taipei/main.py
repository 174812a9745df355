"""FastAPI application entry point."""
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .api.routes import games

# Get settings
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Rules engine for layered tile-matching puzzles: selection, matching, hints, auto-play and undo",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(games.router)


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Tile matching rules engine API",
        "endpoints": {
            "create_game": "/api/games",
            "game_state": "/api/games/{game_id}",
            "select": "/api/games/{game_id}/select",
            "hint": "/api/games/{game_id}/hint",
            "autoplay": "/api/games/{game_id}/autoplay",
            "undo": "/api/games/{game_id}/undo",
            "board": "/api/games/{game_id}/board",
            "docs": "/docs",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": settings.app_version,
    }


if __name__ == "__main__":
    import uvicorn

    # Sessions live in process memory, so a single worker
    uvicorn.run(
        "taipei.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
