"""
Main FastAPI application for the Youth Baseball Lineup Generator.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lineup_app.api import routes
from lineup_app.core.config import CORS_ORIGINS, LOG_LEVEL
from lineup_app.core.logging_config import setup_logging

setup_logging(LOG_LEVEL)

app = FastAPI(
    title="Youth Baseball Lineup API",
    description="API for generating fair inning-by-inning fielding lineups",
    version="1.0.0"
)

# Enable CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(routes.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Youth Baseball Lineup API",
        "version": "1.0.0",
        "endpoints": {
            "lineup": "/api/lineup",
            "batting_order": "/api/batting-order",
            "import": "/api/roster/import",
            "config": "/api/config",
            "health": "/api/health"
        }
    }
