"""
MegaStats FastAPI Application
=============================
Mounts the analytics router behind a CORS-enabled app for dashboards.
"""

from datetime import datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from megastats import __version__
from megastats.analytics_api import analytics_router


logger.info("Initializing FastAPI application...")
app = FastAPI(
    title="MegaStats Analytics API",
    description="Descriptive statistics and bet evaluation for Mega-Sena draw history.",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint with timestamp"""
    return {
        "status": "ok",
        "timestamp": datetime.now().isoformat(),
        "version": __version__,
        "service": "MegaStats API"
    }


app.include_router(analytics_router)
