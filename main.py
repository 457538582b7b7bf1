#!/usr/bin/env python3
"""
MegaStats API Server
====================

Serves the draw analytics API (megastats.api:app) with uvicorn.

Server options come from the environment, optionally through a .env file:
    HOST       bind address (default 0.0.0.0)
    PORT       listen port (default 8000)
    LOG_LEVEL  uvicorn log level (default info)

The draw dataset and hot/cold settings are read from config/config.ini,
or from the file named by MEGASTATS_CONFIG.
"""
import os

from dotenv import load_dotenv

load_dotenv()

from loguru import logger
from megastats.api import app

UVICORN_LOG_LEVELS = {"critical", "error", "warning", "info", "debug", "trace"}


def server_options():
    """Resolve host, port and log level, falling back to defaults on bad values."""
    host = os.getenv("HOST", "0.0.0.0")

    port_str = os.getenv("PORT", "8000")
    try:
        port = int(port_str)
    except ValueError:
        logger.warning(f"Invalid PORT '{port_str}', using 8000")
        port = 8000

    log_level = os.getenv("LOG_LEVEL", "info").lower()
    if log_level not in UVICORN_LOG_LEVELS:
        logger.warning(f"Unsupported LOG_LEVEL '{log_level}', using info")
        log_level = "info"

    return host, port, log_level


if __name__ == "__main__":
    import uvicorn

    host, port, log_level = server_options()
    logger.info(f"Starting MegaStats API on {host}:{port}")
    uvicorn.run(app, host=host, port=port, log_level=log_level)
