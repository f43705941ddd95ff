"""
Entry point for the Allergen Label API

Runs the FastAPI service that the allergen label frontend talks to:
spreadsheet upload, allergen lookup relay and the review session endpoints.
"""

import logging
import sys
from pathlib import Path

# Add the current directory to Python path to ensure imports work
sys.path.insert(0, str(Path(__file__).parent))

from config.settings import settings


def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run() -> None:
    import uvicorn
    from api import app

    configure_logging()
    print(f"🚀 Starting Allergen Label API on port {settings.port}...")

    # Single worker: the review session lives in process memory
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=settings.port,
        workers=1,
        log_level="debug" if settings.debug else "info"
    )


if __name__ == "__main__":
    run()
