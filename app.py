"""
HTTP entry point for the portals.

Loads ``.env``, configures logging and serves the FastAPI application with
uvicorn. The console programs live in ``portals.cli``.
"""

import logging
from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

from portals.main import create_app
from portals.utils.config import get_settings
from portals.utils.logger import setup_logging

setup_logging()
logger = logging.getLogger(__name__)

app = create_app()

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    logger.info(f"Starting portals API on {settings.HOST}:{settings.PORT} (reload={settings.RELOAD})")

    uvicorn.run(
        "app:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_level="info"
    )
