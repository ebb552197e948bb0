"""
Local development entry point
Starts the HomeSearch web app with uvicorn
"""

import logging

import uvicorn

from .config import settings
from .main import configure_logging


logger = logging.getLogger(__name__)


def main() -> None:
    configure_logging()
    logger.info(f"🚀 Starting {settings.app_name} on http://{settings.host}:{settings.port}")
    uvicorn.run("homesearch.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
