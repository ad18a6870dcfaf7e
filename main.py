"""
Entry point for running the registration API.

Loads settings, connects to Supabase and serves the application with Uvicorn.
Exits with status 1 if the configuration is incomplete.
"""
import logging
import sys

import uvicorn

from api.main import create_app
from app.config import ConfigurationError, load_settings
from app.logger import configure_logging
from db.supabase_client import create_supabase

log = logging.getLogger(__name__)


def main():
    """
    Validate configuration, create the database client and start serving requests.
    """
    configure_logging()
    try:
        settings = load_settings()
    except ConfigurationError as e:
        log.error(str(e))
        sys.exit(1)

    configure_logging(settings.log_level)
    log.info("Logger configuration successful")

    try:
        client = create_supabase(settings.supabase_url, settings.supabase_key)
    except Exception as e:
        log.error(f"Could not connect to Supabase: {e}")
        sys.exit(1)

    app = create_app(settings, client)
    log.info(f"Serving on http://{settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
