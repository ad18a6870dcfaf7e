"""
Logging configuration module.

Initializes global logging settings for the API process.
"""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Client libraries that log every HTTP request at INFO level
_NOISY_LOGGERS = ("httpx", "httpcore", "supabase", "postgrest")


def configure_logging(level: str = "INFO"):
    """
    Configure the root logger using the given log level.

    Sets a standardized format for log messages, including timestamp, logger name,
    log level, and the actual message. Database client loggers only report warnings
    and errors.

    Args:
        level (str): Name of the logging level. Unknown names fall back to INFO.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        force=True
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
