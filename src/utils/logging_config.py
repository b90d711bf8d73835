"""Logging setup shared by the Streamlit app and the console script."""
import logging
import os

from dotenv import load_dotenv

DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_log_level() -> int:
    """
    Read LOG_LEVEL from the environment.

    Returns:
        logging level number; unknown names fall back to DEFAULT_LOG_LEVEL
    """
    name = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.getLevelName(DEFAULT_LOG_LEVEL)
    return level


def configure_logging() -> None:
    """Load .env (if present) and configure root logging from LOG_LEVEL."""
    load_dotenv()
    logging.basicConfig(level=resolve_log_level(), format=LOG_FORMAT)
