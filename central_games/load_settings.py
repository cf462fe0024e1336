import logging
import os
from dotenv import load_dotenv

load_dotenv()

log_level = os.getenv("CENTRAL_GAMES_LOG_LEVEL", "INFO")
limite_veterano = int(os.getenv("CENTRAL_GAMES_LIMITE_VETERANO", "1000"))


def configure_logging(level: str | None = None):
    """Configure the root logger for the platform.

    Args:
        level (str | None): Logging level name. Defaults to CENTRAL_GAMES_LOG_LEVEL.
    """
    logging.basicConfig(level=(level or log_level).upper())
