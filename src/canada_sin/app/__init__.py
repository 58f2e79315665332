import logging
import os


def setup_logging(debug: bool = False) -> str:
    """
    Configure logging for the command-line scripts. The level comes from the
    LOG_LEVEL environment variable, unless debug mode is requested. An unknown
    level name falls back to WARNING
    """
    if debug:
        level = "DEBUG"
    else:
        level = os.environ.get("LOG_LEVEL", "WARNING").upper()
    unknown = not isinstance(logging.getLevelName(level), int)
    if unknown:
        bad, level = level, "WARNING"
    logging.basicConfig(level=level)
    if unknown:
        logging.getLogger(__name__).warning("unknown LOG_LEVEL %r, using WARNING", bad)
    return level
