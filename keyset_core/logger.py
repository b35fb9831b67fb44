import logging, json, sys, time, os

from .constants import LOGGER_NAME, ENV_LOG_LEVEL, ENV_LOG_FILE


def get_logger(name=LOGGER_NAME, level=None, to_file=None):
    """Structured JSON logger for keyset_core components."""
    logger = logging.getLogger(name)
    if level is None:
        level = os.getenv(ENV_LOG_LEVEL, "INFO").upper()
        # unknown level names fall back to INFO
        if not isinstance(logging.getLevelName(level), int):
            level = logging.INFO
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            fmt=json.dumps({
                "ts": "%(asctime)s",
                "level": "%(levelname)s",
                "name": "%(name)s",
                "msg": "%(message)s"
            }),
            datefmt="%Y-%m-%dT%H:%M:%SZ",
        )
        formatter.converter = time.gmtime  # UTC timestamps
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        to_file = to_file or os.getenv(ENV_LOG_FILE)
        if to_file:
            os.makedirs(os.path.dirname(to_file) or ".", exist_ok=True)
            file_handler = logging.FileHandler(to_file)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
