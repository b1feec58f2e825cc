# webkey_core/logger.py
import logging, json, sys, time, os

LOG_LEVEL_ENV = "WEBKEY_LOG_LEVEL"


def _json_formatter() -> logging.Formatter:
    # one JSON object per line, UTC timestamps
    formatter = logging.Formatter(
        fmt=json.dumps({
            "ts": "%(asctime)s",
            "level": "%(levelname)s",
            "component": "%(name)s",
            "msg": "%(message)s",
        }),
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    formatter.converter = time.gmtime
    return formatter


def get_logger(name="WebKey", level=None, to_file=None):
    """
    Return the named component logger, installing the stdout JSON handler
    (and an optional file handler) the first time the name is requested.

    ``level`` falls back to $WEBKEY_LOG_LEVEL, then INFO.
    """
    logger = logging.getLogger(name)
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV) or "INFO"
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    if logger.handlers:
        return logger

    formatter = _json_formatter()
    stream = logging.StreamHandler(sys.stdout)
    stream.setFormatter(formatter)
    logger.addHandler(stream)

    if to_file:
        os.makedirs(os.path.dirname(to_file) or ".", exist_ok=True)
        file_handler = logging.FileHandler(to_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def apply_log_level(level, root="WebKey"):
    """Set ``level`` on ``root`` and every component logger beneath it."""
    if isinstance(level, str):
        level = level.upper()
    logging.getLogger(root).setLevel(level)
    for name, logger in list(logging.Logger.manager.loggerDict.items()):
        if name.startswith(root + ".") and isinstance(logger, logging.Logger):
            logger.setLevel(level)
