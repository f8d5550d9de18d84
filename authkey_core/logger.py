import logging, json, sys, time, os


def get_logger(name="authkey", level=None, to_file=None):
    """Unified structured logger for all authkey components.

    Level and file target fall back to AUTHKEY_LOG_LEVEL / AUTHKEY_LOG_FILE.
    """
    logger = logging.getLogger(name)
    if level is None:
        level = os.getenv("AUTHKEY_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        # Unknown names fall back to INFO instead of failing at import time
        resolved = logging.getLevelName(level.strip().upper())
        level = resolved if isinstance(resolved, int) else logging.INFO
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
        formatter.converter = time.gmtime  # Use UTC timestamps
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        to_file = to_file or os.getenv("AUTHKEY_LOG_FILE")
        if to_file:
            os.makedirs(os.path.dirname(to_file) or ".", exist_ok=True)
            file_handler = logging.FileHandler(to_file)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
