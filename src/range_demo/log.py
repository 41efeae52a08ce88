import logging
import sys
from pathlib import Path

# Loggers already given handlers by get_logger
_LOGGER_INITIALIZED = {}

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_logger(
    name="range_demo",
    level=logging.WARNING,
    log_file=None,
    console=True,
    fmt=DEFAULT_FORMAT,
    datefmt="%Y-%m-%d %H:%M:%S",
    encoding="utf-8",
    propagate=False,
):
    """
    Get or create a logger, attaching handlers the first time it is requested.
    - name: Logger name (default 'range_demo')
    - level: Logging level; applied on every call
    - log_file: Optional file path for logs (appended to)
    - console: If True, logs also go to stderr
    - fmt, datefmt: Formatting for log messages
    - propagate: Whether to propagate to the root logger (default False)
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if not _LOGGER_INITIALIZED.get(name, False):
        logger.propagate = propagate
        formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

        if log_file is not None:
            path = Path(log_file)
            path.parent.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(path, mode="a", encoding=encoding)
            fh.setFormatter(formatter)
            logger.addHandler(fh)

        if console:
            ch = logging.StreamHandler(sys.stderr)
            ch.setFormatter(formatter)
            logger.addHandler(ch)

        _LOGGER_INITIALIZED[name] = True

    return logger


def reset_logger(name=None):
    """Drop the handlers of ``name`` (or of every configured logger) and restore its defaults."""
    names = list(_LOGGER_INITIALIZED) if name is None else [name]
    for n in names:
        logger = logging.getLogger(n)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)
        _LOGGER_INITIALIZED.pop(n, None)


def configure(level=logging.WARNING, log_file=None):
    """Configure the demo and library loggers together."""
    for name in ("range_demo", "lazy_transpose"):
        get_logger(name, level=level, log_file=log_file)
    return logging.getLogger("range_demo")
