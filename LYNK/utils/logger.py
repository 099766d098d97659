import logging
import os
import sys
from typing import Optional

_ROOT_NAME = "LYNK"
_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"


class Logger:
    """
    Thin wrapper over the standard logging module. Modules grab a named
    logger with Logger.get_logger(__name__).
    """

    _configured = False

    @classmethod
    def configure(cls, level: Optional[str] = None) -> None:
        """Attach a stream handler to the package logger (idempotent)."""
        root = logging.getLogger(_ROOT_NAME)
        level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
        root.setLevel(getattr(logging, level_name, logging.INFO))
        if not cls._configured:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(_FORMAT, "%Y-%m-%dT%H:%M:%S"))
            root.addHandler(handler)
            cls._configured = True

    @classmethod
    def get_logger(cls, name: Optional[str] = None) -> logging.Logger:
        if not cls._configured:
            cls.configure()
        if not name or name == _ROOT_NAME:
            return logging.getLogger(_ROOT_NAME)
        if not name.startswith(_ROOT_NAME + "."):
            name = f"{_ROOT_NAME}.{name}"
        return logging.getLogger(name)

