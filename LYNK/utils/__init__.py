"""Module for importing the Logger."""

from .logger import Logger

__all__ = [
    'Logger',
]
