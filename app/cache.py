"""
Cache configuration module.

Separating cache instances from main.py prevents circular import issues.
Philosophy: Simple, single-purpose module for shared caches.
"""

import logging
from typing import Generic, Optional, TypeVar

from flask_caching import Cache

logger = logging.getLogger(__name__)

T = TypeVar('T')

# HTTP response cache (configured in main.py)
cache = Cache()


class PortfolioCache(Generic[T]):
    """
    Single-slot cache for the parsed portfolio collection.

    Holds the object itself, so repeat reads return the identical list.
    Never expires; call clear() to pick up a changed content file.
    Not locked: concurrent misses may both populate it, last write wins.
    """

    def __init__(self):
        self._value: Optional[T] = None
        self._populated = False

    @property
    def is_populated(self) -> bool:
        return self._populated

    def get(self) -> Optional[T]:
        return self._value

    def set(self, value: T) -> None:
        self._value = value
        self._populated = True

    def clear(self) -> None:
        if self._populated:
            logger.info("Clearing cached portfolio data")
        self._value = None
        self._populated = False
