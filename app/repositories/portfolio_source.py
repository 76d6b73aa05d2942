"""
Acquisition strategies for the portfolio content CSV.

A source only produces raw text; parsing happens in the service layer.
The composition root picks one strategy based on where the site runs.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union
import logging

import requests

from app.exceptions import NetworkError, StorageError

logger = logging.getLogger(__name__)


class PortfolioSource(ABC):
    """Produces the raw portfolio CSV text as a single string."""

    @abstractmethod
    def read_text(self) -> str:
        raise NotImplementedError

    @property
    @abstractmethod
    def location(self) -> str:
        """Human-readable location, for logs and health checks."""
        raise NotImplementedError


class LocalFileSource(PortfolioSource):
    """Reads the CSV from the application's content directory.

    Files saved with a UTF-8 byte-order mark read the same as files without.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    @property
    def location(self) -> str:
        return str(self.path)

    def read_text(self) -> str:
        logger.info(f"Reading portfolio CSV from {self.path}")
        try:
            return self.path.read_text(encoding='utf-8-sig')
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Could not read portfolio CSV at {self.path}: {e}")
            raise StorageError(f"Portfolio CSV unreadable at {self.path}: {e}") from e


class RemoteFetchSource(PortfolioSource):
    """
    Fetches the CSV over HTTP.

    The resource is treated as immutable for the session, so intermediaries
    may answer with any cached copy. There is no retry: a failed fetch is
    fatal for the current request.
    """

    CACHE_HEADERS = {'Cache-Control': 'max-stale'}

    def __init__(self, url: str, session: Optional[requests.Session] = None,
                 timeout: Optional[float] = None):
        self.url = url
        self.session = session or requests.Session()
        self.timeout = timeout

    @property
    def location(self) -> str:
        return self.url

    def read_text(self) -> str:
        logger.info(f"Fetching portfolio CSV from {self.url}")
        try:
            response = self.session.get(
                self.url, headers=self.CACHE_HEADERS, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"Portfolio CSV fetch failed: {self.url}: {e.__class__.__name__}: {e}")
            raise NetworkError(f"Failed to fetch portfolio CSV: {e}") from e

        if not response.ok:
            logger.error(f"Portfolio CSV fetch returned {response.status_code}: {self.url}")
            raise NetworkError(
                f"Failed to fetch portfolio CSV: {response.status_code}",
                status_code=response.status_code,
            )

        # The file is UTF-8 even when the server omits a charset; a BOM
        # from spreadsheet exports is dropped
        response.encoding = 'utf-8-sig'
        return response.text
