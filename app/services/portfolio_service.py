"""
Business logic for loading and querying portfolio content.

Pure Python - no Flask dependencies.
Philosophy: One acquisition and one parse per cache miss; pages query the
already-sorted collection.
"""

from typing import List, Optional, Tuple
import logging

from app.cache import PortfolioCache
from app.exceptions import AcquisitionError
from app.models import CATEGORY_LABELS, PortfolioItem
from app.repositories.portfolio_source import PortfolioSource
from app.utils.csv_processing import parse_portfolio_csv

logger = logging.getLogger(__name__)


class PortfolioService:
    """
    Service for the portfolio collection.

    The acquisition strategy and the cache are injected by the composition
    root, so tests can build a fresh service per case.
    """

    def __init__(
        self,
        source: PortfolioSource,
        cache: Optional[PortfolioCache] = None,
        recent_count: int = 3
    ):
        self.source = source
        self.cache = cache
        self.recent_count = recent_count

    def fetch_portfolio_data(self) -> List[PortfolioItem]:
        """
        Return the portfolio collection, most recent first.

        Returns the cached list when there is one. Otherwise reads the
        source, parses it and caches the result.

        Raises:
            AcquisitionError: The source could not be read. Nothing is cached.
        """
        if self.cache is not None and self.cache.is_populated:
            return self.cache.get()

        try:
            csv_text = self.source.read_text()
        except AcquisitionError as e:
            logger.error(f"Error fetching portfolio data from {self.source.location}: {e}")
            raise

        items = parse_portfolio_csv(csv_text)

        if self.cache is not None:
            self.cache.set(items)

        return items

    def recent_projects(self, limit: Optional[int] = None) -> List[PortfolioItem]:
        """First `limit` items of the date-sorted collection."""
        if limit is None:
            limit = self.recent_count
        return self.fetch_portfolio_data()[:limit]

    def get_by_slug(self, slug: str) -> Optional[PortfolioItem]:
        """
        Look up one item by exact slug.

        Slugs are expected to be unique; the first match wins.
        """
        for item in self.fetch_portfolio_data():
            if item.slug == slug:
                return item
        logger.info(f"No portfolio item with slug: {slug}")
        return None

    def filter_by_category(self, category: Optional[str]) -> List[PortfolioItem]:
        """Items in the given bucket. No category (or "all") returns everything."""
        items = self.fetch_portfolio_data()
        if not category or category == 'all':
            return items
        return [item for item in items if category in item.categories]

    def available_categories(self) -> List[Tuple[str, str]]:
        """
        (bucket, label) pairs for buckets used by at least one item.

        Returns:
            Pairs in display order, "all" first
        """
        used = {category for item in self.fetch_portfolio_data() for category in item.categories}
        used.add('all')
        return [
            (bucket, label)
            for bucket, label in CATEGORY_LABELS.items()
            if bucket in used
        ]
