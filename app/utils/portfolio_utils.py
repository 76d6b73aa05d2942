"""
Flask-side access to the services built by the composition root.
"""

import logging

from flask import current_app

from app.cache import PortfolioCache, cache
from app.repositories.portfolio_source import LocalFileSource, RemoteFetchSource
from app.services.portfolio_service import PortfolioService

logger = logging.getLogger(__name__)


def build_portfolio_service(settings) -> PortfolioService:
    """
    Build the portfolio service for an app config.

    Selects the acquisition strategy: "remote" fetches PORTFOLIO_CSV_URL,
    anything else reads PORTFOLIO_CSV_PATH.
    """
    if settings.get('PORTFOLIO_SOURCE') == 'remote':
        source = RemoteFetchSource(
            settings['PORTFOLIO_CSV_URL'],
            timeout=settings.get('PORTFOLIO_FETCH_TIMEOUT'),
        )
    else:
        source = LocalFileSource(settings['PORTFOLIO_CSV_PATH'])

    portfolio_cache = PortfolioCache() if settings.get('PORTFOLIO_CACHE_ENABLED', True) else None
    logger.info(
        f"Portfolio source: {source.location} "
        f"(cache {'enabled' if portfolio_cache is not None else 'disabled'})"
    )

    return PortfolioService(
        source,
        cache=portfolio_cache,
        recent_count=settings.get('RECENT_PROJECTS_COUNT', 3),
    )


def get_portfolio_service() -> PortfolioService:
    return current_app.extensions['portfolio_service']


def get_lead_service():
    return current_app.extensions['lead_service']


def clear_portfolio_caches():
    """Drop the parsed collection and any cached API responses."""
    service = get_portfolio_service()
    if service.cache is not None:
        service.cache.clear()
    cache.clear()
