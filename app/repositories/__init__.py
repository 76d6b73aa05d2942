"""
Repository layer for data access.

Repositories handle acquiring raw content.
Philosophy: Single source of truth for where portfolio content comes from.
"""

from app.repositories.portfolio_source import (
    PortfolioSource,
    LocalFileSource,
    RemoteFetchSource
)

__all__ = [
    'PortfolioSource',
    'LocalFileSource',
    'RemoteFetchSource'
]
