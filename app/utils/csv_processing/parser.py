"""
CSV Parser Module
Turns the portfolio content CSV into sorted PortfolioItem records.
"""

import logging
from typing import List

import pandas as pd

from app.models import PortfolioItem
from .category_rules import derive_categories
from .record_mapper import map_row
from .tokenizer import split_lines, tokenize_header, tokenize_row

logger = logging.getLogger(__name__)


def parse_portfolio_csv(csv_text: str) -> List[PortfolioItem]:
    """
    Parse portfolio CSV text into items sorted most-recent-first.

    Args:
        csv_text: Raw CSV file content as string

    Returns:
        List[PortfolioItem]: One item per non-blank data row. Empty when the
        text has no header or no data rows; that is logged, not raised.
    """
    logger.info(f"Starting portfolio CSV parsing, content length: {len(csv_text)} characters")

    lines = split_lines(csv_text)
    if len(lines) < 2:
        logger.error("Portfolio CSV is empty or has no data rows")
        return []

    headers = tokenize_header(lines[0])
    logger.debug(f"Parsed CSV headers: {headers}")

    items = [_build_item(headers, tokenize_row(line)) for line in lines[1:]]
    logger.info(f"Parsed {len(items)} portfolio items from CSV")

    return sort_by_date(items)


def _build_item(headers, values) -> PortfolioItem:
    fields = map_row(headers, values)
    categories = derive_categories(
        fields.get('tags', ()),
        content=fields.get('content'),
        title=fields.get('title'),
        short_description=fields.get('short_description'),
    )
    return PortfolioItem(categories=tuple(categories), **fields)


def parse_sort_dates(values) -> pd.Series:
    """
    Parse sort keys into UTC timestamps.

    Unparseable or missing values become NaT. Naive dates are read as UTC
    so they compare with timezone-aware ones.
    """
    return pd.to_datetime(
        pd.Series(list(values), dtype=object),
        errors='coerce',
        format='mixed',
        utc=True,
    )


def sort_by_date(items: List[PortfolioItem]) -> List[PortfolioItem]:
    """
    Sort items descending by sort_order parsed as a date.

    Items whose sort_order is not a date count as the earliest and go last.
    Equal dates keep their file order.
    """
    if not items:
        return []

    df = pd.DataFrame({
        'position': range(len(items)),
        'parsed_date': parse_sort_dates(item.sort_order for item in items),
    })

    nat_count = df['parsed_date'].isna().sum()
    if nat_count > 0:
        logger.warning(f"{nat_count} sort dates could not be parsed and will be listed last")

    df = df.sort_values('parsed_date', ascending=False, na_position='last', kind='stable')
    sorted_items = [items[position] for position in df['position']]

    logger.debug("Portfolio order after sorting:")
    for item in sorted_items:
        logger.debug(f"  {item.sort_order} - {item.title}")

    return sorted_items
