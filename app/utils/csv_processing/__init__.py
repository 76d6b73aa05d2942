"""
CSV Processing Module
Portfolio content CSV: tokenizing, row mapping, category derivation, sorting.
"""

from .parser import parse_portfolio_csv, sort_by_date
from .tokenizer import split_lines, tokenize_header, tokenize_row
from .record_mapper import COLUMN_MAP, map_row
from .category_rules import CONTENT_RULES, TAG_RULES, CategoryRule, derive_categories

__all__ = [
    'parse_portfolio_csv',
    'sort_by_date',
    'split_lines',
    'tokenize_header',
    'tokenize_row',
    'COLUMN_MAP',
    'map_row',
    'CONTENT_RULES',
    'TAG_RULES',
    'CategoryRule',
    'derive_categories',
]
