"""
Record Mapper Module
Maps a tokenized CSV row onto PortfolioItem fields.
"""

import logging
from typing import Any, Dict, List, Sequence

logger = logging.getLogger(__name__)

# Header labels are matched exactly (case-sensitive)
COLUMN_MAP = {
    'Slug': 'slug',
    'Title': 'title',
    'Logo': 'logo',
    'Main Image': 'main_image',
    'Short Description': 'short_description',
    'Project URL': 'project_url',
    'Content': 'content',
    'Sort Order': 'sort_order',
    'Tags': 'tags',
}


def split_tags(value: str) -> List[str]:
    """Split a Tags cell on commas. An empty cell gives no tags."""
    if not value:
        return []
    return [tag.strip() for tag in value.split(',')]


def map_row(headers: Sequence[str], values: Sequence[str]) -> Dict[str, Any]:
    """
    Build the field dict for one data row.

    Args:
        headers: Column labels from the header row
        values: Field values from one data row

    Returns:
        Dict of PortfolioItem field name -> value. Unknown columns are
        dropped and columns past the end of a short row are left out.
    """
    fields: Dict[str, Any] = {}

    for index, header in enumerate(headers):
        key = COLUMN_MAP.get(header)
        if key is None or index >= len(values):
            continue

        if key == 'tags':
            fields['tags'] = tuple(split_tags(values[index]))
        else:
            fields[key] = values[index]

    return fields
