"""
Content models shared by the loader, services and routes.

Pure Python - no Flask dependencies.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

DEFAULT_PLACEHOLDER_IMAGE = '/static/img/placeholder.svg'

# Filter buckets in display order. "all" is the universal bucket.
CATEGORY_LABELS = {
    'all': 'All',
    'ai': 'AI Solutions',
    'mobile': 'Mobile Apps',
    'web': 'Web Applications',
    'web3': 'Web3 & Blockchain',
    'bubble': 'Bubble Projects',
    'design': 'UX/UI Design',
}


@dataclass(frozen=True)
class PortfolioItem:
    """One portfolio project, built from a single CSV data row."""
    slug: Optional[str] = None
    title: Optional[str] = None
    logo: Optional[str] = None
    main_image: Optional[str] = None
    short_description: Optional[str] = None
    project_url: Optional[str] = None
    content: Optional[str] = None
    sort_order: Optional[str] = None
    tags: Tuple[str, ...] = ()
    categories: Tuple[str, ...] = field(default_factory=lambda: ('all',))

    def image_url(self, placeholder: str = DEFAULT_PLACEHOLDER_IMAGE) -> str:
        """Main image, or the placeholder when the row has none."""
        return self.main_image or placeholder

    @property
    def display_tags(self) -> Tuple[str, ...]:
        """Tags for display; falls back to the derived categories."""
        if self.tags:
            return self.tags
        return tuple(
            category.capitalize()
            for category in self.categories
            if category != 'all'
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the camelCase keys used by the content file's API."""
        return {
            'slug': self.slug,
            'title': self.title,
            'logo': self.logo,
            'mainImage': self.main_image,
            'shortDescription': self.short_description,
            'projectUrl': self.project_url,
            'content': self.content,
            'sortOrder': self.sort_order,
            'tags': list(self.tags),
            'categories': list(self.categories),
        }
