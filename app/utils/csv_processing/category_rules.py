"""
Category Rules Module
Derives filter buckets for a portfolio item from its tags, falling back to
keywords in its content, title and short description.

Both rule tables are ordered. Rules are not mutually exclusive: one tag or
one content body may match several rules, and every match contributes its
bucket once.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, List, NamedTuple, Optional, Sequence

logger = logging.getLogger(__name__)

ALL_BUCKET = 'all'
DEFAULT_BUCKET = 'web'


@dataclass(frozen=True)
class CategoryRule:
    """A bucket and the predicate that selects it."""
    bucket: str
    predicate: Callable


class ItemText(NamedTuple):
    """Lower-cased text of an item, scanned by the content rules."""
    content: str
    title: str
    description: str

    @classmethod
    def build(cls, content: Optional[str], title: Optional[str],
              description: Optional[str]) -> 'ItemText':
        return cls(
            (content or '').lower(),
            (title or '').lower(),
            (description or '').lower(),
        )


def _is_or_contains(tag: str, exact=(), partial=()) -> bool:
    return tag in exact or any(word in tag for word in partial)


def _mentions(text: str, *keywords: str) -> bool:
    # Keywords must start a word so "blockchain" does not also match "ai"
    return any(re.search(r'\b' + re.escape(word), text) for word in keywords)


TAG_RULES: List[CategoryRule] = [
    CategoryRule('ai', lambda tag: _is_or_contains(
        tag, exact=('ai',), partial=('ai solution',))),
    CategoryRule('mobile', lambda tag: _is_or_contains(
        tag, exact=('mobile app', 'mobile'), partial=('mobile app',))),
    CategoryRule('web', lambda tag: _is_or_contains(
        tag, exact=('web app', 'web application', 'web'), partial=('web app',))),
    CategoryRule('web3', lambda tag: _is_or_contains(
        tag, partial=('web3', 'blockchain', 'crypto'))),
    CategoryRule('bubble', lambda tag: _is_or_contains(
        tag, partial=('bubble', 'no-code', 'nocode'))),
    CategoryRule('design', lambda tag: _is_or_contains(
        tag, exact=('design', 'ui', 'ux'), partial=('design', 'ui', 'ux'))),
]

CONTENT_RULES: List[CategoryRule] = [
    CategoryRule('web3', lambda text: (
        _mentions(text.content, 'web3', 'blockchain', 'crypto')
        or _mentions(text.title, 'web3', 'crypto', 'blockchain')
        or _mentions(text.description, 'web3'))),
    CategoryRule('bubble', lambda text: _mentions(
        text.content, 'bubble', 'no-code', 'nocode', 'no code')),
    CategoryRule('ai', lambda text: (
        _mentions(text.content, 'ai', 'artificial intelligence')
        or _mentions(text.title, 'ai', 'content')
        or _mentions(text.description, 'ai', 'ai-powered'))),
    CategoryRule('mobile', lambda text: (
        _mentions(text.content, 'mobile', 'ios', 'android')
        or _mentions(text.title, 'app'))),
    CategoryRule('design', lambda text: _mentions(
        text.content, 'design', 'ui', 'ux', 'interface')),
]


def _add(categories: List[str], bucket: str) -> None:
    if bucket not in categories:
        categories.append(bucket)


def categories_from_tags(tags: Sequence[str]) -> List[str]:
    """Buckets matched by any tag, in first-matched order, without "all"."""
    categories: List[str] = []
    for tag in tags:
        normalized = tag.lower().strip()
        for rule in TAG_RULES:
            if rule.predicate(normalized):
                _add(categories, rule.bucket)
    return categories


def categories_from_text(text: ItemText) -> List[str]:
    """Buckets whose keywords appear in the item text, in rule order."""
    return [rule.bucket for rule in CONTENT_RULES if rule.predicate(text)]


def derive_categories(tags: Sequence[str],
                      content: Optional[str] = None,
                      title: Optional[str] = None,
                      short_description: Optional[str] = None) -> List[str]:
    """
    Derive the filter buckets for one item.

    Tags are authoritative. The text scan only runs when no tag matched, and
    "web" is forced when neither produced a bucket.

    Returns:
        List of bucket ids, always starting with "all" and holding at least
        one other bucket
    """
    categories = [ALL_BUCKET]

    for bucket in categories_from_tags(tags):
        _add(categories, bucket)

    if len(categories) == 1:
        text = ItemText.build(content, title, short_description)
        for bucket in categories_from_text(text):
            _add(categories, bucket)

    if len(categories) == 1:
        categories.append(DEFAULT_BUCKET)

    return categories
