"""
Tests for category derivation.

Tag rules first, content keywords as fallback, "web" as the last resort.
"""

import pytest
from app.utils.csv_processing import CONTENT_RULES, TAG_RULES, derive_categories
from app.utils.csv_processing.category_rules import ItemText, categories_from_tags


class TestTagRules:
    """Tests for the tag rule table"""

    def test_rule_order(self):
        """Rule tables are evaluated in a fixed order"""
        assert [rule.bucket for rule in TAG_RULES] == ['ai', 'mobile', 'web', 'web3', 'bubble', 'design']
        assert [rule.bucket for rule in CONTENT_RULES] == ['web3', 'bubble', 'ai', 'mobile', 'design']

    def test_ai_and_web_tags(self):
        """'AI Solution, Web App' maps to exactly all, ai, web"""
        assert derive_categories(['AI Solution', 'Web App']) == ['all', 'ai', 'web']

    def test_first_matched_first(self):
        """Bucket order follows tag order, not rule order"""
        assert derive_categories(['Web App', 'AI']) == ['all', 'web', 'ai']

    def test_tags_are_normalized(self):
        """Tags are lower-cased and trimmed before matching"""
        assert categories_from_tags(['  MOBILE  ']) == ['mobile']

    def test_duplicates_suppressed(self):
        """A bucket appears once even when several tags select it"""
        assert derive_categories(['Web', 'Web App', 'web application']) == ['all', 'web']

    def test_one_tag_many_buckets(self):
        """Rules overlap: one tag may select several buckets"""
        assert categories_from_tags(['Crypto UI Design']) == ['web3', 'design']

    @pytest.mark.parametrize('tag,bucket', [
        ('AI', 'ai'),
        ('Mobile App', 'mobile'),
        ('Web Application', 'web'),
        ('Blockchain', 'web3'),
        ('No-Code', 'bubble'),
        ('nocode', 'bubble'),
        ('UX', 'design'),
    ])
    def test_single_tag(self, tag, bucket):
        """Each bucket has a tag that selects it"""
        assert categories_from_tags([tag]) == [bucket]

    def test_tags_win_over_content(self):
        """Content is not scanned when a tag matched"""
        categories = derive_categories(['Bubble'], content='An AI mobile app for iOS')
        assert categories == ['all', 'bubble']


class TestContentFallback:
    """Tests for content keyword fallback"""

    def test_blockchain_content(self):
        """Untagged item mentioning blockchain is web3 only"""
        assert derive_categories([], content='<p>A blockchain explorer</p>') == ['all', 'web3']

    def test_unmatched_tags_fall_back(self):
        """Tags that match no rule behave like no tags"""
        assert derive_categories(['Healthcare'], content='Native Android build') == ['all', 'mobile']

    def test_title_and_description(self):
        """Title and short description are scanned too"""
        assert derive_categories([], title='Crypto Tracker') == ['all', 'web3']
        assert derive_categories([], short_description='AI-powered scheduling') == ['all', 'ai']
        assert derive_categories([], title='Content Studio') == ['all', 'ai']

    def test_several_buckets_in_rule_order(self):
        """Content may select several buckets, in rule order"""
        categories = derive_categories(
            [], content='Artificial intelligence for iOS with a new interface, built on Bubble')
        assert categories == ['all', 'bubble', 'ai', 'mobile', 'design']

    def test_keywords_match_word_starts(self):
        """'ai' inside another word does not count"""
        text = ItemText.build('Email campaigns, plain and certain', 'Maintenance', '')
        assert [rule.bucket for rule in CONTENT_RULES if rule.predicate(text)] == []

    def test_title_keyword_inside_word_ignored(self):
        """'app' inside a longer title word does not make an item mobile"""
        assert derive_categories([], title='WhatsApp Clone') == ['all', 'web']
        assert derive_categories([], title='Dapper Store') == ['all', 'web']
        assert derive_categories([], title='Appointment Booker') == ['all', 'mobile']

    def test_forced_web_fallback(self):
        """No tags and no keywords gives all, web"""
        assert derive_categories([], content='Static pages', title='Homepage') == ['all', 'web']

    def test_missing_text_fields(self):
        """None fields are treated as empty text"""
        assert derive_categories([], content=None, title=None, short_description=None) == ['all', 'web']
