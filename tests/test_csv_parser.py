"""
Test Suite for the Portfolio CSV Parser
Covers tokenizing, row mapping, parsing and date sorting.
"""

import pytest
from app.utils.csv_processing import (
    parse_portfolio_csv,
    sort_by_date,
    split_lines,
    tokenize_header,
    tokenize_row,
    map_row
)
from app.utils.csv_processing.tokenizer import clean_field
from app.utils.csv_processing.record_mapper import split_tags
from app.models import PortfolioItem
from tests.test_data_generators import CSVTestData, HEADER


class TestTokenizer:
    """Test the quote-aware line scanner."""

    def test_quoted_field_keeps_comma(self):
        """A quoted field containing a comma is one value."""
        assert tokenize_row('acme,"Acme, Inc.",2024') == ['acme', 'Acme, Inc.', '2024']

    def test_fields_are_trimmed(self):
        """Surrounding whitespace is removed from every field."""
        assert tokenize_row('  a ,  b  ,c  ') == ['a', 'b', 'c']

    def test_trailing_empty_field_kept_for_rows(self):
        """A data row ending in a comma has an empty last field."""
        assert tokenize_row('a,b,') == ['a', 'b', '']

    def test_trailing_empty_label_dropped_for_header(self):
        """A header ending in a comma does not gain an empty column."""
        assert tokenize_header('Slug,Title,') == ['Slug', 'Title']

    def test_quoted_header(self):
        """Quoted header labels are unwrapped."""
        assert tokenize_header('"Slug","Main Image"') == ['Slug', 'Main Image']

    def test_doubled_quote_not_unescaped(self):
        """Quotes only toggle state, so "" disappears rather than becoming a quote."""
        assert tokenize_row('"say ""hi""",x') == ['say hi', 'x']

    def test_clean_field_strips_one_pair(self):
        """At most one leading and one trailing quote are stripped."""
        assert clean_field(' ""x"" ') == '"x"'
        assert clean_field('"x') == 'x'

    def test_blank_lines_dropped(self):
        """Lines that are blank after trimming are skipped."""
        assert split_lines("a\n\n  \nb\r\n\r\n") == ['a', 'b\r']

    def test_quoted_newline_splits_row(self):
        """Known limitation: a quoted newline still ends the line."""
        lines = split_lines('slug,"line one\nline two"')
        assert len(lines) == 2
        assert tokenize_row(lines[0]) == ['slug', 'line one']
        assert tokenize_row(lines[1]) == ['line two']


class TestRecordMapper:
    """Test header-to-field mapping."""

    def test_maps_known_headers(self):
        """Every known header lands on its field."""
        headers = HEADER.split(',')
        values = ['s', 't', 'l', 'm', 'd', 'u', 'c', '2024-01-01', 'Web']
        fields = map_row(headers, values)

        assert fields == {
            'slug': 's',
            'title': 't',
            'logo': 'l',
            'main_image': 'm',
            'short_description': 'd',
            'project_url': 'u',
            'content': 'c',
            'sort_order': '2024-01-01',
            'tags': ('Web',),
        }

    def test_unknown_header_ignored(self):
        """Columns with unrecognized labels are dropped."""
        fields = map_row(['Slug', 'Notes'], ['a', 'secret'])
        assert fields == {'slug': 'a'}
        assert 'secret' not in fields.values()

    def test_headers_are_case_sensitive(self):
        """'slug' is not 'Slug'."""
        assert map_row(['slug'], ['a']) == {}

    def test_short_row_leaves_fields_absent(self):
        """Missing trailing values are not filled in."""
        fields = map_row(['Slug', 'Title', 'Logo'], ['a'])
        assert fields == {'slug': 'a'}

    def test_tags_split_and_trimmed(self):
        """Tags are split on commas and trimmed, in order."""
        assert split_tags('AI Solution,  Web App ') == ['AI Solution', 'Web App']

    def test_empty_tags(self):
        """An empty Tags cell gives no tags, not one empty tag."""
        assert split_tags('') == []
        assert map_row(['Tags'], ['']) == {'tags': ()}


class TestParsePortfolioCSV:
    """Test the full parse pipeline."""

    @pytest.mark.parametrize('case,expected', CSVTestData.get_expected_row_counts())
    def test_row_counts(self, case, expected):
        """One item per non-blank data row."""
        csv_text = CSVTestData.get_all_test_cases()[case]
        assert len(parse_portfolio_csv(csv_text)) == expected

    def test_basic_items(self):
        """Items carry mapped fields and derived categories."""
        items = parse_portfolio_csv(CSVTestData.get_all_test_cases()['basic'])
        briefbot = next(item for item in items if item.slug == 'briefbot')

        assert isinstance(briefbot, PortfolioItem)
        assert briefbot.title == 'BriefBot'
        assert briefbot.main_image == '/img/briefbot.jpg'
        assert briefbot.project_url == 'https://briefbot.example.com'
        assert briefbot.tags == ('AI Solution', 'Web App')
        assert briefbot.categories == ('all', 'ai', 'web')

    def test_sorted_most_recent_first(self):
        """Items are ordered by sort date, newest first."""
        items = parse_portfolio_csv(CSVTestData.get_all_test_cases()['basic'])
        assert [item.sort_order for item in items] == ['2024-06-01', '2024-01-01', '2023-06-15']

    def test_quoted_values(self):
        """Quoted headers and values with commas parse as single fields."""
        items = parse_portfolio_csv(CSVTestData.get_all_test_cases()['quoted'])
        assert items[0].title == 'Acme, Inc.'
        assert items[0].short_description == 'Fast, cheap, good'
        assert items[0].tags == ('Design', 'Bubble')
        assert items[0].categories == ('all', 'design', 'bubble')

    def test_extra_column_and_short_row(self):
        """Unknown columns are ignored and short rows still become items."""
        items = parse_portfolio_csv(CSVTestData.get_all_test_cases()['extra_column'])
        alpha, beta = items

        assert alpha.slug == 'alpha'
        assert 'internal only' not in alpha.to_dict().values()
        assert beta.slug == 'beta'
        assert beta.sort_order is None
        assert beta.tags == ()
        assert beta.categories == ('all', 'web')

    def test_crlf_line_endings(self):
        """Carriage returns are trimmed with the rest of the whitespace."""
        items = parse_portfolio_csv(CSVTestData.get_all_test_cases()['blank_lines'])
        assert [item.slug for item in items] == ['first', 'second']
        assert items[1].sort_order == '2023-01-01'

    def test_byte_order_mark(self):
        """A leading BOM does not hide the Slug column."""
        items = parse_portfolio_csv(CSVTestData.get_all_test_cases()['bom'])
        assert [item.slug for item in items] == ['ledgerlane', 'briefbot', 'fieldkit']

    def test_empty_and_header_only(self):
        """No data rows gives an empty list, not an error."""
        assert parse_portfolio_csv('') == []
        assert parse_portfolio_csv(HEADER) == []

    def test_large_file_order(self):
        """Sorting holds for many rows."""
        items = parse_portfolio_csv(CSVTestData.get_all_test_cases()['large_100'])
        assert items[0].slug == 'project-99'
        assert items[-1].slug == 'project-0'


class TestSortByDate:
    """Test date ordering and the unparseable-date fallback."""

    def test_unparseable_dates_go_last(self):
        """Missing or garbage dates count as earliest, keeping file order."""
        items = parse_portfolio_csv(CSVTestData.get_all_test_cases()['bad_dates'])
        assert [item.slug for item in items] == ['new', 'old', 'nodate', 'garbage']

    def test_equal_dates_keep_file_order(self):
        """Ties are stable."""
        items = [
            PortfolioItem(slug='a', sort_order='2024-01-01'),
            PortfolioItem(slug='b', sort_order='2024-01-01'),
            PortfolioItem(slug='c', sort_order='2025-01-01'),
        ]
        assert [item.slug for item in sort_by_date(items)] == ['c', 'a', 'b']

    def test_mixed_date_formats(self):
        """Different date spellings compare as dates."""
        items = [
            PortfolioItem(slug='iso', sort_order='2023-03-01'),
            PortfolioItem(slug='long', sort_order='June 5, 2023'),
            PortfolioItem(slug='stamp', sort_order='2023-01-01T10:00:00Z'),
        ]
        assert [item.slug for item in sort_by_date(items)] == ['long', 'iso', 'stamp']

    def test_empty(self):
        """Sorting nothing returns nothing."""
        assert sort_by_date([]) == []
