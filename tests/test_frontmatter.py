"""Tests for frontmatter.py — CMS front-matter parsing."""

import pytest

from postwrap.frontmatter import (
    dump_front_matter,
    has_front_matter_delimiter,
    parse_front_matter,
    parse_value,
)


class TestParseFrontMatter:

    def test_metadata_and_body(self, sample_front_matter):
        parsed = parse_front_matter(sample_front_matter)
        assert parsed is not None
        assert parsed.metadata['title'] == 'Hello World'
        assert parsed.metadata['date'] == '2025-01-15'
        assert parsed.metadata['summary'] == 'A first post'
        assert parsed.body.startswith('## Intro')

    def test_list_keeps_empty_entries(self, sample_front_matter):
        """Empty tags are dropped later, at index time."""
        parsed = parse_front_matter(sample_front_matter)
        assert parsed.metadata['tags'] == ['announcement', '', 'blog']

    def test_value_with_colon(self):
        parsed = parse_front_matter('---\ntitle: Time: a story\n---\nbody\n')
        assert parsed.metadata['title'] == 'Time: a story'

    def test_unknown_keys_preserved(self):
        parsed = parse_front_matter('---\nlayout: post\ntitle: X\n---\n')
        assert parsed.metadata['layout'] == 'post'

    def test_lines_without_colon_ignored(self):
        parsed = parse_front_matter('---\ntitle: X\njust text\n---\n')
        assert parsed.metadata == {'title': 'X'}

    def test_empty_value(self):
        parsed = parse_front_matter('---\nsummary:\n---\n')
        assert parsed.metadata['summary'] == ''

    def test_no_delimiter(self):
        assert parse_front_matter('<html><body></body></html>') is None

    def test_unterminated_block(self):
        assert parse_front_matter('---\ntitle: X\nno closing line\n') is None

    def test_closing_delimiter_at_end_of_file(self):
        parsed = parse_front_matter('---\ntitle: X\n---')
        assert parsed.metadata == {'title': 'X'}
        assert parsed.body == ''

    def test_delimiter_with_trailing_whitespace(self):
        parsed = parse_front_matter('---  \ntitle: X\n---\t\nBody')
        assert parsed.body == 'Body'

    def test_windows_line_endings(self):
        parsed = parse_front_matter('---\r\ntitle: X\r\n---\r\nBody\r\n')
        assert parsed.metadata == {'title': 'X'}
        assert parsed.body == 'Body\r\n'


class TestParseValue:

    def test_double_quotes(self):
        assert parse_value('"quoted"') == 'quoted'

    def test_single_quotes(self):
        assert parse_value("'quoted'") == 'quoted'

    def test_mismatched_quotes_kept(self):
        assert parse_value('"half\'') == '"half\''

    def test_list(self):
        assert parse_value("[a, 'b', \"c\"]") == ['a', 'b', 'c']

    def test_empty_list(self):
        assert parse_value('[]') == []

    def test_quoted_brackets_stay_string(self):
        assert parse_value('"[draft]"') == '[draft]'

    def test_bare(self):
        assert parse_value('  plain text  ') == 'plain text'


class TestDumpFrontMatter:

    @pytest.mark.parametrize('metadata', [
        {'title': 'Hello World', 'date': '2025-01-15'},
        {'title': 'Colons: fine', 'summary': '', 'tags': ['a', 'b']},
        {'tags': [], 'title': 'Quotes "inside"'},
        {'layout': 'post', 'title': ' padded '},
        {'note': '[draft]', 'title': "'quoted'"},
    ])
    def test_round_trip(self, metadata):
        parsed = parse_front_matter(dump_front_matter(metadata))
        assert parsed.metadata == metadata

    def test_body_preserved(self):
        parsed = parse_front_matter(dump_front_matter({'title': 'X'}, 'Body\n'))
        assert parsed.body == 'Body\n'

    def test_invalid_key(self):
        with pytest.raises(ValueError):
            dump_front_matter({'bad:key': 'x'})


class TestDelimiterCheck:

    def test_front_matter(self):
        assert has_front_matter_delimiter('---\ntitle: X\n---\n')

    def test_html(self):
        assert not has_front_matter_delimiter('<!DOCTYPE html>')
