"""Tests for dates.py — date parsing and ISO normalization."""

from datetime import datetime, timedelta, timezone

import pytest

from postwrap.dates import format_display, parse_date, resolve_date, to_iso


class TestParseDate:

    @pytest.mark.parametrize('value', [
        '2025-01-15',
        '2025-01-15T00:00:00Z',
        '2025-01-15T00:00:00.000Z',
        '2025-01-15T02:00:00+02:00',
        'January 15, 2025',
        'Jan 15, 2025',
        '15 January 2025',
        '2025/01/15',
        '2025-01-15 00:00',
    ])
    def test_formats(self, value):
        assert to_iso(parse_date(value)) == '2025-01-15T00:00:00.000Z'

    @pytest.mark.parametrize('value', [None, '', 'someday', '2025-13-45'])
    def test_unparseable(self, value):
        assert parse_date(value) is None

    @pytest.mark.parametrize('value', [
        '0001-01-01T00:00:00+05:00',
        '9999-12-31T23:00:00-05:00',
    ])
    def test_out_of_range_after_utc_shift(self, value):
        assert parse_date(value) is None

    def test_datetime_passthrough(self):
        dt = datetime(2025, 1, 15, 12, 30)
        assert parse_date(dt) == datetime(2025, 1, 15, 12, 30, tzinfo=timezone.utc)


class TestFormatting:

    def test_to_iso_milliseconds(self):
        dt = datetime(2025, 3, 1, 8, 5, 9, 123456, tzinfo=timezone.utc)
        assert to_iso(dt) == '2025-03-01T08:05:09.123Z'

    def test_to_iso_naive_is_utc(self):
        assert to_iso(datetime(2025, 1, 15, 9, 30)) == '2025-01-15T09:30:00.000Z'

    def test_to_iso_pads_early_years(self):
        assert to_iso(datetime(99, 1, 1, tzinfo=timezone.utc)) == '0099-01-01T00:00:00.000Z'

    def test_to_iso_overflow_falls_back_to_now(self):
        before = datetime.now(timezone.utc).replace(microsecond=0)
        dt = datetime(1, 1, 1, tzinfo=timezone(timedelta(hours=5)))
        assert parse_date(to_iso(dt)) >= before

    def test_display_has_no_zero_padding(self):
        assert format_display(datetime(2025, 1, 5)) == 'January 5, 2025'


class TestResolveDate:

    def test_missing_is_now(self, capsys):
        before = datetime.now(timezone.utc)
        assert resolve_date(None) >= before
        assert capsys.readouterr().out == ''

    def test_bad_value_warns(self, capsys):
        resolve_date('someday', 'post.html')
        assert "post.html: unrecognised date 'someday'" in capsys.readouterr().out

    def test_out_of_range_warns_and_uses_now(self, capsys):
        before = datetime.now(timezone.utc)
        assert resolve_date('0001-01-01T00:00:00+05:00', 'old.html') >= before
        assert 'old.html: unrecognised date' in capsys.readouterr().out
