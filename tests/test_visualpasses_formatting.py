"""Tests for visual pass formatting."""

from __future__ import annotations

import pytest
from markupsafe import Markup

from utils.visualpasses.formatting import (
    PASS_COLUMNS,
    format_angle,
    format_console_report,
    format_magnitude,
    format_pass_table,
    format_summary,
    pass_row,
    seconds_to_duration,
    utc_seconds_to_local_time,
)
from utils.visualpasses.models import MAGNITUDE_UNKNOWN, Pass, SatelliteInfo, VisualPassReport

SAMPLE_PASS = Pass(
    start_az=307.21, start_az_compass='NW', start_el=13.08, start_utc=1521368025,
    max_az=225.45, max_az_compass='SW', max_el=78.27, max_utc=1521368345,
    end_az=132.82, end_az_compass='SE', end_el=0.0, end_utc=1521368660,
    mag=-3.4, duration=555, start_visibility=1521368025,
)


def _report(passes=(), name='SPACE STATION', passes_count=None):
    info = SatelliteInfo(
        satellite_id=25544,
        satellite_name=name,
        transactions_count=4,
        passes_count=len(passes) if passes_count is None else passes_count,
    )
    return VisualPassReport(info=info, passes=tuple(passes))


class TestValueFormatting:
    """Tests for single value formatters."""

    def test_unknown_magnitude_is_dash(self):
        assert format_magnitude(MAGNITUDE_UNKNOWN) == '-'
        assert format_magnitude(100000.0) == '-'

    @pytest.mark.parametrize('mag, expected', [
        (-3.4, '-3.40'),
        (1.2345, '1.23'),
        (0, '0.00'),
        (99999.999, '100000.00'),
    ])
    def test_magnitude_two_decimals(self, mag, expected):
        assert format_magnitude(mag) == expected

    @pytest.mark.parametrize('seconds, expected', [
        (125, '2m  5s'),
        (555, '9m 15s'),
        (60, '1m  0s'),
        (0, '0m  0s'),
        (3725, '62m  5s'),
        (-125, '-2m -5s'),
        (-60, '-1m  0s'),
        (-5, '0m -5s'),
    ])
    def test_seconds_to_duration(self, seconds, expected):
        assert seconds_to_duration(seconds) == expected

    def test_local_time_rfc822(self, utc_timezone):
        assert utc_seconds_to_local_time(0) == '01 Jan 70 00:00 UTC'
        assert utc_seconds_to_local_time(1521368025) == '18 Mar 18 10:13 UTC'

    @pytest.mark.parametrize('utc_seconds', [100000000000000, -100000000000000, 2**63 - 1, -2**63])
    def test_unrepresentable_local_time_is_dash(self, utc_timezone, utc_seconds):
        assert utc_seconds_to_local_time(utc_seconds) == '-'

    def test_local_time_uses_process_timezone(self, monkeypatch, utc_timezone):
        import time
        monkeypatch.setenv('TZ', 'EST+05')
        time.tzset()

        assert utc_seconds_to_local_time(1521368025) == '18 Mar 18 05:13 EST'

    def test_format_angle(self):
        assert format_angle(13.079) == Markup('13.08&deg;')
        assert format_angle(307.21, 'NW') == Markup('307.21&deg; (NW)')

    def test_format_angle_escapes_compass(self):
        assert format_angle(1.0, '<b>') == Markup('1.00&deg; (&lt;b&gt;)')


class TestFormatSummary:
    """Tests for format_summary()."""

    def test_contains_name_id_and_counts(self):
        html = format_summary(_report([SAMPLE_PASS, SAMPLE_PASS]))

        assert isinstance(html, Markup)
        assert '<h2>SPACE STATION (25544)</h2>' in html
        assert '<li>Transaction count: 4</li>' in html
        assert '<li>Pass count: 2</li>' in html

    def test_pass_count_uses_actual_passes(self):
        html = format_summary(_report([SAMPLE_PASS], passes_count=9))

        assert '<li>Pass count: 1</li>' in html

    def test_name_is_escaped(self):
        html = format_summary(_report(name='<script>alert(1)</script>'))

        assert '<script>' not in html
        assert '&lt;script&gt;alert(1)&lt;/script&gt;' in html


class TestFormatPassTable:
    """Tests for format_pass_table()."""

    def test_header_row_in_column_order(self):
        html = str(format_pass_table(_report()))

        positions = [html.index(f'<th>{column}</th>') for column in PASS_COLUMNS]
        assert positions == sorted(positions)

    def test_no_passes_gives_header_only(self):
        html = format_pass_table(_report())

        assert html.count('<tr>') == 1
        assert '<td>' not in html
        assert html.strip().startswith('<table>')
        assert html.strip().endswith('</table>')

    def test_one_row_per_pass(self):
        html = format_pass_table(_report([SAMPLE_PASS, SAMPLE_PASS, SAMPLE_PASS]))

        assert html.count('<tr>') == 4
        assert html.count('<td>') == 3 * len(PASS_COLUMNS)

    def test_row_values(self, utc_timezone):
        html = format_pass_table(_report([SAMPLE_PASS]))

        assert '<td>-3.40</td>' in html
        assert '<td>9m 15s</td>' in html
        assert '<td>18 Mar 18 10:13 UTC</td>' in html
        assert '<td>307.21&deg; (NW)</td>' in html
        assert '<td>13.08&deg;</td>' in html
        assert '<td>0.00&deg;</td>' in html

    def test_unknown_magnitude_cell(self):
        html = format_pass_table(_report([Pass(mag=MAGNITUDE_UNKNOWN)]))

        assert '<td>-</td>' in html

    def test_pass_row_order(self, utc_timezone):
        cells = [str(cell) for cell in pass_row(SAMPLE_PASS)]

        assert len(cells) == len(PASS_COLUMNS)
        assert cells[0] == '-3.40'
        assert cells[1] == '9m 15s'
        assert cells[4] == '307.21&deg; (NW)'
        assert cells[7] == '225.45&deg; (SW)'
        assert cells[8] == '78.27&deg;'
        assert cells[9] == '18 Mar 18 10:24 UTC'

    def test_compass_is_escaped(self):
        html = format_pass_table(_report([Pass(start_az_compass='"><img>')]))

        assert '<img>' not in html
        assert '&#34;&gt;&lt;img&gt;' in html


class TestConsoleReport:
    """Tests for format_console_report()."""

    def test_header_lines(self):
        text = format_console_report(_report([SAMPLE_PASS], passes_count=3))

        assert 'Satellite name     : SPACE STATION' in text
        assert 'Satellite ID       : 25544' in text
        assert 'Transactions Count : 4' in text
        assert 'Passes Count       : 3' in text

    def test_pass_details(self, utc_timezone):
        text = format_console_report(_report([SAMPLE_PASS]))

        assert 'Pass  0:' in text
        assert '  Magnitude         : -3.40 (brightness)' in text
        assert '  Duration          : 555s (9m 15s)' in text
        assert '  Start             : 18 Mar 18 10:13 UTC' in text
        assert '  Max Azimuth       : 225.45° (SW)' in text
        assert '  End Elevation     : 0.00°' in text

    def test_only_actual_passes_are_listed(self):
        text = format_console_report(_report([SAMPLE_PASS], passes_count=5))

        assert 'Pass  0:' in text
        assert 'Pass  1:' not in text
