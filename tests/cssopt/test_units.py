"""Tests for unit families and the shortest-unit search."""

from cssopt.cssopt_number import format_number
from cssopt.cssopt_units import LENGTH_UNITS, shortest_equivalent, unit_family


def _text(result):
    value, unit = result
    return format_number(value) + unit


class TestUnitFamily:
    """Units are grouped into families that convert among themselves."""

    def test_known_unit(self):
        """px is a length."""
        assert unit_family('px') is LENGTH_UNITS

    def test_unknown_unit(self):
        """Relative units such as em are not converted."""
        assert unit_family('em') is None


class TestShortestEquivalent:
    """The search returns a strictly shorter form within the same family."""

    def test_pixels_to_inches(self):
        """96px is 1in."""
        assert _text(shortest_equivalent(96.0, 'px', False)) == '1in'

    def test_points_to_picas(self):
        """12pt is 1pc, which is shorter than 16px."""
        assert _text(shortest_equivalent(12.0, 'pt', False)) == '1pc'

    def test_no_shorter_form(self):
        """A value with no shorter form is returned unchanged."""
        assert shortest_equivalent(10.0, 'px', False) == (10.0, 'px')

    def test_milliseconds_to_seconds(self):
        """1000ms is 1s."""
        assert _text(shortest_equivalent(1000.0, 'ms', False)) == '1s'

    def test_seconds_stay_when_shorter(self):
        """.5s is shorter than 500ms."""
        assert shortest_equivalent(0.5, 's', False) == (0.5, 's')

    def test_frequency(self):
        """1000Hz is 1kHz."""
        assert _text(shortest_equivalent(1000.0, 'Hz', False)) == '1kHz'

    def test_resolution(self):
        """192dpi is 2dppx."""
        assert _text(shortest_equivalent(192.0, 'dpi', False)) == '2dppx'

    def test_tie_keeps_original(self):
        """96dpi and 1dppx are the same length, so nothing changes."""
        assert shortest_equivalent(96.0, 'dpi', False) == (96.0, 'dpi')

    def test_turn_never_produced(self):
        """360deg is never rewritten as 1turn."""
        assert shortest_equivalent(360.0, 'deg', False) == (360.0, 'deg')

    def test_pixels_to_points(self):
        """100px is 75pt."""
        assert _text(shortest_equivalent(100.0, 'px', False)) == '75pt'

    def test_unknown_unit_passes_through(self):
        """Unknown units are returned unchanged."""
        assert shortest_equivalent(2.0, 'em', True) == (2.0, 'em')

    def test_centimeters_need_aggressive(self):
        """cm and mm take part only in aggressive mode."""
        assert shortest_equivalent(2.54, 'cm', False) == (2.54, 'cm')
        assert _text(shortest_equivalent(2.54, 'cm', True)) == '1in'

    def test_millimeters_to_centimeters(self):
        """10mm is 1cm in aggressive mode."""
        assert shortest_equivalent(10.0, 'mm', False) == (10.0, 'mm')
        assert _text(shortest_equivalent(10.0, 'mm', True)) == '1cm'

    def test_never_converts_into_centimeters_by_default(self):
        """Without aggressive mode a length is never rewritten in cm or mm."""
        value, unit = shortest_equivalent(37.7952755906, 'px', False)
        assert unit not in ('cm', 'mm')

    def test_overflowing_value_unchanged(self):
        """A value too large to convert without overflow keeps its unit."""
        assert shortest_equivalent(1e307, 'in', True) == (1e307, 'in')
