"""
Unit tests for svg_values.values.units module.

Tests:
- Three-decimal formatting (rounding, non-finite values)
- Unit templates and formatting
- Case-insensitive lookup
"""

import numpy as np
import pytest

from svg_values.errors import NullArgumentError, UnknownUnitError
from svg_values.values.units import Unit, format_fixed, is_integral


class TestFormatFixed:
    """Tests for format_fixed function."""

    def test_three_decimals(self):
        """Test that output always has exactly three decimals."""
        assert format_fixed(2.5) == "2.500"
        assert format_fixed(0.0) == "0.000"
        assert format_fixed(-1.5) == "-1.500"

    def test_round_half_up(self):
        """Test rounding half up on the shortest decimal form."""
        assert format_fixed(1.0005) == "1.001"
        assert format_fixed(2.0004) == "2.000"
        assert format_fixed(0.0125) == "0.013"

    def test_large_value(self):
        """Test that large magnitudes are not cut to scientific notation."""
        assert format_fixed(1e20) == "100000000000000000000.000"

    def test_non_finite(self):
        """Test NaN and infinities."""
        assert format_fixed(float("nan")) == "NaN"
        assert format_fixed(float("inf")) == "Infinity"
        assert format_fixed(float("-inf")) == "-Infinity"


class TestIsIntegral:
    """Tests for is_integral function."""

    def test_python_and_numpy_ints(self):
        """Test that Python and numpy integers count as integral."""
        assert is_integral(5)
        assert is_integral(np.int64(5))

    def test_bool_is_integral(self):
        """Test that bool counts as an integer and formats as 0/1."""
        assert is_integral(True)
        assert Unit.PIXEL.format(True) == "1px"

    def test_floats_not_integral(self):
        """Test that floats with integer value are still fractional."""
        assert not is_integral(5.0)
        assert not is_integral(np.float64(5.0))


class TestUnitFormat:
    """Tests for Unit.format and its templates."""

    def test_integer(self):
        """Test integer template."""
        assert Unit.PIXEL.format(5) == "5px"
        assert Unit.MILLIMETER.format(-3) == "-3mm"

    def test_fractional(self):
        """Test fractional template."""
        assert Unit.PIXEL.format(5.0) == "5.000px"
        assert Unit.INCH.format(0.25) == "0.250in"

    def test_percent_escaped(self):
        """Test that the percent sign prints literally."""
        assert Unit.PERCENT.integer_template == "%d%%"
        assert Unit.PERCENT.format(50) == "50%"
        assert Unit.PERCENT.format(12.5) == "12.500%"

    def test_none_has_no_suffix(self):
        """Test unit-less formatting."""
        assert Unit.NONE.format(3) == "3"
        assert Unit.NONE.format(3.14159) == "3.142"

    def test_non_finite_keeps_suffix(self):
        """Test that NaN still carries the unit suffix."""
        assert Unit.PIXEL.format(float("nan")) == "NaNpx"

    def test_str_is_identifier(self):
        """Test str() of a unit."""
        assert str(Unit.PICA) == "pc"
        assert Unit.POINT.identifier == "pt"


class TestUnitLookup:
    """Tests for Unit.lookup classmethod."""

    @pytest.mark.parametrize("unit", list(Unit))
    def test_round_trip_upper_case(self, unit):
        """Test that every identifier maps back, ignoring case."""
        assert Unit.lookup(unit.identifier.upper()) is unit
        assert Unit.lookup(unit.identifier) is unit

    def test_mixed_case(self):
        """Test mixed-case identifiers."""
        assert Unit.lookup("Mm") is Unit.MILLIMETER

    def test_empty_is_none(self):
        """Test that "" is the unit-less unit."""
        assert Unit.lookup("") is Unit.NONE

    def test_unknown(self):
        """Test that an unknown identifier fails explicitly."""
        with pytest.raises(UnknownUnitError) as exc_info:
            Unit.lookup("furlong")
        assert exc_info.value.identifier == "furlong"

    def test_none_argument(self):
        """Test that None is rejected."""
        with pytest.raises(NullArgumentError):
            Unit.lookup(None)
