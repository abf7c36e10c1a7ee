"""Unit tests for svg_values.values.keywords module."""

import pytest

from svg_values.values.keywords import (
    AlignmentBaseline,
    MarkerOrientation,
    PreserveAspectRatio,
    TextAnchor,
)


class TestKeywords:
    """Tests for keyword enumerations."""

    def test_str_is_keyword(self):
        """Test str() gives the SVG keyword."""
        assert str(TextAnchor.MIDDLE) == "middle"
        assert str(PreserveAspectRatio.XMID_YMID) == "xMidYMid"
        assert str(MarkerOrientation.AUTO_START_REVERSE) == "auto-start-reverse"
        assert str(AlignmentBaseline.TEXT_BEFORE_EDGE) == "text-before-edge"

    def test_lookup_by_keyword(self):
        """Test enum lookup by SVG keyword."""
        assert TextAnchor("end") is TextAnchor.END
        assert PreserveAspectRatio("none") is PreserveAspectRatio.NONE

    @pytest.mark.parametrize("enum_cls, count", [
        (AlignmentBaseline, 13),
        (MarkerOrientation, 2),
        (PreserveAspectRatio, 10),
        (TextAnchor, 4),
    ])
    def test_closed_sets(self, enum_cls, count):
        """Test the number of members of each set."""
        assert len(enum_cls) == count

    def test_unknown_keyword(self):
        """Test an unknown keyword is rejected."""
        with pytest.raises(ValueError):
            TextAnchor("center")
