"""Keyword-valued SVG attributes."""

from enum import Enum


class _Keyword(Enum):
    def __str__(self) -> str:
        return self.value


class AlignmentBaseline(_Keyword):
    """Values of ``alignment-baseline``."""
    AUTO = "auto"
    INHERIT = "inherit"
    AFTER_EDGE = "after-edge"
    ALPHABETIC = "alphabetic"
    BASELINE = "baseline"
    BEFORE_EDGE = "before-edge"
    CENTRAL = "central"
    MIDDLE = "middle"
    HANGING = "hanging"
    IDEOGRAPHIC = "ideographic"
    MATHEMATICAL = "mathematical"
    TEXT_AFTER_EDGE = "text-after-edge"
    TEXT_BEFORE_EDGE = "text-before-edge"


class MarkerOrientation(_Keyword):
    """Keyword values of the marker ``orient`` attribute."""
    AUTO = "auto"
    AUTO_START_REVERSE = "auto-start-reverse"   # 180° turned at marker-start


class PreserveAspectRatio(_Keyword):
    """Alignment values of ``preserveAspectRatio``; all but NONE scale uniformly."""
    NONE = "none"
    XMIN_YMIN = "xMinYMin"
    XMID_YMIN = "xMidYMin"
    XMAX_YMIN = "xMaxYMin"
    XMIN_YMID = "xMinYMid"
    XMID_YMID = "xMidYMid"    # SVG default
    XMAX_YMID = "xMaxYMid"
    XMIN_YMAX = "xMinYMax"
    XMID_YMAX = "xMidYMax"
    XMAX_YMAX = "xMaxYMax"


class TextAnchor(_Keyword):
    """Values of ``text-anchor``."""
    INHERIT = "inherit"
    END = "end"
    MIDDLE = "middle"
    START = "start"
