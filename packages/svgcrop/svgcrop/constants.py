"""Shared constants for SVG viewBox tightening."""

# Standard Library
import re

# padding added on all four sides of the tightened bounds
VIEWBOX_MARGIN = 30.0

# approximate glyph advance per character, as a fraction of font size
GLYPH_WIDTH_FACTOR = 0.6

# label extent below the anchor baseline, as a fraction of font size;
# the extent above the anchor is one full font size
LABEL_DESCENT_FACTOR = 0.5

# first viewBox attribute, with either quote style
VIEWBOX_PATTERN = re.compile(r"""(?<![\w:-])viewBox\s*=\s*(["'])([^"']*)\1""")

SEGMENT_TAG = "line"
LABEL_TAG = "text"
