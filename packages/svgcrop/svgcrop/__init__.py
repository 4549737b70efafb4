"""Post-render viewBox tightening for molecule SVG drawings."""

from .bounds import BoundingRectangle
from .bounds import accumulate_bounds
from .constants import VIEWBOX_MARGIN
from .crop import compute_viewbox
from .crop import tighten_viewbox
from .errors import DegenerateGeometry
from .errors import MalformedDocument
from .errors import SvgCropError
from .primitives import Label
from .primitives import Segment
from .restyle import StyleRewrite
from .restyle import apply_style_rewrites
from .svg_parse import iter_primitives

__all__ = [
	"BoundingRectangle",
	"DegenerateGeometry",
	"Label",
	"MalformedDocument",
	"Segment",
	"StyleRewrite",
	"SvgCropError",
	"VIEWBOX_MARGIN",
	"accumulate_bounds",
	"apply_style_rewrites",
	"compute_viewbox",
	"iter_primitives",
	"tighten_viewbox",
]
