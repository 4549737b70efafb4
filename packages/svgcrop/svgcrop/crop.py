"""Tighten the viewBox of a rendered molecule SVG around its geometry."""

# local repo modules
from .bounds import accumulate_bounds
from .constants import VIEWBOX_MARGIN
from .errors import DegenerateGeometry
from .svg_parse import iter_primitives
from .viewport import find_viewbox
from .viewport import replace_viewbox
from .viewport import viewbox_for_bounds


#============================================
def compute_viewbox(svg_text: str, margin: float = VIEWBOX_MARGIN) -> tuple[float, float, float, float]:
	"""Return the tightened (min_x, min_y, width, height) for one document.

	Raises:
		MalformedDocument: no viewBox declaration or unparseable markup.
		DegenerateGeometry: no line or text primitive contributed.
	"""
	# the declaration must exist before any geometry is considered
	find_viewbox(svg_text)
	rect = accumulate_bounds(iter_primitives(svg_text))
	return viewbox_for_bounds(rect, margin)


#============================================
def tighten_viewbox(svg_text: str, margin: float = VIEWBOX_MARGIN, strict: bool = False) -> str:
	"""Return the document with its viewBox fitted to lines and labels.

	Args:
		svg_text: rendered SVG markup, style rewrites already applied.
		margin: padding added on every side of the bounds.
		strict: re-raise DegenerateGeometry instead of returning the
			document unchanged.

	Returns:
		A new document string; the input is never modified.
	"""
	try:
		box = compute_viewbox(svg_text, margin)
	except DegenerateGeometry:
		if strict:
			raise
		return svg_text
	return replace_viewbox(svg_text, box)
