"""Read, format and substitute the document viewBox declaration."""

# Standard Library
import math

# local repo modules
from .bounds import BoundingRectangle
from .constants import VIEWBOX_MARGIN
from .constants import VIEWBOX_PATTERN
from .errors import DegenerateGeometry
from .errors import MalformedDocument


#============================================
def find_viewbox(svg_text: str) -> tuple[float, float, float, float]:
	"""Return (min_x, min_y, width, height) of the first viewBox declaration."""
	match = VIEWBOX_PATTERN.search(svg_text)
	if match is None:
		raise MalformedDocument("SVG document has no viewBox declaration")
	raw_value = match.group(2)
	tokens = raw_value.replace(",", " ").split()
	if len(tokens) != 4:
		raise MalformedDocument(f"viewBox must have four numbers, got {raw_value!r}")
	try:
		values = tuple(float(token) for token in tokens)
	except ValueError as error:
		raise MalformedDocument(f"viewBox is not numeric: {raw_value!r}") from error
	if not all(math.isfinite(value) for value in values):
		raise MalformedDocument(f"viewBox is not finite: {raw_value!r}")
	return values


#============================================
def format_number(value: float) -> str:
	"""Return the shortest text that parses back to the same float.

	Integral values drop the fractional part, so 20.0 becomes "20".
	"""
	value = float(value)
	if value.is_integer() and abs(value) < 1e16:
		return str(int(value))
	return repr(value)


#============================================
def format_viewbox(box: tuple[float, float, float, float]) -> str:
	"""Return the space separated viewBox attribute value."""
	return " ".join(format_number(value) for value in box)


#============================================
def viewbox_for_bounds(
		rect: BoundingRectangle,
		margin: float = VIEWBOX_MARGIN) -> tuple[float, float, float, float]:
	"""Return the padded (min_x, min_y, width, height) for one rectangle."""
	if margin < 0:
		raise ValueError(f"margin must not be negative, got {margin}")
	if rect.is_empty():
		raise DegenerateGeometry("no line or text geometry contributed to the bounds")
	padded = rect.padded(margin)
	return (padded.min_x, padded.min_y, padded.width, padded.height)


#============================================
def replace_viewbox(svg_text: str, box: tuple[float, float, float, float]) -> str:
	"""Return a copy of the document with only the first viewBox replaced."""
	if VIEWBOX_PATTERN.search(svg_text) is None:
		raise MalformedDocument("SVG document has no viewBox declaration")
	new_value = format_viewbox(box)
	def substitute(match) -> str:
		quote = match.group(1)
		return f"viewBox={quote}{new_value}{quote}"
	return VIEWBOX_PATTERN.sub(substitute, svg_text, count=1)
