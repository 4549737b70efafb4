"""Extract drawable primitives from rendered SVG markup."""

# Standard Library
import math

# Third Party
import defusedxml
import defusedxml.ElementTree as ET

# local repo modules
from .constants import LABEL_TAG
from .constants import SEGMENT_TAG
from .errors import MalformedDocument
from .primitives import Label
from .primitives import Segment


#============================================
def local_tag_name(tag: str) -> str:
	"""Return local XML tag name without namespace prefix."""
	if "}" in tag:
		return tag.rsplit("}", 1)[-1]
	return tag


#============================================
def parse_float(raw_value: str | None) -> float:
	"""Parse one SVG numeric attribute, NaN when missing or not numeric."""
	if raw_value is None:
		return math.nan
	try:
		return float(str(raw_value).strip())
	except ValueError:
		return math.nan


#============================================
def element_text(node) -> str:
	"""Return all text inside one element, nested tspans included."""
	return "".join(str(part) for part in node.itertext())


#============================================
def parse_svg_root(svg_text: str):
	"""Parse SVG text into an element tree root."""
	try:
		return ET.fromstring(svg_text)
	except ET.ParseError as error:
		raise MalformedDocument(f"SVG document is not well-formed: {error}") from error
	except defusedxml.DefusedXmlException as error:
		raise MalformedDocument(f"SVG document uses forbidden XML constructs: {error!r}") from error


#============================================
def iter_segments(svg_root):
	"""Yield one Segment per line element with four finite coordinates."""
	for node in svg_root.iter():
		if local_tag_name(str(node.tag)) != SEGMENT_TAG:
			continue
		segment = Segment(
			x1=parse_float(node.get("x1")),
			y1=parse_float(node.get("y1")),
			x2=parse_float(node.get("x2")),
			y2=parse_float(node.get("y2")),
		)
		if not segment.is_finite():
			continue
		yield segment


#============================================
def iter_labels(svg_root):
	"""Yield one Label per text element with anchor, font size and content.

	The font size is read from each element, never assumed, because
	earlier style rewrites may have resized some label classes only.
	"""
	for node in svg_root.iter():
		if local_tag_name(str(node.tag)) != LABEL_TAG:
			continue
		# raw length, surrounding whitespace included
		text_value = element_text(node)
		if not text_value:
			continue
		label = Label(
			x=parse_float(node.get("x")),
			y=parse_float(node.get("y")),
			font_size=parse_float(node.get("font-size")),
			text=text_value,
		)
		if not label.is_finite():
			continue
		yield label


#============================================
def iter_primitives(svg_text: str):
	"""Yield every Segment and then every Label found in one SVG document."""
	svg_root = parse_svg_root(svg_text)
	yield from iter_segments(svg_root)
	yield from iter_labels(svg_root)
