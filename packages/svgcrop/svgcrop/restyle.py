"""Attribute rewrites applied to renderer output before cropping."""

# Standard Library
import dataclasses
import re


#============================================
@dataclasses.dataclass(frozen=True)
class StyleRewrite:
	"""Replace every attribute="old" with attribute="new"."""
	attribute: str
	old: str
	new: str


#============================================
def rewrite_attribute_value(svg_text: str, attribute: str, old: str, new: str) -> str:
	"""Replace one exact attribute value everywhere in the document."""
	pattern = re.compile(
		r'(?<![\w:-])' + re.escape(attribute) + r'=(["\'])' + re.escape(str(old)) + r'\1'
	)
	return pattern.sub(lambda match: f"{attribute}={match.group(1)}{new}{match.group(1)}", svg_text)


#============================================
def _rewrite_mapping(svg_text: str, attribute: str, mapping: dict) -> str:
	# pairs run in order so 14->10 followed by 10->5 chains
	for old, new in mapping.items():
		svg_text = rewrite_attribute_value(svg_text, attribute, str(old), str(new))
	return svg_text


#============================================
def rewrite_font_sizes(svg_text: str, mapping: dict) -> str:
	"""Apply font-size old to new rewrites in mapping order."""
	for new in mapping.values():
		if float(new) <= 0.0:
			raise ValueError(f"font-size must be positive, got {new!r}")
	return _rewrite_mapping(svg_text, "font-size", mapping)


#============================================
def rewrite_stroke_widths(svg_text: str, mapping: dict) -> str:
	"""Apply stroke-width old to new rewrites in mapping order."""
	return _rewrite_mapping(svg_text, "stroke-width", mapping)


#============================================
def apply_style_rewrites(svg_text: str, rewrites) -> str:
	"""Apply an ordered sequence of StyleRewrite entries."""
	for rewrite in rewrites:
		if rewrite.attribute == "font-size":
			svg_text = rewrite_font_sizes(svg_text, {rewrite.old: rewrite.new})
		else:
			svg_text = rewrite_attribute_value(svg_text, rewrite.attribute, rewrite.old, rewrite.new)
	return svg_text
