"""Errors raised while tightening an SVG viewBox."""


class SvgCropError(Exception):
	"""Base class for viewBox tightening failures."""


class MalformedDocument(SvgCropError):
	"""Raised when the document has no usable viewBox declaration."""


class DegenerateGeometry(SvgCropError):
	"""Raised when no primitive contributed to the bounding rectangle."""
