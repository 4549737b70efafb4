"""Typed drawable primitives extracted from a rendered SVG."""

# Standard Library
import dataclasses
import math

# local repo modules
from .constants import GLYPH_WIDTH_FACTOR
from .constants import LABEL_DESCENT_FACTOR


#============================================
@dataclasses.dataclass(frozen=True)
class Segment:
	"""Stroked line, usually one bond stroke."""
	x1: float
	y1: float
	x2: float
	y2: float
	kind = "segment"

	def points(self) -> tuple[tuple[float, float], ...]:
		"""Return both endpoints as independent point contributions."""
		return ((self.x1, self.y1), (self.x2, self.y2))

	def is_finite(self) -> bool:
		return all(math.isfinite(value) for value in (self.x1, self.y1, self.x2, self.y2))


#============================================
@dataclasses.dataclass(frozen=True)
class Label:
	"""Anchored text run with its own rendered font size."""
	x: float
	y: float
	font_size: float
	text: str
	kind = "label"

	def half_width(self) -> float:
		"""Return the approximate half advance width of the glyph run."""
		return (len(self.text) * self.font_size * GLYPH_WIDTH_FACTOR) / 2.0

	def extent_box(self) -> tuple[float, float, float, float]:
		"""Return (x1, y1, x2, y2) of the synthetic glyph rectangle.

		The box extends one font size above the anchor and half a font
		size below it, centered horizontally on the anchor.
		"""
		half_width = self.half_width()
		return (
			self.x - half_width,
			self.y - self.font_size,
			self.x + half_width,
			self.y + self.font_size * LABEL_DESCENT_FACTOR,
		)

	def points(self) -> tuple[tuple[float, float], ...]:
		"""Return the two opposite corners of the glyph rectangle."""
		x1, y1, x2, y2 = self.extent_box()
		return ((x1, y1), (x2, y2))

	def is_finite(self) -> bool:
		return all(math.isfinite(value) for value in (self.x, self.y, self.font_size))
