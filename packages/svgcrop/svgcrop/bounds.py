"""Axis-aligned bounding rectangle accumulation over primitives."""

# Standard Library
import math


#============================================
class BoundingRectangle:
	"""Mutable min/max accumulator that only ever grows.

	A fresh rectangle is in sentinel form (min = +inf, max = -inf) so the
	first contributed point always wins. Each accepted point updates all
	four bounds together, so the rectangle is either entirely finite or
	still in sentinel form.
	"""

	def __init__(self):
		self.min_x = math.inf
		self.min_y = math.inf
		self.max_x = -math.inf
		self.max_y = -math.inf

	def __repr__(self):
		return (
			f"BoundingRectangle(min_x={self.min_x}, min_y={self.min_y}, "
			f"max_x={self.max_x}, max_y={self.max_y})"
		)

	def __eq__(self, other):
		if not isinstance(other, BoundingRectangle):
			return NotImplemented
		return self.as_tuple() == other.as_tuple()

	#============================================
	@classmethod
	def from_box(cls, box: tuple[float, float, float, float]) -> "BoundingRectangle":
		"""Return a rectangle covering the two corners of one box."""
		rect = cls()
		rect.add_point(box[0], box[1])
		rect.add_point(box[2], box[3])
		return rect

	#============================================
	def add_point(self, x: float, y: float) -> bool:
		"""Widen the bounds to include one point; NaN points are skipped."""
		if math.isnan(x) or math.isnan(y):
			return False
		self.min_x = min(self.min_x, x)
		self.max_x = max(self.max_x, x)
		self.min_y = min(self.min_y, y)
		self.max_y = max(self.max_y, y)
		return True

	#============================================
	def add_primitive(self, primitive) -> bool:
		"""Widen the bounds by one Segment or Label.

		Primitives with any non-finite coordinate contribute nothing.
		"""
		if not primitive.is_finite():
			return False
		for x, y in primitive.points():
			self.add_point(x, y)
		return True

	#============================================
	def merge(self, other: "BoundingRectangle") -> "BoundingRectangle":
		"""Widen the bounds by another rectangle, component-wise."""
		self.min_x = min(self.min_x, other.min_x)
		self.min_y = min(self.min_y, other.min_y)
		self.max_x = max(self.max_x, other.max_x)
		self.max_y = max(self.max_y, other.max_y)
		return self

	#============================================
	def is_empty(self) -> bool:
		"""Return True while no point has contributed."""
		return self.min_x > self.max_x or self.min_y > self.max_y

	def contains(self, other: "BoundingRectangle") -> bool:
		return (
			self.min_x <= other.min_x
			and self.min_y <= other.min_y
			and self.max_x >= other.max_x
			and self.max_y >= other.max_y
		)

	#============================================
	def padded(self, margin: float) -> "BoundingRectangle":
		"""Return a new rectangle grown by margin on all four sides."""
		rect = BoundingRectangle()
		rect.min_x = self.min_x - margin
		rect.min_y = self.min_y - margin
		rect.max_x = self.max_x + margin
		rect.max_y = self.max_y + margin
		return rect

	@property
	def width(self) -> float:
		return self.max_x - self.min_x

	@property
	def height(self) -> float:
		return self.max_y - self.min_y

	def as_tuple(self) -> tuple[float, float, float, float]:
		return (self.min_x, self.min_y, self.max_x, self.max_y)


#============================================
def accumulate_bounds(primitives) -> BoundingRectangle:
	"""Fold any iterable of primitives into one bounding rectangle."""
	rect = BoundingRectangle()
	for primitive in primitives:
		rect.add_primitive(primitive)
	return rect
