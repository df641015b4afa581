"""
Axis-agnostic geometry for the wrap panel.

Everything in here is expressed in flow-axis (U) and cross-axis (V) terms
rather than width and height, so one packing algorithm serves both
orientations. The orientation is applied exactly twice: when a width/height
pair enters U/V space (UvMeasure.from_size) and when a finished rectangle
leaves it (UvRect.to_rect / UvMeasure.to_size).

Horizontal flow:	U = width,  V = height
Vertical flow:		U = height, V = width
"""

from __future__ import annotations

from typing import Iterator

from .constants import Orientation, VerticalAlignment, HorizontalAlignment

# Cross-axis alignment fractions; start alignment leaves the rect unchanged
CENTER = 0.5
END = 1.0

_ALIGN_FRACTIONS = {
	'center': CENTER,
	'end': END,
}


class UnsupportedOrientationError(ValueError):
	"""Raised when a value outside Orientation is used to leave U/V space."""

	def __init__(self, orientation):
		super().__init__(f"Unsupported orientation: {orientation!r}")
		self.orientation = orientation


def check_orientation(orientation):
	# Members only; 1, 1.0 and True compare equal to VERTICAL
	if not isinstance(orientation, Orientation):
		raise UnsupportedOrientationError(orientation)
	return orientation


def expand_padding(value) -> tuple:
	"""Expand one value, (horizontal, vertical) or (left, top, right, bottom) to four values."""
	if not isinstance(value, (list, tuple)):
		return (value,) * 4
	if len(value) == 1:
		return (value[0],) * 4
	if len(value) == 2:
		return (value[0], value[1]) * 2
	if len(value) == 4:
		return tuple(value)
	raise ValueError(f"padding needs 1, 2 or 4 values, got {len(value)}: {value!r}")


# -------

class Rect(tuple):
	"""Screen-space rectangle (x, y, width, height)."""

	__slots__ = ()

	def __new__(cls, x=0, y=0, width=0, height=0):
		return tuple.__new__(cls, (x, y, width, height))

	@property
	def x(self):
		return self[0]

	@property
	def y(self):
		return self[1]

	@property
	def width(self):
		return self[2]

	@property
	def height(self):
		return self[3]

	@property
	def right(self):
		return self[0] + self[2]

	@property
	def bottom(self):
		return self[1] + self[3]

	def __repr__(self):
		return f"Rect(x={self[0]}, y={self[1]}, width={self[2]}, height={self[3]})"


class UvMeasure(tuple):
	"""A (u, v) pair: extent along the flow axis and along the cross axis.

	Immutable and hashable; two measures are equal when their values are.
	"""

	__slots__ = ()
	ZERO: UvMeasure

	def __new__(cls, u=0, v=0):
		return tuple.__new__(cls, (u, v))

	@classmethod
	def from_size(cls, orientation, width, height) -> UvMeasure:
		"""Map a width/height pair into U/V space for the given orientation.

		Horizontal flow puts the width on U; any other orientation puts the
		height there. Values are not validated.
		"""
		if orientation == Orientation.HORIZONTAL:
			return cls(width, height)
		return cls(height, width)

	@property
	def u(self):
		return self[0]

	@property
	def v(self):
		return self[1]

	def add(self, u=0, v=0) -> UvMeasure:
		"""Return a new measure offset by (u, v). The receiver is unchanged."""
		return UvMeasure(self[0] + u, self[1] + v)

	def to_size(self, orientation) -> tuple:
		"""Map back to a (width, height) pair."""
		check_orientation(orientation)
		if orientation == Orientation.HORIZONTAL:
			return (self[0], self[1])
		return (self[1], self[0])

	def __repr__(self):
		return f"UvMeasure(u={self[0]}, v={self[1]})"

UvMeasure.ZERO = UvMeasure(0, 0)


class UvRect(tuple):
	"""A child's placement in U/V space: a position and a size measure."""

	__slots__ = ()

	def __new__(cls, position=UvMeasure.ZERO, size=UvMeasure.ZERO):
		return tuple.__new__(cls, (UvMeasure(*position), UvMeasure(*size)))

	@classmethod
	def from_rect(cls, orientation, rect) -> UvRect:
		"""Inverse of to_rect()."""
		x, y, width, height = rect
		check_orientation(orientation)
		return cls(UvMeasure.from_size(orientation, x, y),
				   UvMeasure.from_size(orientation, width, height))

	@property
	def position(self) -> UvMeasure:
		return self[0]

	@property
	def size(self) -> UvMeasure:
		return self[1]

	def translate(self, u=0, v=0) -> UvRect:
		return UvRect(self[0].add(u, v), self[1])

	def _with_cross_alignment(self, mode, max_extent) -> UvRect:
		# Shared by both alignment enumerations; mode is the alignment's value
		if mode == 'stretch':
			return UvRect(self[0], UvMeasure(self[1].u, max_extent))
		fraction = _ALIGN_FRACTIONS.get(mode)
		if fraction is None:
			return self
		offset = max((max_extent - self[1].v) * fraction, 0.0)
		return UvRect(self[0].add(0, offset), self[1])

	def with_vertical_alignment(self, alignment, max_height) -> UvRect:
		"""Align on the cross axis of a horizontal panel.

		TOP is the identity, CENTER and BOTTOM offset the cross position
		(never below zero), STRETCH sets the cross size to max_height.
		Anything that is not a VerticalAlignment is treated as TOP.
		"""
		mode = alignment.value if isinstance(alignment, VerticalAlignment) else None
		return self._with_cross_alignment(mode, max_height)

	def with_horizontal_alignment(self, alignment, max_height) -> UvRect:
		"""Align on the cross axis of a vertical panel (LEFT/CENTER/RIGHT/STRETCH)."""
		mode = alignment.value if isinstance(alignment, HorizontalAlignment) else None
		return self._with_cross_alignment(mode, max_height)

	def to_rect(self, orientation) -> Rect:
		"""Convert to a screen rectangle; must use the orientation the rect was built with."""
		position, size = self
		if check_orientation(orientation) == Orientation.HORIZONTAL:
			return Rect(position.u, position.v, size.u, size.v)
		return Rect(position.v, position.u, size.v, size.u)

	def __repr__(self):
		return f"UvRect(position={self[0]!r}, size={self[1]!r})"


class Row:
	"""One line of children, tracking its own bounding measure as they are added."""

	def __init__(self):
		self._children_rects: list[UvRect] = []
		self._size = UvMeasure.ZERO

	@property
	def children_rects(self) -> tuple[UvRect, ...]:
		return tuple(self._children_rects)

	@property
	def size(self) -> UvMeasure:
		"""Bounding size: u is the furthest flow extent reached, v the tallest child."""
		return self._size

	def add(self, position, size) -> None:
		position, size = UvMeasure(*position), UvMeasure(*size)
		self._children_rects.append(UvRect(position, size))
		self._size = UvMeasure(
			max(self._size.u, position.u + size.u),
			max(self._size.v, size.v))

	def __len__(self):
		return len(self._children_rects)

	def __iter__(self) -> Iterator[UvRect]:
		return iter(self._children_rects)

	def __repr__(self):
		return f"Row(children={len(self._children_rects)}, size={self._size!r})"
