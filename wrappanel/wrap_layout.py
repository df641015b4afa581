"""
Wrap layout driver.

compute_wrap_layout() packs an ordered list of children into rows (or columns
for a vertical panel), wrapping whenever the next child would overflow the
available flow extent, then aligns every child on the cross axis of its row
and converts the result to screen rectangles.

The Layout classes at the bottom plug the same algorithm into the
query/distribute/position protocol used for layout trees:

	panel = LayoutWrap.horizontal(horizontal_spacing=4, children=(
		LayoutBox(40, 20), LayoutBox(60, 30, vertical_alignment=VerticalAlignment.CENTER),
	))
	panel.layout(0, 0, 100, 200)
	panel.children[1].get_computed_rect()
"""

from __future__ import annotations

import logging, math
from typing import Iterable, Optional

from .constants import Orientation, VerticalAlignment, HorizontalAlignment, StretchChild
from .uv_layout import Rect, Row, UvMeasure, UvRect, check_orientation, expand_padding

logger = logging.getLogger(__name__)


# -------
# Driver
# -------

class WrapItem(tuple):
	"""Everything the driver needs to know about one child.

	A plain (width, height) pair can be used wherever a WrapItem is expected;
	it stretches on the cross axis and is visible.
	"""

	__slots__ = ()

	def __new__(cls, width, height,
				horizontal_alignment=HorizontalAlignment.STRETCH,
				vertical_alignment=VerticalAlignment.STRETCH,
				visible=True):
		return tuple.__new__(cls, (width, height, horizontal_alignment, vertical_alignment, bool(visible)))

	@classmethod
	def coerce(cls, value) -> WrapItem:
		if isinstance(value, WrapItem):
			return value
		if isinstance(value, (list, tuple)) and len(value) == 2:
			return cls(value[0], value[1])
		raise TypeError(f"Expected a WrapItem or a (width, height) pair, got {type(value).__name__}: {value!r}")

	@property
	def width(self):
		return self[0]

	@property
	def height(self):
		return self[1]

	@property
	def horizontal_alignment(self):
		return self[2]

	@property
	def vertical_alignment(self):
		return self[3]

	@property
	def visible(self):
		return self[4]

	def measure(self, orientation) -> UvMeasure:
		return UvMeasure.from_size(orientation, self[0], self[1])

	def __repr__(self):
		return (f"WrapItem({self[0]}, {self[1]}, horizontal_alignment={self[2]}, "
				f"vertical_alignment={self[3]}, visible={self[4]})")


class WrapLayoutResult:
	"""Output of one layout pass.

	rects holds one entry per input child, in input order; hidden children
	get None. desired_size is the panel's own (width, height), padding included.
	"""

	def __init__(self, orientation, rows, rects, desired_size, row_offsets):
		self.orientation = orientation
		self.rows: tuple[Row, ...] = tuple(rows)
		self.rects: tuple[Optional[Rect], ...] = tuple(rects)
		self.desired_size: tuple = desired_size
		self.row_offsets: tuple = tuple(row_offsets)

	def __repr__(self):
		return (f"WrapLayoutResult(orientation={self.orientation.name}, rows={len(self.rows)}, "
				f"desired_size={self.desired_size})")


def compute_wrap_layout(children: Iterable, *,
						orientation=Orientation.HORIZONTAL,
						max_width=math.inf, max_height=math.inf,
						horizontal_spacing=0, vertical_spacing=0,
						padding=0,
						stretch_child=StretchChild.NONE) -> WrapLayoutResult:
	"""Arrange children into wrapped rows and return their rectangles.

	Args:
		children: WrapItem instances or (width, height) pairs, in visual order
		orientation: Orientation.HORIZONTAL fills rows left to right and wraps
			downwards; Orientation.VERTICAL fills columns and wraps to the right
		max_width, max_height: Available size; the one on the flow axis is the
			wrap constraint. Either may be math.inf.
		horizontal_spacing, vertical_spacing: Gaps between neighbours and
			between rows, given in screen terms
		padding: One value, (horizontal, vertical) or (left, top, right, bottom)
		stretch_child: StretchChild.LAST lets the last visible child fill the
			rest of its row when the flow axis is constrained

	The first child of a row is always placed, even when it alone exceeds the
	constraint, so nothing is ever dropped.

	Raises UnsupportedOrientationError for anything but an Orientation member
	and ValueError for a padding of the wrong length.
	"""
	check_orientation(orientation)
	items = [WrapItem.coerce(child) for child in children]
	left, top, right, bottom = expand_padding(padding)
	padding_start = UvMeasure.from_size(orientation, left, top)
	padding_end = UvMeasure.from_size(orientation, right, bottom)
	spacing = UvMeasure.from_size(orientation, horizontal_spacing, vertical_spacing)
	available = UvMeasure.from_size(orientation, max_width, max_height)

	rows, placements = _pack_rows(items, orientation, available.u, spacing.u,
								  padding_start.u, padding_end.u, stretch_child)

	# Each row starts where the previous one ended, plus the row spacing
	row_offsets = []
	offset = padding_start.v
	for row in rows:
		row_offsets.append(offset)
		offset += row.size.v + spacing.v

	row_rects = [row.children_rects for row in rows]
	rects: list[Optional[Rect]] = []
	for item, placement in zip(items, placements):
		if placement is None:
			rects.append(None)
			continue
		row_index, rect_index = placement
		rect = _align_child(item, row_rects[row_index][rect_index], orientation, rows[row_index].size.v)
		rects.append(rect.translate(0, row_offsets[row_index]).to_rect(orientation))

	desired = _desired_measure(rows, spacing.v, padding_start, padding_end)
	desired_size = desired.to_size(orientation)
	logger.debug("Wrapped %d children into %d rows, desired size %s", len(items), len(rows), desired_size)
	return WrapLayoutResult(orientation, rows, rects, desired_size, row_offsets)


def _pack_rows(items, orientation, max_u, spacing_u, start_u, end_u, stretch_child):
	"""Greedy first-fit packing; returns the rows and a (row, index) per item."""
	rows: list[Row] = []
	placements = []
	current = Row()
	cursor = start_u

	last_visible = None
	if stretch_child == StretchChild.LAST:
		last_visible = max((i for i, item in enumerate(items) if item.visible), default=None)

	for index, item in enumerate(items):
		if not item.visible:
			placements.append(None)
			continue

		measure = item.measure(orientation)
		if current and cursor + measure.u + end_u > max_u:
			rows.append(current)
			logger.debug("Child %d (u=%s) does not fit at %s of %s, starting row %d",
						 index, measure.u, cursor, max_u, len(rows) + 1)
			current = Row()
			cursor = start_u

		if index == last_visible and math.isfinite(max_u):
			measure = UvMeasure(max(measure.u, max_u - end_u - cursor), measure.v)

		current.add(UvMeasure(cursor, 0), measure)
		placements.append((len(rows), len(current) - 1))
		cursor += measure.u + spacing_u

	if current:
		rows.append(current)
	return rows, placements


def _align_child(item, rect, orientation, row_extent) -> UvRect:
	# The cross axis is vertical for rows and horizontal for columns
	if orientation == Orientation.HORIZONTAL:
		return rect.with_vertical_alignment(item.vertical_alignment, row_extent)
	return rect.with_horizontal_alignment(item.horizontal_alignment, row_extent)


def _desired_measure(rows, spacing_v, padding_start, padding_end) -> UvMeasure:
	if not rows:
		return padding_start.add(padding_end.u, padding_end.v)
	flow = max(row.size.u for row in rows) + padding_end.u
	cross = (padding_start.v + sum(row.size.v for row in rows)
			 + spacing_v * (len(rows) - 1) + padding_end.v)
	return UvMeasure(flow, cross)


# -------
# Layout tree
# -------

class Layout:
	"""Node of a layout tree.

	A container first asks each node for its natural size (query_*), then
	hands out the available space (distribute_*), and finally positions it.
	Sizes and positions are kept as [width, height] and [x, y] lists so they
	can be indexed by Orientation.
	"""

	# Read by the containing panel; leaves override them per instance
	horizontal_alignment = HorizontalAlignment.STRETCH
	vertical_alignment = VerticalAlignment.STRETCH
	visible = True

	def __init__(self):
		self._computed_size = [0, 0]
		self._computed_pos = [0, 0]

	def query_axis_request(self, axis: int) -> float:
		"""Natural extent along axis (0 for width, 1 for height)."""
		return 0

	def query_width_request(self) -> float:
		return self.query_axis_request(Orientation.HORIZONTAL)

	def query_height_request(self) -> float:
		return self.query_axis_request(Orientation.VERTICAL)

	def query_space_request(self) -> tuple:
		return (self.query_width_request(), self.query_height_request())

	def distribute_width(self, available_width: float) -> float:
		# Leaves keep their natural size whatever is available
		self._computed_size[0] = self.query_width_request()
		return self._computed_size[0]

	def distribute_height(self, available_height: float) -> float:
		self._computed_size[1] = self.query_height_request()
		return self._computed_size[1]

	def get_computed_size(self, axis=None):
		if axis is None:
			return tuple(self._computed_size)
		return self._computed_size[axis]

	def get_computed_position(self, axis=None):
		if axis is None:
			return tuple(self._computed_pos)
		return self._computed_pos[axis]

	def get_computed_rect(self) -> Rect:
		return Rect(*self._computed_pos, *self._computed_size)

	def position_at(self, x, y, data=None) -> None:
		"""Move the node's top-left corner; containers also move their children.

		data is passed through untouched to every child.
		"""
		self._computed_pos[0] = x
		self._computed_pos[1] = y

	def place(self, x, y, width, height, data=None) -> None:
		"""Give this node its final rectangle, as decided by its container."""
		self._computed_size[0] = width
		self._computed_size[1] = height
		self.position_at(x, y, data)

	def layout(self, x, y, width, height, data=None) -> tuple:
		"""Distribute width then height, position at (x, y) and return the computed size."""
		self.distribute_width(width)
		self.distribute_height(height)
		self.position_at(x, y, data)
		# Wrapping containers may revise their width once the height is known
		return self.get_computed_size()


class LayoutBox(Layout):
	"""Leaf with a fixed natural size."""

	def __init__(self, width=0, height=0, *,
				 horizontal_alignment=HorizontalAlignment.STRETCH,
				 vertical_alignment=VerticalAlignment.STRETCH,
				 visible=True):
		super().__init__()
		self.width = width
		self.height = height
		self.horizontal_alignment = horizontal_alignment
		self.vertical_alignment = vertical_alignment
		self.visible = visible

	def query_axis_request(self, axis: int) -> float:
		return (self.width, self.height)[axis]

	def __repr__(self):
		return f"LayoutBox({self.width}, {self.height})"


class LayoutWrap(Layout):
	"""Container that wraps its children into rows or columns.

	Its request is the unconstrained (single line) size. distribute_width and
	distribute_height record the available size and take the wrapped size;
	position_at places every visible child at its aligned rectangle.
	"""

	def __init__(self, *, orientation=Orientation.HORIZONTAL, horizontal_spacing=0, vertical_spacing=0,
				 padding=0, stretch_child=StretchChild.NONE, children=()):
		super().__init__()
		self.children = tuple(children)
		self.orientation = check_orientation(orientation)
		self.horizontal_spacing = horizontal_spacing
		self.vertical_spacing = vertical_spacing
		self.padding = expand_padding(padding)
		self.stretch_child = stretch_child
		self._available = [math.inf, math.inf]
		self._result: Optional[WrapLayoutResult] = None

	@classmethod
	def horizontal(cls, **kwargs):
		return cls(orientation=Orientation.HORIZONTAL, **kwargs)

	@classmethod
	def vertical(cls, **kwargs):
		return cls(orientation=Orientation.VERTICAL, **kwargs)

	def _wrap_items(self):
		return [WrapItem(*child.query_space_request(),
						 horizontal_alignment=child.horizontal_alignment,
						 vertical_alignment=child.vertical_alignment,
						 visible=child.visible)
				for child in self.children]

	def compute(self, max_width=math.inf, max_height=math.inf) -> WrapLayoutResult:
		"""Run the driver over the current children and settings."""
		return compute_wrap_layout(
			self._wrap_items(),
			orientation=self.orientation,
			max_width=max_width, max_height=max_height,
			horizontal_spacing=self.horizontal_spacing,
			vertical_spacing=self.vertical_spacing,
			padding=self.padding,
			stretch_child=self.stretch_child)

	def get_layout_result(self) -> Optional[WrapLayoutResult]:
		"""The result of the last distribution or placement, if any."""
		return self._result

	def query_axis_request(self, axis: int) -> float:
		return self.compute().desired_size[axis]

	def distribute_width(self, available_width: float) -> float:
		# Columns only know their width once the height is known,
		# so distribute_height recomputes both axes.
		self._available[0] = available_width
		self._result = self.compute(*self._available)
		self._computed_size[0] = self._result.desired_size[0]
		return self._computed_size[0]

	def distribute_height(self, available_height: float) -> float:
		self._available[1] = available_height
		self._result = self.compute(*self._available)
		self._computed_size[0], self._computed_size[1] = self._result.desired_size
		return self._computed_size[1]

	def place(self, x, y, width, height, data=None) -> None:
		self._available = [width, height]
		self._result = self.compute(width, height)
		super().place(x, y, width, height, data)

	def position_at(self, x, y, data=None) -> None:
		"""Position this container and every visible child."""
		super().position_at(x, y, data)
		if self._result is None:
			self._result = self.compute(*self._available)

		for child, rect in zip(self.children, self._result.rects):
			if rect is None:
				continue
			child.place(x + rect.x, y + rect.y, rect.width, rect.height, data)
