"""Unit tests for the wrap layout driver and the LayoutWrap container."""

import math, os, sys, unittest

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from wrappanel.constants import Orientation, VerticalAlignment, HorizontalAlignment, StretchChild
from wrappanel.uv_layout import Rect, UvMeasure, UnsupportedOrientationError
from wrappanel.wrap_layout import (WrapItem, WrapLayoutResult, compute_wrap_layout,
								   LayoutBox, LayoutWrap)


class TestWrapPacking(unittest.TestCase):
	"""Test how children are packed into rows."""

	def test_three_children_two_rows(self):
		"""Horizontal, max 100, three 40x20 children, no spacing."""
		result = compute_wrap_layout([(40, 20)] * 3, max_width=100)

		self.assertIsInstance(result, WrapLayoutResult)
		self.assertEqual(len(result.rows), 2)
		self.assertEqual(len(result.rows[0]), 2)
		self.assertEqual(len(result.rows[1]), 1)
		self.assertEqual(result.rows[0].size, UvMeasure(80, 20))
		self.assertEqual(result.rows[1].size, UvMeasure(40, 20))
		self.assertEqual(result.desired_size, (80, 40))
		self.assertEqual(result.rects, (
			Rect(0, 0, 40, 20),
			Rect(40, 0, 40, 20),
			Rect(0, 20, 40, 20),
		))

	def test_oversized_single_child(self):
		"""A child wider than the constraint is placed alone, not dropped."""
		result = compute_wrap_layout([(100, 30)], max_width=50)
		self.assertEqual(len(result.rows), 1)
		self.assertEqual(result.rows[0].size.u, 100)
		self.assertEqual(result.rects, (Rect(0, 0, 100, 30),))
		self.assertEqual(result.desired_size, (100, 30))

	def test_oversized_child_between_others(self):
		result = compute_wrap_layout([(30, 10), (100, 10), (30, 10)], max_width=50)
		self.assertEqual([len(row) for row in result.rows], [1, 1, 1])
		self.assertEqual([rect.y for rect in result.rects], [0, 10, 20])
		self.assertEqual(result.desired_size, (100, 30))

	def test_exact_fit_does_not_wrap(self):
		result = compute_wrap_layout([(50, 10), (50, 10)], max_width=100)
		self.assertEqual(len(result.rows), 1)

	def test_no_children(self):
		result = compute_wrap_layout([], max_width=100)
		self.assertEqual(result.rows, ())
		self.assertEqual(result.rects, ())
		self.assertEqual(result.desired_size, (0, 0))

	def test_no_children_with_padding(self):
		result = compute_wrap_layout([], padding=(1, 2, 3, 4))
		self.assertEqual(result.desired_size, (4, 6))

	def test_unconstrained_is_single_row(self):
		result = compute_wrap_layout([(40, 20)] * 10)
		self.assertEqual(len(result.rows), 1)
		self.assertEqual(result.desired_size, (400, 20))

	def test_determinism(self):
		children = [(13, 7), WrapItem(22.5, 9, vertical_alignment=VerticalAlignment.CENTER),
					(41, 3), (8, 16), WrapItem(30, 4, vertical_alignment=VerticalAlignment.BOTTOM)]
		kwargs = dict(max_width=60, horizontal_spacing=2.5, vertical_spacing=1, padding=(3, 1))
		first = compute_wrap_layout(children, **kwargs)
		for _ in range(5):
			again = compute_wrap_layout(children, **kwargs)
			self.assertEqual(again.rects, first.rects)
			self.assertEqual(again.desired_size, first.desired_size)
			self.assertEqual([row.size for row in again.rows], [row.size for row in first.rows])

	def test_rows_never_overflow(self):
		"""Rows stay within the constraint unless their first child alone is larger."""
		sizes = [(17, 5), (64, 9), (3, 3), (120, 4), (45, 11), (45, 2), (8, 8), (99, 1), (1, 1)]
		for max_width in (10, 50, 100, 150):
			with self.subTest(max_width=max_width):
				result = compute_wrap_layout(sizes, max_width=max_width)
				for row in result.rows:
					first = row.children_rects[0]
					self.assertLessEqual(row.size.u, max(max_width, first.size.u))

	def test_row_bounding_sizes(self):
		sizes = [(17, 5), (64, 9), (3, 3), (45, 11), (45, 2), (8, 8)]
		result = compute_wrap_layout(sizes, max_width=70)
		for row in result.rows:
			rects = row.children_rects
			self.assertEqual(row.size.u, max(r.position.u + r.size.u for r in rects))
			self.assertEqual(row.size.v, max(r.size.v for r in rects))

	def test_every_visible_child_is_placed_once(self):
		sizes = [(17, 5), (64, 9), (3, 3), (120, 4), (45, 11)]
		result = compute_wrap_layout(sizes, max_width=60)
		self.assertEqual(sum(len(row) for row in result.rows), len(sizes))
		self.assertTrue(all(rect is not None for rect in result.rects))

	def test_negative_sizes_do_not_fail(self):
		children = [(-10, 5), (20, -5), (0, 0)]
		first = compute_wrap_layout(children, max_width=15)
		second = compute_wrap_layout(children, max_width=15)
		self.assertEqual(len(first.rects), 3)
		self.assertEqual(first.rects, second.rects)


class TestWrapSpacingAndPadding(unittest.TestCase):
	"""Test spacing between children and rows, and padding inside the panel."""

	def test_spacing(self):
		result = compute_wrap_layout([(40, 20)] * 3, max_width=100,
									 horizontal_spacing=10, vertical_spacing=5)
		self.assertEqual(result.rects, (
			Rect(0, 0, 40, 20),
			Rect(50, 0, 40, 20),
			Rect(0, 25, 40, 20),
		))
		self.assertEqual(result.row_offsets, (0, 25))
		self.assertEqual(result.desired_size, (90, 45))

	def test_padding(self):
		result = compute_wrap_layout([(40, 20)] * 3, max_width=100, padding=10)
		self.assertEqual(result.rects, (
			Rect(10, 10, 40, 20),
			Rect(50, 10, 40, 20),
			Rect(10, 30, 40, 20),
		))
		self.assertEqual(result.desired_size, (100, 60))

	def test_padding_counts_against_the_constraint(self):
		result = compute_wrap_layout([(40, 20)] * 2, max_width=90, padding=(5, 0, 6, 0))
		self.assertEqual(len(result.rows), 2)

	def test_two_value_padding(self):
		result = compute_wrap_layout([(10, 10)], padding=(3, 7))
		self.assertEqual(result.rects, (Rect(3, 7, 10, 10),))
		self.assertEqual(result.desired_size, (16, 24))

	def test_padding_of_wrong_length(self):
		for padding in ((1, 2, 3), (), [1, 2, 3, 4, 5]):
			with self.subTest(padding=padding):
				with self.assertRaises(ValueError):
					compute_wrap_layout([(1, 1)], padding=padding)


class TestWrapOrientation(unittest.TestCase):
	"""Test that vertical flow mirrors horizontal flow."""

	def test_vertical_columns(self):
		result = compute_wrap_layout([(20, 40)] * 3, orientation=Orientation.VERTICAL, max_height=100)
		self.assertEqual(result.rects, (
			Rect(0, 0, 20, 40),
			Rect(0, 40, 20, 40),
			Rect(20, 0, 20, 40),
		))
		self.assertEqual(result.desired_size, (40, 80))

	def test_vertical_ignores_max_width_for_wrapping(self):
		result = compute_wrap_layout([(20, 40)] * 3, orientation=Orientation.VERTICAL, max_width=10)
		self.assertEqual(len(result.rows), 1)

	def test_vertical_mirrors_horizontal(self):
		sizes = [(17, 5), (64, 9), (3, 3), (45, 11), (45, 2)]
		transposed = [(height, width) for width, height in sizes]
		horizontal = compute_wrap_layout(sizes, max_width=70, horizontal_spacing=2, vertical_spacing=3)
		vertical = compute_wrap_layout(transposed, orientation=Orientation.VERTICAL, max_height=70,
									   horizontal_spacing=3, vertical_spacing=2)
		for h_rect, v_rect in zip(horizontal.rects, vertical.rects):
			self.assertEqual((h_rect.x, h_rect.y, h_rect.width, h_rect.height),
							 (v_rect.y, v_rect.x, v_rect.height, v_rect.width))
		self.assertEqual(horizontal.desired_size, tuple(reversed(vertical.desired_size)))

	def test_invalid_orientation(self):
		with self.assertRaises(UnsupportedOrientationError):
			compute_wrap_layout([(10, 10)], orientation=7)
		with self.assertRaises(UnsupportedOrientationError):
			compute_wrap_layout([], orientation='sideways')

	def test_orientation_must_be_a_member(self):
		"""Values equal to a member, like 1, 1.0 or True, are still rejected."""
		for orientation in (0, 1, 1.0, True, False):
			with self.subTest(orientation=orientation):
				with self.assertRaises(UnsupportedOrientationError):
					compute_wrap_layout([(10, 10)], orientation=orientation)


class TestWrapAlignment(unittest.TestCase):
	"""Test cross-axis alignment of children inside their rows."""

	def test_alignment_within_row(self):
		children = [
			(40, 50),
			WrapItem(40, 20, vertical_alignment=VerticalAlignment.CENTER),
			WrapItem(40, 20, vertical_alignment=VerticalAlignment.BOTTOM),
			WrapItem(40, 20, vertical_alignment=VerticalAlignment.TOP),
			WrapItem(40, 20),
		]
		result = compute_wrap_layout(children)
		self.assertEqual(result.rects, (
			Rect(0, 0, 40, 50),
			Rect(40, 15, 40, 20),
			Rect(80, 30, 40, 20),
			Rect(120, 0, 40, 20),
			Rect(160, 0, 40, 50),	# stretch by default
		))

	def test_alignment_in_later_rows(self):
		children = [
			(60, 30),
			WrapItem(50, 10, vertical_alignment=VerticalAlignment.BOTTOM),
			WrapItem(40, 20, vertical_alignment=VerticalAlignment.CENTER),
		]
		result = compute_wrap_layout(children, max_width=100)
		self.assertEqual(result.rects[1], Rect(0, 40, 50, 10))
		self.assertEqual(result.rects[2], Rect(50, 30, 40, 20))

	def test_vertical_panel_uses_horizontal_alignment(self):
		children = [
			(20, 30),
			WrapItem(10, 30, horizontal_alignment=HorizontalAlignment.RIGHT),
			WrapItem(10, 30, horizontal_alignment=HorizontalAlignment.LEFT,
					 vertical_alignment=VerticalAlignment.BOTTOM),
		]
		result = compute_wrap_layout(children, orientation=Orientation.VERTICAL)
		self.assertEqual(result.rects, (
			Rect(0, 0, 20, 30),
			Rect(10, 30, 10, 30),
			Rect(0, 60, 10, 30),
		))


class TestWrapHiddenAndStretch(unittest.TestCase):
	"""Test hidden children and stretching of the last child."""

	def test_hidden_children_take_no_space(self):
		children = [(40, 20), WrapItem(500, 500, visible=False), (40, 20)]
		result = compute_wrap_layout(children, max_width=100, horizontal_spacing=10)
		self.assertIsNone(result.rects[1])
		self.assertEqual(result.rects[2], Rect(50, 0, 40, 20))
		self.assertEqual(result.desired_size, (90, 20))

	def test_only_hidden_children(self):
		result = compute_wrap_layout([WrapItem(10, 10, visible=False)], padding=2)
		self.assertEqual(result.rows, ())
		self.assertEqual(result.rects, (None,))
		self.assertEqual(result.desired_size, (4, 4))

	def test_stretch_last_fills_row(self):
		result = compute_wrap_layout([(40, 20), (40, 20), (30, 20)], max_width=100,
									 stretch_child=StretchChild.LAST)
		self.assertEqual(result.rects[2], Rect(0, 20, 100, 20))
		self.assertEqual(result.rects[0], Rect(0, 0, 40, 20))

	def test_stretch_last_respects_padding(self):
		result = compute_wrap_layout([(40, 20), (20, 20)], max_width=100, padding=5,
									 stretch_child=StretchChild.LAST)
		self.assertEqual(result.rects[1], Rect(45, 5, 50, 20))

	def test_stretch_last_skips_hidden_tail(self):
		children = [(40, 20), (20, 20), WrapItem(5, 5, visible=False)]
		result = compute_wrap_layout(children, max_width=100, stretch_child=StretchChild.LAST)
		self.assertEqual(result.rects[1], Rect(40, 0, 60, 20))

	def test_stretch_last_never_shrinks(self):
		result = compute_wrap_layout([(150, 20)], max_width=100, stretch_child=StretchChild.LAST)
		self.assertEqual(result.rects[0], Rect(0, 0, 150, 20))

	def test_stretch_last_needs_a_constraint(self):
		result = compute_wrap_layout([(40, 20), (30, 20)], stretch_child=StretchChild.LAST)
		self.assertEqual(result.rects[1], Rect(40, 0, 30, 20))


class TestWrapItem(unittest.TestCase):
	"""Test child descriptions."""

	def test_defaults(self):
		item = WrapItem(10, 20)
		self.assertEqual((item.width, item.height), (10, 20))
		self.assertEqual(item.horizontal_alignment, HorizontalAlignment.STRETCH)
		self.assertEqual(item.vertical_alignment, VerticalAlignment.STRETCH)
		self.assertTrue(item.visible)

	def test_coerce(self):
		item = WrapItem(1, 2)
		self.assertIs(WrapItem.coerce(item), item)
		self.assertEqual(WrapItem.coerce((3, 4)), WrapItem(3, 4))
		self.assertEqual(WrapItem.coerce([5, 6]), WrapItem(5, 6))
		for bad in ((1, 2, 3), "40x20", 12, None):
			with self.subTest(value=bad):
				with self.assertRaises(TypeError):
					WrapItem.coerce(bad)

	def test_measure(self):
		self.assertEqual(WrapItem(10, 20).measure(Orientation.VERTICAL), UvMeasure(20, 10))


class TestLayoutWrap(unittest.TestCase):
	"""Test the LayoutWrap container in a layout tree."""

	def test_layout_places_children(self):
		boxes = [LayoutBox(40, 20) for _ in range(3)]
		panel = LayoutWrap.horizontal(children=boxes)
		self.assertEqual(panel.layout(0, 0, 100, 200), (80, 40))
		self.assertEqual(panel.get_computed_rect(), Rect(0, 0, 80, 40))
		self.assertEqual([box.get_computed_rect() for box in boxes], [
			Rect(0, 0, 40, 20),
			Rect(40, 0, 40, 20),
			Rect(0, 20, 40, 20),
		])

	def test_layout_offsets_children(self):
		boxes = [LayoutBox(40, 20) for _ in range(3)]
		panel = LayoutWrap(children=boxes, horizontal_spacing=5)
		panel.layout(10, 100, 100, 200)
		self.assertEqual(boxes[1].get_computed_position(), (55, 100))
		self.assertEqual(boxes[2].get_computed_position(), (10, 120))

	def test_request_is_single_line(self):
		panel = LayoutWrap.horizontal(children=[LayoutBox(40, 20), LayoutBox(30, 25)])
		self.assertEqual(panel.query_space_request(), (70, 25))
		self.assertEqual(panel.query_width_request(), 70)
		self.assertEqual(panel.query_height_request(), 25)

	def test_vertical_panel_distribution(self):
		boxes = [LayoutBox(20, 20) for _ in range(3)]
		panel = LayoutWrap.vertical(children=boxes)
		self.assertEqual(panel.layout(0, 0, math.inf, 50), (40, 40))
		self.assertEqual(boxes[2].get_computed_rect(), Rect(20, 0, 20, 20))

	def test_child_alignment(self):
		tall = LayoutBox(30, 40)
		centered = LayoutBox(30, 10, vertical_alignment=VerticalAlignment.CENTER)
		stretched = LayoutBox(30, 10)
		panel = LayoutWrap.horizontal(children=[tall, centered, stretched])
		panel.layout(0, 0, 500, 500)
		self.assertEqual(centered.get_computed_rect(), Rect(30, 15, 30, 10))
		self.assertEqual(stretched.get_computed_rect(), Rect(60, 0, 30, 40))

	def test_hidden_child_is_not_placed(self):
		hidden = LayoutBox(40, 20, visible=False)
		shown = LayoutBox(40, 20)
		panel = LayoutWrap.horizontal(children=[hidden, shown])
		panel.layout(5, 5, 100, 100)
		self.assertEqual(hidden.get_computed_rect(), Rect(0, 0, 0, 0))
		self.assertEqual(shown.get_computed_rect(), Rect(5, 5, 40, 20))

	def test_nested_panels(self):
		inner_boxes = [LayoutBox(30, 10), LayoutBox(30, 10)]
		inner = LayoutWrap.horizontal(children=inner_boxes)
		box = LayoutBox(50, 20)
		outer = LayoutWrap.horizontal(children=[inner, box])

		outer.layout(0, 0, 100, 100)
		self.assertEqual(inner.get_computed_rect(), Rect(0, 0, 60, 10))
		self.assertEqual(box.get_computed_rect(), Rect(0, 10, 50, 20))
		self.assertEqual([b.get_computed_rect() for b in inner_boxes], [
			Rect(0, 0, 30, 10),
			Rect(30, 0, 30, 10),
		])
		self.assertEqual(len(inner.get_layout_result().rows), 1)

	def test_layout_result_available(self):
		panel = LayoutWrap.horizontal(children=[LayoutBox(40, 20)] * 3)
		self.assertIsNone(panel.get_layout_result())
		panel.layout(0, 0, 100, 100)
		self.assertEqual(len(panel.get_layout_result().rows), 2)

	def test_padding_expansion(self):
		self.assertEqual(LayoutWrap(padding=(1, 2)).padding, (1, 2, 1, 2))
		self.assertEqual(LayoutWrap(padding=3).padding, (3, 3, 3, 3))
		with self.assertRaises(ValueError):
			LayoutWrap(padding=(1, 2, 3))

	def test_rejects_integer_orientation(self):
		with self.assertRaises(UnsupportedOrientationError):
			LayoutWrap(orientation=1)


if __name__ == '__main__':
	unittest.main()
