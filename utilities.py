"""
General utility functions for the wrap-panel command line.

Parsing helpers return None when the input cannot be parsed, leaving it to
the caller to report the error; formatting helpers turn layout numbers back
into compact text.
"""

import math, re


_NUMBER_RE = re.compile(r'^[+-]?(?:\d+(?:\.\d*)?|\.\d+)$')


def parse_number(text):
	"""
	Parse a plain decimal number.

	Integers stay integers ('40' -> 40), anything with a decimal point
	becomes a float ('12.5' -> 12.5). Returns None if parsing fails.
	"""
	if text is None:
		return None
	text = text.strip()
	if not _NUMBER_RE.match(text):
		return None
	if '.' in text:
		return float(text)
	return int(text)


def parse_extent(text):
	"""
	Parse an available extent.

	Supports numbers plus 'inf', 'infinite', 'none' and 'unconstrained',
	which all map to math.inf. Negative extents are rejected.
	Returns None if parsing fails.
	"""
	if text is None:
		return None
	if text.strip().lower() in ('inf', 'infinite', 'none', 'unconstrained'):
		return math.inf
	value = parse_number(text)
	if value is None or value < 0:
		return None
	return value


def parse_number_list(text, counts=(1, 2, 4)):
	"""
	Parse comma separated numbers, e.g. '10', '10,5' or '1,2,3,4'.

	Returns a tuple of numbers, or None if any part fails to parse or the
	number of parts is not one of counts.
	"""
	if not text:
		return None
	parts = [parse_number(part) for part in text.split(',')]
	if any(part is None for part in parts) or len(parts) not in counts:
		return None
	return tuple(parts)


def parse_size(text):
	"""
	Parse 'WIDTHxHEIGHT' into a (width, height) tuple.

	Examples:
	- '40x20' -> (40, 20)
	- '12.5X8' -> (12.5, 8)
	Returns None if parsing fails.
	"""
	if not text:
		return None
	parts = re.split(r'[xX]', text.strip())
	if len(parts) != 2:
		return None
	width, height = parse_number(parts[0]), parse_number(parts[1])
	if width is None or height is None:
		return None
	return (width, height)


def parse_child_spec(text):
	"""
	Parse a child description 'WIDTHxHEIGHT[@ALIGN]'.

	ALIGN names the child's cross-axis alignment: start, center, end or
	stretch, or one of the orientation-specific aliases (top, bottom, left,
	right). Returns (width, height, alignment) where alignment is the
	canonical name or None when omitted, or None if parsing fails.
	"""
	if not text:
		return None
	size_text, sep, align_text = text.partition('@')
	size = parse_size(size_text)
	if size is None:
		return None
	if not sep:
		return (size[0], size[1], None)

	from wrappanel.constants import ALIGNMENT_ALIASES
	alignment = ALIGNMENT_ALIASES.get(align_text.strip().lower())
	if alignment is None:
		return None
	return (size[0], size[1], alignment)


def format_number(value):
	"""
	Format a layout number compactly.

	Examples:
	- 40 -> "40"
	- 40.0 -> "40"
	- 12.5 -> "12.5"
	- math.inf -> "inf"
	"""
	if isinstance(value, float):
		if math.isinf(value):
			return "inf" if value > 0 else "-inf"
		if value.is_integer():
			return str(int(value))
	return str(value)


def format_size(size):
	"""Format a (width, height) pair as 'WIDTHxHEIGHT'."""
	width, height = size
	return f"{format_number(width)}x{format_number(height)}"


def format_rect(rect):
	"""Format an (x, y, width, height) rectangle for reports."""
	x, y, width, height = rect
	return (f"x={format_number(x)}, y={format_number(y)}, "
			f"width={format_number(width)}, height={format_number(height)}")
