"""
wrap-panel.py - wrap panel layout command line

Lays out a list of rectangular children the way a wrapping panel would:
children flow along a row (or a column, for a vertical panel) and wrap to a
new one when the available extent is used up. Prints every child's rectangle
and the panel's own size.

Features:
- Horizontal and vertical flow
- Per-child cross-axis alignment (start, center, end, stretch)
- Spacing between children and rows, padding inside the panel
- Optional stretching of the last child to fill its row
- Settings persisted to and loaded from a JSON file
"""

import sys, argparse

from wrappanel import main
from wrappanel.log import LOG_LEVELS, setup_logging
from utilities import parse_child_spec, parse_extent, parse_number_list

# --- Argument types ---

def child_spec(value):
	"""Validate a WIDTHxHEIGHT[@ALIGN] child description."""
	spec = parse_child_spec(value)
	if spec is None:
		raise argparse.ArgumentTypeError(
			f"invalid child {value!r}, expected WIDTHxHEIGHT or WIDTHxHEIGHT@ALIGN")
	return spec

def extent(value):
	"""Validate a non-negative extent or 'inf'."""
	result = parse_extent(value)
	if result is None:
		raise argparse.ArgumentTypeError(f"invalid extent {value!r}, expected a non-negative number or 'inf'")
	return result

def _non_negative_list(value, counts, what):
	numbers = parse_number_list(value, counts)
	if numbers is None:
		raise argparse.ArgumentTypeError(
			f"invalid {what} {value!r}, expected {' or '.join(map(str, counts))} comma separated numbers")
	if any(number < 0 for number in numbers):
		raise argparse.ArgumentTypeError(f"{what} cannot be negative: {value!r}")
	return numbers

def spacing(value):
	"""Validate 'H' or 'H,V' spacing."""
	return _non_negative_list(value, (1, 2), "spacing")

def padding(value):
	"""Validate 1, 2 or 4 padding values."""
	return _non_negative_list(value, (1, 2, 4), "padding")

# --- Core Functions ---

def parse_arguments(argv=None):
	"""Parse command line arguments."""
	parser = argparse.ArgumentParser(
		description='wrap-panel - lay out children in wrapping rows or columns',
		formatter_class=argparse.RawDescriptionHelpFormatter,
		epilog="""
Examples:
  wrap-panel.py --max-width 100 40x20 40x20 40x20
  wrap-panel.py --orientation vertical --max-height 60 30x20@center 10x20 25x30
  wrap-panel.py --max-width 200 --spacing 4,8 --padding 10 60x30@end 60x20 60x40
  wrap-panel.py --settings panel.json --save-settings --spacing 5 --stretch-last
Alignments: start, center, end, stretch (also top/bottom or left/right).
		""".strip()
	)

	parser.add_argument('children', nargs='*', type=child_spec, metavar='CHILD',
			help='Child size as WIDTHxHEIGHT, optionally followed by @ALIGN')
	parser.add_argument('--orientation', type=str.lower, choices=('horizontal', 'vertical'),
			help='Flow direction (default: horizontal)')
	parser.add_argument('--max-width', type=extent, metavar='WIDTH',
			help='Available width, a number or "inf" (default: inf)')
	parser.add_argument('--max-height', type=extent, metavar='HEIGHT',
			help='Available height, a number or "inf" (default: inf)')
	parser.add_argument('--spacing', type=spacing, metavar='H[,V]',
			help='Horizontal and vertical spacing between children')
	parser.add_argument('--padding', type=padding, metavar='P[,P[,P,P]]',
			help='Padding: all sides, horizontal,vertical or left,top,right,bottom')

	stretch_group = parser.add_mutually_exclusive_group()
	stretch_group.add_argument('--stretch-last', action='store_true',
			help='Stretch the last child to fill the rest of its row')
	stretch_group.add_argument('--no-stretch', action='store_true',
			help='Do not stretch any child (overrides saved settings)')

	parser.add_argument('--settings', metavar='FILE',
			help='Load settings from a JSON file; command line options override them')
	parser.add_argument('--save-settings', action='store_true',
			help='Write the resulting settings back to the --settings file')
	parser.add_argument('--json', action='store_true',
			help='Print the layout as JSON instead of a text report')
	parser.add_argument('--log-level', type=str.upper, choices=tuple(LOG_LEVELS), default='WARNING',
			help='Logging level (default: WARNING)')
	parser.add_argument('-v', '--verbose', action='store_true',
			help='Shortcut for --log-level DEBUG')

	args = parser.parse_args(argv)
	if args.save_settings and not args.settings:
		parser.error('--save-settings requires --settings')
	return args

def build_overrides(args):
	"""Collect the settings given explicitly on the command line."""
	overrides = {}
	if args.orientation is not None:
		overrides['orientation'] = args.orientation
	if args.max_width is not None:
		overrides['max_width'] = args.max_width
	if args.max_height is not None:
		overrides['max_height'] = args.max_height
	if args.spacing is not None:
		horizontal = args.spacing[0]
		vertical = args.spacing[1] if len(args.spacing) > 1 else horizontal
		overrides['horizontal_spacing'] = horizontal
		overrides['vertical_spacing'] = vertical
	if args.padding is not None:
		overrides['padding'] = list(args.padding)
	if args.stretch_last:
		overrides['stretch_child'] = 'last'
	elif args.no_stretch:
		overrides['stretch_child'] = 'none'
	return overrides

# --- Main Logic ---

def run(argv=None):
	args = parse_arguments(argv)
	setup_logging('DEBUG' if args.verbose else args.log_level)

	try:
		main.setup(args.children, build_overrides(args),
				   settings_file=args.settings,
				   save_settings=args.save_settings,
				   as_json=args.json)
	except ValueError as e:
		print(f"Error: {e}", file=sys.stderr)
		return 1
	return 0

if __name__ == '__main__':
	sys.exit(run())
