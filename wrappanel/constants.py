"""
Constants and enumerations shared by the wrap panel layout engine.
"""

from enum import Enum, IntEnum

# -------

class Orientation(IntEnum):
	"""Flow direction of the panel. Values double as (width, height) axis indexes."""
	HORIZONTAL = 0		# rows, wrapping downwards
	VERTICAL = 1		# columns, wrapping rightwards

class VerticalAlignment(Enum):
	"""Cross-axis alignment of a child in a horizontal panel."""
	TOP = 'start'
	CENTER = 'center'
	BOTTOM = 'end'
	STRETCH = 'stretch'

class HorizontalAlignment(Enum):
	"""Cross-axis alignment of a child in a vertical panel."""
	LEFT = 'start'
	CENTER = 'center'
	RIGHT = 'end'
	STRETCH = 'stretch'

class StretchChild(Enum):
	"""Which child, if any, fills the remaining flow extent of its row."""
	NONE = 'none'
	LAST = 'last'

# Alignment names accepted from configuration and the command line
ALIGNMENT_ALIASES = {
	'start': 'start', 'top': 'start', 'left': 'start',
	'center': 'center', 'centre': 'center', 'middle': 'center',
	'end': 'end', 'bottom': 'end', 'right': 'end',
	'stretch': 'stretch',
}

# Application settings
SETTINGS_FILE = 'wrap-panel.json'
DEFAULT_SPACING = 0
DEFAULT_PADDING = 0
