"""
Settings management for the wrap panel.

Settings are a flat JSON object persisted through a FileStorageHelper.
Unconstrained extents are stored as null since JSON has no infinity.
"""

import logging, math

from .constants import (SETTINGS_FILE, DEFAULT_SPACING, DEFAULT_PADDING,
						Orientation, StretchChild)
from .storage import FileStorageHelper
from .uv_layout import expand_padding

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS = {
	"orientation": "horizontal",
	"horizontal_spacing": DEFAULT_SPACING,
	"vertical_spacing": DEFAULT_SPACING,
	"padding": [DEFAULT_PADDING] * 4,
	"stretch_child": StretchChild.NONE.value,
	"max_width": None,
	"max_height": None,
}

# Last settings read from or written to each settings file, keyed by FileStorageHelper.item_key()
saved_settings_data = {}

# -------

def parse_orientation(value) -> Orientation:
	"""Accept an Orientation, its name in any case, or its integer value."""
	if isinstance(value, Orientation):
		return value
	if isinstance(value, str):
		try:
			return Orientation[value.strip().upper()]
		except KeyError:
			pass
	elif isinstance(value, int) and not isinstance(value, bool):
		try:
			return Orientation(value)
		except ValueError:
			pass
	raise ValueError(f"Unknown orientation: {value!r} (expected 'horizontal' or 'vertical')")

def _non_negative(name, value):
	if isinstance(value, bool) or not isinstance(value, (int, float)):
		raise ValueError(f"{name} must be a number, got {type(value).__name__}: {value!r}")
	if math.isnan(value) or value < 0:
		raise ValueError(f"{name} must be a non-negative number, got {value}")
	return value

def _extent(name, value):
	# None and infinity both mean unconstrained
	if value is None or (isinstance(value, float) and math.isinf(value) and value > 0):
		return None
	return _non_negative(name, value)

def validate_settings(settings: dict) -> dict:
	"""Return a complete, normalized copy of settings, raising ValueError on bad values."""
	result = dict(DEFAULT_SETTINGS)
	for key, value in settings.items():
		if key not in DEFAULT_SETTINGS:
			logger.warning(f"Ignoring unknown setting {key!r}")
			continue
		result[key] = value

	result["orientation"] = parse_orientation(result["orientation"]).name.lower()
	result["horizontal_spacing"] = _non_negative("horizontal_spacing", result["horizontal_spacing"])
	result["vertical_spacing"] = _non_negative("vertical_spacing", result["vertical_spacing"])

	result["padding"] = [_non_negative("padding", value) for value in expand_padding(result["padding"])]

	stretch_child = result["stretch_child"]
	if isinstance(stretch_child, StretchChild):
		stretch_child = stretch_child.value
	if stretch_child not in {member.value for member in StretchChild}:
		raise ValueError(f"Unknown stretch_child: {stretch_child!r}")
	result["stretch_child"] = stretch_child

	result["max_width"] = _extent("max_width", result["max_width"])
	result["max_height"] = _extent("max_height", result["max_height"])
	return result

def settings_to_layout_kwargs(settings: dict) -> dict:
	"""Keyword arguments for compute_wrap_layout() / LayoutWrap from validated settings."""
	return {
		"orientation": parse_orientation(settings["orientation"]),
		"max_width": math.inf if settings["max_width"] is None else settings["max_width"],
		"max_height": math.inf if settings["max_height"] is None else settings["max_height"],
		"horizontal_spacing": settings["horizontal_spacing"],
		"vertical_spacing": settings["vertical_spacing"],
		"padding": tuple(settings["padding"]),
		"stretch_child": StretchChild(settings["stretch_child"]),
	}

async def load_panel_settings(storage: FileStorageHelper, settings_file=SETTINGS_FILE) -> dict:
	"""Load settings, falling back to the defaults when missing or invalid."""
	data = await storage.read_file(settings_file, None)
	if not isinstance(data, dict):
		if data is not None:
			logger.warning(f"Settings in {settings_file} are not an object, using defaults")
		saved_settings_data.pop(storage.item_key(settings_file), None)
		return validate_settings({})
	try:
		settings = validate_settings(data)
	except ValueError as e:
		logger.warning(f"Invalid settings in {settings_file}: {e}, using defaults")
		saved_settings_data.pop(storage.item_key(settings_file), None)
		return validate_settings({})
	saved_settings_data[storage.item_key(settings_file)] = dict(settings)
	return settings

async def save_panel_settings(storage: FileStorageHelper, settings: dict, settings_file=SETTINGS_FILE) -> bool:
	"""Validate and save settings. Returns False when they match what was last saved."""
	settings = validate_settings(settings)
	if saved_settings_data.get(storage.item_key(settings_file)) == settings:
		return False
	logger.info(f"Saving panel settings to {settings_file}: {settings}")
	await storage.save_file(settings_file, settings)
	saved_settings_data[storage.item_key(settings_file)] = settings
	return True
