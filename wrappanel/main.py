"""
Command-line application logic: resolve settings, run a layout, report it.
"""

import asyncio, json, logging, os, sys

from .constants import Orientation, VerticalAlignment, HorizontalAlignment
from .settings import (load_panel_settings, save_panel_settings, validate_settings,
					   settings_to_layout_kwargs)
from .storage import LocalFileStorage
from .wrap_layout import WrapItem, WrapLayoutResult, compute_wrap_layout

logger = logging.getLogger(__name__)

# -------

async def resolve_settings(overrides: dict, settings_file=None, save=False) -> dict:
	"""Merge command-line overrides over the saved settings (or the defaults)."""
	if settings_file is None:
		return validate_settings(overrides)

	folder, name = os.path.split(os.path.abspath(settings_file))
	storage = LocalFileStorage(folder)
	saved = await load_panel_settings(storage, name)
	settings = validate_settings({**saved, **overrides})
	if save:
		if await save_panel_settings(storage, settings, name):
			logger.info(f"Saved settings to {settings_file}")
	return settings

def build_items(child_specs, orientation) -> list:
	"""Turn parsed (width, height, alignment) specs into WrapItems.

	The alignment applies to the panel's cross axis: vertical alignment for a
	horizontal panel, horizontal alignment for a vertical one.
	"""
	items = []
	for width, height, alignment in child_specs:
		if alignment is None:
			items.append(WrapItem(width, height))
		elif orientation == Orientation.HORIZONTAL:
			items.append(WrapItem(width, height, vertical_alignment=VerticalAlignment(alignment)))
		else:
			items.append(WrapItem(width, height, horizontal_alignment=HorizontalAlignment(alignment)))
	return items

def result_to_dict(result: WrapLayoutResult) -> dict:
	width, height = result.desired_size
	rows = []
	for row, offset in zip(result.rows, result.row_offsets):
		rows.append({"offset": offset, "u": row.size.u, "v": row.size.v, "children": len(row)})
	return {
		"orientation": result.orientation.name.lower(),
		"size": {"width": width, "height": height},
		"rows": rows,
		"rects": [None if rect is None else dict(zip(("x", "y", "width", "height"), rect))
				  for rect in result.rects],
	}

def report_lines(result: WrapLayoutResult) -> list:
	from utilities import format_rect, format_size, format_number

	kind = "Row" if result.orientation == Orientation.HORIZONTAL else "Column"
	lines = [f"Panel size: {format_size(result.desired_size)} "
			 f"({len(result.rows)} {kind.lower()}{'' if len(result.rows) == 1 else 's'})"]
	for index, (row, offset) in enumerate(zip(result.rows, result.row_offsets), 1):
		lines.append(f"  {kind} {index}: offset={format_number(offset)}, "
					 f"extent={format_number(row.size.u)}x{format_number(row.size.v)}, children={len(row)}")
	for index, rect in enumerate(result.rects, 1):
		lines.append(f"  Child {index}: " + ("hidden" if rect is None else format_rect(rect)))
	return lines

def run(child_specs, settings: dict, as_json=False, out=None) -> WrapLayoutResult:
	"""Lay out the children with the given settings and print the result."""
	out = sys.stdout if out is None else out
	kwargs = settings_to_layout_kwargs(settings)
	items = build_items(child_specs, kwargs["orientation"])
	logger.info(f"Laying out {len(items)} children with {settings}")

	result = compute_wrap_layout(items, **kwargs)
	if as_json:
		print(json.dumps(result_to_dict(result), indent=2), file=out)
	else:
		for line in report_lines(result):
			print(line, file=out)
	return result

def setup(child_specs, overrides: dict, settings_file=None, save_settings=False, as_json=False, out=None):
	"""Resolve settings and run one layout. Returns the WrapLayoutResult."""
	settings = asyncio.run(resolve_settings(overrides, settings_file, save_settings))
	return run(child_specs, settings, as_json=as_json, out=out)
