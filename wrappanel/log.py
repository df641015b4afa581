"""
Logging setup for the wrap panel tools.

Library modules only create their own loggers; the command line calls
setup_logging() once to attach a console handler to the package logger.
"""

import logging, sys
from typing import Optional

LOGGER_NAME = "wrappanel"

LOG_LEVELS = {
	"DEBUG": logging.DEBUG,
	"INFO": logging.INFO,
	"WARNING": logging.WARNING,
	"ERROR": logging.ERROR,
	"CRITICAL": logging.CRITICAL
}

class LogFormatter(logging.Formatter):
	"""Formatter that colours the level name on terminals."""

	RESET = '\033[0m'
	LEVEL_COLORS = {
		'DEBUG': '\033[34m',
		'INFO': '\033[32m',
		'WARNING': '\033[33m',
		'ERROR': '\033[31m',
		'CRITICAL': '\033[31m\033[1m'
	}

	def __init__(self, colored: bool = True, *args, **kwargs):
		self.colored = colored and sys.platform != 'win32'
		super().__init__(*args, **kwargs)

	def format(self, record: logging.LogRecord) -> str:
		formatted_msg = super().format(record)
		level_name = record.levelname
		if self.colored and level_name in self.LEVEL_COLORS:
			colored_level = f"{self.LEVEL_COLORS[level_name]}{level_name}{self.RESET}"
			formatted_msg = formatted_msg.replace(level_name, colored_level, 1)
		return formatted_msg

def setup_logging(level: str = "WARNING", colored: Optional[bool] = None, stream=None) -> logging.Logger:
	"""Attach a console handler to the package logger.

	Args:
		level: One of LOG_LEVELS (case-insensitive)
		colored: Colour level names; defaults to whether the stream is a terminal
		stream: Output stream, stderr by default

	Returns:
		logging.Logger: The configured package logger
	"""
	level_name = level.upper()
	if level_name not in LOG_LEVELS:
		raise ValueError(f"Unknown log level: {level!r}")

	logger = logging.getLogger(LOGGER_NAME)
	logger.setLevel(LOG_LEVELS[level_name])

	stream = sys.stderr if stream is None else stream
	if colored is None:
		colored = hasattr(stream, 'isatty') and stream.isatty()

	# Replace a handler from an earlier call rather than stacking another one
	for handler in list(logger.handlers):
		if getattr(handler, '_wrappanel_console', False):
			logger.removeHandler(handler)

	handler = logging.StreamHandler(stream)
	handler._wrappanel_console = True
	handler.setFormatter(LogFormatter(colored=colored, fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
									  datefmt='%H:%M:%S'))
	logger.addHandler(handler)
	return logger
