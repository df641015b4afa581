"""
File-backed key/value storage.

FileStorageHelper is the interface panel settings are persisted through.
There is no notion of a current directory: every path is relative to the
storage root. LocalFileStorage keeps each value as a JSON file on disk and
runs the blocking file operations in a worker thread.
"""

from __future__ import annotations

import abc, asyncio, json, logging, os, shutil
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class DirectoryItemType(Enum):
	NONE = 0
	FILE = 1
	FOLDER = 2


class FileStorageHelper(abc.ABC):
	"""Stores data in a directory tree of files and folders."""

	@abc.abstractmethod
	async def item_exists(self, item_name: str) -> bool:
		"""Return True if a file or folder exists at item_name."""

	@abc.abstractmethod
	async def read_file(self, file_path: str, default: Any = None) -> Any:
		"""Return the object stored in file_path, or default if there is none."""

	@abc.abstractmethod
	async def read_folder(self, folder_path: str) -> list[tuple[DirectoryItemType, str]]:
		"""List the immediate entries of a folder with their item types."""

	@abc.abstractmethod
	async def save_file(self, file_path: str, value: Any) -> None:
		"""Store value in file_path, replacing any previous content."""

	@abc.abstractmethod
	async def save_folder(self, folder_path: str) -> None:
		"""Ensure a folder exists at folder_path."""

	@abc.abstractmethod
	async def delete_item(self, item_path: str) -> None:
		"""Delete a file or a whole folder."""

	def item_key(self, item_path: str):
		"""Hashable identity of an item, equal for every path naming the same item."""
		return (self, os.path.normpath(item_path))


class LocalFileStorage(FileStorageHelper):
	"""FileStorageHelper over a local directory, one JSON document per file."""

	def __init__(self, root='.'):
		self.root = os.path.abspath(root)

	def _resolve(self, path: str) -> str:
		full_path = os.path.abspath(os.path.join(self.root, path))
		if os.path.commonpath([self.root, full_path]) != self.root:
			raise ValueError(f"Path escapes the storage root: {path!r}")
		return full_path

	def item_key(self, item_path: str) -> str:
		# Storages sharing a directory share their items
		return self._resolve(item_path)

	async def item_exists(self, item_name: str) -> bool:
		return await asyncio.to_thread(os.path.exists, self._resolve(item_name))

	async def read_file(self, file_path: str, default: Any = None) -> Any:
		full_path = self._resolve(file_path)

		def read():
			try:
				with open(full_path, "rt", encoding="utf-8") as f:
					return json.load(f)
			except FileNotFoundError:
				return default
			except json.JSONDecodeError as e:
				logger.warning(f"Ignoring unreadable JSON in {full_path}: {e}")
				return default

		return await asyncio.to_thread(read)

	async def read_folder(self, folder_path: str) -> list[tuple[DirectoryItemType, str]]:
		full_path = self._resolve(folder_path)

		def listing():
			items = []
			with os.scandir(full_path) as entries:
				for entry in entries:
					if entry.is_dir():
						item_type = DirectoryItemType.FOLDER
					elif entry.is_file():
						item_type = DirectoryItemType.FILE
					else:
						item_type = DirectoryItemType.NONE
					items.append((item_type, entry.name))
			return sorted(items, key=lambda item: item[1])

		return await asyncio.to_thread(listing)

	async def save_file(self, file_path: str, value: Any) -> None:
		full_path = self._resolve(file_path)

		def write():
			os.makedirs(os.path.dirname(full_path), exist_ok=True)
			with open(full_path, "wt", encoding="utf-8") as f:
				json.dump(value, f, indent=2)

		await asyncio.to_thread(write)
		logger.debug(f"Saved {full_path}")

	async def save_folder(self, folder_path: str) -> None:
		await asyncio.to_thread(os.makedirs, self._resolve(folder_path), exist_ok=True)

	async def delete_item(self, item_path: str) -> None:
		full_path = self._resolve(item_path)

		def delete():
			if os.path.isdir(full_path):
				shutil.rmtree(full_path)
			else:
				os.remove(full_path)

		await asyncio.to_thread(delete)
		logger.debug(f"Deleted {full_path}")
