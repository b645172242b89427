"""
JSON data store for nestlist trees and page options.

Used by the command-line caller; the session itself never touches files.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from nestlist.exceptions import ConfigurationError, StorageError
from nestlist.models.options import Options
from nestlist.models.tree import List


class DataStore:
    """
    Handles reading and writing a tree (or page options) as a JSON file.

    Writes are atomic to prevent a half-written file on failure.
    """

    def __init__(self, file_path: Path) -> None:
        self.file_path = Path(file_path)

    def _read_json(self) -> Any:
        if not self.file_path.exists():
            raise StorageError(f"File not found: {self.file_path}")
        try:
            with open(self.file_path, "r") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise StorageError(f"Corrupt JSON data in {self.file_path}: {e.msg}")
        except OSError as e:
            raise StorageError(f"Failed to read {self.file_path}: {e}")

    def _atomic_write(self, data: Any) -> None:
        """Write data to the file atomically.

        Raises:
            StorageError: If writing to file fails.
        """
        directory = self.file_path.parent
        directory.mkdir(parents=True, exist_ok=True)
        temp_fd, temp_path = tempfile.mkstemp(
            dir=directory, prefix=".tmp_nestlist_", suffix=".json"
        )

        try:
            with os.fdopen(temp_fd, "w") as temp_file:
                json.dump(data, temp_file, indent=2)
            os.replace(temp_path, self.file_path)
        except Exception as e:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise StorageError(f"Failed to write to {self.file_path}: {e}")

    def load_tree(self) -> List:
        """Load a tree from the file.

        Raises:
            StorageError: If the file is missing, corrupt or not a tree.
        """
        data = self._read_json()
        try:
            return List.model_validate(data)
        except ValidationError as e:
            raise StorageError(f"Invalid tree in {self.file_path}: {e}")

    def save_tree(self, tree: List) -> None:
        """Save a tree to the file, omitting absent nested lists."""
        self._atomic_write(tree.model_dump(mode="json", by_alias=True, exclude_none=True))

    def load_options(self) -> Options:
        """Load per-depth page options.

        Accepts either a bare list of records or an object with a
        ``page_options`` key.

        Raises:
            StorageError: If the file is missing or corrupt.
            ConfigurationError: If a record is invalid.
        """
        data = self._read_json()
        if isinstance(data, list):
            data = {"page_options": data}
        try:
            return Options.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid page options in {self.file_path}: {e}")
