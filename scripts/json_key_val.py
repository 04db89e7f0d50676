"""
Todomvc - JSON Key-Value Storage
Provides the durable string key/value store that record collections live in.
"""
import json
from pathlib import Path


class JsonKeyVal:
    """A string key/value store backed by a JSON object file.

    Every call reads the file, so two instances on the same path see each
    other's writes. Values are opaque strings; callers serialize their own data.
    """

    def __init__(self, file_path: Path | str) -> None:
        """Initialize the store with a file path."""
        self.file_path = Path(file_path)
        self._ensure_file_exists()

    def _ensure_file_exists(self) -> None:
        """Create the JSON file with empty object if it doesn't exist."""
        if not self.file_path.exists():
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            self._write_data({})

    def _read_data(self) -> dict[str, str]:
        """Read and return the JSON data from file.

        A missing file reads as empty. A file that is not valid JSON raises
        ``json.JSONDecodeError`` instead of being overwritten on the next set.
        """
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Key/value file {self.file_path} does not hold a JSON object")
        return data

    def _write_data(self, data: dict[str, str]) -> None:
        """Write data to the JSON file."""
        with open(self.file_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def get(self, key: str) -> str | None:
        """Get a value by key, or None if the key is absent."""
        return self._read_data().get(key)

    def set(self, key: str, value: str) -> None:
        """Set a key-value pair."""
        if not isinstance(value, str):
            raise TypeError(f"JsonKeyVal values must be str, got {type(value).__name__}")
        data = self._read_data()
        data[key] = value
        self._write_data(data)

    def delete(self, key: str) -> bool:
        """Delete a key. Returns True if key existed, False otherwise."""
        data = self._read_data()
        if key in data:
            del data[key]
            self._write_data(data)
            return True
        return False

    def exists(self, key: str) -> bool:
        """Check if a key exists."""
        return key in self._read_data()

    def keys(self) -> list[str]:
        """Return all keys."""
        return list(self._read_data().keys())

    def clear(self) -> None:
        """Clear all data."""
        self._write_data({})
