"""Settings kept in a JSON file and addressed by slash-separated key paths."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from types import TracebackType
from typing import Any

from gamekit.strings import split

__all__ = ["JsonStorage", "StoredValue"]


def _is_empty(value: Any) -> bool:
    """True for null and for an empty object or array."""
    return value is None or (isinstance(value, (dict, list)) and not value)


class JsonStorage:
    """A JSON document loaded from ``path`` and written back on request.

    The file is read when the storage is created. Used as a context manager
    the document is written back when the block ends.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.data: Any = {}
        self.read()

    def __enter__(self) -> JsonStorage:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.write()

    def read(self) -> bool:
        """Load the file; a missing or malformed file leaves the data as it was.

        Returns True when the file was loaded.
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError:
            return False
        try:
            loaded = json.loads(text)
        except json.JSONDecodeError:
            return False
        self.data = loaded
        return True

    def write(self) -> None:
        """Write the document with four-space indentation, creating parent directories."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(self.data, indent=4, ensure_ascii=False), encoding="utf-8"
        )

    def traverse_to_key(self, key: str) -> tuple[dict[str, Any], str]:
        """Walk the path ``key``, creating missing objects on the way.

        Returns the object holding the last path part and that part's name.
        A missing last entry is created as null. Raises TypeError when a step
        of the path is a value that is not an object.
        """
        parts = split(key, "/")
        if not parts:
            raise ValueError("empty key")
        if self.data is None:
            self.data = {}
        container = self.data
        for name in parts[:-1]:
            if not isinstance(container, dict):
                raise TypeError(f"cannot look up {name!r} in a non-object value")
            child = container.get(name)
            if child is None:
                child = container[name] = {}
            container = child
        if not isinstance(container, dict):
            raise TypeError(f"cannot look up {parts[-1]!r} in a non-object value")
        container.setdefault(parts[-1], None)
        return container, parts[-1]

    def key_find(self, key: str, default: Any = None) -> Any:
        """The value at ``key``; an empty entry is first replaced by ``default``."""
        container, name = self.traverse_to_key(key)
        if _is_empty(container[name]):
            container[name] = copy.deepcopy(default)
        return container[name]

    def get(self, key: str, default: Any = None) -> Any:
        """A copy of the value at ``key``, storing ``default`` when it is empty."""
        return copy.deepcopy(self.key_find(key, default))

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` at ``key``."""
        container, name = self.traverse_to_key(key)
        container[name] = copy.deepcopy(value)


class StoredValue:
    """A value read from a storage key that can be saved back to it."""

    def __init__(self, storage: JsonStorage, key: str, default: Any = None) -> None:
        self.storage = storage
        self.key = key
        self.value = storage.get(key, default)

    def __enter__(self) -> StoredValue:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.save()

    def save(self) -> None:
        """Put the current value back into the storage."""
        self.storage.set(self.key, self.value)

    def __repr__(self) -> str:
        return f"StoredValue({self.key!r}, {self.value!r})"