"""Service description loading with caching support."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, Sequence

import yaml

from .errors import DescriptionError

DESCRIPTION_SUFFIXES = (".yaml", ".yml", ".json")


@dataclass(frozen=True, slots=True)
class CacheKey:
    """Identity of a description file's contents: resolved path, mtime and size."""

    path: Path
    mtime: float
    size: int

    @classmethod
    def from_path(cls, path: Path) -> CacheKey:
        stat = path.stat()
        return cls(path=path.resolve(), mtime=stat.st_mtime, size=stat.st_size)


class SchemaCache:
    """Parsed descriptions by path, reloaded when the file's mtime or size changes.

    Holds at most ``max_size`` entries; the oldest is dropped first.
    """

    __slots__ = ("_entries", "_max_size")

    def __init__(self, max_size: int = 100) -> None:
        self._entries: dict[Path, tuple[CacheKey, dict[str, Any]]] = {}
        self._max_size = max_size

    def get(self, path: Path) -> dict[str, Any]:
        """Return the parsed description at ``path``.

        Raises:
            DescriptionError: If the file is invalid.
        """
        key = CacheKey.from_path(path)
        entry = self._entries.get(key.path)
        if entry is not None and entry[0] == key:
            return entry[1]

        data = load_schema(key.path)
        self._entries.pop(key.path, None)
        if len(self._entries) >= self._max_size:
            del self._entries[next(iter(self._entries))]
        self._entries[key.path] = (key, data)
        return data

    def __len__(self) -> int:
        return len(self._entries)


def load_schema(schema_path: Path) -> dict[str, Any]:
    """Load a description from a YAML or JSON file.

    Raises:
        DescriptionError: If the file cannot be read or parsed.
    """
    try:
        content = schema_path.read_text(encoding="utf-8")
    except OSError as e:
        raise DescriptionError(f"Failed to read description file: {e}", str(schema_path)) from e

    try:
        if schema_path.suffix.lower() == ".json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise DescriptionError(f"Invalid document: {e}", str(schema_path)) from e

    if not isinstance(data, dict):
        raise DescriptionError("Description root must be a mapping", str(schema_path))

    return data


def collect_schema_paths(inputs: Sequence[Path]) -> list[Path]:
    """Collect all description files from the given inputs.

    Raises:
        FileNotFoundError: If any input path doesn't exist.
    """

    def _iter_paths() -> Iterator[Path]:
        for raw in inputs:
            path = raw.resolve()
            if not path.exists():
                raise FileNotFoundError(f"Description path '{raw}' does not exist")
            if path.is_dir():
                yield from sorted(
                    p
                    for p in path.iterdir()
                    if p.is_file() and p.suffix in DESCRIPTION_SUFFIXES
                )
            else:
                yield path

    # Use dict to preserve order while deduplicating
    seen: dict[Path, None] = {}
    for path in _iter_paths():
        seen.setdefault(path, None)

    return list(seen.keys())
