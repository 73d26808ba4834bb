"""Environment variables and their JSON-backed store."""

from __future__ import annotations

import contextlib
import itertools
import json
import os
from dataclasses import dataclass
from typing import Any, Iterable, Iterator

from .errors import UserConfigError

CONFIG_DIR = "./config"
VARS_FILE = "vars.json"

_next_id = itertools.count()


def _field(data: dict, name: str, default: Any, kind: type) -> Any:
    """Look up a member case-insensitively, checking its JSON type."""
    value = data.get(name)
    if value is None:
        value = next((v for k, v in data.items() if k.lower() == name.lower()), None)
    if value is None:
        return default
    if not isinstance(value, kind) or isinstance(value, bool):
        raise UserConfigError(TypeError(f"field {name!r} has the wrong type"))
    return value


def _write_json(path: str, data: Any) -> None:
    try:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        with open(path, "w", encoding="utf-8") as fh:
            json.dump(data, fh, indent=2, ensure_ascii=False)
            fh.write("\n")
    except OSError as exc:
        raise UserConfigError(exc) from exc


def _read_json(path: str) -> Any:
    """Read a JSON file; OSError propagates if it cannot be opened."""
    with open(path, encoding="utf-8") as fh:
        try:
            return json.load(fh)
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise UserConfigError(exc) from exc


def _records(data: Any) -> list[dict]:
    """Turn a decoded JSON array into a list of objects."""
    if data is None:
        return []
    if not isinstance(data, list) or not all(
        e is None or isinstance(e, dict) for e in data
    ):
        raise UserConfigError(TypeError("expected a JSON array of objects"))
    return [e or {} for e in data]


@dataclass
class Var:
    """A single environment variable."""

    id: int
    key: str
    val: str
    description: str = ""

    def to_json(self) -> dict:
        return {"Id": self.id, "Key": self.key, "Val": self.val, "Description": self.description}

    @classmethod
    def from_json(cls, data: dict) -> "Var":
        return cls(
            id=_field(data, "Id", 0, int),
            key=_field(data, "Key", "", str),
            val=_field(data, "Val", "", str),
            description=_field(data, "Description", "", str),
        )


def new_var(key, val, description):
    """Create a variable with the next process-wide id."""
    return Var(next(_next_id), key, val, description)


def get_var_by_id(store, var_id):
    """Return the first variable with the given id, or None."""
    return next((v for v in store if v.id == var_id), None)


class VarStore:
    """An ordered list of variables persisted to ``vars.json``."""

    def __init__(self, items: Iterable[Var] | None = None, config_dir: str = CONFIG_DIR):
        self._items: list[Var] = list(items or [])
        self.config_dir = config_dir

    @property
    def path(self) -> str:
        return os.path.join(self.config_dir, VARS_FILE)

    def __iter__(self) -> Iterator[Var]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def all(self) -> list[Var]:
        return list(self._items)

    def _find(self, key: str) -> Var | None:
        return next((v for v in self._items if v.key == key), None)

    def get(self, key):
        found = self._find(key)
        return found.val if found else ""

    def get_description(self, key):
        found = self._find(key)
        return found.description if found else ""

    def add(self, key, val, description):
        self._items.append(new_var(key, val, description))

    def set(self, key, val, description):
        """Update the first variable with this key, or append a new one."""
        found = self._find(key)
        if found is None:
            self.add(key, val, description)
        else:
            found.val, found.description = val, description

    def get_id_from_key(self, key):
        found = self._find(key)
        return found.id if found else -1

    def save(self):
        _write_json(self.path, [v.to_json() for v in self._items])

    def load(self):
        """Replace the contents with those on disk; create the file if missing."""
        try:
            data = _read_json(self.path)
        except OSError:
            with contextlib.suppress(UserConfigError):
                self.save()
            return
        self._items = [Var.from_json(r) for r in _records(data)]