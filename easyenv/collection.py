"""Named collections of variables and their JSON-backed store."""

from __future__ import annotations

import contextlib
import os
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from .errors import UserConfigError
from .variables import CONFIG_DIR, VarStore, _field, _read_json, _records, _write_json

COLLECTIONS_FILE = "collections.json"
ENV_FILES_DIR = "env_files"


@dataclass
class Collection:
    """A named set of variable ids written out to an env file."""

    name: str
    filename: str
    var_ids: list[int] = field(default_factory=list)

    def add_var(self, var_id):
        self.var_ids.append(var_id)

    def remove_var(self, var_id):
        """Remove the first occurrence of the id, if present."""
        with contextlib.suppress(ValueError):
            self.var_ids.remove(var_id)

    def vars(self, config_dir=CONFIG_DIR):
        """Variables from the saved store, in the order of this collection's ids."""
        store = VarStore(config_dir=config_dir)
        store.load()
        return [v for var_id in self.var_ids for v in store if v.id == var_id]

    def get_var_id(self, index):
        if not 0 <= index < len(self.var_ids):
            raise IndexError(f"no variable at position {index}")
        return self.var_ids[index]

    def var_count(self):
        return len(self.var_ids)

    def write_to_env_file(self, directory, filename, config_dir=CONFIG_DIR):
        """Write KEY=VALUE lines for this collection to directory/filename."""
        path = os.path.join(directory, filename)
        try:
            with open(path, "w", encoding="utf-8") as fh:
                fh.writelines(f"{v.key}={v.val}\n" for v in self.vars(config_dir))
        except OSError as exc:
            raise UserConfigError(exc) from exc

    def write_to_symlink(self, directory, config_dir=CONFIG_DIR):
        """Write the env file into the config dir and link directory/filename to it."""
        env_dir = os.path.join(config_dir, ENV_FILES_DIR)
        try:
            os.makedirs(env_dir, exist_ok=True)
        except OSError as exc:
            raise UserConfigError(exc) from exc

        env_name = self.name + ".env"
        self.write_to_env_file(env_dir, env_name, config_dir)

        link_path = os.path.join(directory, self.filename)
        try:
            os.stat(link_path)
        except FileNotFoundError:
            pass
        except OSError as exc:
            raise UserConfigError(exc) from exc
        else:
            try:
                os.remove(link_path)
            except OSError as exc:
                raise UserConfigError(exc) from exc

        try:
            os.symlink(os.path.abspath(os.path.join(env_dir, env_name)), link_path)
        except OSError as exc:
            raise UserConfigError(exc) from exc

    def to_json(self) -> dict:
        return {"Name": self.name, "Filename": self.filename, "VarIds": list(self.var_ids)}

    @classmethod
    def from_json(cls, data: dict) -> "Collection":
        ids = _field(data, "VarIds", [], list)
        for var_id in ids:
            if isinstance(var_id, bool) or not isinstance(var_id, int):
                raise UserConfigError(TypeError("VarIds must hold integers"))
        return cls(
            name=_field(data, "Name", "", str),
            filename=_field(data, "Filename", "", str),
            var_ids=list(ids),
        )


class CollectionStore:
    """An ordered list of collections persisted to ``collections.json``."""

    def __init__(self, items: Iterable[Collection] | None = None, config_dir: str = CONFIG_DIR):
        self._items: list[Collection] = list(items or [])
        self.config_dir = config_dir

    @property
    def path(self) -> str:
        return os.path.join(self.config_dir, COLLECTIONS_FILE)

    def __iter__(self) -> Iterator[Collection]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def save(self):
        _write_json(self.path, [c.to_json() for c in self._items])

    def load(self):
        """Replace the contents with those on disk; create the file if it cannot be opened."""
        try:
            data = _read_json(self.path)
        except OSError:
            with contextlib.suppress(UserConfigError):
                self.save()
            return
        self._items = [Collection.from_json(r) for r in _records(data)]