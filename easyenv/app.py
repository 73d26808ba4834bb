"""Three-pane terminal interface for assigning variables to collections."""

from __future__ import annotations

import argparse
import contextlib
import enum
import os
from dataclasses import dataclass

from .collection import Collection, CollectionStore
from .errors import UserConfigError
from .variables import CONFIG_DIR, Var, VarStore

_DEMO_VARS = [
    ("AWS_ACCOUNT", "123456789", "dev environment"),
    ("DB_HOST", "db-prod.example.com", "Primary database host"),
    ("DB_PORT", "5432", "Database port number"),
    ("DB_USER", "prod_user", "Database username"),
    ("DB_PASSWORD", "password", "Production database password"),
    ("DB_NAME", "prod_db", "Production database name"),
    ("AWS_ACCOUNT", "234567890", "Production AWS account ID"),
    ("S3_BUCKET", "myapp-prod-bucket", "Primary S3 bucket name"),
    ("REDIS_URL", "redis://cache.prod:6379", "Redis cache connection URL"),
    ("LOG_LEVEL", "info", "Application log verbosity level"),
    ("TELEMETRY_URL", "https://telemetry.example.com", "Telemetry endpoint URL"),
    ("TELEMETRY_TOKEN", "token", "Telemetry authentication token"),
    ("TELEMETRY_ENABLED", "true", "Enable telemetry collection"),
    ("TELEMETRY_INTERVAL", "60", "Telemetry data collection interval in seconds"),
    ("TELEMETRY_DEBUG", "false", "Enable debug mode for telemetry"),
    ("TELEMETRY_LOG_LEVEL", "debug", "Log level for telemetry data"),
    ("TELEMETRY_LOG_FILE", "/var/log/telemetry.log", "File path for telemetry logs"),
]

_DEMO_COLLECTIONS = [
    ("Dev_Env", ".env", [0, 1]),
    ("Staging_Env", ".env.staging", [2, 3]),
    ("Production_Env", ".env", [0, 2]),
    ("Dev_PostgreSQL", ".env", [1, 3, 4, 6, 9]),
    ("Monitoring_Logging", ".env", [5, 7, 8, 9, 10, 11, 12, 13, 14, 15]),
]


def demo_data(config_dir=CONFIG_DIR):
    """Sample variables and collections; variable ids match their list positions."""
    variables = VarStore(
        (Var(id=i, key=k, val=v, description=d) for i, (k, v, d) in enumerate(_DEMO_VARS)),
        config_dir=config_dir,
    )
    collections = CollectionStore(
        (Collection(name=n, filename=f, var_ids=list(ids)) for n, f, ids in _DEMO_COLLECTIONS),
        config_dir=config_dir,
    )
    return variables, collections


class Focus(enum.IntEnum):
    """Which pane receives keys."""

    VARS = 0
    COLLECTIONS = 1
    FILES = 2


@dataclass(frozen=True)
class _Entry:
    name: str
    is_dir: bool


def _clamp(value: int, size: int) -> int:
    return max(0, min(value, size - 1)) if size else 0


def _fit(text: str, width: int) -> str:
    return text[:width].ljust(width)


class Model:
    """State of the interface: three lists, the focused pane and a directory browser."""

    def __init__(self, variables, collections, start_dir=None):
        self.variables = variables
        self.collections = collections
        self.focus = Focus.VARS
        self.var_index = 0
        self.col_index = 0
        self.focused_collection = 0
        self.file_index = 0
        self.status = ""
        self.current_dir = os.path.abspath(
            start_dir if start_dir is not None else os.path.expanduser("~")
        )
        self.entries: list[_Entry] = []
        self._refresh_entries()

    def _refresh_entries(self) -> None:
        try:
            with os.scandir(self.current_dir) as it:
                found = [_Entry(e.name, e.is_dir()) for e in it]
        except OSError:
            found = []
        self.entries = sorted(found, key=lambda e: (not e.is_dir, e.name))
        self.file_index = 0

    def cycle_focus(self):
        self.focus = Focus((self.focus + 1) % len(Focus))
        return self.focus

    def selected_var_ids(self):
        """Ids of the variables in the focused collection."""
        if not len(self.collections):
            return set()
        return set(self.collections[self.focused_collection].var_ids)

    def move(self, delta):
        """Move the cursor of the focused pane, staying within its list."""
        if self.focus is Focus.VARS:
            self.var_index = _clamp(self.var_index + delta, len(self.variables))
        elif self.focus is Focus.COLLECTIONS:
            self.col_index = _clamp(self.col_index + delta, len(self.collections))
            self.focused_collection = self.col_index
        else:
            self.file_index = _clamp(self.file_index + delta, len(self.entries))

    def toggle_var(self):
        """Add the variable under the cursor to the focused collection, or remove it."""
        if not len(self.variables) or not len(self.collections):
            return
        var_id = self.variables[self.var_index].id
        target = self.collections[self.focused_collection]
        if var_id in target.var_ids:
            target.remove_var(var_id)
        else:
            target.add_var(var_id)
        with contextlib.suppress(UserConfigError):
            self.collections.save()

    def _current_collection(self) -> Collection | None:
        if not len(self.collections):
            return None
        return self.collections[self.col_index]

    def write_env_file(self):
        """Write the selected collection's env file into the browsed directory."""
        target = self._current_collection()
        if target is None:
            return
        target.write_to_env_file(
            self.current_dir, target.filename, self.collections.config_dir
        )
        self._refresh_entries()

    def write_symlink(self):
        """Link the selected collection's env file into the browsed directory."""
        target = self._current_collection()
        if target is None:
            return
        target.write_to_symlink(self.current_dir, self.collections.config_dir)
        self._refresh_entries()

    def _open_entry(self) -> None:
        if not self.entries:
            return
        entry = self.entries[self.file_index]
        if entry.is_dir:
            self.current_dir = os.path.join(self.current_dir, entry.name)
            self._refresh_entries()

    def _parent_dir(self) -> None:
        self.current_dir = os.path.dirname(self.current_dir) or self.current_dir
        self._refresh_entries()

    def handle_key(self, key):
        """Apply one key press; return False when the interface should quit."""
        if key in ("ctrl+c", "q"):
            return False
        if key in ("tab", "shift+tab"):
            self.cycle_focus()
            return True
        if key in ("up", "k"):
            self.move(-1)
        elif key in ("down", "j"):
            self.move(1)
        elif self.focus is Focus.VARS and key == "enter":
            self.toggle_var()
        elif self.focus is Focus.FILES:
            if key == "w":
                try:
                    self.write_env_file()
                except UserConfigError as exc:
                    self.status = f"Error writing env file: {exc}"
            elif key == "s":
                try:
                    self.write_symlink()
                except UserConfigError as exc:
                    self.status = f"Error creating symlink: {exc}"
            elif key in ("enter", "right", "l"):
                self._open_entry()
            elif key in ("left", "h", "backspace"):
                self._parent_dir()
        return True

    def _column(self, title, labels, cursor, focused, width, height):
        mark = "*" if focused else " "
        lines = [_fit(f"{mark}{title}", width)]
        rows = max(height - 1, 0)
        offset = max(0, cursor - rows + 1)
        for pos, label in enumerate(labels[offset:offset + rows], start=offset):
            pointer = ">" if pos == cursor and focused else " "
            lines.append(_fit(f"{pointer}{label}", width))
        lines.extend(_fit("", width) for _ in range(height - len(lines)))
        return lines[:height]

    def render_lines(self, width, height):
        """Render the three panes side by side as `height` lines of at most `width` chars."""
        col_w = max(width // 3, 1)
        selected = self.selected_var_ids()
        var_labels = [
            f"[{'x' if v.id in selected else ' '}] {v.key}={v.val}" for v in self.variables
        ]
        col_labels = [f"{c.name} ({c.filename})" for c in self.collections]
        file_labels = [e.name + ("/" if e.is_dir else "") for e in self.entries]
        columns = [
            self._column("Vars", var_labels, self.var_index,
                         self.focus is Focus.VARS, col_w, height),
            self._column("Collections", col_labels, self.col_index,
                         self.focus is Focus.COLLECTIONS, col_w, height),
            self._column(self.current_dir, file_labels, self.file_index,
                         self.focus is Focus.FILES, col_w, height),
        ]
        return ["".join(parts)[:width] for parts in zip(*columns)]


def _key_name(code: int) -> str:
    import curses

    names = {
        curses.KEY_UP: "up",
        curses.KEY_DOWN: "down",
        curses.KEY_LEFT: "left",
        curses.KEY_RIGHT: "right",
        curses.KEY_ENTER: "enter",
        curses.KEY_BACKSPACE: "backspace",
        curses.KEY_BTAB: "shift+tab",
        3: "ctrl+c",
        9: "tab",
        10: "enter",
        13: "enter",
        127: "backspace",
    }
    if code in names:
        return names[code]
    return chr(code) if 0 <= code < 0x110000 else ""


def _run(stdscr, model: Model) -> None:
    import curses

    with contextlib.suppress(curses.error):
        curses.curs_set(0)
    stdscr.keypad(True)
    while True:
        height, width = stdscr.getmaxyx()
        stdscr.erase()
        lines = model.render_lines(width - 1, max(height - 1, 1))
        if model.status:
            lines.append(model.status[: width - 1])
        for row, line in enumerate(lines[:height]):
            with contextlib.suppress(curses.error):
                stdscr.addstr(row, 0, line)
        stdscr.refresh()
        try:
            code = stdscr.getch()
        except KeyboardInterrupt:
            return
        if code == curses.KEY_RESIZE:
            continue
        if not model.handle_key(_key_name(code)):
            return


def main(argv=None):
    """Start the interface with sample data and save everything on quit."""
    import curses

    parser = argparse.ArgumentParser(prog="easyenv")
    parser.add_argument("--config-dir", default=CONFIG_DIR)
    parser.add_argument("--start-dir", default=None)
    args = parser.parse_args(argv)

    variables, collections = demo_data(args.config_dir)
    model = Model(variables, collections, args.start_dir)
    try:
        curses.wrapper(_run, model)
    except curses.error as exc:
        print(f"Error starting program: {exc}")
        return 1
    try:
        variables.save()
    except UserConfigError as exc:
        print(f"Error saving vars: {exc}")
        return 1
    try:
        collections.save()
    except UserConfigError as exc:
        print(f"Error saving collections: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())