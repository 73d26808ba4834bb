# easyenv

easyenv groups environment variables into named collections and writes
each collection out as a `.env` file. It has a small library for storing
variables and collections as JSON, and a curses interface with three
panes:

- **Vars**: every variable, shown as `[x] KEY=value`. The `x` marks the
  variables that belong to the selected collection.
- **Collections**: the collections, shown as `name (filename)`.
- **Files**: a directory browser. Its title is the current directory,
  and directories are listed first with a trailing `/`.

The focused pane has a `*` before its title. Its cursor is marked with `>`.

## Installation

```
pip install .
```

The interface uses the standard `curses` module, so it needs a platform
that provides it.

## Usage

```
easyenv [--config-dir DIR] [--start-dir DIR]
```

- `--config-dir`: where the JSON files and the `env_files/` directory
  live (default `./config`).
- `--start-dir`: the directory the file browser opens in (default: your
  home directory).

Keys:

| Key                            | Action                                                                  |
|--------------------------------|-------------------------------------------------------------------------|
| `tab`, `shift+tab`             | Move focus to the next pane                                             |
| `up` / `k`, `down` / `j`       | Move the cursor in the focused pane                                     |
| `enter`                        | In Vars: add the variable to the selected collection, or remove it, then save `collections.json` |
| `enter`, `right`, `l`          | In Files: open the directory under the cursor                           |
| `left`, `h`, `backspace`       | In Files: go to the parent directory                                    |
| `w`                            | In Files: write the selected collection to its file name in the current directory |
| `s`                            | In Files: write the collection into the config directory and symlink it into the current directory |
| `q`, `ctrl+c`                  | Quit                                                                    |

Errors from `w` and `s` appear on a status line at the bottom of the
screen.

The `s` key writes the collection to `<config>/env_files/<name>.env`. In
the current directory it then creates a symlink to that file, using the
absolute path and named after the collection's file name. If something
already has that name, it is removed first.

`w` and `s` write `KEY=value` lines. They take the variables from
`vars.json` in the config directory, not from the variables on screen.

## What the interface does not do

- It always starts from a built-in set of sample variables and
  collections. It does not read `vars.json` or `collections.json` at
  startup.
- When you quit, it saves the variables and collections on screen to the
  config directory. This replaces what was there before.
- It cannot create, edit or delete variables or collections. It can only
  change which variables a collection holds. For anything more, use the
  library.

## Storage

State is kept as indented JSON in the config directory:

- `vars.json`: a list of objects with `Id`, `Key`, `Val` and
  `Description`.
- `collections.json`: a list of objects with `Name`, `Filename` and
  `VarIds`.

`VarStore.load()` and `CollectionStore.load()` replace the store's
contents with the file's. If the file cannot be opened, they write the
store's current contents to it instead. If the file holds malformed JSON
or values of the wrong type, they raise `UserConfigError`.

## Library use

```python
from easyenv.variables import VarStore
from easyenv.collection import Collection, CollectionStore

store = VarStore([], "./config")
store.add("DB_HOST", "localhost", "Database host")
store.save()

dev = Collection(name="Dev_Env", filename=".env")
dev.add_var(store.get_id_from_key("DB_HOST"))
CollectionStore([dev], "./config").save()
dev.write_to_env_file(".", ".env", "./config")
```

- `easyenv.variables`: `Var`, `VarStore` (`all`, `get`,
  `get_description`, `add`, `set`, `get_id_from_key`, `save`, `load`),
  `new_var` and `get_var_by_id`. Ids come from a counter shared by the
  whole process and start at 0. `get` and `get_description` return `""`
  for an unknown key. `get_id_from_key` returns `-1` for one.
- `easyenv.collection`: `Collection` (`add_var`, `remove_var`, `vars`,
  `get_var_id`, `var_count`, `write_to_env_file`, `write_to_symlink`)
  and `CollectionStore` (`save`, `load`). `get_var_id` raises
  `IndexError` for a position out of range.
- `easyenv.app`: `Model`, which holds the interface state and takes key
  names through `handle_key`; `demo_data`; and `main`.

Errors from reading or writing files are raised as
`easyenv.errors.UserConfigError`.