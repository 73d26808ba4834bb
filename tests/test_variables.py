import json

import pytest

from easyenv.errors import UserConfigError
from easyenv.variables import Var, VarStore, get_var_by_id, new_var


def test_new_var_ids_increase():
    a = new_var("A", "1", "first")
    b = new_var("B", "2", "second")
    assert b.id == a.id + 1
    assert (a.key, a.val, a.description) == ("A", "1", "first")


def test_get_and_description():
    store = VarStore(config_dir="unused")
    store.add("DB_HOST", "db.example.com", "host")
    assert store.get("DB_HOST") == "db.example.com"
    assert store.get_description("DB_HOST") == "host"


def test_get_missing_returns_empty():
    store = VarStore(config_dir="unused")
    assert store.get("NOPE") == ""
    assert store.get_description("NOPE") == ""
    assert store.get_id_from_key("NOPE") == -1


def test_get_returns_first_duplicate():
    store = VarStore(config_dir="unused")
    store.add("AWS_ACCOUNT", "one", "")
    store.add("AWS_ACCOUNT", "two", "")
    assert store.get("AWS_ACCOUNT") == "one"
    assert store.get_id_from_key("AWS_ACCOUNT") == store[0].id


def test_set_updates_existing():
    store = VarStore(config_dir="unused")
    store.add("K", "old", "old desc")
    store.set("K", "new", "new desc")
    assert len(store) == 1
    assert store.get("K") == "new"
    assert store.get_description("K") == "new desc"


def test_set_appends_missing():
    store = VarStore(config_dir="unused")
    store.add("A", "1", "")
    store.set("B", "2", "d")
    assert [v.key for v in store] == ["A", "B"]


def test_all_returns_items_in_order():
    store = VarStore(config_dir="unused")
    for key in ("X", "Y", "Z"):
        store.add(key, key.lower(), "")
    assert [v.key for v in store.all()] == ["X", "Y", "Z"]


def test_get_var_by_id():
    store = VarStore(config_dir="unused")
    store.add("A", "1", "")
    store.add("B", "2", "")
    target = store[1]
    assert get_var_by_id(store, target.id) is target
    assert get_var_by_id(store, -5) is None


def test_save_load_roundtrip(tmp_path):
    store = VarStore(config_dir=str(tmp_path / "cfg"))
    store.add("LOG_LEVEL", "info", "verbosity")
    store.add("PORT", "5432", "")
    store.save()
    loaded = VarStore(config_dir=str(tmp_path / "cfg"))
    loaded.load()
    assert loaded.all() == store.all()


def test_saved_json_uses_field_names(tmp_path):
    store = VarStore([Var(7, "K", "V", "D")], config_dir=str(tmp_path))
    store.save()
    data = json.loads((tmp_path / "vars.json").read_text())
    assert data == [{"Id": 7, "Key": "K", "Val": "V", "Description": "D"}]


def test_load_missing_creates_file(tmp_path):
    store = VarStore(config_dir=str(tmp_path))
    store.load()
    assert len(store) == 0
    assert json.loads((tmp_path / "vars.json").read_text()) == []


def test_load_replaces_contents(tmp_path):
    (tmp_path / "vars.json").write_text('[{"Id": 3, "Key": "A", "Val": "b"}]')
    store = VarStore([Var(1, "OLD", "x")], config_dir=str(tmp_path))
    store.load()
    assert store.all() == [Var(3, "A", "b", "")]


def test_load_is_case_insensitive(tmp_path):
    (tmp_path / "vars.json").write_text('[{"id": 4, "key": "A", "val": "v"}]')
    store = VarStore(config_dir=str(tmp_path))
    store.load()
    assert store[0] == Var(4, "A", "v", "")


def test_load_invalid_json_raises(tmp_path):
    (tmp_path / "vars.json").write_text("{not json")
    store = VarStore(config_dir=str(tmp_path))
    with pytest.raises(UserConfigError):
        store.load()


def test_load_wrong_type_raises(tmp_path):
    (tmp_path / "vars.json").write_text('[{"Id": "x"}]')
    store = VarStore(config_dir=str(tmp_path))
    with pytest.raises(UserConfigError):
        store.load()