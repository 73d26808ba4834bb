import os

import pytest

from easyenv.app import Focus, Model, demo_data
from easyenv.collection import Collection, CollectionStore
from easyenv.variables import Var, VarStore


@pytest.fixture
def setup(tmp_path):
    config = tmp_path / "config"
    work = tmp_path / "work"
    work.mkdir()
    (work / "sub").mkdir()
    (work / "afile.txt").write_text("x")
    variables = VarStore(
        [Var(0, "A", "1", ""), Var(1, "B", "2", ""), Var(2, "C", "3", "")],
        config_dir=str(config),
    )
    variables.save()
    collections = CollectionStore(
        [Collection("First", ".env", [0]), Collection("Second", ".env.other", [1, 2])],
        config_dir=str(config),
    )
    model = Model(variables, collections, str(work))
    return model, config, work


def test_demo_data_contents(tmp_path):
    variables, collections = demo_data(str(tmp_path))
    assert len(variables) == 17
    assert len(collections) == 5
    assert collections[0].name == "Dev_Env"
    assert collections[0].var_ids == [0, 1]
    assert collections[1].filename == ".env.staging"
    assert [v.id for v in variables] == list(range(17))


def test_cycle_focus_wraps(setup):
    model, _, _ = setup
    assert model.focus is Focus.VARS
    assert model.cycle_focus() is Focus.COLLECTIONS
    assert model.cycle_focus() is Focus.FILES
    assert model.cycle_focus() is Focus.VARS


def test_move_clamps(setup):
    model, _, _ = setup
    model.move(-5)
    assert model.var_index == 0
    model.move(10)
    assert model.var_index == len(model.variables) - 1


def test_collection_focus_changes_selection(setup):
    model, _, _ = setup
    assert model.selected_var_ids() == {0}
    model.handle_key("tab")
    model.handle_key("down")
    assert model.focused_collection == 1
    assert model.selected_var_ids() == {1, 2}


def test_toggle_adds_and_saves(setup, tmp_path):
    model, config, _ = setup
    model.move(1)
    model.toggle_var()
    assert model.selected_var_ids() == {0, 1}
    stored = CollectionStore(config_dir=str(config))
    stored.load()
    assert stored[0].var_ids == [0, 1]


def test_toggle_twice_removes(setup):
    model, _, _ = setup
    model.handle_key("enter")
    assert model.selected_var_ids() == set()
    model.handle_key("enter")
    assert model.selected_var_ids() == {0}


def test_quit_keys(setup):
    model, _, _ = setup
    assert model.handle_key("q") is False
    assert model.handle_key("ctrl+c") is False
    assert model.handle_key("down") is True


def test_write_env_file(setup):
    model, _, work = setup
    model.focus = Focus.FILES
    model.handle_key("w")
    assert (work / ".env").read_text() == "A=1\n"
    assert any(e.name == ".env" for e in model.entries)


def test_write_symlink(setup):
    model, config, work = setup
    model.col_index = 1
    model.focus = Focus.FILES
    model.handle_key("s")
    link = work / ".env.other"
    assert link.is_symlink()
    assert link.read_text() == "B=2\nC=3\n"
    assert os.path.samefile(link, config / "env_files" / "Second.env")


def test_file_browsing(setup):
    model, _, work = setup
    model.focus = Focus.FILES
    assert model.entries[0].name == "sub"
    model.handle_key("enter")
    assert model.current_dir == str(work / "sub")
    model.handle_key("backspace")
    assert model.current_dir == str(work)


def test_render_lines_shape(setup):
    model, _, _ = setup
    lines = model.render_lines(90, 8)
    assert len(lines) == 8
    assert all(len(line) <= 90 for line in lines)
    assert "*Vars" in lines[0]
    assert "Collections" in lines[0]
    assert any("[x] A=1" in line for line in lines)
    assert any("[ ] B=2" in line for line in lines)