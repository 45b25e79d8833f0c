import json
import os
import stat

import pytest

from wrike2clickup.errors import OutputWriteError
from wrike2clickup.utils.writers import render_csv, write_csv, write_json


def test_render_csv_uses_given_columns():
    text = render_csv([{"id": "A", "title": "Hello, world", "extra": 1, "list": None}], ["id", "title", "list"])
    assert text == 'id,title,list\nA,"Hello, world",\n'


def test_write_csv_and_json(tmp_path):
    csv_path = write_csv(tmp_path / "out.csv", [{"id": "A"}], ["id"])
    assert csv_path.read_text(encoding="utf-8") == "id\nA\n"

    json_path = write_json(tmp_path / "out.json", {"tasks": [{"id": "A", "title": "Café"}]})
    assert json.loads(json_path.read_text(encoding="utf-8")) == {"tasks": [{"id": "A", "title": "Café"}]}


def test_no_temporary_files_left_behind(tmp_path):
    write_json(tmp_path / "out.json", [])
    assert [p.name for p in tmp_path.iterdir()] == ["out.json"]


def test_unwritable_target_raises(tmp_path):
    target = tmp_path / "missing-dir" / "out.csv"
    with pytest.raises(OutputWriteError) as excinfo:
        write_csv(target, [{"id": "A"}], ["id"])
    assert excinfo.value.path == str(target)
    assert not target.exists()


def _umask():
    mask = os.umask(0)
    os.umask(mask)
    return mask


def test_new_file_follows_umask(tmp_path):
    path = write_csv(tmp_path / "out.csv", [{"id": "A"}], ["id"])
    assert stat.S_IMODE(path.stat().st_mode) == 0o666 & ~_umask()


def test_replaced_file_keeps_its_mode(tmp_path):
    target = tmp_path / "out.json"
    target.write_text("old", encoding="utf-8")
    target.chmod(0o640)
    write_json(target, {"tasks": []})
    assert stat.S_IMODE(target.stat().st_mode) == 0o640
    assert json.loads(target.read_text(encoding="utf-8")) == {"tasks": []}
