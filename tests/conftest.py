# Make the package importable when the repo isn't installed.
from pathlib import Path
import json
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def users():
    return [
        {"uid": "U1", "email": "ada@example.com", "firstName": "Ada"},
        {"uid": "U2", "email": "grace@example.com", "firstName": "Grace"},
        {"uid": "BOT", "email": "bot@wrike.com", "firstName": "Wrike"},
    ]


@pytest.fixture
def sprint_export(users):
    """One folder "Sprint 1" holding task A (with subtask B); task C is in no folder."""
    tasks = [
        {
            "id": "A",
            "title": "Task A",
            "description": "<p>Plan the <b>sprint</b></p>",
            "status": 0,
            "importance": "High",
            "author": "U1",
            "assigned": ["U2", "BOT"],
            "shared": [],
            "successors": ["B"],
            "comments": ["long thread"],
            "dateCreated": "2019-01-01",
        },
        {"id": "B", "title": "Task B", "status": 1, "author": "U2", "assigned": [], "shared": ["U1"]},
        {"id": "C", "title": "Task C", "status": 2, "customStatus": {"title": "Blocked"}, "author": "BOT", "assigned": [], "shared": []},
    ]
    folders = [
        {"id": "F1", "title": "Sprint 1", "description": "", "owners": ["U1"], "shared": [], "children": ["A"]},
    ]
    return {"users": users, "tasks": tasks, "folders": folders}


@pytest.fixture
def write_export(tmp_path):
    """Write an export dict as users.json / tasks.json / folders.json and return the paths."""

    def _write(export):
        paths = {}
        for kind in ("users", "tasks", "folders"):
            path = tmp_path / f"{kind}.json"
            path.write_text(json.dumps(export[kind]), encoding="utf-8")
            paths[kind] = path
        return paths

    return _write
