import pytest

from wrike2clickup.errors import TaskCycleError
from wrike2clickup.wrike_api.task_tree import TaskIndex, flatten_task, flatten_tasks, unique_by_id


def _ids(tasks):
    return [t["id"] for t in tasks]


def test_flatten_none_is_empty():
    assert flatten_task(None) == []
    assert flatten_tasks([None, None]) == []


def test_flatten_task_without_successors():
    task = {"id": "A", "title": "Solo"}
    assert flatten_task(task) == [{"id": "A", "title": "Solo"}]


def test_flatten_is_preorder_and_keeps_sibling_order():
    tree = {
        "id": "A",
        "successors": [
            {"id": "B", "successors": [{"id": "D"}, {"id": "E"}]},
            {"id": "C", "successors": [{"id": "F"}]},
        ],
    }
    flat = flatten_task(tree)
    assert _ids(flat) == ["A", "B", "D", "E", "C", "F"]
    position = {t["id"]: i for i, t in enumerate(flat)}
    for task in flat:
        if "parent_id" in task:
            assert position[task["parent_id"]] < position[task["id"]]


def test_flatten_links_parents_and_successors():
    tree = {"id": "A", "successors": [{"id": "B", "successors": [{"id": "C"}]}, {"id": "D"}]}
    by_id = {t["id"]: t for t in flatten_task(tree)}

    assert "parent_id" not in by_id["A"]
    assert by_id["A"]["successor_ids"] == "B,D"
    assert by_id["B"]["parent_id"] == "A"
    assert by_id["B"]["successor_ids"] == "C"
    assert by_id["C"]["parent_id"] == "B"
    assert by_id["D"]["parent_id"] == "A"
    assert all("successors" not in t for t in by_id.values())


def test_flatten_empty_successors_leaves_no_successor_ids():
    flat = flatten_task({"id": "A", "successors": []})
    assert flat == [{"id": "A"}]


def test_flatten_does_not_mutate_input():
    tree = {"id": "A", "successors": [{"id": "B"}]}
    flatten_task(tree)
    assert tree == {"id": "A", "successors": [{"id": "B"}]}


def test_flatten_resolves_successor_ids_through_index():
    raw = [
        {"id": "A", "successors": ["B", "missing"]},
        {"id": "B", "successors": ["C"]},
        {"id": "C"},
    ]
    index = TaskIndex(raw)
    flat = flatten_task("A", index)
    assert _ids(flat) == ["A", "B", "C"]
    assert flat[0]["successor_ids"] == "B"
    assert flat[2]["parent_id"] == "B"


def test_unknown_task_id_flattens_to_nothing():
    assert flatten_task("nope", TaskIndex([])) == []
    assert flatten_task("nope") == []


def test_cycle_raises_instead_of_looping():
    index = TaskIndex([{"id": "A", "successors": ["B"]}, {"id": "B", "successors": ["A"]}])
    with pytest.raises(TaskCycleError) as excinfo:
        flatten_task("A", index)
    assert excinfo.value.task_id == "A"


def test_self_nested_task_raises():
    task = {"id": "A"}
    task["successors"] = [task]
    with pytest.raises(TaskCycleError):
        flatten_task(task)


def test_shared_subtree_is_not_a_cycle():
    index = TaskIndex(
        [
            {"id": "A", "successors": ["B", "C"]},
            {"id": "B", "successors": ["D"]},
            {"id": "C", "successors": ["D"]},
            {"id": "D"},
        ]
    )
    flat = flatten_task("A", index)
    assert _ids(flat) == ["A", "B", "D", "C", "D"]
    assert _ids(unique_by_id(flat)) == ["A", "B", "D", "C"]


def test_deep_chain_does_not_hit_recursion_limit():
    depth = 2000
    raw = [{"id": str(i), "successors": [str(i + 1)]} for i in range(depth)] + [{"id": str(depth)}]
    flat = flatten_task("0", TaskIndex(raw))
    assert len(flat) == depth + 1
    assert flat[-1]["parent_id"] == str(depth - 1)


def test_unique_by_id_keeps_first_occurrence():
    tasks = [{"id": "A", "v": 1}, {"id": "B"}, {"id": "A", "v": 2}]
    assert unique_by_id(tasks) == [{"id": "A", "v": 1}, {"id": "B"}]


def test_task_index_first_wins():
    index = TaskIndex([{"id": "A", "v": 1}, {"id": "A", "v": 2}])
    assert len(index) == 1
    assert "A" in index
    assert index.get("A")["v"] == 1


def test_loose_successor_values_are_ignored():
    index = TaskIndex([{"id": "A", "successors": ["B", None, ["C"]]}, {"id": "B"}, {"id": "C"}])
    flat = flatten_task("A", index)
    assert _ids(flat) == ["A", "B"]
    assert flat[0]["successor_ids"] == "B"


def test_single_successor_id_is_treated_as_a_list():
    index = TaskIndex([{"id": "A", "successors": "B"}, {"id": "B"}])
    assert _ids(flatten_task("A", index)) == ["A", "B"]


def test_nested_task_with_unusable_id_is_skipped():
    flat = flatten_task({"id": "A", "successors": [{"id": ["x"]}, {"id": "B"}]})
    assert _ids(flat) == ["A", "B"]
