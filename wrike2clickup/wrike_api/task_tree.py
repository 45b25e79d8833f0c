"""
Flattening of Wrike successor (subtask) trees.

Wrike nests subtasks under ``successors``, either as full task objects or
as task IDs. ClickUp wants a flat list where each subtask points back at
its parent, so every tree is walked depth-first, pre-order, and turned
into parent-pointer records:

* ``parent_id`` on each successor is the ID of the task it was nested in;
* ``successor_ids`` on a parent is the comma-joined IDs of its immediate
  successors;
* ``successors`` itself never appears on an emitted record.

Records are shallow copies; the parsed export is left untouched.
"""
from __future__ import annotations

from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Tuple, Union

from ..errors import TaskCycleError
from ..utils.logger import get_logger
from .utils import as_list, is_id

log = get_logger(__name__)

Task = Dict[str, Any]
TaskRef = Union[Task, str, int]


class TaskIndex:
    """Lookup of raw tasks by ID. The first task with a given ID wins."""

    def __init__(self, tasks: Iterable[Task]):
        self._by_id: Dict[Any, Task] = {}
        for task in tasks:
            self._by_id.setdefault(task.get("id"), task)

    def __contains__(self, task_id: Any) -> bool:
        return task_id in self._by_id

    def __len__(self) -> int:
        return len(self._by_id)

    def get(self, task_id: Any) -> Optional[Task]:
        return self._by_id.get(task_id)


def resolve_task(ref: Optional[TaskRef], index: Optional[TaskIndex] = None) -> Optional[Task]:
    """Return the task for a nested object or an ID; None when unknown."""
    if ref is None:
        return None
    if isinstance(ref, dict):
        task_id = ref.get("id")
        if task_id is not None and not is_id(task_id):
            log.debug("Ignoring nested task with unusable id %r", task_id)
            return None
        return ref
    if not is_id(ref):
        log.debug("Ignoring task reference %r", ref)
        return None
    task = index.get(ref) if index is not None else None
    if task is None:
        log.debug("Task %r is referenced but not in the export", ref)
    return task


def flatten_task(task: Optional[TaskRef], index: Optional[TaskIndex] = None) -> List[Task]:
    """
    Traverse all successors of a task and flatten them to a single list.

    The task comes first, then each successor subtree in array order.
    Raises TaskCycleError if a task is reachable from its own successors.
    """
    root = resolve_task(task, index)
    if root is None:
        return []

    flat: List[Task] = []
    # (task, parent id, ids on the path from the root)
    stack: List[Tuple[Task, Any, FrozenSet[Any]]] = [(root, None, frozenset())]
    while stack:
        current, parent_id, ancestors = stack.pop()
        task_id = current.get("id")
        if task_id in ancestors:
            raise TaskCycleError(task_id)

        record = {key: value for key, value in current.items() if key != "successors"}
        if parent_id is not None:
            record["parent_id"] = parent_id

        successors = current.get("successors")
        if successors is not None:
            children = [child for child in (resolve_task(ref, index) for ref in as_list(successors)) if child is not None]
            successor_ids = ",".join(str(child.get("id")) for child in children)
            if successor_ids:
                record["successor_ids"] = successor_ids
            else:
                record.pop("successor_ids", None)
            path = ancestors | {task_id}
            # reversed so the first successor is popped first
            for child in reversed(children):
                stack.append((child, task_id, path))

        flat.append(record)
    return flat


def flatten_tasks(tasks: Iterable[Optional[TaskRef]], index: Optional[TaskIndex] = None) -> List[Task]:
    """Flatten every task (or task ID) in ``tasks`` and concatenate the results."""
    flat: List[Task] = []
    for task in tasks:
        flat.extend(flatten_task(task, index))
    return flat


def unique_by_id(tasks: Iterable[Task]) -> List[Task]:
    """Drop repeated task IDs, keeping the first occurrence."""
    seen = set()
    unique: List[Task] = []
    for task in tasks:
        task_id = task.get("id")
        if task_id in seen:
            continue
        seen.add(task_id)
        unique.append(task)
    return unique
