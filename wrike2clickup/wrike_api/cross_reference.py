"""
Folder membership of tasks, expressed as ClickUp tags and lists.

ClickUp (sadly) cannot link the same task to several lists, while a Wrike
task can sit in any number of folders. Every folder a task belongs to
becomes a tag, except the excluded ones, and the first folder named in
``list_names`` becomes the task's one list.
"""
from __future__ import annotations

from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Sequence, Tuple

# (folder title, IDs of every task reachable from the folder)
FolderTasks = Tuple[Optional[str], Iterable[Any]]


class FolderMembership:
    """Precomputed ``task id -> folder titles`` index, in folder-input order."""

    def __init__(
        self,
        folders: Sequence[FolderTasks],
        exclude_tags: FrozenSet[str] = frozenset({""}),
        list_names: FrozenSet[str] = frozenset({""}),
    ):
        self.exclude_tags = frozenset(exclude_tags)
        self.list_names = frozenset(list_names)
        self._titles: Dict[Any, List[Optional[str]]] = {}
        for title, task_ids in folders:
            if title is not None and not isinstance(title, str):
                title = str(title)
            # a folder counts once per task even if it reaches it twice
            for task_id in dict.fromkeys(task_ids):
                self._titles.setdefault(task_id, []).append(title)

    def tags_for(self, task_id: Any) -> Optional[str]:
        """Comma-separated titles of the task's folders, minus excluded ones."""
        tags = [title for title in self._titles.get(task_id, ()) if title not in self.exclude_tags]
        return ",".join(title or "" for title in tags) or None

    def list_for(self, task_id: Any) -> Optional[str]:
        """Title of the first list-eligible folder holding the task."""
        for title in self._titles.get(task_id, ()):
            if title in self.list_names:
                return title
        return None
