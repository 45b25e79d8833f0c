"""In-memory conversion of one Wrike export snapshot."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List

from ..utils.data_loading import WrikeExport
from ..utils.logger import get_logger
from ..utils.markdown import html_to_markdown
from .cross_reference import FolderMembership
from .identity import UserDirectory
from .records import MarkdownConverter, assemble_folder, assemble_task
from .task_tree import TaskIndex, flatten_tasks, unique_by_id
from .utils import as_list

log = get_logger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    tasks: List[Dict[str, Any]] = field(default_factory=list)
    folders: List[Dict[str, Any]] = field(default_factory=list)
    users: List[Dict[str, Any]] = field(default_factory=list)

    def as_document(self) -> Dict[str, List[Dict[str, Any]]]:
        return {"users": self.users, "folders": self.folders, "tasks": self.tasks}


def transform_export(
    export: WrikeExport,
    exclude_tags: FrozenSet[str] = frozenset({""}),
    list_names: FrozenSet[str] = frozenset({""}),
    to_markdown: MarkdownConverter = html_to_markdown,
) -> ConversionResult:
    """
    Flatten, cross-reference and resolve a whole export.

    The result is deterministic: the same export and settings always give
    the same records in the same order.
    """
    users = UserDirectory(export.users)
    index = TaskIndex(export.tasks)

    tasks = unique_by_id(flatten_tasks(export.tasks, index))
    log.info("Flattened %d top-level tasks into %d distinct tasks", len(export.tasks), len(tasks))

    folder_task_ids = []
    for folder in export.folders:
        members = unique_by_id(flatten_tasks(as_list(folder.get("children")), index))
        folder_task_ids.append([task.get("id") for task in members])

    membership = FolderMembership(
        [(folder.get("title"), task_ids) for folder, task_ids in zip(export.folders, folder_task_ids)],
        exclude_tags=exclude_tags,
        list_names=list_names,
    )

    task_records = [
        assemble_task(
            task,
            users,
            to_markdown,
            tags=membership.tags_for(task.get("id")),
            list_title=membership.list_for(task.get("id")),
        )
        for task in tasks
    ]
    folder_records = [
        assemble_folder(folder, users, to_markdown, task_ids)
        for folder, task_ids in zip(export.folders, folder_task_ids)
    ]
    listed = sum(1 for record in task_records if record.get("list"))
    log.info("%d of %d tasks were assigned a list", listed, len(task_records))

    return ConversionResult(tasks=task_records, folders=folder_records, users=users.active_users)
