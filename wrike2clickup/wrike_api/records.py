"""
Assembly of flat, ClickUp-ready records.

Each assembler starts from a copy of the source object minus a fixed drop
list, then overwrites the fields that need resolving (users, status,
Markdown). Every other field passes through untouched.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Optional

from .identity import UserDirectory
from .status import status_label

MarkdownConverter = Callable[[Optional[str]], Optional[str]]

# Bulky or irrelevant for ClickUp.
DROPPED_TASK_FIELDS = frozenset({"comments", "googleDocs", "attachments", "timelog", "duration", "successors"})
DROPPED_FOLDER_FIELDS = frozenset(
    {"comments", "attachments", "googleDocs", "isProject", "dateCreated", "projectCreatedDate", "children"}
)

# Column order of ClickUp's CSV import.
CSV_FIELDS = (
    "id",
    "title",
    "description",
    "status",
    "customStatus",
    "tags",
    "list",
    "importance",
    "author",
    "assigned",
    "shared",
    "dateCreated",
    "dateStart",
    "dateDue",
)


def _without(source: Dict[str, Any], dropped: frozenset) -> Dict[str, Any]:
    return {key: value for key, value in source.items() if key not in dropped}


def assemble_task(
    task: Dict[str, Any],
    users: UserDirectory,
    to_markdown: MarkdownConverter,
    tags: Optional[str] = None,
    list_title: Optional[str] = None,
) -> Dict[str, Any]:
    """Prepare a flattened task in a format that's actually usable by ClickUp."""
    record = _without(task, DROPPED_TASK_FIELDS)
    record.update(
        {
            "id": task.get("id"),
            "title": task.get("title"),
            "description": to_markdown(task.get("description")),
            "customStatus": status_label(task),
            "author": users.email_for(task.get("author")),
            "assigned": users.emails_for(task.get("assigned")),
            "shared": users.emails_for(task.get("shared")),
            "tags": tags,
            "list": list_title,
        }
    )
    return record


def assemble_folder(
    folder: Dict[str, Any],
    users: UserDirectory,
    to_markdown: MarkdownConverter,
    task_ids: Iterable[Any] = (),
) -> Dict[str, Any]:
    """Prepare a folder (a future ClickUp list) with its resolved task membership."""
    record = _without(folder, DROPPED_FOLDER_FIELDS)
    record.update(
        {
            "id": folder.get("id"),
            "title": folder.get("title"),
            "description": to_markdown(folder.get("description")),
            "author": users.email_for(folder.get("author")),
            "owners": users.emails_for(folder.get("owners")),
            "shared": users.emails_for(folder.get("shared")),
            "tasks": list(task_ids),
        }
    )
    return record


def csv_rows(records: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Project records onto CSV_FIELDS; absent fields become None."""
    return [{name: record.get(name) for name in CSV_FIELDS} for record in records]
