"""
Whole-file loading of a Wrike account export.

Each file is read once and parsed completely before any transformation
starts. Entries missing their identifying key are logged and skipped; any
other file-level problem is fatal.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Type, Union

from pydantic import BaseModel, ValidationError

from ..errors import ExportLoadError
from .export_schema import SCHEMAS
from .logger import get_logger

log = get_logger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class WrikeExport:
    """The three parsed collections of one export snapshot."""

    users: List[Dict[str, Any]] = field(default_factory=list)
    tasks: List[Dict[str, Any]] = field(default_factory=list)
    folders: List[Dict[str, Any]] = field(default_factory=list)


def read_json_file(path: PathLike) -> Any:
    """Read and parse a JSON file, raising ExportLoadError on failure."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        raise ExportLoadError(str(path), "file not found")
    except json.JSONDecodeError as e:
        raise ExportLoadError(str(path), f"invalid JSON ({e.msg} at line {e.lineno})")
    except (OSError, UnicodeDecodeError) as e:
        raise ExportLoadError(str(path), str(e))


def _checked_entries(entries: List[Any], model: Type[BaseModel], path: Path) -> List[Dict[str, Any]]:
    kept: List[Dict[str, Any]] = []
    for position, entry in enumerate(entries):
        if not isinstance(entry, dict):
            log.warning("Skipping entry #%d in %s: not an object", position, path)
            continue
        try:
            model.model_validate(entry)
        except ValidationError as e:
            log.warning(
                "Skipping entry #%d in %s: %d field error(s), first: %s",
                position,
                path,
                e.error_count(),
                e.errors()[0]["msg"],
            )
            continue
        kept.append(entry)
    return kept


def load_collection(path: PathLike, kind: str) -> List[Dict[str, Any]]:
    """
    Load one export collection (``users``, ``tasks`` or ``folders``).

    The file must hold a top-level JSON array. Entries are returned as the
    raw parsed dicts so that fields the converter does not know about are
    passed through untouched.
    """
    path = Path(path)
    data = read_json_file(path)
    if not isinstance(data, list):
        raise ExportLoadError(str(path), f"expected a JSON array of {kind}, got {type(data).__name__}")
    entries = _checked_entries(data, SCHEMAS[kind], path)
    log.debug("Loaded %d %s from %s", len(entries), kind, path)
    return entries


def load_export(users_path: PathLike, tasks_path: PathLike, folders_path: PathLike) -> WrikeExport:
    """Load the users, tasks and folders files of one export."""
    return WrikeExport(
        users=load_collection(users_path, "users"),
        tasks=load_collection(tasks_path, "tasks"),
        folders=load_collection(folders_path, "folders"),
    )
