"""
Exceptions raised by the converter.

Anything deriving from Wrike2ClickupError is fatal for a run: the CLI logs
the message and exits with a non-zero status.
"""
from __future__ import annotations


class Wrike2ClickupError(Exception):
    """Base class for converter errors."""


class ExportLoadError(Wrike2ClickupError):
    """An input export file could not be read or parsed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Could not load {path}: {reason}")
        self.path = path
        self.reason = reason


class OutputWriteError(Wrike2ClickupError):
    """The output file could not be written."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Could not write {path}: {reason}")
        self.path = path
        self.reason = reason


class TaskCycleError(Wrike2ClickupError):
    """A task is its own (indirect) successor."""

    def __init__(self, task_id) -> None:
        super().__init__(f"Task {task_id} appears among its own successors")
        self.task_id = task_id


__all__ = ["Wrike2ClickupError", "ExportLoadError", "OutputWriteError", "TaskCycleError"]
