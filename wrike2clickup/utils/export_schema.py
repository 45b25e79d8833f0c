from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, ConfigDict

# Wrike IDs are opaque; exports carry them as strings but numbers are accepted.
WrikeId = Union[str, int]

# Only the identifying key is checked. Every other field is passed through
# as-is and normalised where it is consumed.


class UserModel(BaseModel):
    model_config = ConfigDict(extra="allow")

    uid: WrikeId
    email: Any = None
    firstName: Any = None


class TaskModel(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: WrikeId
    title: Any = None
    description: Any = None
    status: Any = None
    customStatus: Any = None
    author: Any = None
    assigned: Any = None
    shared: Any = None
    # nested task objects or task IDs
    successors: Any = None


class FolderModel(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: WrikeId
    title: Any = None
    description: Any = None
    author: Any = None
    owners: Any = None
    shared: Any = None
    children: Any = None


SCHEMAS = {
    "users": UserModel,
    "tasks": TaskModel,
    "folders": FolderModel,
}
