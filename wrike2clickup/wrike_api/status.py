"""Map Wrike task statuses to display names."""
from typing import Any, Dict, Optional

from .utils import is_id

STATUS_NAMES = {
    0: "New",
    1: "Finished",
    2: "Waiting",
    3: "Canceled",
}


def status_label(task: Dict[str, Any]) -> Optional[str]:
    """
    Return the full name of the task's status.

    A custom status wins when set; otherwise the numeric code is looked up
    in STATUS_NAMES. Codes outside the table give None.
    """
    custom = task.get("customStatus")
    if custom:
        return custom.get("title") if isinstance(custom, dict) else None
    status = task.get("status")
    if not is_id(status):
        return None
    return STATUS_NAMES.get(status)
