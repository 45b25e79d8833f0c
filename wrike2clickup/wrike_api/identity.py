"""Resolve Wrike user IDs to email addresses."""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from ..utils.logger import get_logger
from .utils import as_list, is_id

log = get_logger(__name__)

# Wrike's own bot accounts all carry this first name.
SERVICE_ACCOUNT_FIRST_NAME = "Wrike"


def is_service_account(user: Dict[str, Any]) -> bool:
    return user.get("firstName") == SERVICE_ACCOUNT_FIRST_NAME


class UserDirectory:
    """
    Read-only ``uid -> email`` index over the active (non-service) users.

    Unknown and filtered IDs resolve to None; callers drop those silently.
    """

    def __init__(self, users: Iterable[Dict[str, Any]]):
        self._active: List[Dict[str, Any]] = [u for u in users if not is_service_account(u)]
        self._emails: Dict[Any, Optional[str]] = {}
        for user in self._active:
            # first user wins when an export repeats a uid
            self._emails.setdefault(user.get("uid"), user.get("email"))

    @property
    def active_users(self) -> List[Dict[str, Any]]:
        return list(self._active)

    def __len__(self) -> int:
        return len(self._active)

    def email_for(self, uid: Any) -> Optional[str]:
        if not is_id(uid):
            return None
        email = self._emails.get(uid)
        if email is None:
            log.debug("No active user with uid %r", uid)
        return email

    def emails_for(self, uids: Any) -> Optional[str]:
        """Comma-joined emails for ``uids``; None when nothing resolves."""
        emails = [email for email in map(self.email_for, as_list(uids)) if email]
        return ",".join(emails) or None
