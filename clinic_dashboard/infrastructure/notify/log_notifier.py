import logging
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from ...application.ports.notifier import Notifier


@dataclass(frozen=True)
class Toast:
    level: str
    message: str
    created_at: datetime


class LogNotifier(Notifier):
    """Toast channel that logs every message and keeps the most recent ones for display"""

    def __init__(self, limit: int = 50) -> None:
        self._logger = logging.getLogger(__name__)
        self.limit = limit
        self.toasts: List[Toast] = []

    def _push(self, level: str, message: str) -> None:
        self.toasts.append(Toast(level=level, message=message, created_at=datetime.utcnow()))
        if len(self.toasts) > self.limit:
            del self.toasts[: len(self.toasts) - self.limit]

    def success(self, message: str) -> None:
        self._logger.info(f"TOAST success: {message}")
        self._push("success", message)

    def error(self, message: str) -> None:
        self._logger.warning(f"TOAST error: {message}")
        self._push("error", message)

    @property
    def last(self) -> Optional[Toast]:
        return self.toasts[-1] if self.toasts else None
