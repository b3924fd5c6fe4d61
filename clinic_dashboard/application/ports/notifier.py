from typing import Protocol


class Notifier(Protocol):
    """User-facing message channel (toasts)"""

    def success(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        ...
