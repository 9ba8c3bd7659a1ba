"""Notification: collect-then-report validation errors."""

from dataclasses import asdict, dataclass
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class NotificationErrorProps:
    """A single validation failure."""

    context: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


class Notification:
    """Append-only accumulator of validation errors.

    Each entity owns exactly one notification for its whole lifetime.
    Errors are kept in insertion order; duplicates are kept as well.
    """

    def __init__(self) -> None:
        self._errors: List[NotificationErrorProps] = []

    def add_error(self, error: NotificationErrorProps) -> None:
        self._errors.append(error)

    def has_errors(self) -> bool:
        return len(self._errors) > 0

    def get_errors(self) -> Tuple[NotificationErrorProps, ...]:
        return tuple(self._errors)

    def messages(self, context: Optional[str] = None) -> str:
        """Render errors as ``"context: message"`` joined by commas.

        Args:
            context: Only include errors raised under this context

        Returns:
            The joined message string, empty when nothing matches
        """
        return ",".join(
            f"{error.context}: {error.message}"
            for error in self._errors
            if context is None or error.context == context
        )

    def __len__(self) -> int:
        return len(self._errors)
