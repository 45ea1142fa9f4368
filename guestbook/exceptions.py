"""Custom exception hierarchy for guestbook.

Exception Hierarchy:
    GuestbookError (base)
    ├── ValidationError - bad caller input (never retried)
    ├── NotFoundError - referenced guest absent or inactive
    ├── DataSourceError - repository / I/O failure (retryable)
    └── ConfigurationError - settings/configuration issues

Usage:
    from guestbook.exceptions import DataSourceError

    try:
        guests = await repository.get_all()
    except OSError as e:
        raise DataSourceError("Failed to retrieve guests") from e
"""

from typing import Any, Optional, Sequence


class GuestbookError(Exception):
    """Base exception for all guestbook errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., IDs, fields)
        retryable: Whether this error might succeed on retry
    """

    def __init__(
        self,
        message: str,
        *,
        retryable: bool = False,
        **context: Any,
    ) -> None:
        self.message = message
        self.context = context
        self.retryable = retryable
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ValidationError(GuestbookError):
    """Caller supplied invalid input (empty query, non-positive limit...)."""

    def __init__(
        self,
        message: str = "Invalid input",
        *,
        fields: Optional[Sequence[str]] = None,
        **context: Any,
    ) -> None:
        self.fields = list(fields) if fields else []
        if self.fields:
            context["fields"] = self.fields
        super().__init__(message, retryable=False, **context)


class NotFoundError(GuestbookError):
    """A referenced guest does not exist (or is inactive)."""

    def __init__(
        self,
        message: str = "Resource not found",
        *,
        resource: Optional[str] = None,
        resource_id: Optional[str] = None,
        **context: Any,
    ) -> None:
        if resource:
            context["resource"] = resource
        if resource_id is not None:
            context["resource_id"] = resource_id
        super().__init__(message, retryable=False, **context)

    @classmethod
    def for_guest(cls, guest_id: str, resource: str = "Guest") -> "NotFoundError":
        return cls(
            f"{resource} with ID {guest_id} not found",
            resource=resource,
            resource_id=guest_id,
        )


class DataSourceError(GuestbookError):
    """The guest data source failed - retryable."""

    def __init__(self, message: str = "Data source operation failed", **context: Any) -> None:
        super().__init__(message, retryable=True, **context)


class ConfigurationError(GuestbookError):
    """Invalid or missing configuration."""

    def __init__(
        self,
        message: str = "Configuration error",
        *,
        setting: Optional[str] = None,
        **context: Any,
    ) -> None:
        if setting:
            context["setting"] = setting
        super().__init__(message, **context)
