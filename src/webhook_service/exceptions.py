"""Exception hierarchy for webhook-service."""

from __future__ import annotations


class WebhookServiceError(Exception):
    """Base exception for all webhook-service errors."""


class TransportError(WebhookServiceError):
    """Raised by a transport when the underlying HTTP library fails."""

    def __init__(self, message: str, *, original_error: Exception | None = None) -> None:
        """Initialize TransportError.

        Args:
            message: Human-readable description of the failure
            original_error: Exception raised by the HTTP library, if any
        """
        super().__init__(message)
        self.message: str = message
        self.original_error: Exception | None = original_error


class SettingsLoadError(WebhookServiceError):
    """Raised when dispatcher settings cannot be loaded."""

    def __init__(self, message: str, *, file_path: str | None = None) -> None:
        """Initialize SettingsLoadError.

        Args:
            message: Error message
            file_path: Path to the settings file that failed to load
        """
        super().__init__(message)
        self.message: str = message
        self.file_path: str | None = file_path
