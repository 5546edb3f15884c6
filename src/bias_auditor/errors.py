"""Error taxonomy surfaced to the configuration view.

Every error carries a message that is safe to show to the user as-is.
"""

from __future__ import annotations


class AuditError(RuntimeError):
    """Base class for failures that return the form to an editable state."""

    default_message = "An error occurred while generating the bias audit."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class MissingCredential(AuditError):
    default_message = "Please provide your API key."


class AuthError(AuditError):
    default_message = "The API key is invalid or missing. Please check your key or environment configuration."


class NetworkError(AuditError):
    default_message = (
        "A network error occurred while contacting the language model API. "
        "Please check your internet connection and try again."
    )


class MalformedResponse(AuditError):
    default_message = "The model returned an incomplete or unreadable report. Please run the analysis again."


class UpstreamError(AuditError):
    """Any other upstream failure; the upstream message is kept."""

    def __init__(self, upstream_message: str = "") -> None:
        detail = upstream_message.strip() or "unknown error"
        super().__init__(f"An unexpected error occurred with the language model API: {detail}")
        self.upstream_message = upstream_message


class ValidationError(AuditError):
    """Local form-guard failure (no attribute selected, empty description)."""

    default_message = "The audit configuration is incomplete."


class ExportError(AuditError):
    default_message = "The report could not be exported."
