"""
Error types for the bucket lister.

Every failure coming back from S3 is folded into S3OperationError so callers
only have one exception to handle.
"""

from __future__ import annotations

from botocore.exceptions import BotoCoreError, ClientError

UNKNOWN_CODE = "unknown code"
MISSING_REASON = "missing reason"


class ConfigurationError(RuntimeError):
    """Raised when environment configuration cannot be used."""


class S3OperationError(RuntimeError):
    """Uniform error carrying an S3 error code, a message and optional context."""

    def __init__(self, message: str | None = None, code: str | None = None, context: str | None = None):
        self.message = message
        self.code = code
        self.context = context
        super().__init__(self._render())

    def _render(self) -> str:
        text = f"{self.code or UNKNOWN_CODE}: {self.message or MISSING_REASON}"
        if self.context:
            return f"{self.context}: {text}"
        return text

    def __str__(self) -> str:
        return self._render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._render()!r})"

    @classmethod
    def from_error(cls, error: BaseException) -> S3OperationError:
        """
        Build an S3OperationError from a botocore failure.

        ClientError provides both code and message through its response
        metadata. BotoCoreError subclasses (connection failures, parameter
        validation, missing credentials) have no code; their text becomes the
        message. Anything else maps to an error with neither.
        """
        if isinstance(error, ClientError):
            details = error.response.get("Error", {}) if error.response else {}
            return cls(message=details.get("Message") or None, code=details.get("Code") or None)
        if isinstance(error, BotoCoreError):
            return cls(message=str(error) or None)
        return cls()

    def add_message(self, context: str) -> S3OperationError:
        """Return a copy of this error with context prepended."""
        combined = f"{context}: {self.context}" if self.context else context
        return type(self)(message=self.message, code=self.code, context=combined)
