from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when the generation client is built without an API key."""


class GenerationError(RuntimeError):
    """Raised when the text-generation service call fails."""


class NotFoundError(LookupError):
    """Raised when a project or task id does not exist."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
