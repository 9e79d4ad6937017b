from typing import Any


class TranslationGuardError(Exception):
    """Base exception for every error raised by translation-guard."""

    def __init__(self, message: str = "", *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context or {}
