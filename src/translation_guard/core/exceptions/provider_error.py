from enum import StrEnum

from translation_guard.core.exceptions.translation_guard_error import TranslationGuardError


class ProviderName(StrEnum):
    GITHUB = "github"
    DEEPL = "deepl"


class ProviderError(TranslationGuardError):
    """An external collaborator (VCS, oracle) failed to serve a request."""

    def __init__(
        self,
        provider: ProviderName,
        message: str,
        *,
        status_code: int | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message, context={"provider": provider.value})
        self.provider = provider
        self.status_code = status_code
        self.retryable = retryable

    def __str__(self) -> str:
        code = f" status={self.status_code}" if self.status_code is not None else ""
        return f"{self.provider.value}: {self.message}{code}"
