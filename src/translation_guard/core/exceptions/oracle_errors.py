from translation_guard.core.exceptions.provider_error import ProviderError, ProviderName


class OracleUnavailableError(ProviderError):
    """No credential is configured for the translation oracle."""

    def __init__(self, message: str = "DeepL API key not found") -> None:
        super().__init__(ProviderName.DEEPL, message)


class OracleRequestFailedError(ProviderError):
    """The oracle call failed: network error, non-2xx status or malformed body."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(ProviderName.DEEPL, f"DeepL API error: {message}", status_code=status_code)
