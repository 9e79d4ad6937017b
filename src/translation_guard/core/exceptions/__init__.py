from translation_guard.core.exceptions.annotation_persist_error import AnnotationPersistError
from translation_guard.core.exceptions.oracle_errors import (
    OracleRequestFailedError,
    OracleUnavailableError,
)
from translation_guard.core.exceptions.provider_error import ProviderError, ProviderName
from translation_guard.core.exceptions.setup_error import SetupError
from translation_guard.core.exceptions.translation_guard_error import TranslationGuardError

__all__ = [
    "AnnotationPersistError",
    "OracleRequestFailedError",
    "OracleUnavailableError",
    "ProviderError",
    "ProviderName",
    "SetupError",
    "TranslationGuardError",
]
