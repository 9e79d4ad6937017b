from translation_guard.core.domain.translation.changed_file import ChangedFile
from translation_guard.core.domain.translation.file_verification_result import (
    FileVerificationResult,
)
from translation_guard.core.domain.translation.mismatch_record import MismatchRecord
from translation_guard.core.domain.translation.translation_check_config import (
    DEFAULT_FILE_PATTERNS,
    TranslationCheckConfig,
)
from translation_guard.core.domain.translation.translation_check_report import (
    TranslationCheckReport,
)
from translation_guard.core.domain.translation.translation_pair import TranslationPair
from translation_guard.core.domain.translation.verification_outcome import VerificationOutcome

__all__ = [
    "DEFAULT_FILE_PATTERNS",
    "ChangedFile",
    "FileVerificationResult",
    "MismatchRecord",
    "TranslationCheckConfig",
    "TranslationCheckReport",
    "TranslationPair",
    "VerificationOutcome",
]
