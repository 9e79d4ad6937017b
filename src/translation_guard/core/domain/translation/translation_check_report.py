from dataclasses import dataclass

from translation_guard.core.domain.translation.file_verification_result import (
    FileVerificationResult,
)


@dataclass(frozen=True)
class TranslationCheckReport:
    has_errors: bool
    file_results: tuple[FileVerificationResult, ...] = ()

    @property
    def files_processed(self) -> int:
        return len(self.file_results)
