from dataclasses import dataclass

from translation_guard.core.domain.translation.mismatch_record import MismatchRecord


@dataclass(frozen=True, kw_only=True)
class FileVerificationResult:
    """Outcome of checking every new pair of one translation file.

    ``check_errors`` holds the messages of pairs the oracle could not verify;
    they fail the run just like mismatches but are not annotated.
    """

    filename: str
    mismatches: tuple[MismatchRecord, ...] = ()
    check_errors: tuple[str, ...] = ()
    pairs_checked: int = 0
    annotated: bool = False

    @property
    def had_extraction_errors(self) -> bool:
        return bool(self.check_errors)

    @property
    def has_errors(self) -> bool:
        return bool(self.mismatches) or self.had_extraction_errors
