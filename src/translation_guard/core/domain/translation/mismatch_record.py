"""A translation pair whose provided target disagrees with the oracle."""

from dataclasses import dataclass

from translation_guard.core.domain.translation.translation_pair import TranslationPair
from translation_guard.core.domain.translation.verification_outcome import VerificationOutcome


@dataclass(frozen=True)
class MismatchRecord:
    originating_line: str
    source_text: str
    target_text: str
    reference_translation: str

    @classmethod
    def from_pair(cls, pair: TranslationPair, outcome: VerificationOutcome) -> "MismatchRecord":
        return cls(
            originating_line=pair.originating_line,
            source_text=pair.source_text,
            target_text=pair.target_text,
            reference_translation=outcome.reference_translation,
        )

    @property
    def annotation(self) -> str:
        """Single-line comment inserted after the offending line."""
        return (
            f'# Translation error: "{self.source_text}" -> '
            f'Provided: "{self.target_text}", Expected: "{self.reference_translation}"'
        )

    def describe(self, filename: str) -> str:
        return (
            f"Translation mismatch in {filename}:\n"
            f"Source: {self.source_text}\n"
            f"Provided: {self.target_text}\n"
            f"DeepL: {self.reference_translation}"
        )
