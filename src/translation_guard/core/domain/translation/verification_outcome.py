from dataclasses import dataclass


@dataclass(frozen=True)
class VerificationOutcome:
    is_match: bool
    reference_translation: str
