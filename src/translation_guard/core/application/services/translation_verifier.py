"""Compares human translations against the oracle's reference translation."""

import structlog

from translation_guard.core.application.ports.translation_oracle_port import TranslationOraclePort
from translation_guard.core.domain.translation import VerificationOutcome

logger = structlog.get_logger()


def normalize_translation(text: str) -> str:
    """Drop one trailing period and fold case.

    Deliberately coarse: other punctuation and sentence structure are kept, so
    "Hola!" and "hola" still differ.
    """
    return text.removesuffix(".").lower()


class TranslationVerifier:
    """Asks the oracle for a reference translation and compares it to the target."""

    def __init__(self, oracle: TranslationOraclePort) -> None:
        self._oracle = oracle

    async def verify(
        self, source_text: str, target_text: str, source_lang: str, target_lang: str
    ) -> VerificationOutcome:
        reference = await self._oracle.translate(source_text, source_lang, target_lang)
        is_match = normalize_translation(reference) == normalize_translation(target_text)
        logger.debug(
            "Translation compared",
            source=source_text,
            provided=target_text,
            reference=reference,
            is_match=is_match,
        )
        return VerificationOutcome(is_match=is_match, reference_translation=reference)
