"""Diff-scoped translation check: Select -> Extract -> Verify -> Annotate -> Report."""

import asyncio

import structlog
from structlog.contextvars import bind_contextvars

from translation_guard.core.application.services.annotation_publisher import AnnotationPublisher
from translation_guard.core.application.services.translation_verifier import TranslationVerifier
from translation_guard.core.application.skills.translation import (
    extract_pairs,
    select_translation_diffs,
)
from translation_guard.core.domain.translation import (
    ChangedFile,
    FileVerificationResult,
    MismatchRecord,
    TranslationCheckConfig,
    TranslationCheckReport,
    TranslationPair,
    VerificationOutcome,
)
from translation_guard.core.exceptions import AnnotationPersistError, ProviderError

logger = structlog.get_logger()


class TranslationCheckWorkflow:
    """Checks every new translation pair of the selected files against the oracle.

    Files are handled one after another and never short-circuit each other;
    pairs of one file are verified concurrently up to the configured limit.
    Oracle failures and mismatches both fail the run, but only mismatches are
    annotated back into the file.
    """

    def __init__(
        self,
        verifier: TranslationVerifier,
        publisher: AnnotationPublisher | None = None,
    ) -> None:
        self._verifier = verifier
        self._publisher = publisher

    async def run(
        self, files: list[ChangedFile], config: TranslationCheckConfig
    ) -> TranslationCheckReport:
        bind_contextvars(event_type="workflow.translation_check")
        selected = select_translation_diffs(files, config.file_patterns)
        if not selected:
            logger.info("No translation files found in the diff", changed_files=len(files))
            return TranslationCheckReport(has_errors=False)

        results: list[FileVerificationResult] = []
        for changed in selected:
            results.append(await self._check_file(changed, config))
        has_errors = any(result.has_errors for result in results)
        return TranslationCheckReport(has_errors=has_errors, file_results=tuple(results))

    async def _check_file(
        self, changed: ChangedFile, config: TranslationCheckConfig
    ) -> FileVerificationResult:
        filename = changed.filename
        logger.info(f"Checking file: {filename}", file_path=filename)
        pairs = list(extract_pairs(changed.diff_text))
        if not pairs:
            logger.info(f"No new translations found in {filename}", file_path=filename)
            return FileVerificationResult(filename=filename)

        outcomes = await self._verify_pairs(pairs, config)
        mismatches: list[MismatchRecord] = []
        check_errors: list[str] = []
        messages: list[str] = []
        for pair, outcome in zip(pairs, outcomes, strict=True):
            if isinstance(outcome, ProviderError):
                message = (
                    f"Error checking translation '{pair.source_text}' in {filename}: "
                    f"{outcome.message}"
                )
                check_errors.append(message)
                messages.append(message)
            elif not outcome.is_match:
                mismatch = MismatchRecord.from_pair(pair, outcome)
                mismatches.append(mismatch)
                messages.append(mismatch.describe(filename))

        if not messages:
            logger.info(
                f"All translations in {filename} verified successfully!",
                file_path=filename,
                pairs=len(pairs),
            )
            return FileVerificationResult(filename=filename, pairs_checked=len(pairs))

        logger.error(
            "Errors found:\n" + "\n\n".join(messages),
            file_path=filename,
            mismatches=len(mismatches),
            check_errors=len(check_errors),
        )
        annotated = await self._annotate(filename, mismatches, config)
        return FileVerificationResult(
            filename=filename,
            mismatches=tuple(mismatches),
            check_errors=tuple(check_errors),
            pairs_checked=len(pairs),
            annotated=annotated,
        )

    async def _verify_pairs(
        self, pairs: list[TranslationPair], config: TranslationCheckConfig
    ) -> list[VerificationOutcome | ProviderError]:
        """Verify pairs concurrently; results keep the order of pairs."""
        semaphore = asyncio.Semaphore(config.max_concurrent_checks)

        async def verify_one(pair: TranslationPair) -> VerificationOutcome | ProviderError:
            async with semaphore:
                try:
                    return await self._verifier.verify(
                        pair.source_text, pair.target_text, config.source_lang, config.target_lang
                    )
                except ProviderError as exc:
                    return exc

        return list(await asyncio.gather(*(verify_one(pair) for pair in pairs)))

    async def _annotate(
        self, filename: str, mismatches: list[MismatchRecord], config: TranslationCheckConfig
    ) -> bool:
        if not mismatches or not config.annotate_files or self._publisher is None:
            return False
        try:
            return await self._publisher.publish(filename, mismatches)
        except AnnotationPersistError as exc:
            logger.warning(
                str(exc),
                file_path=filename,
                error_type=type(exc).__name__,
                error_details=str(exc.__cause__),
            )
            return False
