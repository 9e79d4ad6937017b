"""Unit tests for TranslationCheckWorkflow with an in-memory oracle."""

import asyncio
from unittest.mock import AsyncMock

import pytest
from structlog.testing import capture_logs

from translation_guard.core.application.ports.translation_oracle_port import TranslationOraclePort
from translation_guard.core.application.services.translation_verifier import TranslationVerifier
from translation_guard.core.application.workflows.translation_check_workflow import (
    TranslationCheckWorkflow,
)
from translation_guard.core.domain.translation import ChangedFile, TranslationCheckConfig
from translation_guard.core.exceptions import AnnotationPersistError, OracleRequestFailedError

# ── Fixtures ──────────────────────────────────────────────────────────


class DictOracle(TranslationOraclePort):
    """Translates from a fixed table; unknown texts fail like a broken API."""

    def __init__(self, table: dict[str, str], delay: float = 0.0) -> None:
        self.table = table
        self.delay = delay
        self.calls: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        self.calls.append(text)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
            if text not in self.table:
                raise OracleRequestFailedError("Request failed with status code 456")
            return self.table[text]
        finally:
            self.in_flight -= 1


@pytest.fixture()
def oracle() -> DictOracle:
    return DictOracle({"cat": "gato", "dog": "perro", "hello": "Hola.", "bye": "adiós"})


@pytest.fixture()
def publisher() -> AsyncMock:
    mock = AsyncMock()
    mock.publish.return_value = True
    return mock


@pytest.fixture()
def workflow(oracle: DictOracle, publisher: AsyncMock) -> TranslationCheckWorkflow:
    return TranslationCheckWorkflow(verifier=TranslationVerifier(oracle), publisher=publisher)


def _events(logs: list[dict]) -> list[str]:
    return [entry["event"] for entry in logs if entry["log_level"] != "debug"]


# ── Tests ─────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_matching_pair_passes_without_annotation(workflow, publisher, check_config):
    files = [ChangedFile(filename="Translations.txt", diff_text="+(cat)=(gato)")]

    with capture_logs() as logs:
        report = await workflow.run(files, check_config)

    assert report.has_errors is False
    assert report.files_processed == 1
    assert report.file_results[0].pairs_checked == 1
    publisher.publish.assert_not_called()
    assert _events(logs) == [
        "Checking file: Translations.txt",
        "All translations in Translations.txt verified successfully!",
    ]


@pytest.mark.asyncio
async def test_mismatch_is_recorded_and_annotated(workflow, publisher, check_config):
    files = [ChangedFile(filename="Translations.txt", diff_text="+(cat)=(perro)")]

    with capture_logs() as logs:
        report = await workflow.run(files, check_config)

    result = report.file_results[0]
    assert report.has_errors is True
    assert result.annotated is True
    assert [(m.source_text, m.target_text, m.reference_translation) for m in result.mismatches] == [
        ("cat", "perro", "gato")
    ]
    publisher.publish.assert_awaited_once_with("Translations.txt", list(result.mismatches))
    error_log = next(entry for entry in logs if entry["log_level"] == "error")
    assert error_log["event"] == (
        "Errors found:\nTranslation mismatch in Translations.txt:\n"
        "Source: cat\nProvided: perro\nDeepL: gato"
    )


@pytest.mark.asyncio
async def test_oracle_failure_is_a_reported_error_not_a_mismatch(workflow, publisher, check_config):
    files = [ChangedFile(filename="menu.i18n", diff_text="+(unknown)=(desconocido)\n+(dog)=(perro)")]

    with capture_logs() as logs:
        report = await workflow.run(files, check_config)

    result = report.file_results[0]
    assert report.has_errors is True
    assert result.mismatches == ()
    assert result.had_extraction_errors is True
    assert result.check_errors == (
        "Error checking translation 'unknown' in menu.i18n: "
        "DeepL API error: Request failed with status code 456",
    )
    publisher.publish.assert_not_called()
    assert any(entry["event"].startswith("Errors found:\nError checking") for entry in logs)


@pytest.mark.asyncio
async def test_files_without_new_pairs_are_clean(workflow, oracle, check_config):
    files = [ChangedFile(filename="Translations.txt", diff_text="-(cat)=(perro)\n+# note")]

    with capture_logs() as logs:
        report = await workflow.run(files, check_config)

    assert report.has_errors is False
    assert report.file_results[0].pairs_checked == 0
    assert oracle.calls == []
    assert "No new translations found in Translations.txt" in _events(logs)


@pytest.mark.asyncio
async def test_no_matching_files_means_zero_processed_and_success(workflow, oracle, check_config):
    files = [ChangedFile(filename="src/main.py", diff_text="+(cat)=(perro)")]

    report = await workflow.run(files, check_config)

    assert report.has_errors is False
    assert report.files_processed == 0
    assert oracle.calls == []


@pytest.mark.asyncio
async def test_one_failing_file_does_not_stop_the_others(workflow, check_config):
    files = [
        ChangedFile(filename="a/Translations.txt", diff_text="+(cat)=(perro)"),
        ChangedFile(filename="b/Translations.txt", diff_text="+(hello)=(hola)"),
    ]

    report = await workflow.run(files, check_config)

    assert report.has_errors is True
    assert [r.has_errors for r in report.file_results] == [True, False]


@pytest.mark.asyncio
async def test_persist_failure_is_a_warning_and_keeps_the_failure(workflow, publisher, check_config):
    publisher.publish.side_effect = AnnotationPersistError("Translations.txt", RuntimeError("409"))
    files = [ChangedFile(filename="Translations.txt", diff_text="+(cat)=(perro)")]

    with capture_logs() as logs:
        report = await workflow.run(files, check_config)

    assert report.has_errors is True
    assert report.file_results[0].annotated is False
    assert any(entry["log_level"] == "warning" for entry in logs)


@pytest.mark.asyncio
async def test_annotation_can_be_disabled(workflow, publisher):
    config = TranslationCheckConfig(annotate_files=False)
    files = [ChangedFile(filename="Translations.txt", diff_text="+(cat)=(perro)")]

    report = await workflow.run(files, config)

    assert report.has_errors is True
    publisher.publish.assert_not_called()


@pytest.mark.asyncio
async def test_concurrent_checks_keep_pair_order_and_limit(publisher):
    oracle = DictOracle({"one": "uno", "two": "dos", "three": "tres", "four": "cuatro"}, delay=0.01)
    workflow = TranslationCheckWorkflow(verifier=TranslationVerifier(oracle), publisher=publisher)
    diff = "+(one)=(x) (two)=(dos)\n+(three)=(y)\n+(four)=(z)"

    report = await workflow.run(
        [ChangedFile(filename="Translations.txt", diff_text=diff)],
        TranslationCheckConfig(max_concurrent_checks=2),
    )

    assert [m.source_text for m in report.file_results[0].mismatches] == ["one", "three", "four"]
    assert oracle.max_in_flight == 2
