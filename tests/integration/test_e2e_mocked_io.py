"""End-to-end runs of the CLI entrypoint against mocked GitHub and DeepL."""

import base64
import io
import json

import httpx
import pytest
import respx

from translation_guard.infrastructure.drivers.github.github_actions_reporter import (
    GitHubActionsReporter,
)
from translation_guard.infrastructure.entrypoints.cli.translation_check_cli import run_check

API = "https://api.github.example.com"
DEEPL = "https://deepl.example.com/v2/translate"
COMMIT_URL = f"{API}/repos/acme/game/commits/abc123"
CONTENT_URL = f"{API}/repos/acme/game/contents/data/Translations.txt"


def _b64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def _commit(patch: str, filename: str = "data/Translations.txt") -> httpx.Response:
    return httpx.Response(200, json={"sha": "abc123", "files": [{"filename": filename, "patch": patch}]})


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def reporter(settings, stream):
    return GitHubActionsReporter(settings.github_output, stream=stream)


@pytest.mark.asyncio
async def test_matching_translation_passes_and_leaves_file_alone(settings, reporter, stream, output_file):
    with respx.mock(assert_all_called=False) as mock:
        mock.get(COMMIT_URL).mock(return_value=_commit("@@ -0,0 +1 @@\n+(cat)=(gato)"))
        mock.post(DEEPL).mock(return_value=httpx.Response(200, json={"translations": [{"text": "gato"}]}))
        write = mock.put(CONTENT_URL)

        exit_code = await run_check(settings, reporter)

    assert exit_code == 0
    assert not write.called
    assert output_file.read_text() == "status=success\n"
    assert stream.getvalue() == ""


@pytest.mark.asyncio
async def test_mismatch_fails_and_commits_annotation(settings, reporter, stream, output_file):
    original = "(dog)=(perro)\n(cat)=(perro)\n"
    with respx.mock(assert_all_called=False) as mock:
        mock.get(COMMIT_URL).mock(return_value=_commit("@@ -1 +1,2 @@\n (dog)=(perro)\n+(cat)=(perro)"))
        mock.post(DEEPL).mock(return_value=httpx.Response(200, json={"translations": [{"text": "gato"}]}))
        mock.get(CONTENT_URL).mock(
            return_value=httpx.Response(200, json={"content": _b64(original), "sha": "blob1"})
        )
        write = mock.put(CONTENT_URL).mock(
            return_value=httpx.Response(200, json={"commit": {"sha": "def456"}})
        )

        exit_code = await run_check(settings, reporter)

    assert exit_code == 1
    assert stream.getvalue() == "::error::Translation check failed\n"
    assert not output_file.exists()
    body = json.loads(write.calls.last.request.content)
    assert body["message"] == "Add translation error comments for data/Translations.txt"
    assert body["branch"] == "main"
    assert body["sha"] == "blob1"
    assert base64.b64decode(body["content"]).decode("utf-8") == (
        "(dog)=(perro)\n"
        "(cat)=(perro)\n"
        '# Translation error: "cat" -> Provided: "perro", Expected: "gato"\n'
    )


@pytest.mark.asyncio
async def test_no_translation_files_is_success(settings, reporter, output_file):
    with respx.mock(assert_all_called=False) as mock:
        mock.get(COMMIT_URL).mock(return_value=_commit("+print('hi')", filename="src/app.py"))
        oracle = mock.post(DEEPL)

        exit_code = await run_check(settings, reporter)

    assert exit_code == 0
    assert not oracle.called
    assert output_file.read_text() == "status=success\n"


@pytest.mark.asyncio
async def test_oracle_outage_fails_without_annotating(settings, reporter, stream):
    with respx.mock(assert_all_called=False) as mock:
        mock.get(COMMIT_URL).mock(return_value=_commit("+(cat)=(gato)"))
        mock.post(DEEPL).mock(return_value=httpx.Response(503))
        content = mock.get(CONTENT_URL)

        exit_code = await run_check(settings, reporter)

    assert exit_code == 1
    assert not content.called
    assert stream.getvalue() == "::error::Translation check failed\n"


@pytest.mark.asyncio
async def test_missing_credential_aborts_before_any_request(settings, reporter, stream):
    settings = settings.model_copy(update={"deepl_api_key": None})

    with respx.mock(assert_all_called=False) as mock:
        commit = mock.get(COMMIT_URL)

        exit_code = await run_check(settings, reporter)

    assert exit_code == 1
    assert not commit.called
    assert stream.getvalue() == "::error::Action failed: DeepL API key not found\n"


@pytest.mark.asyncio
async def test_unreachable_vcs_is_a_setup_failure(settings, reporter, stream):
    with respx.mock(assert_all_called=False) as mock:
        mock.get(COMMIT_URL).mock(return_value=httpx.Response(404, json={"message": "Not Found"}))

        exit_code = await run_check(settings, reporter)

    assert exit_code == 1
    assert stream.getvalue().startswith("::error::Action failed: Could not read commit abc123")
