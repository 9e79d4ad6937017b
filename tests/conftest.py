import pytest

from translation_guard.core.domain.delivery import CommitContext
from translation_guard.core.domain.translation import TranslationCheckConfig
from translation_guard.infrastructure.configuration.main_settings import Settings


@pytest.fixture
def output_file(tmp_path):
    return tmp_path / "github_output"


@pytest.fixture
def settings(output_file):
    return Settings(
        translation_file_patterns="Translations.txt,.i18n",
        source_lang="EN",
        target_lang="ES",
        annotate_files=True,
        github_token="mock_gh_token",
        deepl_api_key="mock_deepl_key",
        github_api_url="https://api.github.example.com",
        deepl_api_url="https://deepl.example.com",
        github_repository="acme/game",
        github_sha="abc123",
        github_ref="refs/heads/main",
        github_output=output_file,
    )


@pytest.fixture
def check_config():
    return TranslationCheckConfig(source_lang="EN", target_lang="ES", max_concurrent_checks=2)


@pytest.fixture
def commit():
    return CommitContext(repository="acme/game", sha="abc123", ref="refs/heads/main")
