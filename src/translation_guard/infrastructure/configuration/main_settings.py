from pathlib import Path

from pydantic import AliasChoices, Field, SecretStr, ValidationInfo, field_validator
from pydantic_settings import (
    BaseSettings,
    EnvSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from translation_guard.core.domain.delivery import CommitContext
from translation_guard.core.domain.translation import TranslationCheckConfig
from translation_guard.core.exceptions import SetupError


class NonBlankEnvSettingsSource(EnvSettingsSource):
    """Environment source that treats blank variables as unset, so the next alias is tried."""

    def __init__(self, settings_cls: type[BaseSettings]) -> None:
        super().__init__(settings_cls)
        self.env_vars = {
            key: value for key, value in self.env_vars.items() if value and value.strip()
        }


class Settings(BaseSettings):
    """
    Run configuration, read once at process start.
    Action inputs win over plain environment variables. A blank input falls
    through to the environment variable, then to the default.
    """

    # Check options
    translation_file_patterns: str = Field(
        default="Translations.txt,.i18n",
        validation_alias=AliasChoices(
            "INPUT_TRANSLATION-FILE-PATTERNS", "TRANSLATION_FILE_PATTERNS", "translation_file_patterns"
        ),
        description="Comma-separated filename substrings selecting translation files",
    )
    source_lang: str = Field(
        default="EN", validation_alias=AliasChoices("INPUT_SOURCE-LANG", "SOURCE_LANG", "source_lang")
    )
    target_lang: str = Field(
        default="RU", validation_alias=AliasChoices("INPUT_TARGET-LANG", "TARGET_LANG", "target_lang")
    )
    annotate_files: bool = Field(
        default=True,
        validation_alias=AliasChoices("INPUT_ANNOTATE-FILES", "ANNOTATE_FILES", "annotate_files"),
        description="Commit inline error comments into files with mismatches",
    )
    max_concurrent_checks: int = Field(
        default=4,
        ge=1,
        validation_alias=AliasChoices("MAX_CONCURRENT_CHECKS", "max_concurrent_checks"),
    )
    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        validation_alias=AliasChoices("HTTP_TIMEOUT_SECONDS", "http_timeout_seconds"),
    )
    log_level: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL", "log_level"))

    # Credentials
    github_token: SecretStr | None = Field(
        default=None, validation_alias=AliasChoices("GITHUB_TOKEN", "github_token")
    )
    deepl_api_key: SecretStr | None = Field(
        default=None, validation_alias=AliasChoices("DEEPL_API_KEY", "deepl_api_key")
    )

    # Endpoints
    github_api_url: str = Field(
        default="https://api.github.com", validation_alias=AliasChoices("GITHUB_API_URL", "github_api_url")
    )
    deepl_api_url: str = Field(
        default="https://api-free.deepl.com", validation_alias=AliasChoices("DEEPL_API_URL", "deepl_api_url")
    )

    # CI context
    github_repository: str = Field(
        default="", validation_alias=AliasChoices("GITHUB_REPOSITORY", "github_repository")
    )
    github_sha: str = Field(default="", validation_alias=AliasChoices("GITHUB_SHA", "github_sha"))
    github_ref: str = Field(default="", validation_alias=AliasChoices("GITHUB_REF", "github_ref"))
    github_output: Path | None = Field(
        default=None, validation_alias=AliasChoices("GITHUB_OUTPUT", "github_output")
    )

    model_config = SettingsConfigDict(env_file=None, extra="ignore", populate_by_name=True)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        env_settings = NonBlankEnvSettingsSource(settings_cls)
        return init_settings, env_settings, dotenv_settings, file_secret_settings

    @field_validator(
        "translation_file_patterns",
        "source_lang",
        "target_lang",
        "annotate_files",
        "github_api_url",
        "deepl_api_url",
        "github_output",
        mode="before",
    )
    @classmethod
    def blank_means_default(cls, value: object, info: ValidationInfo) -> object:
        """Blank values passed directly fall back to the default."""
        if isinstance(value, str) and not value.strip():
            return cls.model_fields[info.field_name].default
        return value

    @property
    def file_patterns(self) -> tuple[str, ...]:
        patterns = (p.strip() for p in self.translation_file_patterns.split(","))
        return tuple(p for p in patterns if p)

    def validate_credentials(self) -> None:
        """Both credentials and the commit context are required before any file is read."""
        if not self.github_token or not self.github_token.get_secret_value():
            raise SetupError("GitHub token is missing in settings.")
        if not self.deepl_api_key or not self.deepl_api_key.get_secret_value():
            raise SetupError("DeepL API key not found")
        if not self.github_repository or not self.github_sha:
            raise SetupError("GITHUB_REPOSITORY and GITHUB_SHA must identify the commit to check.")

    def to_check_config(self) -> TranslationCheckConfig:
        return TranslationCheckConfig(
            file_patterns=self.file_patterns,
            source_lang=self.source_lang,
            target_lang=self.target_lang,
            annotate_files=self.annotate_files,
            max_concurrent_checks=self.max_concurrent_checks,
        )

    def to_commit_context(self) -> CommitContext:
        try:
            return CommitContext(
                repository=self.github_repository, sha=self.github_sha, ref=self.github_ref
            )
        except ValueError as exc:
            raise SetupError(str(exc)) from exc
