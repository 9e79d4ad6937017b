from dataclasses import dataclass

DEFAULT_FILE_PATTERNS: tuple[str, ...] = ("Translations.txt", ".i18n")


@dataclass(frozen=True, kw_only=True)
class TranslationCheckConfig:
    """Run-wide options, built once from settings and handed to every component."""

    file_patterns: tuple[str, ...] = DEFAULT_FILE_PATTERNS
    source_lang: str = "EN"
    target_lang: str = "RU"
    annotate_files: bool = True
    max_concurrent_checks: int = 4

    def __post_init__(self) -> None:
        if self.max_concurrent_checks < 1:
            raise ValueError("max_concurrent_checks must be at least 1.")
