"""Functional DI container: wires adapters and the workflow from settings."""

from translation_guard.core.application.services.annotation_publisher import AnnotationPublisher
from translation_guard.core.application.services.translation_verifier import TranslationVerifier
from translation_guard.core.application.workflows.translation_check_workflow import (
    TranslationCheckWorkflow,
)
from translation_guard.core.domain.delivery import CommitContext
from translation_guard.infrastructure.configuration.main_settings import Settings
from translation_guard.infrastructure.drivers.deepl.deepl_oracle_adapter import DeepLOracleAdapter
from translation_guard.infrastructure.drivers.github.github_http_client import GitHubHttpClient
from translation_guard.infrastructure.drivers.github.github_vcs_adapter import GitHubVcsAdapter


def build_vcs(settings: Settings) -> GitHubVcsAdapter:
    client = GitHubHttpClient(
        base_url=settings.github_api_url,
        token=settings.github_token,
        timeout=settings.http_timeout_seconds,
    )
    return GitHubVcsAdapter(client)


def build_oracle(settings: Settings) -> DeepLOracleAdapter:
    return DeepLOracleAdapter(
        base_url=settings.deepl_api_url,
        api_key=settings.deepl_api_key,
        timeout=settings.http_timeout_seconds,
    )


def build_workflow(
    settings: Settings, vcs: GitHubVcsAdapter, commit: CommitContext
) -> TranslationCheckWorkflow:
    publisher = AnnotationPublisher(vcs, commit) if settings.annotate_files else None
    return TranslationCheckWorkflow(
        verifier=TranslationVerifier(build_oracle(settings)),
        publisher=publisher,
    )
