from translation_guard.core.application.ports.ci_port import CiPort
from translation_guard.core.application.ports.translation_oracle_port import TranslationOraclePort
from translation_guard.core.application.ports.vcs_port import VcsPort

__all__ = ["CiPort", "TranslationOraclePort", "VcsPort"]
