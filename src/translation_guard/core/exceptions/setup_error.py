from translation_guard.core.exceptions.translation_guard_error import TranslationGuardError


class SetupError(TranslationGuardError):
    """Fatal: the run cannot start (missing credential, unreachable VCS API)."""
