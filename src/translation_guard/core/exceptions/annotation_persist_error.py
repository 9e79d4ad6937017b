from translation_guard.core.exceptions.translation_guard_error import TranslationGuardError


class AnnotationPersistError(TranslationGuardError):
    """The content store failed to read or update a file being annotated."""

    def __init__(self, filename: str, cause: Exception) -> None:
        super().__init__(
            f"Could not annotate {filename}: {cause}", context={"filename": filename}
        )
        self.filename = filename
