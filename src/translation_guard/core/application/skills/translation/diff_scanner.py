from collections.abc import Iterable

from translation_guard.core.domain.translation import ChangedFile


def select_translation_diffs(files: Iterable[ChangedFile], patterns: Iterable[str]) -> list[ChangedFile]:
    """Keep the files whose name ends with or contains one of the patterns.

    Patterns are plain case-sensitive substrings; blank ones never match.
    """
    active = [pattern for pattern in patterns if pattern]
    return [
        changed
        for changed in files
        if any(changed.filename.endswith(p) or p in changed.filename for p in active)
    ]
