from collections.abc import Iterable

from translation_guard.core.domain.translation import MismatchRecord


def merge_annotations(original_content: str, mismatches: Iterable[MismatchRecord]) -> str:
    """Insert one error comment after the line of each mismatch.

    Mismatches are applied in order against the progressively updated content.
    A comment already present is not added again, and a mismatch whose line is
    no longer in the content is skipped, so merging twice changes nothing.
    """
    content = original_content
    for mismatch in mismatches:
        comment = mismatch.annotation
        if comment in content:
            continue
        line = mismatch.originating_line
        if line not in content:
            continue
        content = content.replace(line, f"{line}\n{comment}", 1)
    return content
