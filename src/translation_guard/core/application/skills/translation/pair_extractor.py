"""Pure functions for pulling new translation pairs out of unified-diff text."""

import re
from collections.abc import Iterator

from translation_guard.core.domain.translation import TranslationPair

_PAIR_RE = re.compile(r"\((.*?)\)=\((.*?)\)")


def extract_pairs(diff_text: str) -> Iterator[TranslationPair]:
    """Yield every `(source)=(target)` pair declared on an added line.

    Pairs come in diff line order, then left to right within a line. Each call
    scans the text from scratch, so iterating twice yields the same pairs.
    """
    for line in diff_text.split("\n"):
        added = _added_line_body(line)
        if added is None:
            continue
        for match in _PAIR_RE.finditer(added):
            yield TranslationPair(
                source_text=match.group(1).strip(),
                target_text=match.group(2).strip(),
                originating_line=added,
            )


def _added_line_body(line: str) -> str | None:
    """Strip the addition marker; None for context, removals and file headers."""
    if not line.startswith("+") or line.startswith("+++"):
        return None
    return line[1:]
