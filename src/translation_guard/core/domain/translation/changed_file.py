from dataclasses import dataclass


@dataclass(frozen=True)
class ChangedFile:
    """One file touched by the inspected commit, with its unified-diff patch."""

    filename: str
    diff_text: str = ""
