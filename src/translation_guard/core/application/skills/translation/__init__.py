from translation_guard.core.application.skills.translation.annotation_merger import (
    merge_annotations,
)
from translation_guard.core.application.skills.translation.diff_scanner import (
    select_translation_diffs,
)
from translation_guard.core.application.skills.translation.pair_extractor import extract_pairs

__all__ = ["extract_pairs", "merge_annotations", "select_translation_diffs"]
