"""Offline preview: which pairs a diff introduces and how mismatches would be annotated.

Usage:
    python scripts/preview_annotations.py changes.diff Translations.txt "cat=gato" "dog=perro"

Each KEY=VALUE argument stands in for the oracle's reference translation of KEY.
Pairs whose source has no reference are reported as unchecked.
"""

import os
import sys
from pathlib import Path

# Add src to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "../src")))

from translation_guard.core.application.services.translation_verifier import normalize_translation
from translation_guard.core.application.skills.translation import extract_pairs, merge_annotations
from translation_guard.core.domain.translation import MismatchRecord, VerificationOutcome


def preview(diff_path: Path, content_path: Path, references: dict[str, str]) -> None:
    pairs = list(extract_pairs(diff_path.read_text(encoding="utf-8")))
    print(f"--- {len(pairs)} new pair(s) in {diff_path} ---")

    mismatches = []
    for pair in pairs:
        reference = references.get(pair.source_text)
        if reference is None:
            print(f"?  {pair.source_text!r} -> {pair.target_text!r} (no reference given)")
            continue
        if normalize_translation(reference) == normalize_translation(pair.target_text):
            print(f"OK {pair.source_text!r} -> {pair.target_text!r}")
            continue
        print(f"!! {pair.source_text!r} -> {pair.target_text!r}, expected {reference!r}")
        outcome = VerificationOutcome(is_match=False, reference_translation=reference)
        mismatches.append(MismatchRecord.from_pair(pair, outcome))

    content = content_path.read_text(encoding="utf-8")
    merged = merge_annotations(content, mismatches)
    if merged == content:
        print(f"\nNo changes needed for {content_path}")
        return
    print(f"\n--- {content_path} after annotation ---")
    print(merged)


def main(argv: list[str]) -> int:
    if len(argv) < 2 or any("=" not in arg for arg in argv[2:]):
        print(__doc__)
        return 2
    refs = dict(arg.split("=", 1) for arg in argv[2:])
    preview(Path(argv[0]), Path(argv[1]), refs)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
