from dataclasses import dataclass


@dataclass(frozen=True)
class TranslationPair:
    """A `(source)=(target)` declaration found on an added diff line.

    ``originating_line`` is the whole added line without its ``+`` marker and is
    shared verbatim by every pair extracted from that line.
    """

    source_text: str
    target_text: str
    originating_line: str
