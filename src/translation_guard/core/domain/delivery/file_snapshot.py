from dataclasses import dataclass


@dataclass(frozen=True)
class FileSnapshot:
    """File content read at a ref plus the blob sha the next write must match."""

    path: str
    content: str
    sha: str
