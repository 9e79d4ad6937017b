from dataclasses import dataclass


@dataclass(frozen=True)
class CommitContext:
    """Identifies the commit under inspection and the branch annotations go to."""

    repository: str
    sha: str
    ref: str = ""

    def __post_init__(self):
        if not self.repository or "/" not in self.repository:
            raise ValueError(f"Repository must look like 'owner/name', got '{self.repository}'")
        if not self.sha:
            raise ValueError("Commit sha cannot be empty.")

    @property
    def branch(self) -> str:
        return self.ref.removeprefix("refs/heads/")
