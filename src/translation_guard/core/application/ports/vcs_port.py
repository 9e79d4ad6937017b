from abc import ABC, abstractmethod

from translation_guard.core.domain.delivery import FileSnapshot
from translation_guard.core.domain.translation import ChangedFile


class VcsPort(ABC):

    @abstractmethod
    async def get_changed_files(self, repository: str, sha: str) -> list[ChangedFile]:
        """Returns every file touched by the commit with its unified-diff patch."""
        pass

    @abstractmethod
    async def get_file(self, repository: str, path: str, ref: str) -> FileSnapshot:
        """Reads the file content at ref."""
        pass

    @abstractmethod
    async def update_file(
        self, repository: str, snapshot: FileSnapshot, content: str, branch: str, message: str
    ) -> str:
        """Writes content over snapshot on branch. Returns the new commit sha."""
        pass
