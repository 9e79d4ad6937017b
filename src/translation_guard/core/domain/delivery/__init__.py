from translation_guard.core.domain.delivery.commit_context import CommitContext
from translation_guard.core.domain.delivery.file_snapshot import FileSnapshot

__all__ = ["CommitContext", "FileSnapshot"]
