import structlog

from translation_guard.core.application.ports.vcs_port import VcsPort
from translation_guard.core.application.skills.translation import merge_annotations
from translation_guard.core.domain.delivery import CommitContext
from translation_guard.core.domain.translation import MismatchRecord
from translation_guard.core.exceptions import AnnotationPersistError, ProviderError

logger = structlog.get_logger()

COMMIT_MESSAGE_TEMPLATE = "Add translation error comments for {filename}"


class AnnotationPublisher:
    """Read-modify-write of a translation file: fetch, merge comments, persist if changed.

    The write is conditioned on the blob sha that was read, so a file changed by
    a concurrent run is rejected by the store instead of being overwritten.
    """

    def __init__(self, vcs: VcsPort, commit: CommitContext) -> None:
        self._vcs = vcs
        self._commit = commit

    async def publish(self, filename: str, mismatches: list[MismatchRecord]) -> bool:
        """Returns True when the file was updated."""
        try:
            snapshot = await self._vcs.get_file(self._commit.repository, filename, self._commit.sha)
            updated = merge_annotations(snapshot.content, mismatches)
            if updated == snapshot.content:
                logger.info(f"No changes needed for {filename}", file_path=filename)
                return False
            await self._vcs.update_file(
                self._commit.repository,
                snapshot,
                updated,
                branch=self._commit.branch,
                message=COMMIT_MESSAGE_TEMPLATE.format(filename=filename),
            )
        except ProviderError as exc:
            raise AnnotationPersistError(filename, exc) from exc
        logger.info(f"Updated {filename} with error comments", file_path=filename)
        return True
