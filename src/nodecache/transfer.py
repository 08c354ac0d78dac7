"""RemoteTransfer — recursive copy between two node channels."""

from __future__ import annotations

import contextlib
import logging
from typing import TYPE_CHECKING

from .config import StorageConfig
from .exceptions import InterruptedOperationError, TransferError
from .utils import FileFilter, join_path

if TYPE_CHECKING:
    from .protocol import CancelToken
    from .types import RemotePath

logger = logging.getLogger(__name__)


class RemoteTransfer:
    """Copies directory trees from one channel to another.

    File bytes are streamed chunk by chunk from the source channel straight
    into the destination channel; nothing is staged in between.  Only files
    are counted, directories are created on demand.
    """

    def __init__(self, config: StorageConfig | None = None) -> None:
        self.config = config or StorageConfig()

    async def copy_recursive(
        self,
        source: RemotePath,
        dest: RemotePath,
        includes: str = "",
        excludes: str = "",
        *,
        cancel: CancelToken | None = None,
    ) -> int:
        """Copy files under *source* matching the masks to *dest*.

        Returns the number of files copied.  Raises ``TransferError`` on I/O
        failure and ``InterruptedOperationError`` if *cancel* is set between
        two files; both carry the count completed so far.
        """
        logger.info("Copying from %s to %s", source, dest)

        file_filter = FileFilter(
            includes=includes or self.config.default_includes,
            excludes=excludes,
            use_default_excludes=self.config.use_default_excludes,
        )

        transferred = 0
        try:
            if not await source.channel.is_dir(source.path):
                raise TransferError(f"Source directory not found: {source}")

            # Depth-first, in listing order
            pending: list[str] = [""]
            while pending:
                rel_dir = pending.pop()
                entries = await source.channel.list_dir(join_path(source.path, rel_dir))
                subdirs: list[str] = []
                for entry in entries:
                    rel = join_path(rel_dir, entry.name)
                    if entry.is_directory:
                        if not file_filter.is_excluded(rel):
                            subdirs.append(rel)
                        continue
                    if not file_filter.accepts(rel):
                        continue

                    if cancel is not None and cancel.is_set():
                        raise InterruptedOperationError(
                            f"Copy from {source} to {dest} interrupted after "
                            f"{transferred} file(s)",
                            transferred=transferred,
                        )

                    reader = source.channel.read_chunks(
                        join_path(source.path, rel), self.config.chunk_size
                    )
                    async with contextlib.aclosing(reader) as chunks:
                        await dest.channel.write_chunks(join_path(dest.path, rel), chunks)
                    transferred += 1
                pending.extend(reversed(subdirs))
        except OSError as e:
            raise TransferError(
                f"Failed to copy from {source} to {dest}: {e}", transferred=transferred
            ) from e

        logger.info("Copied %d file(s) from %s to %s", transferred, source, dest)
        return transferred
