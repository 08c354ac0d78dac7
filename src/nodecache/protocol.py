"""Collaborator protocols — runtime-checkable interfaces.

A ``Channel`` is the only way this package touches a node's filesystem.
Paths handed to a channel are absolute physical paths on that node, using
POSIX separators.  Channels report failures with builtin ``OSError``
subclasses; higher layers decide whether to wrap or downgrade them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import AsyncIterable, AsyncIterator

    from .membership import Node
    from .types import FileInfo, RemotePath


@runtime_checkable
class Channel(Protocol):
    """File operations executed on one node's filesystem."""

    @property
    def name(self) -> str:
        """Display name of the node behind this channel."""
        ...

    async def home_directory(self) -> str:
        """Absolute path of the node-local root for cached object paths."""
        ...

    async def exists(self, path: str) -> bool: ...

    async def is_dir(self, path: str) -> bool: ...

    async def list_dir(self, path: str) -> list[FileInfo]:
        """List a directory.  Raises ``FileNotFoundError`` / ``NotADirectoryError``."""
        ...

    def read_chunks(self, path: str, chunk_size: int) -> AsyncIterator[bytes]:
        """Stream a file's bytes in chunks of at most *chunk_size*."""
        ...

    async def write_chunks(self, path: str, chunks: AsyncIterable[bytes]) -> int:
        """Write *chunks* to *path*, creating parents.  Returns bytes written."""
        ...

    async def mkdir(self, path: str) -> None: ...

    async def delete_recursive(self, path: str) -> bool:
        """Delete a file or tree.  Returns False if nothing was there."""
        ...


@runtime_checkable
class Membership(Protocol):
    """Enumerates cluster nodes; the coordinator is always reachable."""

    @property
    def coordinator(self) -> Node: ...

    def list_nodes(self) -> list[Node]: ...


@runtime_checkable
class DirectoryBrowser(Protocol):
    """Renders a directory listing for a resolved location."""

    def browse(self, location: RemotePath, label: str) -> Any: ...


@runtime_checkable
class CancelToken(Protocol):
    """Cooperative cancellation flag (``asyncio.Event``, ``threading.Event``)."""

    def is_set(self) -> bool: ...
