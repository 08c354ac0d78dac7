"""Value types: Item, SubPath, RemotePath, FileInfo."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath
from typing import TYPE_CHECKING

from .utils import join_path, split_segments

if TYPE_CHECKING:
    from .protocol import Channel


@dataclass(frozen=True, slots=True)
class Item:
    """Logical owner of a stored object tree.

    Attributes:
        container: Name of the parent container (e.g. ``"jobs"``).
        name: Name of the item inside its container.
    """

    container: str
    name: str

    @classmethod
    def from_root_dir(cls, root_dir: str | PurePath) -> Item:
        """Build an Item from its root directory, e.g. ``/var/ci/jobs/proj``."""
        root = PurePath(root_dir)
        return cls(container=root.parent.name, name=root.name)

    @property
    def full_name(self) -> str:
        return f"{self.container}/{self.name}"


@dataclass(frozen=True, slots=True)
class SubPath:
    """Immutable segment sequence relative to an item's storage root."""

    segments: tuple[str, ...] = ()

    @classmethod
    def parse(cls, path: str | SubPath | None) -> SubPath:
        """Parse ``"a/b"`` style paths. ``..`` never climbs above the root."""
        if isinstance(path, SubPath):
            return path
        return cls(split_segments(path or ""))

    def child(self, segment: str) -> SubPath:
        """Return a new SubPath with *segment* (which may contain ``/``) appended."""
        return SubPath.parse("/".join((*self.segments, segment)))

    def __str__(self) -> str:
        return "/".join(self.segments)


@dataclass(frozen=True)
class RemotePath:
    """A physical path on a specific node, reached through *channel*."""

    channel: Channel
    path: str

    def child(self, name: str) -> RemotePath:
        return RemotePath(self.channel, join_path(self.path, name))

    def __str__(self) -> str:
        return f"{self.channel.name}:{self.path}"


@dataclass
class FileInfo:
    """Directory listing entry returned by a channel."""

    path: str
    name: str
    is_directory: bool
    size_bytes: int | None = None
