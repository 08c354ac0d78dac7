"""Test helpers: on-disk trees and a multi-node cluster handle."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from nodecache.local_channel import LocalDiskChannel
    from nodecache.membership import NodeRegistry
    from nodecache.types import Item


def write_tree(root: Path, files: dict[str, str]) -> None:
    """Create *files* (relative path -> text) under *root*."""
    for rel, content in files.items():
        target = root / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content)


def read_tree(root: Path) -> dict[str, str]:
    """Map every file under *root* to its text, keyed by POSIX relative path."""
    return {
        p.relative_to(root).as_posix(): p.read_text()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


@dataclass
class Cluster:
    """Three-node cluster on temporary directories."""

    registry: NodeRegistry
    homes: dict[str, Path]
    channels: dict[str, LocalDiskChannel]

    def node_dir(self, node: str, item: Item, sub: str = "") -> Path:
        path = self.homes[node] / item.container / item.name
        return path / sub if sub else path
