"""Item-scoped path derivation.

The relative path of a cached object depends only on the item and the sub
path.  Joined to a node's home directory it yields that node's physical
location; every node keeps its own private copy under the same relative path.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .types import SubPath
from .utils import join_path

if TYPE_CHECKING:
    from .types import Item


def relative_path(item: Item, sub_path: SubPath | str = "") -> str:
    """Return ``container/name/sub/path`` for *item* and *sub_path*.

    Examples:
        relative_path(Item("jobs", "proj"), "cache/deps") -> "jobs/proj/cache/deps"
        relative_path(Item("jobs", "proj")) -> "jobs/proj"
    """
    sub_path = SubPath.parse(sub_path)
    return join_path(item.container, item.name, *sub_path.segments)


def physical_path(home: str, item: Item, sub_path: SubPath | str = "") -> str:
    """Anchor the relative path of *item*/*sub_path* under a node home directory."""
    return join_path(home, relative_path(item, sub_path))
