"""NodeRegistry and Node."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .protocol import Channel


@dataclass
class Node:
    """A cluster member capable of holding cached data."""

    name: str
    """Unique node name, e.g. ``"agent-1"``."""

    channel: Channel | None = None
    """Channel to the node's filesystem.  ``None`` while the node is offline."""

    coordinator: bool = False
    """True for the cluster's control node."""

    label: str = ""
    """Display name for the node."""

    @property
    def online(self) -> bool:
        return self.channel is not None

    def __post_init__(self) -> None:
        self.name = self.name.strip()
        if not self.label:
            self.label = self.name or "(coordinator)"


class NodeRegistry:
    """Registry of cluster members.

    The coordinator is passed in at construction and always takes part in
    ``list_nodes()``, whether or not it was registered separately.
    Enumeration order is by node name, with the coordinator last.
    """

    def __init__(self, coordinator: Node) -> None:
        coordinator.coordinator = True
        self._coordinator = coordinator
        self._nodes: dict[str, Node] = {}

    @property
    def coordinator(self) -> Node:
        return self._coordinator

    def add_node(self, node: Node) -> None:
        """Add or replace a node.

        Registering the coordinator itself is a no-op; any other node using
        the coordinator's name is rejected.
        """
        if node.name == self._coordinator.name:
            if node is not self._coordinator:
                raise ValueError(f"Node name is reserved for the coordinator: {node.name}")
            return
        self._nodes[node.name] = node

    def remove_node(self, name: str) -> None:
        """Remove a node.  Removing an unknown name is a no-op."""
        self._nodes.pop(name.strip(), None)

    def get_node(self, name: str) -> Node | None:
        name = name.strip()
        if name == self._coordinator.name:
            return self._coordinator
        return self._nodes.get(name)

    def has_node(self, name: str) -> bool:
        return self.get_node(name) is not None

    def list_nodes(self) -> list[Node]:
        """All members sorted by name, coordinator appended last."""
        nodes = [
            n
            for n in sorted(self._nodes.values(), key=lambda n: n.name)
            if n.name != self._coordinator.name
        ]
        nodes.append(self._coordinator)
        return nodes
