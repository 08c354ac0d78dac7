"""Shared fixtures for nodecache tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from tests.helpers import Cluster

from nodecache.local_channel import LocalDiskChannel
from nodecache.membership import Node, NodeRegistry
from nodecache.storage import LocalNodeStorage
from nodecache.types import Item

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def item() -> Item:
    return Item(container="jobs", name="proj")


@pytest.fixture
def cluster(tmp_path: Path) -> Cluster:
    """Coordinator plus agents ``agent-a`` and ``agent-b``, each with its own home."""
    homes: dict[str, Path] = {}
    channels: dict[str, LocalDiskChannel] = {}
    for name in ("coordinator", "agent-a", "agent-b"):
        home = tmp_path / name
        home.mkdir()
        homes[name] = home
        channels[name] = LocalDiskChannel(home, name=name)

    registry = NodeRegistry(Node("coordinator", channels["coordinator"]))
    registry.add_node(Node("agent-b", channels["agent-b"]))
    registry.add_node(Node("agent-a", channels["agent-a"]))
    return Cluster(registry=registry, homes=homes, channels=channels)


@pytest.fixture
def storage(cluster: Cluster) -> LocalNodeStorage:
    return LocalNodeStorage(cluster.registry)
