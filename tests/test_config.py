"""Tests for StorageConfig."""

from __future__ import annotations

import pytest

from nodecache.config import DEFAULT_CHUNK_SIZE, StorageConfig
from nodecache.membership import Node, NodeRegistry
from nodecache.storage import LocalNodeStorage


class TestStorageConfig:
    def test_defaults(self):
        cfg = StorageConfig()
        assert cfg.chunk_size == DEFAULT_CHUNK_SIZE
        assert cfg.default_includes == "**/*"
        assert cfg.use_default_excludes is True
        assert cfg.browse_label == "Cache of {name}"

    @pytest.mark.parametrize("size", [0, -1])
    def test_rejects_non_positive_chunk_size(self, size: int):
        with pytest.raises(ValueError, match="chunk_size"):
            StorageConfig(chunk_size=size)

    def test_shared_by_storage_and_transfer(self):
        cfg = StorageConfig(chunk_size=10)
        storage = LocalNodeStorage(NodeRegistry(Node("master")), cfg)
        assert storage.config is cfg
        assert storage.transfer.config is cfg
