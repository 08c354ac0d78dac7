"""nodecache: item storage on the nodes of a build cluster.

Resolves item-scoped paths to the node that holds them and copies trees
between nodes.
"""

__version__ = "0.1.0"

from nodecache.binder import ChannelBinder
from nodecache.config import StorageConfig
from nodecache.exceptions import (
    InterruptedOperationError,
    NodeCacheError,
    TransferError,
    UnresolvedChannelError,
)
from nodecache.local_channel import LocalDiskChannel
from nodecache.membership import Node, NodeRegistry
from nodecache.object_path import ObjectPath
from nodecache.protocol import CancelToken, Channel, DirectoryBrowser, Membership
from nodecache.resolver import physical_path, relative_path
from nodecache.storage import LocalNodeStorage
from nodecache.transfer import RemoteTransfer
from nodecache.types import FileInfo, Item, RemotePath, SubPath

__all__ = [
    "CancelToken",
    "Channel",
    "ChannelBinder",
    "DirectoryBrowser",
    "FileInfo",
    "InterruptedOperationError",
    "Item",
    "LocalDiskChannel",
    "LocalNodeStorage",
    "Membership",
    "Node",
    "NodeCacheError",
    "NodeRegistry",
    "ObjectPath",
    "RemotePath",
    "RemoteTransfer",
    "StorageConfig",
    "SubPath",
    "TransferError",
    "UnresolvedChannelError",
    "__version__",
    "physical_path",
    "relative_path",
]
