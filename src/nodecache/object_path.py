"""ObjectPath — item-scoped path whose physical node may be unknown."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any

from .exceptions import NodeCacheError, UnresolvedChannelError
from .resolver import relative_path
from .types import RemotePath, SubPath

if TYPE_CHECKING:
    from .binder import ChannelBinder
    from .protocol import CancelToken, Channel, DirectoryBrowser
    from .transfer import RemoteTransfer
    from .types import Item

logger = logging.getLogger(__name__)


class _DiscoveredChannel:
    """Write-once slot for a channel found by discovery.

    Owned by one handle. A child starts with a copy of its parent's value
    at derivation time and never writes back. Racing discoveries on one
    handle converge on the same node, so the first writer wins.
    """

    __slots__ = ("_channel", "_lock")

    def __init__(self, channel: Channel | None = None) -> None:
        self._channel = channel
        self._lock = threading.Lock()

    @property
    def channel(self) -> Channel | None:
        return self._channel

    def set_once(self, channel: Channel) -> Channel:
        with self._lock:
            if self._channel is None:
                self._channel = channel
            return self._channel


class ObjectPath:
    """Handle on a cached object tree of an item.

    A handle built inside an execution context carries the workspace's
    channel and never looks on other nodes.  Without one, the owning node is
    discovered on first use and remembered by this handle; children derived
    afterwards start from the remembered channel.

    Usage::

        storage = LocalNodeStorage(registry)
        cache = storage.object_path(item, "cache", workspace=workspace)
        await cache.child("deps").copy_recursive_from(workspace, "**/*.jar")
    """

    def __init__(
        self,
        item: Item,
        binder: ChannelBinder,
        transfer: RemoteTransfer,
        sub_path: SubPath | str = "",
        *,
        channel: Channel | None = None,
        _discovered: _DiscoveredChannel | None = None,
    ) -> None:
        self._item = item
        self._binder = binder
        self._transfer = transfer
        self._sub_path = SubPath.parse(sub_path)
        self._bound = channel
        self._discovered = _discovered or _DiscoveredChannel()

    def __repr__(self) -> str:
        return f"ObjectPath(item={self._item.full_name!r}, path={self.path!r})"

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def item(self) -> Item:
        return self._item

    @property
    def sub_path(self) -> SubPath:
        return self._sub_path

    @property
    def path(self) -> str:
        return str(self._sub_path)

    @property
    def relative_path(self) -> str:
        return relative_path(self._item, self._sub_path)

    @property
    def resolved_channel(self) -> Channel | None:
        """Bound channel, else the channel remembered from discovery."""
        return self._bound or self._discovered.channel

    def child(self, segment: str) -> ObjectPath:
        return ObjectPath(
            self._item,
            self._binder,
            self._transfer,
            self._sub_path.child(segment),
            channel=self._bound,
            _discovered=_DiscoveredChannel(self._discovered.channel),
        )

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    async def _resolve(self, cancel: CancelToken | None) -> Channel:
        channel = await self._binder.resolve(
            self._item,
            self._sub_path,
            self._bound,
            cached=self._discovered.channel,
            cancel=cancel,
        )
        if channel is not self._bound:
            channel = self._discovered.set_once(channel)
        return channel

    async def _resolve_or_fallback(self, cancel: CancelToken | None) -> Channel:
        try:
            return await self._resolve(cancel)
        except UnresolvedChannelError:
            return self._binder.fallback()

    async def _locate(self, channel: Channel) -> RemotePath:
        return RemotePath(
            channel, await self._binder.physical_path(channel, self._item, self._sub_path)
        )

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def exists(self, *, cancel: CancelToken | None = None) -> bool:
        """True if the path exists on its owning node (or, failing discovery,
        on the coordinator)."""
        try:
            channel = await self._resolve_or_fallback(cancel)
        except UnresolvedChannelError:
            return False
        location = await self._locate(channel)
        return await channel.exists(location.path)

    async def delete_recursive(self, *, cancel: CancelToken | None = None) -> None:
        """Delete the tree. A missing path is not an error."""
        channel = await self._resolve_or_fallback(cancel)
        location = await self._locate(channel)
        deleted = await channel.delete_recursive(location.path)
        logger.debug("Delete %s: %s", location, "removed" if deleted else "nothing to remove")

    async def copy_recursive_to(
        self,
        target: RemotePath,
        includes: str = "**/*",
        excludes: str = "",
        *,
        cancel: CancelToken | None = None,
    ) -> int:
        """Copy this cached tree to *target*. Returns the number of files copied."""
        cache = await self._locate(await self._resolve(cancel))
        return await self._transfer.copy_recursive(
            cache, target, includes, excludes, cancel=cancel
        )

    async def copy_recursive_from(
        self,
        source: RemotePath,
        includes: str = "**/*",
        excludes: str = "",
        *,
        cancel: CancelToken | None = None,
    ) -> int:
        """Copy *source* into this cached tree. Returns the number of files copied."""
        cache = await self._locate(await self._resolve(cancel))
        return await self._transfer.copy_recursive(
            source, cache, includes, excludes, cancel=cancel
        )

    async def browse(self, browser: DirectoryBrowser, name: str) -> Any:
        """Hand the resolved location to *browser*; None if it cannot be resolved."""
        try:
            location = await self._locate(await self._resolve_or_fallback(None))
        except (NodeCacheError, OSError):
            logger.warning("Cannot browse %s", self.relative_path, exc_info=True)
            return None
        label = self._transfer.config.browse_label.format(name=name)
        return browser.browse(location, label)
