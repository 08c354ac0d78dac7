"""ChannelBinder — find the channel of the node that owns an object path."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .exceptions import InterruptedOperationError, UnresolvedChannelError
from .resolver import physical_path, relative_path

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from .membership import Node
    from .protocol import CancelToken, Channel, Membership
    from .types import Item, SubPath

logger = logging.getLogger(__name__)


async def _channel_home(channel: Channel) -> str:
    return await channel.home_directory()


class ChannelBinder:
    """Binds object paths to node channels.

    Resolution order: a channel bound by the execution context, then a
    channel cached by an earlier discovery, then discovery itself.
    Discovery checks every candidate node in enumeration order and returns
    the first one where the path exists.  It costs one remote round trip
    per node checked, so it is only expected when browsing outside of an
    execution.
    """

    def __init__(
        self,
        membership: Membership,
        home_resolver: Callable[[Channel], Awaitable[str]] | None = None,
    ) -> None:
        self.membership = membership
        self._home_resolver = home_resolver or _channel_home

    async def home_directory(self, channel: Channel) -> str:
        return await self._home_resolver(channel)

    async def physical_path(self, channel: Channel, item: Item, sub_path: SubPath) -> str:
        """Physical location of *item*/*sub_path* on the node behind *channel*."""
        return physical_path(await self.home_directory(channel), item, sub_path)

    def candidates(self) -> list[Node]:
        """Registered nodes followed by the coordinator, without duplicates."""
        nodes = list(self.membership.list_nodes())
        coordinator = self.membership.coordinator
        if not any(n is coordinator for n in nodes):
            nodes.append(coordinator)
        return nodes

    async def discover(
        self,
        item: Item,
        sub_path: SubPath,
        *,
        cancel: CancelToken | None = None,
    ) -> Channel | None:
        """Return the channel of the first node holding the path, or None."""
        rel = relative_path(item, sub_path)
        for node in self.candidates():
            if cancel is not None and cancel.is_set():
                raise InterruptedOperationError(f"Discovery of {rel} interrupted")

            channel = node.channel
            if channel is None:
                logger.debug("Skipping offline node %s", node.name)
                continue

            try:
                path = await self.physical_path(channel, item, sub_path)
                found = await channel.exists(path)
            except OSError:
                logger.warning("Lookup of %s failed on node %s", rel, node.name, exc_info=True)
                continue

            logger.debug("Looked up %s on node %s: %s", rel, node.name, found)
            if found:
                return channel

        return None

    async def resolve(
        self,
        item: Item,
        sub_path: SubPath,
        bound: Channel | None = None,
        *,
        cached: Channel | None = None,
        cancel: CancelToken | None = None,
    ) -> Channel:
        """Return the owning channel or raise ``UnresolvedChannelError``."""
        if bound is not None:
            return bound
        if cached is not None:
            return cached

        channel = await self.discover(item, sub_path, cancel=cancel)
        if channel is None:
            raise UnresolvedChannelError(
                f"No node holds {relative_path(item, sub_path)} and no channel is bound"
            )
        return channel

    def fallback(self) -> Channel:
        """The coordinator's channel, used when discovery finds nothing."""
        coordinator = self.membership.coordinator
        if coordinator.channel is None:
            raise UnresolvedChannelError(f"Coordinator {coordinator.name} is offline")
        logger.debug("Falling back to coordinator %s", coordinator.name)
        return coordinator.channel
