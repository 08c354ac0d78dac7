"""LocalNodeStorage — builds ObjectPath handles for items."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .binder import ChannelBinder
from .config import StorageConfig
from .object_path import ObjectPath
from .transfer import RemoteTransfer

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from .protocol import Channel, Membership
    from .types import Item, RemotePath, SubPath


class LocalNodeStorage:
    """Item storage kept on the nodes that run the work.

    Each node caches objects under its own home directory.  The membership
    collaborator is injected once and shared by every handle.
    """

    def __init__(
        self,
        membership: Membership,
        config: StorageConfig | None = None,
        *,
        home_resolver: Callable[[Channel], Awaitable[str]] | None = None,
    ) -> None:
        self.config = config or StorageConfig()
        self.binder = ChannelBinder(membership, home_resolver)
        self.transfer = RemoteTransfer(self.config)

    def object_path(
        self,
        item: Item,
        path: SubPath | str = "",
        workspace: RemotePath | None = None,
    ) -> ObjectPath:
        """Handle on *item*/*path*.

        *workspace* is the current execution's workspace; its channel binds
        the handle.  Pass None when browsing outside an execution.
        """
        channel = workspace.channel if workspace is not None else None
        return ObjectPath(item, self.binder, self.transfer, path, channel=channel)
