"""Custom exception hierarchy for node-local item storage."""


class NodeCacheError(Exception):
    """Base exception for all nodecache errors."""


class UnresolvedChannelError(NodeCacheError):
    """Raised when no node holds a path and no channel was bound."""


class TransferError(NodeCacheError):
    """Raised on I/O failure on either side of a recursive copy.

    ``transferred`` is the number of files completed before the failure.
    """

    def __init__(self, message: str, transferred: int = 0) -> None:
        super().__init__(message)
        self.transferred = transferred


class InterruptedOperationError(NodeCacheError):
    """Raised when discovery or a transfer observes a cancellation request.

    ``transferred`` is the number of files completed before the check.
    """

    def __init__(self, message: str, transferred: int = 0) -> None:
        super().__init__(message)
        self.transferred = transferred
