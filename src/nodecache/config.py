"""StorageConfig."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_CHUNK_SIZE = 64 * 1024  # 64KB


@dataclass
class StorageConfig:
    """Settings shared by every handle built from one ``LocalNodeStorage``."""

    chunk_size: int = DEFAULT_CHUNK_SIZE
    """Bytes per chunk when streaming a file between channels."""

    default_includes: str = "**/*"
    """Include mask used when a caller passes an empty one."""

    use_default_excludes: bool = True
    """Skip VCS metadata and editor droppings during transfers."""

    browse_label: str = "Cache of {name}"
    """Label handed to the directory browser; ``{name}`` is the caller's name."""

    def __post_init__(self) -> None:
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")
