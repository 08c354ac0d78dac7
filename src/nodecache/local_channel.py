"""LocalDiskChannel — a node filesystem rooted at a directory on this host."""

from __future__ import annotations

import asyncio
import contextlib
import os
import shutil
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

from .types import FileInfo

if TYPE_CHECKING:
    from collections.abc import AsyncIterable, AsyncIterator


class LocalDiskChannel:
    """Channel over the local disk. Implements the ``Channel`` protocol.

    ``host_dir`` plays the role of the node's home directory. Every path
    handed to the channel must resolve inside it; anything else raises
    ``PermissionError``.  Blocking disk work runs in worker threads.
    """

    def __init__(self, host_dir: Path | str, name: str | None = None) -> None:
        self.host_dir = Path(host_dir).resolve()
        self.name = name or self.host_dir.name

        if not self.host_dir.exists():
            raise FileNotFoundError(f"Host directory does not exist: {self.host_dir}")
        if not self.host_dir.is_dir():
            raise NotADirectoryError(f"Host path is not a directory: {self.host_dir}")

    def __repr__(self) -> str:
        return f"LocalDiskChannel(name={self.name!r}, host_dir={str(self.host_dir)!r})"

    # =========================================================================
    # Path Resolution & Security
    # =========================================================================

    def _resolve_path(self, path: str) -> Path:
        """Resolve *path* and check that it stays within host_dir.

        Relative paths are taken relative to host_dir.
        """
        candidate = Path(path)
        if not candidate.is_absolute():
            candidate = self.host_dir / candidate

        resolved = candidate.resolve()
        try:
            resolved.relative_to(self.host_dir)
        except ValueError:
            raise PermissionError(
                f"Path traversal detected: {path} resolves outside {self.host_dir}"
            ) from None

        return resolved

    # =========================================================================
    # Read Operations
    # =========================================================================

    async def home_directory(self) -> str:
        return self.host_dir.as_posix()

    async def exists(self, path: str) -> bool:
        try:
            resolved = self._resolve_path(path)
        except PermissionError:
            return False
        return await asyncio.to_thread(resolved.exists)

    async def is_dir(self, path: str) -> bool:
        try:
            resolved = self._resolve_path(path)
        except PermissionError:
            return False
        return await asyncio.to_thread(resolved.is_dir)

    async def list_dir(self, path: str) -> list[FileInfo]:
        """List directory contents, directories first, then by name."""
        resolved = self._resolve_path(path)

        def _scan() -> list[FileInfo]:
            if not resolved.exists():
                raise FileNotFoundError(f"Directory not found: {path}")
            if not resolved.is_dir():
                raise NotADirectoryError(f"Not a directory: {path}")

            entries: list[FileInfo] = []
            with os.scandir(resolved) as it:
                for entry in it:
                    is_dir = entry.is_dir()
                    entries.append(
                        FileInfo(
                            path=Path(entry.path).as_posix(),
                            name=entry.name,
                            is_directory=is_dir,
                            size_bytes=None if is_dir else entry.stat().st_size,
                        )
                    )
            entries.sort(key=lambda x: (not x.is_directory, x.name.lower()))
            return entries

        return await asyncio.to_thread(_scan)

    async def read_chunks(self, path: str, chunk_size: int) -> AsyncIterator[bytes]:
        resolved = self._resolve_path(path)
        f = await asyncio.to_thread(resolved.open, "rb")
        try:
            while True:
                chunk = await asyncio.to_thread(f.read, chunk_size)
                if not chunk:
                    break
                yield chunk
        finally:
            await asyncio.to_thread(f.close)

    # =========================================================================
    # Write Operations
    # =========================================================================

    async def write_chunks(self, path: str, chunks: AsyncIterable[bytes]) -> int:
        """Write atomically via tempfile + replace. Last writer wins."""
        resolved = self._resolve_path(path)

        def _open_tmp() -> tuple[int, str]:
            resolved.parent.mkdir(parents=True, exist_ok=True)
            return tempfile.mkstemp(dir=str(resolved.parent), suffix=".tmp")

        fd, tmp_path = await asyncio.to_thread(_open_tmp)
        written = 0
        try:
            with os.fdopen(fd, "wb") as f:
                async for chunk in chunks:
                    await asyncio.to_thread(f.write, chunk)
                    written += len(chunk)
            await asyncio.to_thread(Path(tmp_path).replace, resolved)
        except BaseException:
            with contextlib.suppress(OSError):
                Path(tmp_path).unlink()
            raise
        return written

    async def mkdir(self, path: str) -> None:
        resolved = self._resolve_path(path)
        await asyncio.to_thread(resolved.mkdir, parents=True, exist_ok=True)

    async def delete_recursive(self, path: str) -> bool:
        resolved = self._resolve_path(path)
        if resolved == self.host_dir:
            raise PermissionError(f"Refusing to delete home directory: {self.host_dir}")

        def _delete() -> bool:
            if not resolved.exists():
                return False
            if resolved.is_dir():
                shutil.rmtree(resolved)
            else:
                resolved.unlink()
            return True

        return await asyncio.to_thread(_delete)
