"""
Tile handle cache.

Keeps one open, read-only file per tile so repeated lookups in the same
tile do not reopen it. Safe to share between threads: lookup, open and
insert happen under one lock, and reads use positioned I/O so handles
carry no shared cursor. Closing a handle waits for reads already in
progress on it.
"""

import logging
import os
import stat
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO

from ..constants import ErrorMessages
from ..errors import (
    TileClosedError,
    TileIOError,
    TileNotFoundError,
    TilePermissionError,
    TileReadError,
)

logger = logging.getLogger(__name__)

_HAS_PREAD = hasattr(os, "pread")

Opener = Callable[[Path], BinaryIO]


def open_tile_file(path: Path) -> BinaryIO:
    """Open a tile read-only, refusing anything that is not a regular file."""
    if not stat.S_ISREG(path.stat().st_mode):
        raise TileIOError(ErrorMessages.TILE_NOT_REGULAR.format(path.name), tile=path.name)
    return open(path, "rb")


class TileHandle:
    """An open tile file supporting size queries and reads at an offset.

    Every operation on the descriptor runs inside reading(), which counts
    active readers. close() waits for the count to drop to zero and only
    then closes the file, so a descriptor number is never reused by the
    OS while a read on it is still in flight.
    """

    def __init__(self, tile: str, file: BinaryIO) -> None:
        self.tile = tile
        self._file = file
        self._cond = threading.Condition()
        self._readers = 0
        # Only used where os.pread is unavailable
        self._seek_lock = threading.Lock()

    @property
    def closed(self) -> bool:
        return self._file.closed

    @contextmanager
    def reading(self) -> Iterator["TileHandle"]:
        """
        Keep the handle open for the duration of the block.

        Raises:
            TileClosedError: If the handle has already been closed
        """
        with self._cond:
            if self.closed:
                raise TileClosedError(ErrorMessages.TILE_CLOSED.format(self.tile), tile=self.tile)
            self._readers += 1
        try:
            yield self
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    def size(self) -> int:
        """Current byte length of the underlying file."""
        with self.reading():
            try:
                return os.fstat(self._file.fileno()).st_size
            except OSError as e:
                raise TileIOError(
                    ErrorMessages.READ_FAILED.format(self.tile, e), tile=self.tile
                ) from e

    def read_at(self, offset: int, length: int) -> bytes:
        """
        Read exactly `length` bytes starting at `offset`.

        Raises:
            TileClosedError: If the handle has been closed
            TileReadError: If fewer bytes are available
            TileIOError: If the read itself fails
        """
        with self.reading():
            try:
                if _HAS_PREAD:
                    data = os.pread(self._file.fileno(), length, offset)
                else:
                    with self._seek_lock:
                        self._file.seek(offset)
                        data = self._file.read(length)
            except OSError as e:
                raise TileIOError(
                    ErrorMessages.READ_FAILED.format(self.tile, e), tile=self.tile
                ) from e

        if len(data) != length:
            raise TileReadError(
                ErrorMessages.SHORT_READ.format(self.tile, length, offset, len(data)),
                tile=self.tile,
            )
        return data

    def close(self) -> None:
        """Close the file once every active reader has finished."""
        with self._cond:
            while self._readers:
                self._cond.wait()
            self._file.close()


class TileHandleCache:
    """Thread-safe mapping from tile filename to an open TileHandle.

    A tile is opened lazily on first request and then kept for the life of
    the cache. There is no eviction policy; entries only go away through
    discard() or close().
    """

    def __init__(self, directory: str | Path, opener: Opener = open_tile_file) -> None:
        self.directory = Path(directory)
        self._opener = opener
        self._handles: dict[str, TileHandle] = {}
        self._lock = threading.Lock()

    def get_or_open(self, tile: str) -> TileHandle:
        """
        Return the cached handle for a tile, opening the file if needed.

        Args:
            tile: Tile filename, e.g. "N49W002.hgt"

        Raises:
            TileNotFoundError: File is missing
            TilePermissionError: File cannot be opened for reading
            TileIOError: Any other open failure
        """
        with self._lock:
            handle = self._handles.get(tile)
            if handle is not None:
                return handle

            path = self.directory / tile
            try:
                file = self._opener(path)
            except FileNotFoundError as e:
                raise TileNotFoundError(
                    ErrorMessages.TILE_NOT_FOUND.format(tile, self.directory), tile=tile
                ) from e
            except PermissionError as e:
                raise TilePermissionError(
                    ErrorMessages.TILE_PERMISSION.format(tile), tile=tile
                ) from e
            except OSError as e:
                raise TileIOError(ErrorMessages.TILE_OPEN_FAILED.format(tile, e), tile=tile) from e

            handle = TileHandle(tile, file)
            self._handles[tile] = handle
            logger.info(f"Opened tile {tile}")
            return handle

    def discard(self, tile: str) -> bool:
        """Close and forget one tile. Returns True if it was open."""
        with self._lock:
            handle = self._handles.pop(tile, None)
        if handle is None:
            return False
        handle.close()
        logger.debug(f"Closed tile {tile}")
        return True

    def close(self) -> None:
        """Close every cached handle."""
        with self._lock:
            handles = list(self._handles.values())
            self._handles.clear()
        for handle in handles:
            handle.close()
        if handles:
            logger.debug(f"Closed {len(handles)} tiles")

    def tiles(self) -> list[str]:
        """Sorted names of the currently open tiles."""
        with self._lock:
            return sorted(self._handles)

    def __contains__(self, tile: object) -> bool:
        with self._lock:
            return tile in self._handles

    def __len__(self) -> int:
        with self._lock:
            return len(self._handles)

    def __enter__(self) -> "TileHandleCache":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
