"""A bip buffer: a circular buffer that always hands out contiguous blocks."""

from __future__ import annotations

from typing import Optional, Union


class BipBuffer:
    """Circular byte buffer built from two regions, A and B.

    Writers reserve a contiguous block, fill it and commit it; readers take
    the first contiguous block and decommit what they consumed.
    """

    def __init__(self, buffer: Union[bytearray, int, None] = None) -> None:
        if isinstance(buffer, int):
            buffer = bytearray(buffer)
        self._buffer = buffer
        self._view = memoryview(buffer) if buffer is not None else memoryview(b"")
        self._ixa = self._sza = 0
        self._ixb = self._szb = 0
        self._ix_resrv = self._sz_resrv = 0

    @property
    def buffer_size(self) -> int:
        """Total size of the underlying storage."""
        return len(self._view)

    @property
    def is_initialized(self) -> bool:
        """True when the buffer has storage."""
        return self._buffer is not None

    @property
    def committed_size(self) -> int:
        """Bytes committed in both regions."""
        return self._sza + self._szb

    @property
    def reservation_size(self) -> int:
        """Bytes currently reserved; zero when nothing is reserved."""
        return self._sz_resrv

    def __len__(self) -> int:
        return self.committed_size

    def clear(self) -> None:
        """Drop every allocation and reservation without touching the memory."""
        self._ixa = self._sza = self._ixb = self._szb = 0
        self._ix_resrv = self._sz_resrv = 0

    def _space_after_a(self) -> int:
        return len(self._view) - self._ixa - self._sza

    def _b_free_space(self) -> int:
        return self._ixa - self._ixb - self._szb

    def reserve(self, size: int) -> Optional[memoryview]:
        """Reserve up to ``size`` contiguous bytes for writing.

        Returns a writable view of the reserved block, which may be shorter
        than asked for, or None when no space is free.
        """
        if size < 0:
            raise ValueError("size must not be negative")
        if self._szb:
            free = min(size, self._b_free_space())
            if free == 0:
                return None
            start = self._ixb + self._szb
        else:
            after_a = self._space_after_a()
            if after_a >= self._ixa:
                if after_a == 0:
                    return None
                free = min(size, after_a)
                start = self._ixa + self._sza
            else:
                if self._ixa == 0:
                    return None
                free = min(size, self._ixa)
                start = 0
        self._sz_resrv = free
        self._ix_resrv = start
        return self._view[start : start + free]

    def commit(self, size: int) -> None:
        """Commit ``size`` written bytes and release the rest of the reservation."""
        if size > 0:
            self.commit_partial(size)
        self._ix_resrv = 0
        self._sz_resrv = 0

    def commit_partial(self, size: int) -> int:
        """Commit ``size`` bytes, keeping the rest reserved; return bytes committed."""
        size = max(0, min(size, self._sz_resrv))
        if self._sza == 0 and self._szb == 0:
            self._ixa = self._ix_resrv
        if self._ix_resrv == self._ixa + self._sza:
            self._sza += size
        else:
            self._szb += size
        self._ix_resrv += size
        self._sz_resrv -= size
        return size

    def get_contiguous_block(self) -> memoryview:
        """Return a view of the first committed block; empty when none."""
        return self._view[self._ixa : self._ixa + self._sza]

    def decommit_block(self, size: int) -> None:
        """Release ``size`` bytes from the start of the first block."""
        if size >= self._sza:
            self._ixa, self._sza = self._ixb, self._szb
            self._ixb = self._szb = 0
        else:
            self._sza -= size
            self._ixa += size

    def write(self, data: bytes) -> int:
        """Copy as much of ``data`` in as fits; return the number of bytes written."""
        written = 0
        while written < len(data):
            block = self.reserve(len(data) - written)
            if block is None:
                break
            count = len(block)
            block[:] = data[written : written + count]
            self.commit(count)
            written += count
        return written