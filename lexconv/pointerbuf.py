"""A read-only, seekable view over an existing sequence of characters or bytes."""

from __future__ import annotations

import io
from typing import Sequence


class PointerBuffer:
    """Read position over ``data`` without copying it up front.

    Seeking outside ``[0, len(data)]`` raises ``ValueError``.  Seeking from the
    end counts *backwards*: ``seek(n, io.SEEK_END)`` moves to ``len(data) - n``
    and ``n`` must not be negative.
    """

    def __init__(self, data: Sequence = b"") -> None:
        self._data = data
        self._pos = 0

    def read(self, size: int = -1) -> Sequence:
        """Return up to ``size`` items (all that remain if negative) and advance."""
        end = len(self._data) if size < 0 else min(self._pos + size, len(self._data))
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def tell(self) -> int:
        """Return the current read position."""
        return self._pos

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        """Move the read position and return the new one."""
        size = len(self._data)
        if whence == io.SEEK_SET:
            if offset < 0 or offset > size:
                raise ValueError(f"seek offset {offset} out of range 0..{size}")
            self._pos = offset
        elif whence == io.SEEK_END:
            if offset < 0 or offset > size:
                raise ValueError(f"seek offset {offset} out of range 0..{size}")
            self._pos = size - offset
        elif whence == io.SEEK_CUR:
            target = self._pos + offset
            if target < 0 or target > size:
                raise ValueError(f"seek position {target} out of range 0..{size}")
            self._pos = target
        return self._pos

    def remaining(self) -> Sequence:
        """Return the unread part of the data without advancing."""
        return self._data[self._pos:]