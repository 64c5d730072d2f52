# -----------------------------------------------------------------------------
# es7s/hexstream [Streaming hex+ASCII dump renderer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from .const import ROW_LEN


class RowBuffer:
    """
    Single-slot buffer holding the row that is currently being received.

    A finished row (16 bytes) stays in the buffer until the next call to
    `writable()`, which rolls it over to the next row. That way "fill is 0"
    always means "nothing received for this row yet", and a finished row is
    distinguishable from an empty one.
    """
    def __init__(self):
        self._data = bytearray(ROW_LEN)
        self._offset = 0
        self._fill = 0

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def fill(self) -> int:
        return self._fill

    @property
    def position(self) -> int:
        return self._offset + self._fill

    @property
    def finished(self) -> bool:
        return self._fill == ROW_LEN

    @property
    def is_dirty(self) -> bool:
        return 0 < self._fill < ROW_LEN

    @property
    def data(self) -> bytes:
        return bytes(self._data[:self._fill])

    def writable(self) -> memoryview:
        if self.finished:
            self._offset += ROW_LEN
            self._fill = 0
        return memoryview(self._data)[self._fill:]

    def advance(self, num_bytes: int):
        if num_bytes <= 0 or self._fill + num_bytes > ROW_LEN:
            raise BufferError(f'Cannot advance row buffer by {num_bytes} byte(s), {ROW_LEN - self._fill} available')
        self._fill += num_bytes

    def __repr__(self):
        return f'{self.__class__.__name__}[{self._offset:08x}+{self._fill}]->[{self.data.hex(" ")}]'
