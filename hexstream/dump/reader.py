# -----------------------------------------------------------------------------
# es7s/hexstream [Streaming hex+ASCII dump renderer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import BinaryIO

from pytermor import SeqIndex

from .row import RowBuffer
from ..console import Console, ConsoleDebugBuffer


class ChunkReader:
    """
    Reads the input into a `RowBuffer`, never past the end of the current
    row. Each call returns whatever the source has available right now (up
    to the row boundary), so slow producers get rendered byte by byte.
    """
    def __init__(self, source: BinaryIO, max_bytes: int|None = None):
        self._source = source
        self._max_bytes = max_bytes
        self._chunks = 0
        self._eof = False
        self._debug_buffer = ConsoleDebugBuffer('reader', SeqIndex.MAGENTA)

    @property
    def eof(self) -> bool:
        return self._eof

    def read_chunk(self, row: RowBuffer) -> int:
        """
        Read next chunk into ``row`` and return amount of bytes read; 0 means
        end of stream. I/O errors are not retried and terminate the stream the
        same way.
        """
        if self._eof:
            return 0

        if self._max_bytes and row.position >= self._max_bytes:
            self._debug_buffer.write(2, 'Byte limit reached: ' + Console.wrap(self._max_bytes, SeqIndex.BOLD),
                                     offset=row.position)
            return self._set_eof()

        try:
            with row.writable() as view:
                limit = len(view)
                if self._max_bytes:
                    limit = min(limit, self._max_bytes - row.position)
                with view[:limit] as target:
                    read_count = self._source.readinto1(target)
        except OSError as e:
            self._debug_buffer.write(1, f'Read failed: {e.__class__.__name__}: {e!s}', offset=row.position)
            return self._set_eof()

        if not read_count:
            self._debug_buffer.write(1, 'Encountered EOF', offset=row.position)
            return self._set_eof()

        row.advance(read_count)
        self._debug_buffer.write(1, f'Read chunk #{self._chunks}: {Console.printd(row.data[-read_count:])}',
                                 offset=row.position - read_count)
        self._chunks += 1
        return read_count

    def _set_eof(self) -> int:
        self._eof = True
        return 0
