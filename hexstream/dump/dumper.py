# -----------------------------------------------------------------------------
# es7s/hexstream [Streaming hex+ASCII dump renderer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import List

from pytermor import SeqIndex

from .collapse import CollapseController
from .control import Token, assemble_tokens, strip_control_codes
from .reader import ChunkReader
from .renderer import RowRenderer
from .row import RowBuffer
from ..console import ConsoleDebugBuffer, ConsoleOutputBuffer


class Dumper:
    """
    Renders one input stream. Every chunk read from the input is rendered
    and flushed immediately, even when it does not finish a row.
    """
    def __init__(self, reader: ChunkReader, output_buffer: ConsoleOutputBuffer, squeeze: bool = True):
        self._reader = reader
        self._output_buffer = output_buffer
        self._row = RowBuffer()
        self._controller = CollapseController(RowRenderer(), squeeze)
        self._debug_buffer = ConsoleDebugBuffer('dumper', SeqIndex.YELLOW)

    @property
    def row(self) -> RowBuffer:
        return self._row

    @property
    def controller(self) -> CollapseController:
        return self._controller

    def run(self):
        try:
            while self.process_chunk():
                pass
        except KeyboardInterrupt:
            self._debug_buffer.write(1, 'Interrupted', offset=self._row.position)
        self.finish()

    def process_chunk(self) -> bool:
        dirty = self._row.is_dirty
        if not self._reader.read_chunk(self._row):
            return False

        tokens = self._controller.process(self._row.data, self._row.offset, dirty)
        self._write(tokens)
        return True

    def finish(self):
        self._debug_buffer.write(1, f'Total: {self._row.position} byte(s)', offset=self._row.position)
        self._write(['\n'])

    def _write(self, tokens: List[Token]):
        self._debug_buffer.write(3, repr(strip_control_codes(tokens)), offset=self._row.offset)
        self._output_buffer.write(assemble_tokens(tokens))
