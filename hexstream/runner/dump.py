# -----------------------------------------------------------------------------
# es7s/hexstream [Streaming hex+ASCII dump renderer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import sys
from typing import BinaryIO

from pytermor import SeqIndex

from . import AbstractRunner
from ..common import ArgumentError
from ..console import Console, ConsoleDebugBuffer, ConsoleOutputBuffer
from ..dump import ChunkReader, Dumper
from ..settings import SettingsManager


class DumpRunner(AbstractRunner):
    def __init__(self, output_buffer: ConsoleOutputBuffer = None):
        self._output_buffer = output_buffer or ConsoleOutputBuffer()
        self._debug_buffer = ConsoleDebugBuffer('runner', SeqIndex.BLUE)

    def run(self):
        app_settings = SettingsManager.app_settings
        if app_settings.max_bytes is not None and app_settings.max_bytes < 0:
            raise ArgumentError(f'Byte limit should be a non-negative integer, got {app_settings.max_bytes}')

        source = self._open()
        try:
            reader = ChunkReader(source, app_settings.max_bytes)
            Dumper(reader, self._output_buffer, app_settings.squeeze).run()
        finally:
            self._close(source)

    def _open(self) -> BinaryIO:
        app_settings = SettingsManager.app_settings
        if app_settings.reading_stdin:
            self._debug_buffer.write(1, 'Reading from stdin')
            return sys.stdin.buffer

        try:
            source = open(app_settings.filename, 'rb')
        except OSError as e:
            raise ArgumentError(f'Cannot open {app_settings.filename!r}: {e.strerror}') from e
        self._debug_buffer.write(1, 'Opened file: ' + Console.wrap(app_settings.filename, SeqIndex.BOLD))
        return source

    def _close(self, source: BinaryIO):
        if SettingsManager.app_settings.reading_stdin or source.closed:
            return
        source.close()
        self._debug_buffer.write(2, 'Closed file')
