# -----------------------------------------------------------------------------
# es7s/hexstream [Streaming hex+ASCII dump renderer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import sys
import traceback
from abc import ABCMeta, abstractmethod
from typing import Any, IO, List

from pytermor import SeqIndex, SequenceSGR, enclose

from .common import ArgumentError, OutputError
from .settings import SettingsManager, Settings


# noinspection PyMethodMayBeStatic
class AbstractConsoleBuffer(metaclass=ABCMeta):
    @abstractmethod
    def flush(self): raise NotImplementedError


class ConsoleOutputBuffer(AbstractConsoleBuffer):
    """
    Buffer for the dump itself. Any failure to write or flush the
    target stream is fatal and is raised as `OutputError`; after that the
    buffer discards everything written to it.
    """
    def __init__(self, stream: IO[str] = None):
        self._stream = stream
        self._buf = ''
        self._broken = False
        Console.register_buffer(self)

    @property
    def stream(self) -> IO[str]:
        return self._stream or sys.stdout

    def write(self, s: str, flush=True):
        self._buf += s
        if flush:
            self.flush()

    def flush(self):
        if self._broken:
            self._buf = ''
            return

        buf, self._buf = self._buf, ''
        try:
            if buf:
                self.stream.write(buf)
            self.stream.flush()
        except OSError as e:
            self._broken = True
            raise OutputError(f'Failed to write to output stream: {e!s}') from e


class ConsoleDebugBuffer(AbstractConsoleBuffer):
    def __init__(self, key_prefix: str = None, prefix_offset_color: SequenceSGR = SeqIndex.GRAY):
        self._buf = ''

        self._default_prefix = Console.format_prefix(key_prefix, SeqIndex.GRAY) if key_prefix else None
        self._prefix_seq = prefix_offset_color

        Console.register_buffer(self)

    def write(self, level: int, s: str, offset: int = None, end='\n', no_default_prefix=False, flush=True):
        if SettingsManager.app_settings.debug < level:
            return

        prefix = ''
        if isinstance(offset, int):
            prefix = Console.format_prefix_with_offset(offset, self._prefix_seq)
        elif self._default_prefix is not None:
            if not no_default_prefix:
                prefix = self._default_prefix

        self._buf += f'{prefix}{s}{end}'
        if flush:
            self.flush()

    def flush(self):
        if not self._buf:
            return

        Console.debug(self._buf, end='')
        self._buf = ''


class Console:
    SEQ_ERROR_TRACE = SeqIndex.RED
    SEQ_ERROR = SeqIndex.HI_RED
    MAIN_PREFIX_LEN = 8

    buffers: List[AbstractConsoleBuffer] = list()

    @staticmethod
    def register_buffer(buffer: AbstractConsoleBuffer):
        Console.buffers.append(buffer)

    @staticmethod
    def flush_buffers():
        for buffer in Console.buffers:
            try:
                buffer.flush()
            except OutputError:
                pass  # reported by the caller already

    @staticmethod
    def on_exception(e: Exception):
        Console.flush_buffers()

        if isinstance(e, ArgumentError):
            Console.error(f'{e.__class__.__name__}: {e!s}')
            Console.info(e.USAGE_MSG, file=sys.stderr)

        elif SettingsManager.app_settings.debug > 0:
            tb_lines = [line.rstrip('\n')
                        for line
                        in traceback.format_exception(e.__class__, e, e.__traceback__)]
            error = tb_lines.pop(-1)
            Console.print(Console.wrap('\n'.join(tb_lines), Console.SEQ_ERROR_TRACE), file=sys.stderr)
            Console.error(error)

        else:
            Console.error(f'{e.__class__.__name__}: {e!s}')
            Console.info("Run the app with '" + Console.wrap('--debug', SeqIndex.BOLD) + "' argument to see the details",
                         file=sys.stderr)

    @staticmethod
    def debug(s: str = '', end='\n'):
        Console.print(s, end=end, file=sys.stderr)

    @staticmethod
    def info(s: str = '', end='\n', **kwargs):
        Console.print(s, end=end, **kwargs)

    @staticmethod
    def error(s: str = '', end='\n'):
        Console.print(Console.wrap(Console.wrap('ERROR: ', SeqIndex.BOLD) + s, Console.SEQ_ERROR), end=end,
                      file=sys.stderr)

    @staticmethod
    def get_separator() -> str:
        return Console.wrap('│', SeqIndex.GRAY)

    @staticmethod
    def wrap(s: Any, opening_seq: SequenceSGR) -> str:
        return enclose(opening_seq, f'{s!s}')

    @staticmethod
    def debug_settings():
        app_settings = SettingsManager.app_settings
        if not app_settings.debug_settings:
            return

        default_settings = Settings()
        debug_buffer = ConsoleDebugBuffer('settings')
        attrs = sorted(app_settings.__dict__.keys())
        max_attr_len = max(len(attr) for attr in attrs)

        for attr in attrs:
            app_value = getattr(app_settings, attr)
            default_value = getattr(default_settings, attr)
            if app_value != default_value:
                values = Console.wrap(f'{app_value!s}', SeqIndex.GREEN) + ' ' + \
                         Console.wrap(f'[{default_value!s}]', SeqIndex.GRAY)
            else:
                values = Console.wrap(f'{default_value!s}', SeqIndex.YELLOW)
            debug_buffer.write(3, attr.rjust(max_attr_len) + Console.get_separator() + values)

    @staticmethod
    def format_prefix(label: str, opening_seq: SequenceSGR) -> str:
        return Console.wrap(f'{label!s:>{Console.MAIN_PREFIX_LEN}.{Console.MAIN_PREFIX_LEN}s}', opening_seq) + \
               Console.get_separator()

    @staticmethod
    def format_prefix_with_offset(offset: int, opening_seq: SequenceSGR = SeqIndex.GREEN) -> str:
        return Console.format_prefix(f'{offset:08x}', opening_seq)

    @staticmethod
    def print(s: str, end='\n', **kwargs):
        print(s, end=end, **kwargs)

    @staticmethod
    def printd(v: Any, max_input_len: int = 5) -> str:
        if isinstance(v, (bytes, bytearray)):
            result = 'len ' + Console.wrap(len(v), SeqIndex.BOLD)
            if not SettingsManager.app_settings.debug_buffer_contents:
                return result

            if len(v) == 0:
                return f'{result} ' + Console.wrap('[]', SeqIndex.GRAY)
            hex_str = ' '.join([f'{b:02x}' for b in v[:max_input_len]])
            if len(v) > max_input_len:
                hex_str += ' ..'
            return f'{result} ' + Console.wrap(f'[{hex_str}]', SeqIndex.GRAY)

        return f'{v!s}'
