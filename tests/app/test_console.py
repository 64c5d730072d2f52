# -----------------------------------------------------------------------------
# es7s/hexstream [Streaming hex+ASCII dump renderer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import io
import unittest
from contextlib import redirect_stderr

from pytermor import SeqIndex

from hexstream import OutputError
from hexstream.console import Console, ConsoleDebugBuffer, ConsoleOutputBuffer
from hexstream.settings import SettingsManager


class BrokenStream(io.StringIO):
    def write(self, s: str) -> int:
        raise BrokenPipeError(32, 'Broken pipe')


class ConsoleOutputBufferTestCase(unittest.TestCase):
    def setUp(self) -> None:
        SettingsManager.init()

    def test_write_flushes_by_default(self):
        stream = io.StringIO()
        buffer = ConsoleOutputBuffer(stream)

        buffer.write('abc')

        self.assertEqual(stream.getvalue(), 'abc')

    def test_write_without_flush(self):
        stream = io.StringIO()
        buffer = ConsoleOutputBuffer(stream)

        buffer.write('abc', flush=False)
        self.assertEqual(stream.getvalue(), '')
        buffer.flush()
        self.assertEqual(stream.getvalue(), 'abc')

    def test_write_failure_is_fatal(self):
        buffer = ConsoleOutputBuffer(BrokenStream())

        with self.assertRaises(OutputError) as cm:
            buffer.write('abc')
        self.assertIsInstance(cm.exception.__cause__, BrokenPipeError)

    def test_broken_buffer_discards_output(self):
        buffer = ConsoleOutputBuffer(BrokenStream())
        with self.assertRaises(OutputError):
            buffer.write('abc')

        buffer.write('def')
        Console.flush_buffers()


class ConsoleDebugBufferTestCase(unittest.TestCase):
    def setUp(self) -> None:
        SettingsManager.init()

    def _write(self, level: int) -> str:
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            ConsoleDebugBuffer('test').write(level, 'message')
        return stderr.getvalue()

    def test_debug_disabled(self):
        self.assertEqual(self._write(1), '')

    def test_debug_level_reached(self):
        SettingsManager.app_settings.debug = 2

        self.assertIn('message', self._write(2))

    def test_debug_level_not_reached(self):
        SettingsManager.app_settings.debug = 1

        self.assertEqual(self._write(2), '')

    def test_offset_prefix(self):
        SettingsManager.app_settings.debug = 1
        stderr = io.StringIO()

        with redirect_stderr(stderr):
            ConsoleDebugBuffer('test').write(1, 'message', offset=0x20)

        self.assertIn('00000020', stderr.getvalue())


class ConsolePrintdTestCase(unittest.TestCase):
    def setUp(self) -> None:
        SettingsManager.init()

    def test_bytes_length_only(self):
        self.assertIn('len', Console.printd(b'abc'))
        self.assertNotIn('61', Console.printd(b'abc'))

    def test_bytes_contents(self):
        SettingsManager.app_settings.debug = 3

        result = Console.printd(b'abcdefg', 3)

        self.assertIn('61 62 63 ..', result)


class ConsoleErrorTestCase(unittest.TestCase):
    def setUp(self) -> None:
        SettingsManager.init()

    def _error(self, s: str) -> str:
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            Console.error(s)
        return stderr.getvalue()

    def test_message_stays_colored_after_label(self):
        result = self._error('OutputError: boom')

        self.assertNotIn(SeqIndex.RESET.assemble(), result)
        self.assertTrue(result.startswith(SeqIndex.HI_RED.assemble()))
        self.assertIn('OutputError: boom', result)

    def test_label_is_closed_before_message(self):
        result = self._error('OutputError: boom')
        label_end = result.index('ERROR: ') + len('ERROR: ')
        message_start = result.index('OutputError: boom')

        self.assertLess(label_end, message_start)
        self.assertNotEqual(result[label_end:message_start], '')


if __name__ == '__main__':
    unittest.main()
