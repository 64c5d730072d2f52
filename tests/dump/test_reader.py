# -----------------------------------------------------------------------------
# es7s/hexstream [Streaming hex+ASCII dump renderer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import io
import unittest

from hexstream.dump import ChunkReader, RowBuffer
from hexstream.settings import SettingsManager
from .scripted_source import ScriptedSource


class ChunkReaderTestCase(unittest.TestCase):
    def setUp(self) -> None:
        SettingsManager.init()
        self.row = RowBuffer()

    def test_read_is_capped_at_row_boundary(self):
        reader = ChunkReader(ScriptedSource(bytes(range(20))))

        self.assertEqual(reader.read_chunk(self.row), 16)
        self.assertEqual(self.row.data, bytes(range(16)))
        self.assertEqual(reader.read_chunk(self.row), 4)
        self.assertEqual(self.row.offset, 16)
        self.assertEqual(self.row.data, bytes(range(16, 20)))

    def test_read_continues_partial_row(self):
        reader = ChunkReader(ScriptedSource(b'a' * 10, b'b' * 10))

        self.assertEqual(reader.read_chunk(self.row), 10)
        self.assertEqual(reader.read_chunk(self.row), 6)
        self.assertEqual(self.row.data, b'a' * 10 + b'b' * 6)
        self.assertEqual(reader.read_chunk(self.row), 4)
        self.assertEqual(self.row.data, b'b' * 4)

    def test_single_byte_chunks(self):
        reader = ChunkReader(ScriptedSource(*[bytes([b]) for b in b'hello']))

        counts = [reader.read_chunk(self.row) for _ in range(6)]

        self.assertEqual(counts, [1, 1, 1, 1, 1, 0])
        self.assertEqual(self.row.data, b'hello')

    def test_eof(self):
        source = ScriptedSource(b'abc')
        reader = ChunkReader(source)

        reader.read_chunk(self.row)
        self.assertEqual(reader.read_chunk(self.row), 0)
        self.assertTrue(reader.eof)
        self.assertEqual(reader.read_chunk(self.row), 0)
        self.assertEqual(source.reads, 2)

    def test_io_error_is_treated_as_eof(self):
        reader = ChunkReader(ScriptedSource(b'abc', error=OSError(5, 'Input/output error')))

        self.assertEqual(reader.read_chunk(self.row), 3)
        self.assertEqual(reader.read_chunk(self.row), 0)
        self.assertTrue(reader.eof)
        self.assertEqual(self.row.data, b'abc')

    def test_byte_limit(self):
        reader = ChunkReader(ScriptedSource(b'x' * 40), max_bytes=20)

        self.assertEqual(reader.read_chunk(self.row), 16)
        self.assertEqual(reader.read_chunk(self.row), 4)
        self.assertEqual(reader.read_chunk(self.row), 0)
        self.assertEqual(self.row.position, 20)

    def test_byte_limit_at_row_boundary(self):
        reader = ChunkReader(ScriptedSource(b'x' * 40), max_bytes=16)

        self.assertEqual(reader.read_chunk(self.row), 16)
        self.assertEqual(reader.read_chunk(self.row), 0)

    def test_row_views_are_released_after_cropped_read(self):
        class KeepingSource(ScriptedSource):
            def __init__(self, *chunks: bytes):
                super().__init__(*chunks)
                self.targets = []

            def readinto1(self, b) -> int:
                self.targets.append(b)
                return super().readinto1(b)

        source = KeepingSource(b'x' * 10, b'y' * 10)
        reader = ChunkReader(source, max_bytes=12)

        self.assertEqual(reader.read_chunk(self.row), 10)
        self.assertEqual(reader.read_chunk(self.row), 2)
        self.assertEqual(reader.read_chunk(self.row), 0)
        self.assertEqual(len(source.targets), 2)
        for target in source.targets:
            with self.assertRaises(ValueError):
                len(target)

        # resizing fails with BufferError while any view of the row is exported
        self.row._data.append(0)
        self.row._data.pop()
        self.assertEqual(self.row.data, b'x' * 10 + b'y' * 2)

    def test_bytes_io_source(self):
        reader = ChunkReader(io.BytesIO(b'0123456789abcdefXYZ'))

        self.assertEqual(reader.read_chunk(self.row), 16)
        self.assertEqual(reader.read_chunk(self.row), 3)
        self.assertEqual(reader.read_chunk(self.row), 0)
        self.assertEqual(self.row.data, b'XYZ')


if __name__ == '__main__':
    unittest.main()
