# -----------------------------------------------------------------------------
# es7s/hexstream [Streaming hex+ASCII dump renderer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import List

from . import AbstractRunner
from ..console import Console
from ..dump import ByteClass, ControlCode, RowRenderer, COLLAPSE_MARKER, assemble_tokens, \
    NULL_CHARCODES, CONTROL_CHARCODES, PRINTABLE_CHARCODES, EXTENDED_CHARCODES


class LegendRunner(AbstractRunner):
    BYTE_CLASS_RANGES = {
        ByteClass.NULL: NULL_CHARCODES,
        ByteClass.CONTROL: CONTROL_CHARCODES,
        ByteClass.PRINTABLE: PRINTABLE_CHARCODES,
        ByteClass.EXTENDED: EXTENDED_CHARCODES,
    }
    SAMPLE_BYTES = bytes([0x00, 0x09, 0x0a, 0x20, 0x41, 0x62, 0x7e, 0x7f, 0x80, 0xff])

    def run(self):
        for line in self._compose():
            Console.info(line)

    def _compose(self) -> List[str]:
        lines = ['BYTE CLASSES']
        for byte_class, charcodes in self.BYTE_CLASS_RANGES.items():
            color = byte_class.color
            range_str = f'{charcodes[0]:02x}' if len(charcodes) == 1 else f'{charcodes[0]:02x}-{charcodes[-1]:02x}'
            lines.append('  ' + assemble_tokens([color, byte_class.value.ljust(12), range_str.ljust(8),
                                                  color.value, ControlCode.DEFAULT_COLOR]))
        lines += [
            '',
            'MARKERS',
            f'  {COLLAPSE_MARKER}           previous row repeats one or more times',
            '',
            'EXAMPLE',
            '  ' + assemble_tokens(RowRenderer().render(self.SAMPLE_BYTES, 0)),
        ]
        return lines
