# -----------------------------------------------------------------------------
# es7s/hexstream [Streaming hex+ASCII dump renderer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import Callable, List

from .const import ROW_LEN, GROUP_LEN, ByteClass, CHARCODE_TO_GUTTER_CHAR_MAP
from .control import ControlCode, Token


# noinspection PyMethodMayBeStatic
class RowRenderer:
    """
    Formats one (possibly unfinished) row as a list of tokens::

        00000000  48 65 6c 6c 6f 2c 20 77  6f 72 6c 64 21 0a        |Hello, world!.|

    Rows shorter than 16 bytes are padded in the hex section only, so that
    the gutter of a short row starts in the same column as the full rows.
    Colors are switched only when the byte class changes and are always
    reset before padding and delimiters.
    """
    PADDING_HEX = ' '
    PADDING_OFFSET = 2 * ' '
    PADDING_GROUP = ' '
    GUTTER_DELIMITER = '|'

    def render(self, data: bytes, offset: int, redraw: bool = False) -> List[Token]:
        if not 0 < len(data) <= ROW_LEN:
            raise ValueError(f'Row should contain 1-{ROW_LEN} bytes, got {len(data)}')

        result: List[Token] = []
        if redraw:
            result.append(ControlCode.CARRIAGE_RETURN)

        result.append(ControlCode.DEFAULT_COLOR)
        result.append(self.format_offset(offset))
        result.extend(self._colorize(data, self._format_hex))
        padding = self._justify_hex(len(data))
        if padding:
            result.append(padding)
        result.append(self.GUTTER_DELIMITER)
        result.extend(self._colorize(data, self._format_char))
        result.append(self.GUTTER_DELIMITER)
        return result

    def format_offset(self, offset: int) -> str:
        return f'{offset:08x}' + self.PADDING_OFFSET

    def _format_hex(self, idx: int, b: int) -> str:
        return f'{b:02x}' + self.PADDING_HEX + self._get_group_padding(idx)

    def _format_char(self, idx: int, b: int) -> str:
        return CHARCODE_TO_GUTTER_CHAR_MAP[b]

    def _justify_hex(self, data_len: int) -> str:
        return ''.join(
            '  ' + self.PADDING_HEX + self._get_group_padding(idx)
            for idx in range(data_len, ROW_LEN)
        )

    def _get_group_padding(self, idx: int) -> str:
        if (idx + 1) % GROUP_LEN == 0:
            return self.PADDING_GROUP
        return ''

    def _colorize(self, data: bytes, format_fn: Callable[[int, int], str]) -> List[Token]:
        result: List[Token] = []
        cur_color = ControlCode.DEFAULT_COLOR
        cur_text = ''
        for idx, b in enumerate(data):
            color = ByteClass.of(b).color
            if color is not cur_color:
                if cur_text:
                    result.append(cur_text)
                result.append(color)
                cur_color = color
                cur_text = ''
            cur_text += format_fn(idx, b)

        if cur_text:
            result.append(cur_text)
        if cur_color is not ControlCode.DEFAULT_COLOR:
            result.append(ControlCode.DEFAULT_COLOR)
        return result
