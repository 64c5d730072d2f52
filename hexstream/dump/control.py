# -----------------------------------------------------------------------------
# es7s/hexstream [Streaming hex+ASCII dump renderer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, Union

from pytermor import SeqIndex, make_erase_in_line


class ControlCode(Enum):
    """
    Terminal control codes the renderer is allowed to emit. Rendering logic
    operates with these members only; actual escape sequences are assembled
    at the output boundary (see `assemble()`).
    """
    DEFAULT_COLOR = 'default'
    RED_COLOR = 'red'
    MAGENTA_COLOR = 'magenta'
    GREY_COLOR = 'grey'
    ERASE_LINE_START = 'erase_line_start'
    ERASE_LINE_END = 'erase_line_end'
    CARRIAGE_RETURN = 'carriage_return'

    def assemble(self) -> str:
        return CONTROL_CODE_TO_SEQ_MAP[self]


Token = Union[str, ControlCode]

CONTROL_CODE_TO_SEQ_MAP: Dict[ControlCode, str] = {
    ControlCode.DEFAULT_COLOR: SeqIndex.COLOR_OFF.assemble(),
    ControlCode.RED_COLOR: SeqIndex.RED.assemble(),
    ControlCode.MAGENTA_COLOR: SeqIndex.MAGENTA.assemble(),
    ControlCode.GREY_COLOR: SeqIndex.GRAY.assemble(),
    ControlCode.ERASE_LINE_START: make_erase_in_line(1).assemble(),
    ControlCode.ERASE_LINE_END: make_erase_in_line(0).assemble(),
    ControlCode.CARRIAGE_RETURN: '\r',
}


def assemble_tokens(tokens: Iterable[Token]) -> str:
    return ''.join(t.assemble() if isinstance(t, ControlCode) else t for t in tokens)


def strip_control_codes(tokens: Iterable[Token]) -> str:
    return ''.join(t for t in tokens if not isinstance(t, ControlCode))
