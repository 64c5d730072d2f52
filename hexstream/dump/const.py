# -----------------------------------------------------------------------------
# es7s/hexstream [Streaming hex+ASCII dump renderer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from enum import Enum

from .control import ControlCode

ROW_LEN = 16
GROUP_LEN = 8
COLLAPSE_MARKER = '*'

NULL_CHARCODES = [0x00]
CONTROL_CHARCODES = list(range(0x01, 0x21))
PRINTABLE_CHARCODES = list(range(0x21, 0x7f))
EXTENDED_CHARCODES = list(range(0x7f, 0x100))
GUTTER_CHARCODES = list(range(0x20, 0x7f))
GUTTER_PLACEHOLDER = '.'


class ByteClass(Enum):
    NULL = 'null'
    CONTROL = 'control'
    PRINTABLE = 'printable'
    EXTENDED = 'extended'

    @property
    def color(self) -> ControlCode:
        return BYTE_CLASS_COLOR_MAP[self]

    @staticmethod
    def of(b: int) -> 'ByteClass':
        return CHARCODE_TO_BYTE_CLASS_MAP[b]


BYTE_CLASS_COLOR_MAP = {
    ByteClass.NULL: ControlCode.RED_COLOR,
    ByteClass.CONTROL: ControlCode.MAGENTA_COLOR,
    ByteClass.PRINTABLE: ControlCode.DEFAULT_COLOR,
    ByteClass.EXTENDED: ControlCode.GREY_COLOR,
}

CHARCODE_TO_BYTE_CLASS_MAP = {
    **{b: ByteClass.NULL for b in NULL_CHARCODES},
    **{b: ByteClass.CONTROL for b in CONTROL_CHARCODES},
    **{b: ByteClass.PRINTABLE for b in PRINTABLE_CHARCODES},
    **{b: ByteClass.EXTENDED for b in EXTENDED_CHARCODES},
}

CHARCODE_TO_GUTTER_CHAR_MAP = {
    **{b: GUTTER_PLACEHOLDER for b in range(0x00, 0x100)},
    **{b: chr(b) for b in GUTTER_CHARCODES},
}


class CollapseState(Enum):
    NO_PREVIOUS = 'no_previous'
    NORMAL = 'normal'
    COLLAPSING = 'collapsing'
