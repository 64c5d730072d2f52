# -----------------------------------------------------------------------------
# es7s/hexstream [Streaming hex+ASCII dump renderer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from .control import ControlCode, Token, assemble_tokens, strip_control_codes
from .const import ROW_LEN, GROUP_LEN, COLLAPSE_MARKER, ByteClass, CollapseState, BYTE_CLASS_COLOR_MAP, \
    NULL_CHARCODES, CONTROL_CHARCODES, PRINTABLE_CHARCODES, EXTENDED_CHARCODES

from .row import RowBuffer
from .reader import ChunkReader
from .renderer import RowRenderer
from .collapse import CollapseController
from .dumper import Dumper
