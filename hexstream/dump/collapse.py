# -----------------------------------------------------------------------------
# es7s/hexstream [Streaming hex+ASCII dump renderer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import List

from pytermor import SeqIndex

from .const import ROW_LEN, COLLAPSE_MARKER, CollapseState
from .control import ControlCode, Token
from .renderer import RowRenderer
from ..console import ConsoleDebugBuffer


class CollapseController:
    """
    Decides how each incoming row is displayed. Unfinished rows are always
    (re)drawn as is. Finished rows are compared with the last finished row
    that was displayed in full:

    - different: display in full, remember it;
    - same, first in a run: erase whatever is on the line, print a marker;
    - same, run continues: erase whatever is on the line, print nothing.

    Only one row of history is kept, so memory usage does not depend on the
    stream length.
    """
    def __init__(self, renderer: RowRenderer, squeeze: bool = True):
        self._renderer = renderer
        self._squeeze = squeeze
        self._previous: bytes|None = None
        self._collapsed = False
        self._debug_buffer = ConsoleDebugBuffer('collapse', SeqIndex.CYAN)

    @property
    def state(self) -> CollapseState:
        if self._previous is None:
            return CollapseState.NO_PREVIOUS
        if self._collapsed:
            return CollapseState.COLLAPSING
        return CollapseState.NORMAL

    @property
    def previous(self) -> bytes|None:
        return self._previous

    def process(self, data: bytes, offset: int, dirty: bool) -> List[Token]:
        """
        :param data:   Row content received so far (1-16 bytes).
        :param offset: Row offset in the stream.
        :param dirty:  True if part of this row is already displayed on
                       the current line.
        """
        if len(data) < ROW_LEN:
            return self._renderer.render(data, offset, redraw=dirty)

        if not self._is_duplicate(data):
            self._update_state(offset, data, False)
            return self._renderer.render(data, offset, redraw=dirty) + ['\n']

        if self._collapsed:
            self._debug_buffer.write(2, 'Run continues', offset=offset)
            return self._erase_line(dirty)

        self._update_state(offset, self._previous, True)
        return self._erase_line(dirty) + [COLLAPSE_MARKER, '\n']

    def _is_duplicate(self, data: bytes) -> bool:
        return self._squeeze and self._previous == data

    def _update_state(self, offset: int, previous: bytes, collapsed: bool):
        state_before = self.state
        self._previous = previous
        self._collapsed = collapsed
        if state_before is not self.state:
            self._debug_buffer.write(2, f'State: {state_before.value} -> {self.state.value}', offset=offset)

    def _erase_line(self, dirty: bool) -> List[Token]:
        if dirty:
            # cursor is right after the partially drawn row
            return [ControlCode.ERASE_LINE_START, ControlCode.CARRIAGE_RETURN]
        return [ControlCode.ERASE_LINE_END]
