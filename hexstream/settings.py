# -----------------------------------------------------------------------------
# es7s/hexstream [Streaming hex+ASCII dump renderer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from argparse import Namespace
from typing import Any


class Settings(Namespace):
    def __init__(self, **kwargs: Any):
        super().__init__(**kwargs)

        self.debug: int = 0
        self.filename: str|None = None
        self.legend: bool = False
        self.max_bytes: int|None = None  # no limit
        self.no_squeeze: bool = False
        self.version: bool = False

    @property
    def reading_stdin(self) -> bool:
        return not self.filename or self.filename == '-'

    @property
    def squeeze(self) -> bool:
        return not self.no_squeeze

    @property
    def debug_settings(self) -> bool:
        return self.debug >= 3

    @property
    def debug_buffer_contents(self) -> bool:
        return self.debug >= 3


class SettingsManager:
    app_settings: Settings

    @staticmethod
    def init():
        SettingsManager.app_settings = Settings()
