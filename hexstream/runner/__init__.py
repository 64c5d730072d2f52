# -----------------------------------------------------------------------------
# es7s/hexstream [Streaming hex+ASCII dump renderer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from ._abstract import AbstractRunner

from .dump import DumpRunner
from .legend import LegendRunner
from .version import VersionRunner

from .factory import RunnerFactory
