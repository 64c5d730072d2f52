# -----------------------------------------------------------------------------
# es7s/hexstream [Streaming hex+ASCII dump renderer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from . import main

main()
