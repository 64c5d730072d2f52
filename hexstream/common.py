# -----------------------------------------------------------------------------
# es7s/hexstream [Streaming hex+ASCII dump renderer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------

class ArgumentError(Exception):
    USAGE_MSG = "Run the app with '--help' argument to see the usage"


class OutputError(Exception):
    pass
