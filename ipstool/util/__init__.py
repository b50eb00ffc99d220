# Copyright (c) Kuba Szczodrzyński 2026-10-17.

from . import intbin
from .logging import VERBOSE, LoggingHandler, graph, graph_hexdump, verbose
from .misc import sizeof
from .streams import ProgressReader, read_progress, stream_size

__all__ = [
    "LoggingHandler",
    "ProgressReader",
    "VERBOSE",
    "graph",
    "graph_hexdump",
    "intbin",
    "read_progress",
    "sizeof",
    "stream_size",
    "verbose",
]
