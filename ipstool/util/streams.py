#  Copyright (c) Kuba Szczodrzyński 2026-10-17.

from contextlib import contextmanager
from io import UnsupportedOperation
from os import fstat
from typing import IO, Generator

import click


def stream_size(io: IO[bytes]) -> int:
    """Size of the file behind ``io``, or 0 if it has none (pipes, stdin)."""
    try:
        return fstat(io.fileno()).st_size
    except (UnsupportedOperation, AttributeError, OSError):
        return 0


class ProgressReader:
    """Readable wrapper advancing a click progress bar by every chunk read."""

    def __init__(self, io: IO[bytes], bar) -> None:
        self.io = io
        self.bar = bar

    def read(self, n: int = -1) -> bytes:
        data = self.io.read(n)
        self.bar.update(len(data))
        return data


@contextmanager
def read_progress(
    io: IO[bytes],
    label: str = None,
) -> Generator[ProgressReader, None, None]:
    with click.progressbar(length=stream_size(io), label=label, width=64) as bar:
        yield ProgressReader(io, bar)
