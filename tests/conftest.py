# Copyright (c) Kuba Szczodrzyński 2026-10-17.

from io import BytesIO

import pytest

from ipstool.util.intbin import inttobe16, inttobe24


def make_patch(*records) -> bytes:
    """
    Build an IPS patch from ``(offset, data)`` and ``(offset, size, fill)`` tuples.
    """
    out = b"PATCH"
    for record in records:
        if len(record) == 2:
            offset, data = record
            out += inttobe24(offset) + inttobe16(len(data)) + data
        else:
            offset, size, fill = record
            out += inttobe24(offset) + b"\x00\x00" + inttobe16(size) + bytes([fill])
    return out + b"EOF"


class TrickleIO(BytesIO):
    """BytesIO returning at most ``chunk`` bytes per read() call."""

    def __init__(self, data: bytes, chunk: int = 1) -> None:
        super().__init__(data)
        self.chunk = chunk
        self.reads = 0

    def read(self, n: int = -1) -> bytes:
        self.reads += 1
        if n < 0 or n > self.chunk:
            n = self.chunk
        return super().read(n)


@pytest.fixture
def patch_factory():
    return make_patch


@pytest.fixture
def trickle_io():
    return TrickleIO
