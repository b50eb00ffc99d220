# Copyright (c) Kuba Szczodrzyński 2026-10-17.

from dataclasses import dataclass
from typing import Union

MAGIC = b"PATCH"
EOF_MARKER = b"EOF"

OFFSET_SIZE = 3
SIZE_SIZE = 2
RLE_SIZE = 3


class IPSError(Exception):
    pass


class InvalidMagicError(IPSError, ValueError):
    def __init__(self, magic: bytes) -> None:
        super().__init__(f"Invalid IPS magic string: {bytes(magic)!r}")
        self.magic = bytes(magic)


@dataclass
class Record:
    offset: int
    data: Union[bytes, memoryview]
    rle: bool = False

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def end(self) -> int:
        return self.offset + len(self.data)
