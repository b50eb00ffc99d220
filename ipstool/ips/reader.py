# Copyright (c) Kuba Szczodrzyński 2026-10-17.

from typing import IO, Callable, Generator, Optional

from ipstool.util.intbin import betoint
from ipstool.util.logging import verbose

from .models import (
    EOF_MARKER,
    MAGIC,
    OFFSET_SIZE,
    RLE_SIZE,
    SIZE_SIZE,
    InvalidMagicError,
    Record,
)

CHUNK_SIZE = 512

RecordHandler = Callable[[Record], None]


class RecordReader:
    """
    Decoder of IPS patch record streams.

    The reader consumes bytes from ``patch`` only. Records are produced
    lazily, one at a time, and a record is delivered only after all of
    its bytes have been read successfully.

    With ``reuse_buffer`` enabled, every record's ``data`` is a view of
    one scratch buffer owned by the reader. It is overwritten when the
    next record is decoded, so it must not be kept past the record's
    handling. Otherwise, each record gets its own ``bytes`` object.
    """

    patch: IO[bytes]
    buffer: Optional[bytearray] = None

    def __init__(self, patch: IO[bytes]) -> None:
        self.patch = patch

    def read_into(self, buf: memoryview) -> int:
        # short reads are retried until the buffer is full or the stream ends
        size = len(buf)
        pos = 0
        while pos < size:
            chunk = self.patch.read(min(size - pos, CHUNK_SIZE))
            if not chunk:
                break
            buf[pos : pos + len(chunk)] = chunk
            pos += len(chunk)
        return pos

    def read_full(self, size: int) -> bytes:
        buf = bytearray(size)
        self.read_into_full(memoryview(buf))
        return bytes(buf)

    def read_into_full(self, buf: memoryview) -> None:
        read = self.read_into(buf)
        if read != len(buf):
            raise IOError(
                f"Unexpected end of patch stream "
                f"(expected {len(buf)} bytes, got {read})"
            )

    def check_header(self) -> None:
        magic = bytearray(len(MAGIC))
        read = self.read_into(memoryview(magic))
        if magic[:read] != MAGIC:
            raise InvalidMagicError(magic[:read])

    def alloc_data(self, reuse_buffer: bool, size: int) -> memoryview:
        if not reuse_buffer:
            return memoryview(bytearray(size))
        if self.buffer is None or len(self.buffer) < size:
            # replace instead of resizing, old views may still be exported
            self.buffer = bytearray(size)
        return memoryview(self.buffer)[:size]

    def iter_records(
        self,
        reuse_buffer: bool = False,
    ) -> Generator[Record, None, None]:
        self.check_header()

        while True:
            # read record header
            offset = self.read_full(OFFSET_SIZE)
            if offset == EOF_MARKER:
                return
            offset = betoint(offset)
            size = betoint(self.read_full(SIZE_SIZE))

            rle = size == 0
            if rle:
                header = self.read_full(RLE_SIZE)
                size = betoint(header[0:2])
                fill = header[2]
                data = self.alloc_data(reuse_buffer, size)
                data[:] = bytes([fill]) * size
                verbose(f"RLE record @ 0x{offset:06X}: {size} x 0x{fill:02X}")
            else:
                data = self.alloc_data(reuse_buffer, size)
                self.read_into_full(data)
                verbose(f"Data record @ 0x{offset:06X}: {size} byte(s)")

            if not reuse_buffer:
                data = data.tobytes()
            yield Record(offset=offset, data=data, rle=rle)

    def records(self, reuse_buffer: bool, handle: RecordHandler) -> None:
        """
        Decode the whole patch, passing every record to ``handle``.

        Exceptions raised by ``handle`` abort the decoding and propagate
        to the caller.
        """
        for record in self.iter_records(reuse_buffer):
            handle(record)
