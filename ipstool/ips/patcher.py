# Copyright (c) Kuba Szczodrzyński 2026-10-17.

from io import SEEK_SET, BytesIO
from logging import debug
from typing import IO, Callable, Optional, Union

from .models import Record
from .reader import RecordReader

COPY_SIZE = 64 * 1024


def write_full(sink: IO[bytes], data: Union[bytes, memoryview]) -> int:
    # raw sinks may accept only part of the data per call
    data = memoryview(data)
    pos = 0
    while pos < len(data):
        n = sink.write(data[pos:])
        if not n:
            raise IOError(
                f"Short write to output (wrote {pos} of {len(data)} bytes)"
            )
        pos += n
    return pos


class Patcher(RecordReader):
    """
    Apply an IPS patch to a file.

    Nothing is read from either stream until ``apply()`` is called.
    """

    file: IO[bytes]

    def __init__(self, patch: IO[bytes], file: IO[bytes]) -> None:
        super().__init__(patch)
        self.file = file

    def apply(
        self,
        sink: IO[bytes],
        on_record: Optional[Callable[[Record], None]] = None,
    ) -> int:
        """
        Write the patched file into ``sink``.

        The original file is copied into ``sink`` first, then every record
        is written at its offset, in patch order. Writing past the end
        of the sink extends it.

        ``on_record`` is called after each record is written. Raising an
        exception from it stops patching, leaving all previous records
        applied.

        :return: number of bytes written by the patch records
        """
        # copy data over...
        copied = 0
        while True:
            chunk = self.file.read(COPY_SIZE)
            if not chunk:
                break
            copied += write_full(sink, chunk)
        debug(f"Copied original file: {copied} byte(s)")

        # now start patching
        wrote = 0
        count = 0
        for record in self.iter_records(reuse_buffer=True):
            sink.seek(record.offset, SEEK_SET)
            wrote += write_full(sink, record.data)
            count += 1
            if on_record:
                on_record(record)

        debug(f"Applied {count} record(s): {wrote} byte(s) written")
        return wrote


def ips_apply(data: bytes, patch: bytes) -> bytes:
    io = BytesIO()
    Patcher(BytesIO(patch), BytesIO(data)).apply(io)
    return io.getvalue()
