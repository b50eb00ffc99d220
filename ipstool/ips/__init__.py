# Copyright (c) Kuba Szczodrzyński 2026-10-17.

from .models import EOF_MARKER, MAGIC, InvalidMagicError, IPSError, Record
from .patcher import Patcher, ips_apply
from .reader import RecordReader

__all__ = [
    "EOF_MARKER",
    "IPSError",
    "InvalidMagicError",
    "MAGIC",
    "Patcher",
    "Record",
    "RecordReader",
    "ips_apply",
]
