# Copyright (c) Kuba Szczodrzyński 2026-10-17.

from . import util
from .ips import InvalidMagicError, IPSError, Patcher, Record, RecordReader, ips_apply
from .version import get_version

__all__ = [
    "IPSError",
    "InvalidMagicError",
    "Patcher",
    "Record",
    "RecordReader",
    "cli",
    "get_version",
    "ips_apply",
    "util",
]


def cli():
    from .__main__ import cli

    cli()
