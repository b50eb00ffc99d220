#  Copyright (c) Kuba Szczodrzyński 2026-10-17.

from io import SEEK_END
from logging import debug, info, warning
from os import unlink
from typing import IO

import click
from click import File

from ipstool.ips import Patcher, Record
from ipstool.util.misc import sizeof
from ipstool.util.streams import read_progress


@click.command(short_help="Apply an IPS patch to a file")
@click.option(
    "-i",
    "--input",
    "file",
    help="The input file to patch",
    type=File("rb"),
    required=True,
)
@click.option(
    "-p",
    "--patch",
    help="The IPS patch",
    type=File("rb"),
    required=True,
)
@click.option(
    "-o",
    "--output",
    help="The patched file to output",
    type=click.Path(dir_okay=False, writable=True),
    required=True,
)
@click.option(
    "--keep-partial",
    help="Keep the output file if patching fails",
    is_flag=True,
)
@click.option(
    "--progress/--no-progress",
    help="Show a progress bar while copying the input file",
    default=False,
)
def cli(
    file: IO[bytes],
    patch: IO[bytes],
    output: str,
    keep_partial: bool,
    progress: bool,
):
    """
    Copy the input file to the output, then apply every record
    of the IPS patch on top of it.

    The input file is never modified.
    """
    records = 0

    def on_record(record: Record) -> None:
        nonlocal records
        records += 1

    with open(output, "wb") as dst:
        try:
            if progress:
                with read_progress(file, label="Copying input") as reader:
                    wrote = Patcher(patch, reader).apply(dst, on_record=on_record)
            else:
                wrote = Patcher(patch, file).apply(dst, on_record=on_record)
        except Exception:
            dst.close()
            if not keep_partial:
                warning(f"Patching failed, removing {output}")
                unlink(output)
            raise
        dst.seek(0, SEEK_END)
        size = dst.tell()

    debug(f"Patch applied: {records} record(s)")
    info(f"Wrote {output} ({sizeof(size)}), {wrote} byte(s) patched")
