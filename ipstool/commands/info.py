#  Copyright (c) Kuba Szczodrzyński 2026-10-17.

from logging import info
from typing import IO

import click
from click import File
from prettytable import PrettyTable

from ipstool.ips import Record, RecordReader
from ipstool.util.logging import graph_hexdump
from ipstool.util.misc import sizeof


@click.command(short_help="List records of an IPS patch")
@click.argument("patch", type=File("rb"))
@click.option(
    "-d",
    "--data",
    help="Hexdump record data (needs -vv)",
    is_flag=True,
)
def cli(patch: IO[bytes], data: bool):
    """
    Decode the IPS patch and print a table of its records.

    \b
    Arguments:
      PATCH     IPS patch file name
    """
    table = PrettyTable()
    table.field_names = ["#", "Offset", "Size", "Type"]
    table.align = "l"
    table.align["Size"] = "r"

    count = 0
    total = 0
    end = 0

    def handle(record: Record) -> None:
        nonlocal count, total, end
        kind = "Data"
        if record.rle:
            kind = f"RLE (0x{record.data[0]:02X})" if record.size else "RLE"
        table.add_row([count, f"0x{record.offset:06X}", record.size, kind])
        count += 1
        if data:
            graph_hexdump(1, record.data)
        total += record.size
        end = max(end, record.end)

    RecordReader(patch).records(reuse_buffer=True, handle=handle)

    click.echo(table.get_string())
    info(
        f"{count} record(s), {sizeof(total)} of data, "
        f"patched range ends at 0x{end:06X}"
    )
