# Copyright (c) Kuba Szczodrzyński 2026-10-17.

import os
from logging import DEBUG, INFO, exception

import click

from ipstool.commands import apply, info
from ipstool.util.logging import VERBOSE, LoggingHandler
from ipstool.version import get_version

VERBOSITY_LEVEL = [INFO, DEBUG, VERBOSE]


@click.group(
    help="Apply and inspect IPS binary patches",
    context_settings=dict(help_option_names=["-h", "--help"]),
)
@click.option(
    "-v",
    "--verbose",
    help="Output debugging messages (-vv to log every patch record)",
    count=True,
)
@click.option(
    "-T",
    "--traceback",
    help="Print complete exception traceback",
    is_flag=True,
)
@click.option(
    "-t",
    "--timed",
    help="Prepend log lines with elapsed time",
    is_flag=True,
)
@click.option(
    "-r",
    "--raw-log",
    help="Output log messages without level prefixes and colors",
    is_flag=True,
)
@click.option(
    "-i",
    "--indent",
    help="Nest log messages this many graph levels deep",
    type=click.IntRange(min=0),
    default=0,
)
@click.version_option(
    get_version() or "unknown",
    "-V",
    "--version",
    message="ipstool %(version)s",
)
def cli_entrypoint(
    verbose: int,
    traceback: bool,
    timed: bool,
    raw_log: bool,
    indent: int,
):
    if not verbose:
        verbose = int(os.environ.get("IPSTOOL_VERBOSE", 0))
    logger = LoggingHandler.get()
    logger.level = VERBOSITY_LEVEL[min(verbose, len(VERBOSITY_LEVEL) - 1)]
    logger.full_traceback = traceback
    logger.timed = timed
    logger.raw = raw_log
    logger.indent = indent


cli_entrypoint.add_command(apply.cli, name="apply")
cli_entrypoint.add_command(info.cli, name="info")


def cli():
    try:
        cli_entrypoint()
    except Exception as e:
        exception(None, exc_info=e)
        exit(1)


if __name__ == "__main__":
    cli()
