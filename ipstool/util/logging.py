#  Copyright (c) Kuba Szczodrzyński 2026-10-17.

import logging
import sys
from logging import (
    CRITICAL,
    DEBUG,
    ERROR,
    INFO,
    WARNING,
    LogRecord,
    StreamHandler,
    log,
)
from time import time
from traceback import extract_tb

import click
from hexdump import hexdump

VERBOSE = DEBUG // 2

LEVEL_COLORS = {
    VERBOSE: "bright_cyan",
    DEBUG: "bright_blue",
    INFO: "bright_green",
    WARNING: "bright_yellow",
    ERROR: "bright_red",
    CRITICAL: "bright_magenta",
}


class LoggingHandler(StreamHandler):
    """
    Root log handler printing through click.

    Lines get a one-letter level prefix and a level color. Warnings and
    errors go to stderr, everything else to stdout.
    """

    INSTANCE: "LoggingHandler" = None

    timed: bool = False
    raw: bool = False
    indent: int = 0
    full_traceback: bool = False

    @staticmethod
    def get() -> "LoggingHandler":
        if not LoggingHandler.INSTANCE:
            LoggingHandler.INSTANCE = LoggingHandler()
        return LoggingHandler.INSTANCE

    def __init__(self) -> None:
        super().__init__()
        self.time_start = time()
        logging.addLevelName(VERBOSE, "VERBOSE")
        for h in list(logging.root.handlers):
            logging.root.removeHandler(h)
        logging.root.addHandler(self)

    @property
    def level(self) -> int:
        return logging.root.level

    @level.setter
    def level(self, value: int) -> None:
        logging.root.setLevel(value)

    def emit(self, record: LogRecord) -> None:
        if record.exc_info and record.exc_info[1]:
            self.emit_exception(record.exc_info[1])
            return
        self.emit_line(record.levelno, record.getMessage())

    def emit_line(self, levelno: int, message: str) -> None:
        if self.indent:
            message = graph_prefix(self.indent) + message
        letter = logging.getLevelName(levelno)[:1]
        if self.timed:
            message = f"{letter} [{time() - self.time_start:9.3f}] {message}"
        elif not self.raw:
            message = f"{letter}: {message}"
        click.secho(
            message,
            file=sys.stderr if levelno >= WARNING else sys.stdout,
            fg=None if self.raw else LEVEL_COLORS.get(levelno),
        )

    def emit_exception(self, e: BaseException) -> None:
        title = f"{type(e).__name__}: {e}"
        while e:
            self.emit_line(ERROR, title)
            frames = extract_tb(e.__traceback__)
            if not self.full_traceback:
                frames = frames[-1:]
            for frame in frames:
                self.emit_line(
                    ERROR,
                    graph_prefix(1)
                    + f'File "{frame.filename}", line {frame.lineno}, in {frame.name}',
                )
            e = e.__cause__ or e.__context__
            if e:
                title = f"Caused by {type(e).__name__}: {e}"


def graph_prefix(level: int) -> str:
    return (level - 1) * "|   " + "|-- " if level else ""


def verbose(msg, *args, **kwargs):
    log(VERBOSE, msg, *args, **kwargs)


def graph(level: int, message: str, loglevel: int = INFO):
    log(loglevel, graph_prefix(level) + message)


def graph_hexdump(level: int, data: bytes, loglevel: int = VERBOSE):
    if not logging.root.isEnabledFor(loglevel):
        return
    for line in hexdump(bytes(data), "generator"):
        graph(level, line, loglevel=loglevel)
