# MIT License
# Copyright (c) 2026 Franz Granlund
# See LICENSE file in the project root for full license information.

"""Monitoring outcome reporting.

Each report prints a single "<PREFIX>: <message>" line to stdout and ends
the process with the plugin exit code:

    OK       -> 0
    WARN     -> 1
    CRIT     -> 2
    UNKNOWN  -> 3
"""

import enum


class Status(enum.IntEnum):
    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3

    @property
    def prefix(self):
        return _PREFIXES[self]


_PREFIXES = {
    Status.OK: "OK",
    Status.WARNING: "WARN",
    Status.CRITICAL: "CRIT",
    Status.UNKNOWN: "UNKNOWN",
}


class OutcomeReached(SystemExit):
    def __init__(self, status, message):
        super().__init__(int(status))
        self.status = status
        self.message = message


def format_line(status, message):
    return f"{status.prefix}: {message}"


def report(status, message):
    status = Status(status)
    print(format_line(status, message), flush=True)
    raise OutcomeReached(status, message)


def ok(message):
    report(Status.OK, message)


def warning(message):
    report(Status.WARNING, message)


def critical(message):
    report(Status.CRITICAL, message)


def unknown(message):
    report(Status.UNKNOWN, message)
