# MIT License
# Copyright (c) 2026 Franz Granlund
# See LICENSE file in the project root for full license information.

"""Expectation matching against the latest response.

Accepted values:
- int: exact status code (200)
- StatusClass: inclusive status code range (StatusClass.CLIENT_ERROR)
- str: regular expression searched anywhere in the body ("healthy")
- re.Pattern: compiled regular expression searched in the body
- Expectation: used as is
"""

import enum
import re


class NoResponseError(RuntimeError):
    pass


class StatusClass(enum.Enum):
    INFO = (100, 199)
    OK = (200, 399)
    SUCCESS = (200, 299)
    REDIRECT = (300, 399)
    ERROR = (400, 599)
    CLIENT_ERROR = (400, 499)
    SERVER_ERROR = (500, 599)

    def __init__(self, low, high):
        self.low = low
        self.high = high

    def __contains__(self, code):
        return self.low <= code <= self.high


class Expectation:
    def matches(self, response):
        raise NotImplementedError


class StatusRange(Expectation):
    def __init__(self, low, high=None):
        self.low = low
        self.high = low if high is None else high

    def matches(self, response):
        return self.low <= response.status <= self.high

    def __repr__(self):
        return f"StatusRange({self.low}, {self.high})"


class LiteralPattern(Expectation):
    def __init__(self, text):
        self.text = text

    def matches(self, response):
        # compiled per evaluation, never stored
        return re.compile(self.text).search(response.body) is not None

    def __repr__(self):
        return f"LiteralPattern({self.text!r})"


class CompiledPattern(Expectation):
    def __init__(self, pattern):
        self.pattern = pattern

    def matches(self, response):
        return self.pattern.search(response.body) is not None

    def __repr__(self):
        return f"CompiledPattern({self.pattern.pattern!r})"


def expectation(value):
    if isinstance(value, Expectation):
        return value
    if isinstance(value, bool):
        raise TypeError(f"unsupported expectation: {value!r}")
    if isinstance(value, int):
        return StatusRange(value)
    if isinstance(value, StatusClass):
        return StatusRange(value.low, value.high)
    if isinstance(value, str):
        return LiteralPattern(value)
    if isinstance(value, re.Pattern):
        return CompiledPattern(value)
    raise TypeError(f"unsupported expectation: {value!r}")


def evaluate(response, values, affirm=True):
    """Return True when every value matches with the given polarity.

    Values are resolved and evaluated one at a time; the first mismatch
    returns False without touching the remaining values.
    """
    if response is None:
        raise NoResponseError("no response to evaluate; issue a request first")
    for value in values:
        if expectation(value).matches(response) != affirm:
            return False
    return True
