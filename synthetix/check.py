# MIT License
# Copyright (c) 2026 Franz Granlund
# See LICENSE file in the project root for full license information.

"""Check sessions and the script boundary.

A script is any callable taking the session:

def script(check):
    if not check.get("/login"):
        check.critical(check.error)
    if not check.expect(200, "Welcome"):
        check.warning(f"unexpected login page ({check.status_code})")

against("http://example.com/", script)
"""

import sys

from . import outcome
from .config import DEFAULT_CONFIG
from .expectations import NoResponseError, evaluate
from .transport import Transport

PASSED_MESSAGE = "Synthetic Transaction Passed"
REDIRECT_LOOP = "redirect loop"


def debug(msg, config=DEFAULT_CONFIG):
    if config.debug_enabled:
        print(msg, file=sys.stderr)


def _is_redirect(response):
    return 300 <= response.status <= 399


class Check:
    def __init__(self, url, config=DEFAULT_CONFIG, transport=None):
        self.url = url
        self.config = config
        self.last = None
        self._error = None
        self.transport = transport or Transport(url)

    @property
    def error(self):
        return self._error or "(no error)"

    @property
    def response(self):
        if self.last is None:
            raise NoResponseError("no request has been made")
        return self.last

    @property
    def status_code(self):
        return self.response.status

    @property
    def body(self):
        return self.response.body

    @property
    def headers(self):
        return self.response.headers

    def debug(self, msg):
        debug(msg, self.config)

    def get_without_redirect(self, url):
        self.last = self.transport.get(url)
        self.debug(f"GET {url} -> {self.last.status}")
        return self.last

    def get(self, url):
        remaining = self.config.redirect_loop_limit
        self.get_without_redirect(url)
        while _is_redirect(self.last) and remaining > 0:
            remaining -= 1
            location = self.last.header("Location")
            if not location:
                raise ValueError(f"redirect {self.last.status} without Location header")
            self.debug(f"following redirect to {location}")
            self.get_without_redirect(location)
        if _is_redirect(self.last):
            self._error = REDIRECT_LOOP
            return False
        self._error = None
        return True

    def post(self, url, data):
        self.last = self.transport.post(url, data)
        self.debug(f"POST {url} -> {self.last.status}")
        return self.last

    def expect(self, *states):
        return evaluate(self.last, states, affirm=True)

    def expect_not(self, *states):
        return evaluate(self.last, states, affirm=False)

    def ok(self, msg):
        outcome.ok(msg)

    def warning(self, msg):
        outcome.warning(msg)

    def critical(self, msg):
        outcome.critical(msg)

    def unknown(self, msg):
        outcome.unknown(msg)

    def close(self):
        self.transport.close()


def run_check(url, procedure, config=DEFAULT_CONFIG):
    check = None
    try:
        check = Check(url, config)
        return procedure(check)
    except outcome.OutcomeReached:
        raise
    except Exception as exc:
        debug(f"check failed: {exc!r}", config)
        outcome.critical(str(exc) or type(exc).__name__)
    finally:
        if check is not None:
            check.close()


def against(url, procedure, config=DEFAULT_CONFIG):
    run_check(url, procedure, config)
    outcome.ok(PASSED_MESSAGE)


transaction = against
