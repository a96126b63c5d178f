# MIT License
# Copyright (c) 2026 Franz Granlund
# See LICENSE file in the project root for full license information.

"""HTTP transport bound to a single resolved endpoint.

The URL's hostname is resolved once through DNS and every request of the
session goes to that address and port. Requests carry the address as their
Host header; name-based virtual hosts on the target will not see the
original hostname.

Example:
transport = Transport("http://example.com/status")
response = transport.get("/status")
response.status, response.header("Location")
"""

import email.message
import http.client
import socket
import urllib.parse
from dataclasses import dataclass, field

DEFAULT_PORTS = {"http": 80, "https": 443}


@dataclass(frozen=True)
class Response:
    status: int
    body: str = ""
    headers: email.message.Message = field(default_factory=http.client.HTTPMessage)

    def __post_init__(self):
        if not isinstance(self.headers, email.message.Message):
            object.__setattr__(self, "headers", _to_message(self.headers))

    def header(self, name, default=None):
        return self.headers.get(name, default)

    def header_values(self, name):
        return self.headers.get_all(name, [])


def _to_message(pairs):
    message = http.client.HTTPMessage()
    items = pairs.items() if hasattr(pairs, "items") else pairs
    for key, value in items:
        message[key] = value
    return message


def resolve(url):
    parts = urllib.parse.urlsplit(url)
    if not parts.hostname:
        raise ValueError(f"invalid url: {url!r}")
    port = parts.port or DEFAULT_PORTS.get(parts.scheme.lower(), 80)
    return socket.gethostbyname(parts.hostname), port


def _read_response(resp):
    response_body = resp.read().decode("utf-8", errors="replace")
    return Response(status=resp.status, body=response_body, headers=resp.headers)


class Transport:
    def __init__(self, url, timeout=None):
        self.address, self.port = resolve(url)
        self.connection = http.client.HTTPConnection(
            self.address, self.port, timeout=timeout
        )
        self.connection.connect()

    def request(self, method, target, body=None, headers=None):
        self.connection.request(method, target or "/", body=body, headers=headers or {})
        return _read_response(self.connection.getresponse())

    def get(self, target):
        return self.request("GET", target)

    def post(self, target, form_fields):
        data = urllib.parse.urlencode(form_fields or {}, doseq=True).encode("utf-8")
        headers = {"Content-Type": "application/x-www-form-urlencoded"}
        return self.request("POST", target, body=data, headers=headers)

    def close(self):
        self.connection.close()
