# MIT License
# Copyright (c) 2026 Franz Granlund
# See LICENSE file in the project root for full license information.

import os
import socket
import sys
import threading
import urllib.parse
from http.server import BaseHTTPRequestHandler, HTTPServer

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))


def get_free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def _make_handler(routes, requests):
    class RouteHandler(BaseHTTPRequestHandler):
        def _respond(self, method, form=None):
            path = urllib.parse.urlsplit(self.path).path
            requests.append((method, path, form))
            route = routes.get(path)
            if route is None:
                status, headers, body = 404, {}, "not found"
            else:
                status, headers, body = route(self) if callable(route) else route
            payload = body.encode("utf-8")
            self.send_response(status)
            for key, value in headers.items():
                for item in value if isinstance(value, list) else [value]:
                    self.send_header(key, item)
            self.send_header("Content-Length", str(len(payload)))
            self.end_headers()
            self.wfile.write(payload)

        def do_GET(self):
            self._respond("GET")

        def do_POST(self):
            length = int(self.headers.get("Content-Length", 0))
            raw = self.rfile.read(length).decode("utf-8")
            self._respond("POST", urllib.parse.parse_qs(raw))

        def log_message(self, _format, *_args):
            return

    return RouteHandler


class RouteServer:
    """Localhost HTTP server answering from a {path: (status, headers, body)} table."""

    def __init__(self):
        self.routes = {}
        self.requests = []
        self.port = get_free_port()
        self.server = HTTPServer(
            ("127.0.0.1", self.port), _make_handler(self.routes, self.requests)
        )
        self.thread = threading.Thread(target=self.server.serve_forever, daemon=True)

    @property
    def base_url(self):
        return f"http://127.0.0.1:{self.port}"

    def url(self, path="/"):
        return self.base_url + path

    def start(self):
        self.thread.start()

    def stop(self):
        self.server.shutdown()
        self.server.server_close()


@pytest.fixture
def http_server():
    server = RouteServer()
    server.start()
    try:
        yield server
    finally:
        server.stop()
