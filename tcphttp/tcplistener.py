"""TCP listener that parses incoming HTTP requests and prints them."""

from __future__ import annotations

import argparse
import socket
import sys
from typing import TextIO

from tcphttp.request import Request, request_from_reader

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 42069


class _SocketReader:
    """Adapts a connected socket to the ``read(size)`` interface."""

    def __init__(self, conn: socket.socket) -> None:
        self._conn = conn

    def read(self, size: int = 1024, /) -> bytes:
        return self._conn.recv(size)


def _emit(out: TextIO, text: str) -> None:
    out.write(text)
    out.flush()


def format_request(request: Request) -> str:
    """Render a parsed request as the human-readable report printed by the listener."""
    line = request.request_line
    parts = [
        "Request line:\n",
        f"- Method: {line.method} \n",
        f"- Target: {line.request_target} \n",
        f"- Version: {line.http_version} \n",
        "Headers:\n",
    ]
    parts.extend(f"- {key}: {value}\n" for key, value in request.headers.items())
    parts.append("Body:\n")
    if request.body:
        parts.append(request.body.decode("latin-1"))
    return "".join(parts)


def serve(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT, out: TextIO | None = None) -> None:
    """Accept connections forever, printing each parsed request to ``out``.

    Returns only when the listener cannot be opened or accepting fails.
    """
    out = sys.stdout if out is None else out
    try:
        listener = socket.create_server((host, port))
    except OSError as err:
        _emit(out, f"ERR: {err}\n")
        return

    with listener:
        while True:
            try:
                conn, _ = listener.accept()
            except OSError as err:
                _emit(out, f"ERR: {err}\n")
                return
            with conn:
                _emit(out, "Connection has been accepted!\n")
                try:
                    request = request_from_reader(_SocketReader(conn))
                except (ValueError, OSError) as err:
                    _emit(out, f"ERR: {err}\n")
                    continue
                _emit(out, format_request(request))


def main(argv: list[str] | None = None) -> int:
    """Run the listener from the command line."""
    parser = argparse.ArgumentParser(
        prog="tcplistener", description="Print HTTP requests received over TCP."
    )
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    try:
        serve(args.host, args.port, sys.stdout)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())