"""Send lines of text as UDP datagrams, one per line."""

from __future__ import annotations

import argparse
import socket
import sys
from collections.abc import Iterable
from typing import TextIO

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 42069
PROMPT = ">"


def _emit(out: TextIO, text: str) -> None:
    out.write(text)
    out.flush()


def send_lines(
    lines: Iterable[str | bytes],
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    out: TextIO | None = None,
) -> int:
    """Send each line to ``host:port`` as its own datagram.

    A prompt is written to ``out`` before each line is taken. Send errors
    are reported to ``out`` and do not stop the loop. Returns the number
    of datagrams sent.
    """
    out = sys.stdout if out is None else out
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError as err:
        _emit(out, f"{err} \n")
        return 0

    sent = 0
    with sock:
        try:
            sock.connect((host, port))
        except OSError as err:
            _emit(out, f"{err} \n")
            return 0

        remaining = iter(lines)
        while True:
            _emit(out, PROMPT)
            line = next(remaining, None)
            if line is None:
                break
            payload = line if isinstance(line, bytes) else line.encode("utf-8")
            try:
                sock.send(payload)
            except OSError as err:
                _emit(out, f"{err} \n")
                continue
            sent += 1
    return sent


def main(argv: list[str] | None = None) -> int:
    """Send standard input line by line over UDP."""
    parser = argparse.ArgumentParser(
        prog="udpsender", description="Send lines from standard input as UDP datagrams."
    )
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    try:
        send_lines(sys.stdin, args.host, args.port, sys.stdout)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())