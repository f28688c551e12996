"""Incremental parsing of HTTP/1.1 requests from a byte stream."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from typing import Protocol

from tcphttp.headers import Headers

_CRLF = b"\r\n"
_READ_SIZE = 1024
_SUPPORTED_VERSION = "HTTP/1.1"
_INTEGER = re.compile(r"[+-]?[0-9]+")


class RequestParseError(ValueError):
    """Raised when a request is malformed or ends too early."""


class ParserState(enum.IntEnum):
    """Stages of request parsing."""

    INITIALIZED = 0
    PARSING_HEADERS = 1
    PARSING_BODY = 2
    DONE = 3


class _Reader(Protocol):
    def read(self, size: int = ..., /) -> bytes: ...


@dataclass
class RequestLine:
    """The method, target and version of a request."""

    http_version: str = ""
    request_target: str = ""
    method: str = ""


@dataclass
class Request:
    """A parsed HTTP request.

    ``body`` is None when the request carries no Content-Length header.
    """

    request_line: RequestLine = field(default_factory=RequestLine)
    headers: Headers = field(default_factory=Headers)
    body: bytes | None = None
    state: ParserState = ParserState.INITIALIZED

    def _parse(self, data: bytes) -> int:
        """Parse as much of ``data`` as possible; return bytes consumed."""
        consumed = 0
        while self.state is not ParserState.DONE:
            n = self._parse_single(data[consumed:])
            if n == 0:
                break
            consumed += n
        return consumed

    def _parse_single(self, data: bytes) -> int:
        if self.state is ParserState.INITIALIZED:
            request_line, n = parse_request_line(data)
            if request_line is None:
                return 0
            self.request_line = request_line
            self.state = ParserState.PARSING_HEADERS
            return n
        if self.state is ParserState.PARSING_HEADERS:
            n, done = self.headers.parse(data)
            if done:
                self.state = ParserState.PARSING_BODY
            return n
        if self.state is ParserState.PARSING_BODY:
            n, done = self._parse_body(data)
            if done:
                self.state = ParserState.DONE
            return n
        raise RequestParseError("can't parse in a done state")

    def _parse_body(self, data: bytes) -> tuple[int, bool]:
        try:
            length_text = self.headers.get("Content-Length")
        except KeyError:
            return 0, True

        if not _INTEGER.fullmatch(length_text):
            raise RequestParseError("contentLength not valid int")
        content_length = int(length_text)

        self.body = (self.body or b"") + data
        if len(self.body) > content_length:
            raise RequestParseError(
                f"len of body ({len(self.body)}) > content length ({content_length})"
            )
        return len(data), len(self.body) == content_length


def parse_request_line(data: bytes) -> tuple[RequestLine | None, int]:
    """Parse the request line at the start of ``data``.

    Returns the request line and the bytes consumed including the CRLF,
    or ``(None, 0)`` if no complete line is available yet.
    """
    line_end = data.find(_CRLF)
    if line_end == -1:
        return None, 0
    line = bytes(data[:line_end]).decode("utf-8", errors="replace")
    return _request_line_from_string(line), line_end + len(_CRLF)


def _request_line_from_string(line: str) -> RequestLine:
    parts = line.split(" ")
    if len(parts) != 3:
        raise RequestParseError(
            f"request line must have 3 parts, got {len(parts)}: {line!r}"
        )
    method, target, version = parts

    if method != method.upper():
        raise RequestParseError(f"method is not all uppercase: {method!r}")
    if not target.startswith("/"):
        raise RequestParseError(f"no leading / in request target: {target!r}")
    if version != _SUPPORTED_VERSION:
        raise RequestParseError(f"unsupported HTTP version: {version!r}")

    return RequestLine(
        http_version=version.removeprefix("HTTP/"),
        request_target=target,
        method=method,
    )


def request_from_reader(reader: _Reader) -> Request:
    """Read and parse one request from ``reader``.

    ``reader.read(size)`` may return fewer bytes than asked for; an empty
    result marks the end of the stream.
    """
    request = Request()
    buffer = bytearray()
    while request.state is not ParserState.DONE:
        chunk = reader.read(_READ_SIZE)
        if not chunk:
            raise RequestParseError(
                f"incomplete request, in state: {int(request.state)}, "
                f"unparsed bytes on EOF: {len(buffer)}"
            )
        buffer += chunk
        consumed = request._parse(bytes(buffer))
        del buffer[:consumed]
    return request