# tcphttp

An incremental HTTP/1.1 request parser built directly on byte streams. It also
comes with two small command-line tools: a TCP listener that parses and prints
incoming HTTP requests, and a UDP sender that forwards lines typed on standard
input.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Parsing a request

`request_from_reader` takes any object that has a `read(size)` method returning
bytes, such as a socket file or `io.BytesIO`. It reads until the request is
complete: first the request line, then the headers, then a body whose length
comes from `Content-Length`.

```python
import io
from tcphttp.request import request_from_reader

raw = (
    b"POST /submit HTTP/1.1\r\n"
    b"Host: localhost:42069\r\n"
    b"Content-Length: 13\r\n"
    b"\r\n"
    b"hello world!\n"
)
req = request_from_reader(io.BytesIO(raw))
print(req.request_line.method)          # POST
print(req.request_line.request_target)  # /submit
print(req.request_line.http_version)    # 1.1
print(req.headers.get("host"))          # localhost:42069
print(req.body)                         # b'hello world!\n'
```

A malformed request line, a bad header, or a stream that ends before the
request is complete raises `RequestParseError`.

## Headers

`Headers` is a mapping with lower-case keys. `parse` takes one header line at a
time from a byte buffer and returns how many bytes it used and whether the
blank line that ends the headers has been reached. If the same field name
appears more than once, its values are joined with `", "`.

```python
from tcphttp.headers import Headers

headers = Headers()
consumed, done = headers.parse(b"HoSt: localhost:42069\r\n\r\n")
# consumed == 23, done is False, headers["host"] == "localhost:42069"
```

Invalid field names, or whitespace between the field name and the colon,
raise `HeaderParseError`. `is_valid_field_name` checks a name on its own.

## Command-line tools

Listen on `localhost:42069` and print each HTTP request that arrives:

```
tcplistener
```

Then, from another terminal, send a request to it:

```
curl http://localhost:42069/coffee
```

Send each line typed on standard input as a UDP datagram to
`localhost:42069`:

```
udpsender
```