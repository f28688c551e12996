import pytest

from tcphttp.headers import HeaderParseError, Headers, is_valid_field_name


def test_valid_single_header():
    headers = Headers()
    n, done = headers.parse(b"HoSt: localhost:42069\r\n\r\n")
    assert headers["host"] == "localhost:42069"
    assert n == 23
    assert done is False


def test_valid_single_header_with_extra_whitespace():
    headers = Headers()
    data = b"       HOst: localhost:42069                           \r\n\r\n"
    n, done = headers.parse(data)
    assert headers["host"] == "localhost:42069"
    assert n == 57
    assert done is False


def test_valid_two_headers_with_existing_headers():
    headers = Headers({"host": "localhost:42069"})
    n, done = headers.parse(b"User-AgenT: curl/7.81.0\r\nAccept: */*\r\n\r\n")
    assert headers["host"] == "localhost:42069"
    assert headers["user-agent"] == "curl/7.81.0"
    assert n == 25
    assert done is False


def test_valid_done():
    headers = Headers()
    n, done = headers.parse(b"\r\n a bunCh of other stuff")
    assert len(headers) == 0
    assert n == 2
    assert done is True


def test_invalid_spacing_header():
    headers = Headers()
    with pytest.raises(HeaderParseError):
        headers.parse(b"       HoSt : localhost:42069       \r\n\r\n")
    assert len(headers) == 0


def test_invalid_chars_in_field_name():
    headers = Headers()
    with pytest.raises(HeaderParseError):
        headers.parse("Yams🍠🍠🍠: localhost:69420\r\n\r\n".encode())
    assert len(headers) == 0


def test_multiple_values_for_one_field_name():
    headers = Headers({"host": "sillygooses"})
    n, done = headers.parse(b"HosT: moregoosesarehere\r\n\r\n")
    assert headers["host"] == "sillygooses, moregoosesarehere"
    assert done is False
    assert n == len(b"HosT: moregoosesarehere\r\n")


def test_incomplete_line_needs_more_data():
    headers = Headers()
    assert headers.parse(b"Host: localhost") == (0, False)
    assert len(headers) == 0


def test_missing_colon_raises():
    with pytest.raises(HeaderParseError):
        Headers().parse(b"NoColonHere\r\n\r\n")


def test_empty_field_name_raises():
    with pytest.raises(HeaderParseError):
        Headers().parse(b": value\r\n")


def test_get_is_case_insensitive():
    headers = Headers()
    headers.set("Content-Type", "text/plain")
    assert headers.get("CONTENT-TYPE") == "text/plain"


def test_get_missing_key_raises():
    with pytest.raises(KeyError, match="content-length"):
        Headers().get("Content-Length")


def test_set_appends_values():
    headers = Headers()
    headers.set("Accept", "a")
    headers.set("ACCEPT", "b")
    headers.set("accept", "c")
    assert headers == {"accept": "a, b, c"}


def test_constructor_lowercases_keys():
    headers = Headers({"X-Thing": "1"})
    assert list(headers) == ["x-thing"]
    assert "X-THING" in headers


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Host", True),
        ("X-Custom_Header.1", True),
        ("!#$%&'*+-.^_`|~", True),
        ("", False),
        ("Has Space", False),
        ("Bad(Paren)", False),
        ("Yams🍠", False),
    ],
)
def test_is_valid_field_name(name, expected):
    assert is_valid_field_name(name) is expected