"""Tests for hyperview.http.response — immutable Response values."""

import pytest

from hyperview.http.response import (
    TEXT_HTML,
    TEXT_PLAIN,
    Response,
    header_url,
    plain_text_error,
)


class TestResponse:
    def test_defaults(self) -> None:
        r = Response()
        assert r.body == ""
        assert r.status == 200
        assert r.content_type == TEXT_HTML
        assert r.headers == ()

    def test_with_status(self) -> None:
        assert Response().with_status(201).status == 201

    def test_with_header(self) -> None:
        assert Response().with_header("X-Custom", "value").headers == (("X-Custom", "value"),)

    def test_with_headers_dict(self) -> None:
        r = Response().with_headers({"A": "1", "B": "2"})
        assert ("A", "1") in r.headers
        assert ("B", "2") in r.headers

    def test_with_content_type(self) -> None:
        assert Response().with_content_type("application/json").content_type == "application/json"

    def test_transformations_do_not_mutate(self) -> None:
        original = Response("body")
        original.with_status(404)
        assert original.status == 200

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Response().status = 500  # type: ignore[misc]

    def test_header_lookup(self) -> None:
        r = Response(content_type=TEXT_PLAIN).with_header("ETag", '"v1"')
        assert r.header("etag") == '"v1"'
        assert r.header("Content-Type") == TEXT_PLAIN
        assert r.header("X-Missing", "none") == "none"

    def test_body_conversions(self) -> None:
        assert Response("héllo").body_bytes == "héllo".encode()
        assert Response(b"bytes").text == "bytes"


class TestPlainTextError:
    def test_shape(self) -> None:
        r = plain_text_error("Not Found", 404)
        assert r.status == 404
        assert r.text == "Not Found\n"
        assert r.content_type == TEXT_PLAIN
        assert r.header("X-Content-Type-Options") == "nosniff"


class TestHeaderUrl:
    def test_non_ascii_is_percent_encoded(self) -> None:
        assert header_url("/café/menü") == "/caf%C3%A9/men%C3%BC"

    def test_ascii_url_unchanged(self) -> None:
        url = "https://example.com/search?q=a+b&page=2#results"
        assert header_url(url) == url

    def test_existing_escapes_kept(self) -> None:
        assert header_url("/caf%C3%A9") == "/caf%C3%A9"

    def test_spaces_encoded(self) -> None:
        assert header_url("/my page") == "/my%20page"
