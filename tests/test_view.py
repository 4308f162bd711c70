"""Tests for hyperview.view — the ViewResponse builder and ViewData."""

import json
from datetime import UTC, datetime

import pytest

from hyperview.context import nonce_var, set_nonce
from hyperview.htmx import Swap
from hyperview.http.request import Request
from hyperview.view import ViewData, ViewResponse


class TestViewResponseBasics:
    def test_chaining_returns_self(self) -> None:
        view = ViewResponse()
        assert view.path("users/show").layout("app").title("Profile") is view

    def test_accessors(self) -> None:
        view = ViewResponse("users/show", layout="app").title("Profile")
        assert view.template_path == "users/show"
        assert view.template_layout == "app"
        assert view.page_title == "Profile"
        assert view.status_code == 0

    @pytest.mark.parametrize(
        ("setter", "code"),
        [
            ("status_ok", 200),
            ("status_created", 201),
            ("status_unauthorized", 401),
            ("status_forbidden", 403),
            ("status_not_found", 404),
            ("status_method_not_allowed", 405),
            ("status_error", 500),
            ("status_maintenance", 503),
        ],
    )
    def test_named_status_setters(self, setter: str, code: int) -> None:
        view = ViewResponse()
        getattr(view, setter)()
        assert view.status_code == code

    def test_status_if_unset_keeps_explicit_status(self) -> None:
        view = ViewResponse().status(418).status_if_unset(200)
        assert view.status_code == 418

    def test_status_if_unset_fills_zero(self) -> None:
        assert ViewResponse().status_if_unset(200).status_code == 200


class TestViewResponseData:
    def test_merge_overwrites(self) -> None:
        view = ViewResponse().data({"a": 1, "b": 2}).data(b=3)
        payload = view.view_data(Request.build()).payload()
        assert payload["a"] == 1
        assert payload["b"] == 3

    def test_data_item(self) -> None:
        view = ViewResponse().data_item("count", 7)
        assert view.view_data(Request.build()).get("count") == 7

    def test_errors(self) -> None:
        view = ViewResponse().errors("Fix the form", {"email": "required"})
        data = view.view_data(Request.build())
        assert data.error == "Fix the form"
        assert data.has_error
        assert data.errors == {"email": "required"}
        assert data.has_errors


class TestViewResponseHeaders:
    def test_header_replaces_case_insensitively(self) -> None:
        view = ViewResponse().header("X-Thing", "a").header("x-thing", "b")
        assert view.headers == {"x-thing": "b"}

    def test_cache_headers(self) -> None:
        view = ViewResponse().no_cache_strict().etag('"abc"')
        assert view.headers["Cache-Control"] == "no-cache, no-store, must-revalidate"
        assert view.headers["ETag"] == '"abc"'

    def test_cache_control_literal(self) -> None:
        assert ViewResponse().cache_control("max-age=60").headers["Cache-Control"] == "max-age=60"

    def test_last_modified_datetime(self) -> None:
        view = ViewResponse().last_modified(datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC))
        assert view.headers["Last-Modified"] == "Tue, 02 Jan 2024 03:04:05 GMT"

    def test_last_modified_string(self) -> None:
        view = ViewResponse().last_modified("Tue, 02 Jan 2024 03:04:05 GMT")
        assert view.headers["Last-Modified"] == "Tue, 02 Jan 2024 03:04:05 GMT"

    def test_content_type(self) -> None:
        view = ViewResponse().header("Content-Type", "application/json")
        assert view.content_type == "application/json"
        assert ("Content-Type", "application/json") not in view.response_headers()

    def test_content_type_unset(self) -> None:
        assert ViewResponse().content_type is None


class TestViewResponseHtmx:
    def test_simple_headers(self) -> None:
        view = (
            ViewResponse()
            .hx_push_url("/inbox")
            .hx_redirect("/login")
            .hx_refresh()
            .hx_replace_url("/inbox?page=2")
            .hx_retarget("#main")
            .hx_reselect("#content")
        )
        headers = view.headers
        assert headers["HX-Push-Url"] == "/inbox"
        assert headers["HX-Redirect"] == "/login"
        assert headers["HX-Refresh"] == "true"
        assert headers["HX-Replace-Url"] == "/inbox?page=2"
        assert headers["HX-Retarget"] == "#main"
        assert headers["HX-Reselect"] == "#content"

    def test_url_headers_percent_encoded(self) -> None:
        view = ViewResponse().hx_push_url("/café").hx_redirect("/café").hx_replace_url("/café")
        assert view.headers["HX-Push-Url"] == "/caf%C3%A9"
        assert view.headers["HX-Redirect"] == "/caf%C3%A9"
        assert view.headers["HX-Replace-Url"] == "/caf%C3%A9"

    def test_negative_flags(self) -> None:
        view = ViewResponse().hx_no_push_url().hx_no_refresh().hx_no_replace_url()
        assert view.headers["HX-Push-Url"] == "false"
        assert view.headers["HX-Refresh"] == "false"
        assert view.headers["HX-Replace-Url"] == "false"

    def test_reswap_accepts_swap(self) -> None:
        view = ViewResponse().hx_reswap(Swap("outerHTML").with_transition())
        assert view.headers["HX-Reswap"] == "outerHTML transition:true"

    def test_location_plain_and_json(self) -> None:
        assert ViewResponse().hx_location("/inbox").headers["HX-Location"] == "/inbox"
        value = ViewResponse().hx_location("/inbox", target="#main").headers["HX-Location"]
        assert json.loads(value) == {"path": "/inbox", "target": "#main"}

    def test_triggers_merge_into_headers(self) -> None:
        view = (
            ViewResponse()
            .hx_trigger("saved")
            .hx_trigger_after_settle("settled")
            .hx_trigger_after_swap("swapped")
        )
        headers = view.headers
        assert headers["HX-Trigger"] == "saved"
        assert headers["HX-Trigger-After-Settle"] == "settled"
        assert headers["HX-Trigger-After-Swap"] == "swapped"


class TestViewData:
    def test_defaults(self) -> None:
        data = ViewData().bind(Request.build())
        context = data.data()
        assert context["error"] == ""
        assert context["errors"] == {}
        assert context["view"] is data

    def test_payload_excludes_view(self) -> None:
        data = ViewData({"name": "Ada"}).bind(Request.build())
        assert data.payload() == {"name": "Ada", "error": "", "errors": {}}

    def test_context_is_a_fresh_dict(self) -> None:
        data = ViewData({"name": "Ada"}).bind(Request.build())
        context = data.data()
        context["extra"] = 1
        assert "extra" not in data.payload()
        assert "view" not in data.payload()

    def test_view_key_reserved_in_context_only(self) -> None:
        data = ViewData({"view": "grid"}).bind(Request.build())
        assert data.data()["view"] is data
        assert data.payload()["view"] == "grid"

    def test_get_missing_is_empty_string(self) -> None:
        data = ViewData()
        assert data.get("missing") == ""
        assert data.get_string("missing") == ""

    def test_get_string_ignores_non_strings(self) -> None:
        assert ViewData({"n": 3}).get_string("n") == ""

    def test_unbound_request_raises(self) -> None:
        with pytest.raises(RuntimeError, match="not bound"):
            _ = ViewData().request

    def test_request_helpers(self) -> None:
        request = Request.build(
            "POST",
            "/users",
            headers={"Host": "example.com:8080", "HX-Request": "true"},
        )
        data = ViewData().bind(request)
        assert data.base_url == "http://example.com:8080"
        assert data.request_path == "/users"
        assert data.request_method == "POST"
        assert data.is_htmx_request
        assert not data.is_boosted_request

    def test_current_year(self) -> None:
        assert ViewData().current_year == datetime.now().year

    def test_nonce_empty_when_unset(self) -> None:
        assert ViewData().nonce == ""

    def test_nonce_from_context(self) -> None:
        token = set_nonce("n0nce")
        try:
            data = ViewData()
            assert data.nonce == "n0nce"
            assert json.loads(data.htmx_nonce) == {
                "includeIndicatorStyles": False,
                "inlineScriptNonce": "n0nce",
            }
        finally:
            nonce_var.reset(token)

    def test_title_passes_through(self) -> None:
        view = ViewResponse().title("Home")
        assert view.view_data(Request.build()).title == "Home"
