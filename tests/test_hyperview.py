"""Tests for hyperview.renderer.HyperView — adapter registry, dispatch, redirects."""

import json
from pathlib import Path

import pytest

from hyperview.adapters import Adapter, BaseAdapter, ErrorKind, JSONAdapter, TemplateAdapter
from hyperview.config import ViewConfig
from hyperview.errors import AdapterNotFound
from hyperview.http.request import Request
from hyperview.http.response import Response
from hyperview.renderer import HyperView
from hyperview.view import ViewResponse


class RecordingAdapter(BaseAdapter):
    """Adapter that records what it was asked to render."""

    def __init__(self, label: str) -> None:
        self.label = label
        self.init_calls = 0
        self.rendered: list[ViewResponse] = []
        self.errors: list[tuple[ErrorKind, ViewResponse, BaseException | None]] = []

    def init(self) -> None:
        self.init_calls += 1

    def render(self, request: Request, view: ViewResponse) -> Response:
        self.rendered.append(view)
        return Response(body=f"{self.label}:{view.template_path}")

    def render_error(
        self,
        kind: ErrorKind,
        request: Request,
        view: ViewResponse,
        exc: BaseException | None = None,
    ) -> Response:
        self.errors.append((kind, view, exc))
        return Response(body=f"{self.label}:{kind.name}", status=kind.status)


class FailingInitAdapter(RecordingAdapter):
    def init(self) -> None:
        msg = "cannot load"
        raise RuntimeError(msg)


def _hv(**adapters: Adapter) -> HyperView:
    return HyperView(
        ViewConfig(base_layout="app", system_layout="plain"),
        adapters={
            "html": RecordingAdapter("html"),
            "json": RecordingAdapter("json"),
            **adapters,
        },
    )


def _get(hv: HyperView, name: str) -> RecordingAdapter:
    adapter = hv.adapter(name)
    assert isinstance(adapter, RecordingAdapter)
    return adapter


class TestRegistry:
    def test_defaults_installed(self) -> None:
        hv = HyperView()
        assert isinstance(hv.adapter("html"), TemplateAdapter)
        assert isinstance(hv.adapter("json"), JSONAdapter)

    def test_defaults_do_not_replace_custom(self) -> None:
        hv = _hv()
        assert isinstance(hv.adapter("html"), RecordingAdapter)
        assert isinstance(hv.adapter("json"), RecordingAdapter)

    def test_register_runs_init(self) -> None:
        hv = _hv()
        csv = RecordingAdapter("csv")
        hv.register_adapter("csv", csv)
        assert csv.init_calls == 1
        assert hv.adapter("csv") is csv

    def test_last_registration_wins(self) -> None:
        hv = _hv()
        replacement = RecordingAdapter("html2")
        hv.register_adapter("html", replacement)
        assert hv.adapter("html") is replacement

    def test_failed_init_is_not_registered(self) -> None:
        hv = _hv()
        with pytest.raises(RuntimeError, match="cannot load"):
            hv.register_adapter("pdf", FailingInitAdapter("pdf"))
        assert not hv.has_adapter("pdf")

    def test_unknown_adapter_raises(self) -> None:
        with pytest.raises(AdapterNotFound):
            _hv().adapter("pdf")

    def test_reinit_calls_every_adapter(self) -> None:
        hv = _hv()
        hv.reinit()
        assert _get(hv, "html").init_calls == 2
        assert _get(hv, "json").init_calls == 2

    def test_instances_are_isolated(self) -> None:
        first, second = _hv(), _hv()
        first.register_adapter("csv", RecordingAdapter("csv"))
        assert not second.has_adapter("csv")


class TestDispatch:
    @pytest.mark.parametrize("path", ["sample", "sample.html"])
    def test_html_selection(self, path: str) -> None:
        hv = _hv()
        response = hv.render(Request.build(), ViewResponse(path))
        assert response.text == "html:sample"

    def test_json_extension(self) -> None:
        hv = _hv()
        assert hv.render(Request.build(), ViewResponse("sample.json")).text == "json:sample"

    def test_json_content_type_header(self) -> None:
        hv = _hv()
        view = ViewResponse("sample").header("Content-Type", "application/json; charset=utf-8")
        assert hv.render(Request.build(), view).text == "json:sample"

    def test_custom_extension_adapter(self) -> None:
        hv = _hv(csv=RecordingAdapter("csv"))
        response = hv.render(Request.build(), ViewResponse("reports/monthly.csv"))
        assert response.text == "csv:reports/monthly"

    def test_unknown_extension_is_500(self) -> None:
        response = _hv().render(Request.build(), ViewResponse("sample.pdf"))
        assert response.status == 500
        assert "Adapter not found" in response.text

    def test_dot_in_directory_is_not_an_extension(self) -> None:
        hv = _hv()
        assert hv.render(Request.build(), ViewResponse("v1.2/notes")).text == "html:v1.2/notes"

    def test_render_as_applies_base_layout(self) -> None:
        hv = _hv()
        hv.render_as(Request.build(), "html", ViewResponse("sample"))
        assert _get(hv, "html").rendered[-1].template_layout == "app"

    def test_render_as_keeps_explicit_layout(self) -> None:
        hv = _hv()
        hv.render_as(Request.build(), "html", ViewResponse("sample", layout="bare"))
        assert _get(hv, "html").rendered[-1].template_layout == "bare"


class TestErrorShortcuts:
    @pytest.mark.parametrize(
        ("method", "kind"),
        [
            ("render_forbidden", ErrorKind.FORBIDDEN),
            ("render_maintenance", ErrorKind.MAINTENANCE),
            ("render_method_not_allowed", ErrorKind.METHOD_NOT_ALLOWED),
            ("render_not_found", ErrorKind.NOT_FOUND),
            ("render_unauthorized", ErrorKind.UNAUTHORIZED),
        ],
    )
    def test_default_html_adapter(self, method: str, kind: ErrorKind) -> None:
        hv = _hv()
        response = getattr(hv, method)(Request.build())
        assert response.status == kind.status
        recorded_kind, view, _ = _get(hv, "html").errors[-1]
        assert recorded_kind is kind
        assert view.template_layout == "plain"
        assert view.status_code == kind.status

    def test_adapter_key(self) -> None:
        hv = _hv()
        response = hv.render_not_found(Request.build(), "json")
        assert response.text == "json:NOT_FOUND"

    def test_system_error(self) -> None:
        hv = _hv()
        exc = RuntimeError("boom")
        response = hv.render_system_error(Request.build(), exc)
        assert response.status == 500
        kind, view, recorded = _get(hv, "html").errors[-1]
        assert kind is ErrorKind.SYSTEM_ERROR
        assert recorded is exc
        assert view.status_code == 500

    def test_missing_adapter(self) -> None:
        response = _hv().render_forbidden(Request.build(), "pdf")
        assert response.status == 500
        assert "Adapter not found" in response.text


class TestRedirect:
    def test_htmx_request(self) -> None:
        request = Request.build(headers={"HX-Request": "true"})
        response = _hv().redirect(request, "/login")
        assert response.status == 303
        assert response.header("HX-Redirect") == "/login"
        assert response.text == "redirecting..."

    def test_xml_http_request(self) -> None:
        request = Request.build(headers={"X-Requested-With": "XMLHttpRequest"})
        response = _hv().redirect(request, "/login")
        assert response.status == 200
        assert response.content_type.startswith("application/json")
        assert json.loads(response.text) == {
            "message": "redirecting...",
            "status": "redirect",
            "url": "/login",
        }

    def test_plain_request(self) -> None:
        response = _hv().redirect(Request.build(), "/login")
        assert response.status == 302
        assert response.header("Location") == "/login"

    def test_boosted_request_gets_plain_redirect(self) -> None:
        request = Request.build(headers={"HX-Request": "true", "HX-Boosted": "true"})
        assert _hv().redirect(request, "/login").status == 302

    def test_hx_redirect(self) -> None:
        response = _hv().hx_redirect("/next")
        assert response.status == 303
        assert response.header("HX-Redirect") == "/next"

    def test_non_ascii_url_is_percent_encoded(self) -> None:
        assert _hv().redirect(Request.build(), "/café").header("Location") == "/caf%C3%A9"
        htmx = Request.build(headers={"HX-Request": "true"})
        assert _hv().redirect(htmx, "/café").header("HX-Redirect") == "/caf%C3%A9"


class TestBuilders:
    def test_new_response_uses_base_layout(self) -> None:
        assert _hv().new_response().template_layout == "app"

    def test_new_response_with_layout(self) -> None:
        assert _hv().new_response("wide").template_layout == "wide"

    def test_new_system_response(self) -> None:
        assert _hv().new_system_response().template_layout == "plain"


class TestEndToEnd:
    def test_kida_and_json_defaults(self, tmp_path: Path) -> None:
        views = tmp_path / "views"
        (views / "layouts").mkdir(parents=True)
        (views / "layouts" / "base.html").write_text(
            "<main>{% block content %}{% end %}</main>", encoding="utf-8"
        )
        (views / "hello.html").write_text("<p>Hello {{ name }}</p>", encoding="utf-8")
        hv = HyperView(ViewConfig(template_dir=tmp_path))

        html = hv.render(Request.build(), hv.new_response().path("hello").data(name="Ada"))
        assert html.status == 200
        assert "<main><p>Hello Ada</p></main>" in html.text

        data = hv.render(Request.build(), hv.new_response().path("hello.json").data(name="Ada"))
        body = json.loads(data.text)
        assert body["status"] == "success"
        assert body["data"]["name"] == "Ada"

    def test_missing_template_never_200(self, tmp_path: Path) -> None:
        hv = HyperView(ViewConfig(template_dir=tmp_path))
        response = hv.render(Request.build(), ViewResponse("ghost", layout="base"))
        assert response.status == 500
        assert "template not found: ghost" in response.text
