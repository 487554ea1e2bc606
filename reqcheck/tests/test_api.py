"""
Tests: HTTP surface and CGI entry point.

Run with:
    pytest reqcheck/tests/test_api.py -v
"""

import io
import json

import pytest
from fastapi.testclient import TestClient

from reqcheck.api import create_app
from reqcheck.api.routes import serving_script
from reqcheck.config import Settings, get_settings


@pytest.fixture
def client(monkeypatch):
    settings = Settings(entry_script=serving_script(), server_software="TestServer/1.0")
    monkeypatch.setattr("reqcheck.api.routes.get_settings", lambda: settings)
    return TestClient(create_app())


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"


class TestReportPage:
    def test_html_report(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        assert "FastAPI Requirement Checker" in resp.text
        assert "Server variables" in resp.text

    def test_accept_language_selects_translation(self, client):
        resp = client.get("/", headers={"Accept-Language": "fr;q=0.5,id;q=0.9"})
        assert resp.status_code == 200
        assert "Versi Python" in resp.text

    def test_rendering_failure_is_500(self, client, monkeypatch):
        def _boom(*args, **kwargs):
            raise RuntimeError("template exploded")

        monkeypatch.setattr("reqcheck.api.routes.render_report", _boom)
        resp = client.get("/")
        assert resp.status_code == 500
        assert "template exploded" in resp.json()["detail"]


class TestReportJson:
    def test_json_report(self, client):
        resp = client.get("/api/requirements")
        assert resp.status_code == 200
        payload = resp.json()
        assert len(payload["requirements"]) == 15
        assert payload["result"] in ("PASS", "WARN")
        assert payload["result_code"] in (1, -1)
        server_row = payload["requirements"][1]
        assert server_row["satisfied"] is True
        assert server_row["remark"] == "\u00a0"

    def test_language_reported(self, client):
        resp = client.get("/api/requirements", headers={"Accept-Language": "de-DE"})
        assert resp.json()["language"] == "de_de"

    def test_wrong_entry_script_fails(self, client, server_vars, monkeypatch, tmp_path):
        server_vars["SCRIPT_FILENAME"] = str(tmp_path / "x.py")
        monkeypatch.setattr(
            "reqcheck.api.routes.server_vars_from_scope",
            lambda scope, s: server_vars,
        )
        payload = client.get("/api/requirements").json()
        assert payload["result"] == "FAIL"
        assert payload["requirements"][1]["remark"].startswith("SCRIPT_FILENAME must be")

    def test_stale_entry_script_setting_fails(self, settings, monkeypatch):
        monkeypatch.setattr("reqcheck.api.routes.get_settings", lambda: settings)
        payload = TestClient(create_app()).get("/api/requirements").json()
        assert payload["result"] == "FAIL"
        assert payload["requirements"][1]["remark"].startswith("SCRIPT_FILENAME must be")

    def test_default_entry_script_is_serving_module(self, monkeypatch):
        monkeypatch.setattr("reqcheck.api.routes.get_settings", lambda: Settings())
        payload = TestClient(create_app()).get("/api/requirements").json()
        assert payload["requirements"][1]["satisfied"] is True


class TestCgiEntry:
    def test_run_writes_cgi_response(self, server_vars, entry_script, monkeypatch):
        monkeypatch.setattr("reqcheck.main.get_settings", lambda: Settings(entry_script=entry_script))
        from reqcheck.main import run

        out = io.StringIO()
        run(environ=server_vars, out=out, entry_script=entry_script)
        head, _, body = out.getvalue().partition("\r\n\r\n")
        assert head == "Content-Type: text/html; charset=utf-8"
        assert body.lstrip().startswith("<!DOCTYPE html>")

    def test_run_reports_script_mismatch(self, server_vars, entry_script, tmp_path, monkeypatch):
        monkeypatch.setattr("reqcheck.main.get_settings", lambda: Settings(entry_script=entry_script))
        from reqcheck.main import run

        out = io.StringIO()
        run(environ=server_vars, out=out, entry_script=str(tmp_path / "elsewhere.py"))
        assert "SCRIPT_FILENAME must be the same as the entry script file path." in out.getvalue()

    def test_run_on_plain_cgi_host(self, entry_script, monkeypatch):
        monkeypatch.setattr("reqcheck.main.get_settings", lambda: Settings(entry_script=entry_script))
        from reqcheck.main import run

        environ = {
            "GATEWAY_INTERFACE": "CGI/1.1",
            "HTTP_HOST": "localhost",
            "SERVER_NAME": "localhost",
            "SERVER_PORT": "80",
            "SERVER_PROTOCOL": "HTTP/1.1",
            "REQUEST_METHOD": "GET",
            "SCRIPT_NAME": "/cgi-bin/index.py",
            "SCRIPT_FILENAME": entry_script,
            "PATH_INFO": "/check",
            "QUERY_STRING": "",
            "HTTP_ACCEPT": "text/html",
            "HTTP_USER_AGENT": "curl/8.0",
        }
        out = io.StringIO()
        run(environ=environ, out=out, entry_script=entry_script)
        assert '<div class="result fail">' not in out.getvalue()
        assert "do not include" not in out.getvalue()

    def test_script_url_derived_from_script_name(self):
        from reqcheck.main import cgi_server_vars

        environ = {"SCRIPT_NAME": "/index.py", "PATH_INFO": "/a"}
        assert cgi_server_vars(environ)["SCRIPT_URL"] == "/index.py/a"
        assert cgi_server_vars({"SCRIPT_NAME": "/index.py"})["SCRIPT_URL"] == "/index.py"
        assert cgi_server_vars({**environ, "SCRIPT_URL": "/x"})["SCRIPT_URL"] == "/x"
        assert "SCRIPT_URL" not in cgi_server_vars({})
        assert "SCRIPT_URL" not in environ

    def test_print_json(self, server_vars, monkeypatch):
        from reqcheck.main import print_json

        out = io.StringIO()
        print_json(environ=server_vars, out=out)
        payload = json.loads(out.getvalue())
        assert len(payload["requirements"]) == 15


def test_settings_cached():
    assert get_settings() is get_settings()
