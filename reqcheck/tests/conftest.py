from __future__ import annotations

from pathlib import Path

import pytest

from reqcheck.config import Settings
from reqcheck.context import CheckContext
from reqcheck.i18n import Translator


@pytest.fixture
def entry_script(tmp_path: Path) -> str:
    script = tmp_path / "index.py"
    script.write_text("# entry\n", encoding="utf-8")
    return str(script)


@pytest.fixture
def settings(entry_script: str) -> Settings:
    return Settings(entry_script=entry_script, server_software="TestServer/1.0")


@pytest.fixture
def server_vars(entry_script: str) -> dict[str, str]:
    """A complete, consistent set of CGI variables for one request."""
    return {
        "HTTP_HOST": "localhost",
        "SERVER_NAME": "localhost",
        "SERVER_PORT": "80",
        "SCRIPT_NAME": "/index.py",
        "SCRIPT_FILENAME": entry_script,
        "SCRIPT_URL": "/index.py/check",
        "HTTP_ACCEPT": "text/html",
        "HTTP_USER_AGENT": "pytest",
        "REQUEST_URI": "/index.py/check",
        "QUERY_STRING": "",
        "PATH_INFO": "/check",
        "SERVER_SOFTWARE": "TestServer/1.0",
    }


@pytest.fixture
def make_context(settings: Settings, entry_script: str):
    def _make(server_vars=None, translator=None, language=None) -> CheckContext:
        return CheckContext(
            settings=settings,
            server_vars=server_vars or {},
            entry_script=entry_script,
            language=language,
            translator=translator or Translator(),
        )
    return _make
