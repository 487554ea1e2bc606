"""
Server-variable sanity check.

Verifies the web server passes the CGI-style variables the framework
relies on to build URLs and resolve routes. In CGI mode the variables
come straight from the process environment; behind an ASGI server they
are derived from the request scope by server_vars_from_scope().
"""

from __future__ import annotations

import logging
import os
from typing import Any, Mapping

from reqcheck.config import Settings
from reqcheck.context import CheckContext
from reqcheck.i18n import MessageKey

logger = logging.getLogger(__name__)

REQUIRED_SERVER_VARS = (
    "HTTP_HOST",
    "SERVER_NAME",
    "SERVER_PORT",
    "SCRIPT_NAME",
    "SCRIPT_FILENAME",
    "SCRIPT_URL",
    "HTTP_ACCEPT",
    "HTTP_USER_AGENT",
)


def _missing(server_vars: Mapping[str, Any], name: str) -> bool:
    return server_vars.get(name) is None


def check_server_vars(context: CheckContext) -> str:
    """
    Return "" when the server variables are usable, otherwise a
    description of the first problem found. Checks run in this order:
    missing variables, script path mismatch, missing request URI and
    query string, undeterminable path info.
    """
    server_vars = context.server_vars

    missing = [name for name in REQUIRED_SERVER_VARS if _missing(server_vars, name)]
    if missing:
        logger.info(f"Missing server variables: {missing}")
        return context.t(MessageKey.SERVER_VARS_MISSING, vars=", ".join(missing))

    reported = os.path.realpath(server_vars["SCRIPT_FILENAME"])
    actual = os.path.realpath(context.entry_script)
    if reported != actual:
        logger.info(f"SCRIPT_FILENAME {reported} does not match entry script {actual}")
        return context.t(MessageKey.SCRIPT_FILENAME_MISMATCH)

    if _missing(server_vars, "REQUEST_URI") and _missing(server_vars, "QUERY_STRING"):
        return context.t(MessageKey.REQUEST_URI_MISSING)

    if _missing(server_vars, "PATH_INFO") and not str(server_vars["SCRIPT_URL"]).startswith(
        str(server_vars["SCRIPT_NAME"])
    ):
        return context.t(MessageKey.PATH_INFO_UNDETERMINED)

    return ""


def server_vars_from_scope(scope: Mapping[str, Any], settings: Settings) -> dict[str, str]:
    """Build CGI-style server variables from an ASGI HTTP scope.

    ASGI has no script file, so SCRIPT_FILENAME reports the configured
    `settings.entry_script`. The HTTP routes compare it with the module that
    actually serves the app, so a stale setting fails the script check.
    """
    server_vars: dict[str, str] = {}

    for raw_name, raw_value in scope.get("headers", []):
        name = raw_name.decode("latin-1").upper().replace("-", "_")
        value = raw_value.decode("latin-1")
        if name not in ("CONTENT_TYPE", "CONTENT_LENGTH"):
            name = f"HTTP_{name}"
        if name in server_vars:
            server_vars[name] = f"{server_vars[name]},{value}"
        else:
            server_vars[name] = value

    server = scope.get("server")
    if server:
        host, port = server
        server_vars["SERVER_NAME"] = str(host)
        if port is not None:
            server_vars["SERVER_PORT"] = str(port)

    client = scope.get("client")
    if client:
        server_vars["REMOTE_ADDR"] = str(client[0])

    root_path = scope.get("root_path", "")
    path = scope.get("path", "/")
    path_info = path[len(root_path):] if root_path and path.startswith(root_path) else path
    query_string = scope.get("query_string", b"").decode("latin-1")

    server_vars["SCRIPT_NAME"] = root_path
    server_vars["PATH_INFO"] = path_info
    server_vars["SCRIPT_URL"] = root_path + path_info
    server_vars["QUERY_STRING"] = query_string
    server_vars["REQUEST_URI"] = server_vars["SCRIPT_URL"] + (f"?{query_string}" if query_string else "")
    server_vars["REQUEST_METHOD"] = scope.get("method", "GET")
    server_vars["SERVER_PROTOCOL"] = f"HTTP/{scope.get('http_version', '1.1')}"
    server_vars["SERVER_SOFTWARE"] = settings.server_software
    server_vars["SCRIPT_FILENAME"] = settings.entry_script

    return server_vars
