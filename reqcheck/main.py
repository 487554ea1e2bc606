"""
Requirement Checker — Main Entry Point

Render the report for a CGI request (the web server runs this as the script):
    python -m reqcheck

Print the report as JSON for the current environment:
    python -m reqcheck --json

Run as an HTTP server:
    python -m reqcheck --serve
    # or: uvicorn reqcheck.api:app --port 8000
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Mapping, TextIO

from reqcheck.config import get_settings
from reqcheck.context import build_context
from reqcheck.report import build_report, render_report
from reqcheck.utils.logger import setup_logging


def cgi_server_vars(environ: Mapping[str, str]) -> dict[str, str]:
    """Copy the CGI environment, deriving SCRIPT_URL where the server omits it."""
    server_vars = dict(environ)
    if server_vars.get("SCRIPT_URL") is None and server_vars.get("SCRIPT_NAME") is not None:
        # only mod_rewrite sets SCRIPT_URL; RFC 3875 hosts give SCRIPT_NAME and PATH_INFO
        server_vars["SCRIPT_URL"] = server_vars["SCRIPT_NAME"] + server_vars.get("PATH_INFO", "")
    return server_vars


def run(
    environ: Mapping[str, str] | None = None,
    out: TextIO | None = None,
    entry_script: str | None = None,
) -> None:
    """Write a CGI response carrying the HTML requirement report."""
    settings = get_settings()
    # stdout carries the response body
    setup_logging(settings.log_level, stream=sys.stderr)
    logger = logging.getLogger(__name__)

    environ = cgi_server_vars(os.environ if environ is None else environ)
    out = out or sys.stdout
    entry_script = entry_script or os.path.abspath(sys.argv[0])

    context = build_context(environ, entry_script, settings)
    report = build_report(context)
    html = render_report(context, report.requirements, report.result)

    logger.info(f"Report for {environ.get('REMOTE_ADDR', 'local')}: {report.result.value}")
    out.write("Content-Type: text/html; charset=utf-8\r\n\r\n")
    out.write(html)
    out.flush()


def print_json(environ: Mapping[str, str] | None = None, out: TextIO | None = None) -> None:
    """Print the evaluated report for this process environment as JSON."""
    settings = get_settings()
    setup_logging(settings.log_level, stream=sys.stderr)

    environ = cgi_server_vars(os.environ if environ is None else environ)
    out = out or sys.stdout

    context = build_context(environ, os.path.abspath(sys.argv[0]), settings)
    out.write(build_report(context).model_dump_json(indent=2))
    out.write("\n")


def serve(host: str | None = None, port: int | None = None) -> None:
    """Start the FastAPI server."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    host = host or settings.host
    port = port or settings.port
    logger.info(f"Starting {settings.app_name} on {host}:{port}")
    uvicorn.run("reqcheck.api:app", host=host, port=port)


def cli() -> None:
    if "--serve" in sys.argv:
        serve()
    elif "--json" in sys.argv:
        print_json()
    else:
        run()


if __name__ == "__main__":
    cli()
