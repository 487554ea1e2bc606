from .renderer import (
    build_report,
    framework_version,
    render_html,
    render_report,
    select_view,
    server_info,
)

__all__ = [
    "build_report",
    "framework_version",
    "render_html",
    "render_report",
    "select_view",
    "server_info",
]
