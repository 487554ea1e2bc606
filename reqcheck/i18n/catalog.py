"""
Message catalog. Every user-visible string has a stable key here.

Message tables under messages/<lang>/messages.json map these keys to
translations; anything missing falls back to SOURCE_MESSAGES.
"""

from __future__ import annotations

from enum import Enum


class MessageKey(str, Enum):
    # ── Requirement names ────────────────────────────────
    PYTHON_VERSION = "python_version"
    SERVER_VARIABLES = "server_variables"
    REFLECTION = "reflection"
    REGEX = "regex"
    COLLECTIONS = "collections"
    XML_DOM = "xml_dom"
    DB_TOOLKIT = "db_toolkit"
    SQLITE = "sqlite"
    MYSQL = "mysql"
    POSTGRESQL = "postgresql"
    MEMCACHED = "memcached"
    REDIS = "redis"
    CRYPTOGRAPHY = "cryptography"
    SOAP = "soap"
    IMAGING = "imaging"

    # ── Used-by / remarks ────────────────────────────────
    ALL_DB_CLASSES = "all_db_classes"
    PYTHON_VERSION_REQUIRED = "python_version_required"
    SQLITE_REMARK = "sqlite_remark"
    MYSQL_REMARK = "mysql_remark"
    POSTGRESQL_REMARK = "postgresql_remark"
    CRYPTOGRAPHY_REMARK = "cryptography_remark"

    # ── Server-variable diagnostics ──────────────────────
    SERVER_VARS_MISSING = "server_vars_missing"
    SCRIPT_FILENAME_MISMATCH = "script_filename_mismatch"
    REQUEST_URI_MISSING = "request_uri_missing"
    PATH_INFO_UNDETERMINED = "path_info_undetermined"

    # ── Report view ──────────────────────────────────────
    PAGE_TITLE = "page_title"
    DESCRIPTION = "description"
    CONCLUSION = "conclusion"
    RESULT_PASS = "result_pass"
    RESULT_WARN = "result_warn"
    RESULT_FAIL = "result_fail"
    DETAILS = "details"
    COL_NAME = "col_name"
    COL_RESULT = "col_result"
    COL_REQUIRED_BY = "col_required_by"
    COL_MEMO = "col_memo"
    LEGEND = "legend"
    LEGEND_PASSED = "legend_passed"
    LEGEND_FAILED = "legend_failed"
    LEGEND_WARNING = "legend_warning"
    PASSED = "passed"
    FAILED = "failed"
    WARNING = "warning"


SOURCE_MESSAGES: dict[MessageKey, str] = {
    MessageKey.PYTHON_VERSION: "Python version",
    MessageKey.SERVER_VARIABLES: "Server variables",
    MessageKey.REFLECTION: "Reflection support",
    MessageKey.REGEX: "Regular expressions",
    MessageKey.COLLECTIONS: "Abstract collections",
    MessageKey.XML_DOM: "XML DOM support",
    MessageKey.DB_TOOLKIT: "Database toolkit",
    MessageKey.SQLITE: "SQLite driver",
    MessageKey.MYSQL: "MySQL driver",
    MessageKey.POSTGRESQL: "PostgreSQL driver",
    MessageKey.MEMCACHED: "Memcached client",
    MessageKey.REDIS: "Redis client",
    MessageKey.CRYPTOGRAPHY: "Cryptography library",
    MessageKey.SOAP: "SOAP client",
    MessageKey.IMAGING: "Imaging library",

    MessageKey.ALL_DB_CLASSES: 'All <a href="{url}">DB-related classes</a>',
    MessageKey.PYTHON_VERSION_REQUIRED: "Python {version} or higher is required.",
    MessageKey.SQLITE_REMARK: "This is required if you are using SQLite database.",
    MessageKey.MYSQL_REMARK: "This is required if you are using MySQL database.",
    MessageKey.POSTGRESQL_REMARK: "This is required if you are using PostgreSQL database.",
    MessageKey.CRYPTOGRAPHY_REMARK: "This is required by encrypt and decrypt methods.",

    MessageKey.SERVER_VARS_MISSING: "Server variables do not include {vars}.",
    MessageKey.SCRIPT_FILENAME_MISMATCH: (
        "SCRIPT_FILENAME must be the same as the entry script file path."
    ),
    MessageKey.REQUEST_URI_MISSING: "Either REQUEST_URI or QUERY_STRING must exist.",
    MessageKey.PATH_INFO_UNDETERMINED: (
        "Unable to determine URL path info. Please make sure PATH_INFO "
        "(or SCRIPT_URL and SCRIPT_NAME) contains proper value."
    ),

    MessageKey.PAGE_TITLE: "{framework} Requirement Checker",
    MessageKey.DESCRIPTION: (
        "This page checks whether your server configuration satisfies the "
        "requirements for running {framework} web applications. It checks the "
        "interpreter version, the required modules and the server variables "
        "passed in by the web server."
    ),
    MessageKey.CONCLUSION: "Conclusion",
    MessageKey.RESULT_PASS: "Your server configuration satisfies all requirements by {framework}.",
    MessageKey.RESULT_WARN: (
        "Your server configuration satisfies the minimum requirements by {framework}. "
        "Please pay attention to the warnings listed below if your application "
        "will use the corresponding features."
    ),
    MessageKey.RESULT_FAIL: (
        "Unfortunately your server configuration does not satisfy the "
        "requirements by {framework}."
    ),
    MessageKey.DETAILS: "Details",
    MessageKey.COL_NAME: "Name",
    MessageKey.COL_RESULT: "Result",
    MessageKey.COL_REQUIRED_BY: "Required By",
    MessageKey.COL_MEMO: "Memo",
    MessageKey.LEGEND: "Legend",
    MessageKey.LEGEND_PASSED: "passed",
    MessageKey.LEGEND_FAILED: "failed",
    MessageKey.LEGEND_WARNING: "warning",
    MessageKey.PASSED: "Passed",
    MessageKey.FAILED: "Failed",
    MessageKey.WARNING: "Warning",
}
