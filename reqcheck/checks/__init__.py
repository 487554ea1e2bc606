"""Probes, the requirement table, the server-variable check and evaluation."""

from reqcheck.checks.evaluator import evaluate, fold_result
from reqcheck.checks.probes import (
    AttributeProbe,
    ModuleProbe,
    Probe,
    ProbeOutcome,
    PythonVersionProbe,
    ServerVariablesProbe,
)
from reqcheck.checks.requirements import RequirementDefinition, collect, requirement_table
from reqcheck.checks.server import REQUIRED_SERVER_VARS, check_server_vars, server_vars_from_scope

__all__ = [
    "AttributeProbe",
    "ModuleProbe",
    "Probe",
    "ProbeOutcome",
    "PythonVersionProbe",
    "REQUIRED_SERVER_VARS",
    "RequirementDefinition",
    "ServerVariablesProbe",
    "check_server_vars",
    "collect",
    "evaluate",
    "fold_result",
    "requirement_table",
    "server_vars_from_scope",
]
