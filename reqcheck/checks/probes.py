"""
Runtime probes. Each is a side-effect-free read of the interpreter environment.

A probe never raises: anything it cannot determine counts as unsatisfied.
"""

from __future__ import annotations

import importlib
import importlib.util
import logging
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass

from reqcheck.checks.server import check_server_vars
from reqcheck.context import CheckContext

logger = logging.getLogger(__name__)


@dataclass
class ProbeOutcome:
    satisfied: bool
    detail: str = ""  # replaces the row's remark when non-empty


class Probe(ABC):
    """Abstract base for all requirement probes."""

    @abstractmethod
    def run(self, context: CheckContext) -> ProbeOutcome:
        ...


def version_at_least(actual: tuple[int, ...], minimum: tuple[int, ...]) -> bool:
    """Compare dotted versions component-wise, padding the shorter with zeros."""
    width = max(len(actual), len(minimum))
    actual = tuple(actual) + (0,) * (width - len(actual))
    minimum = tuple(minimum) + (0,) * (width - len(minimum))
    return actual >= minimum


class PythonVersionProbe(Probe):
    def __init__(self, minimum: tuple[int, ...] | None = None):
        self.minimum = minimum

    def run(self, context: CheckContext) -> ProbeOutcome:
        minimum = self.minimum or context.settings.min_python_tuple
        return ProbeOutcome(version_at_least(tuple(sys.version_info[:3]), minimum))


def module_available(name: str) -> bool:
    if name in sys.modules:
        # a None entry blocks the import
        return sys.modules[name] is not None
    try:
        return importlib.util.find_spec(name) is not None
    except (ImportError, ValueError):
        # find_spec imports parent packages for dotted names
        return False


class ModuleProbe(Probe):
    """Satisfied when the module can be found, without importing it."""

    def __init__(self, module: str):
        self.module = module

    def run(self, context: CheckContext) -> ProbeOutcome:
        found = module_available(self.module)
        logger.debug(f"Module {self.module}: {'found' if found else 'missing'}")
        return ProbeOutcome(found)


class AttributeProbe(Probe):
    """Satisfied when `module` provides `attribute` (typically a class)."""

    def __init__(self, module: str, attribute: str):
        self.module = module
        self.attribute = attribute

    def run(self, context: CheckContext) -> ProbeOutcome:
        if not module_available(self.module):
            return ProbeOutcome(False)
        try:
            mod = importlib.import_module(self.module)
        except ImportError as e:
            logger.debug(f"Importing {self.module} failed: {e}")
            return ProbeOutcome(False)
        return ProbeOutcome(hasattr(mod, self.attribute))


class ServerVariablesProbe(Probe):
    """Wraps check_server_vars; its diagnostic becomes the row's remark."""

    def run(self, context: CheckContext) -> ProbeOutcome:
        message = check_server_vars(context)
        return ProbeOutcome(message == "", message)
