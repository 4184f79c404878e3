"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from ci3lint.diagnostics.diagnostic import Severity


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = Severity.WARNING
    category: str | None = None


CONTROLLER_MISSING_BASE_CLASS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="CI3_CONTROLLER_MISSING_BASE_CLASS",
    message="Controller should extend CI_Controller",
    hint="Declare the controller as `class Name extends CI_Controller`.",
    severity=Severity.WARNING,
    category="inheritance",
)

MODEL_MISSING_BASE_CLASS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="CI3_MODEL_MISSING_BASE_CLASS",
    message="Model should extend CI_Model",
    hint="Declare the model as `class Name extends CI_Model`.",
    severity=Severity.WARNING,
    category="inheritance",
)

# `{name}` is filled with the model name from the load call.
MODEL_MAY_NOT_EXIST: Final[DiagnosticSpec] = DiagnosticSpec(
    code="CI3_MODEL_MAY_NOT_EXIST",
    message="Model '{name}' might not exist",
    hint="Check that application/models contains a matching model file.",
    severity=Severity.WARNING,
    category="reference",
)

DIRECT_QUERY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="CI3_DIRECT_QUERY",
    message="Consider using Query Builder methods instead of direct queries for better security",
    hint="Use `$this->db->get()`, `where()` and friends, or bind parameters.",
    severity=Severity.INFORMATION,
    category="style",
)
