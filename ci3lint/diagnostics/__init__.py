"""Diagnostics."""

from ci3lint.diagnostics.codes import (
    CONTROLLER_MISSING_BASE_CLASS,
    DIRECT_QUERY,
    MODEL_MAY_NOT_EXIST,
    MODEL_MISSING_BASE_CLASS,
    DiagnosticSpec,
)
from ci3lint.diagnostics.diagnostic import Diagnostic, Severity
from ci3lint.diagnostics.report import (
    count_by_severity,
    format_diagnostic,
    has_errors,
)

__all__ = [
    "CONTROLLER_MISSING_BASE_CLASS",
    "DIRECT_QUERY",
    "MODEL_MAY_NOT_EXIST",
    "MODEL_MISSING_BASE_CLASS",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "count_by_severity",
    "format_diagnostic",
    "has_errors",
]
