"""Diagnostics helpers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from ci3lint.diagnostics.diagnostic import Diagnostic, Severity


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == Severity.ERROR for d in diagnostics)


def count_by_severity(diagnostics: Iterable[Diagnostic]) -> dict[Severity, int]:
    counts = Counter(d.severity for d in diagnostics)
    return {severity: counts.get(severity, 0) for severity in Severity}


def format_diagnostic(path: str, diagnostic: Diagnostic) -> str:
    """Render `path:line:col: severity [rule] message` with one-based coordinates."""
    return f"{path}:{diagnostic.start.display()}: {diagnostic.severity} [{diagnostic.rule_id}] {diagnostic.message}"
