"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from ci3lint.classify import Classification
from ci3lint.diagnostics import Diagnostic
from ci3lint.document import Document


@dataclass(frozen=True, slots=True)
class AnalysisRunResult:
    """Result of analyzing one document snapshot."""

    document: Document
    classification: Classification
    diagnostics: list[Diagnostic]
    has_errors: bool

    @property
    def identity(self) -> str:
        return self.document.identity
