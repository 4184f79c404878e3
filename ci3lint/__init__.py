"""Convention checks for CodeIgniter 3 controllers and models."""

from ci3lint.classify import Classification, classify
from ci3lint.diagnostics import Diagnostic, Severity
from ci3lint.document import Document
from ci3lint.host import Ci3Extension, ExtensionHost
from ci3lint.lint import RuleEngine, default_rules
from ci3lint.options import AnalyzerOptions
from ci3lint.pipeline import AnalysisRunResult, run_analysis
from ci3lint.store import DiagnosticPublisher, DiagnosticStore
from ci3lint.text import Position, offset_to_position, range_from_match

__all__ = [
    "AnalysisRunResult",
    "AnalyzerOptions",
    "Ci3Extension",
    "Classification",
    "Diagnostic",
    "DiagnosticPublisher",
    "DiagnosticStore",
    "Document",
    "ExtensionHost",
    "Position",
    "RuleEngine",
    "Severity",
    "classify",
    "default_rules",
    "offset_to_position",
    "range_from_match",
    "run_analysis",
]
