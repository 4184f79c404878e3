"""Analysis entrypoints and result carriers."""

from ci3lint.pipeline.entrypoints import analyze_document, analyze_paths, expand_paths, run_analysis
from ci3lint.pipeline.results import AnalysisRunResult

__all__ = [
    "AnalysisRunResult",
    "analyze_document",
    "analyze_paths",
    "expand_paths",
    "run_analysis",
]
