"""Analyzer configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from ci3lint.document import PHP_LANGUAGE_ID
from ci3lint.lint.models import ModelRegistry, NullModelRegistry

ANALYZE_CURRENT_FILE_COMMAND: Final[str] = "codeigniter-3-intelligence.analyzeCurrentFile"
DIAGNOSTIC_COLLECTION_NAME: Final[str] = "codeigniter3"


@dataclass(frozen=True, slots=True)
class AnalyzerOptions:
    """Identifiers and services wiring the analyzer into a host."""

    language_id: str = PHP_LANGUAGE_ID
    command_id: str = ANALYZE_CURRENT_FILE_COMMAND
    collection_name: str = DIAGNOSTIC_COLLECTION_NAME
    model_registry: ModelRegistry = field(default_factory=NullModelRegistry)
