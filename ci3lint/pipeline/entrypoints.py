"""Store-free entrypoints for library and CLI use."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path

from ci3lint.classify import classify
from ci3lint.diagnostics import has_errors
from ci3lint.document import PHP_LANGUAGE_ID, Document
from ci3lint.lint import ModelRegistry, Rule, default_rules, run_rules, validate_rules
from ci3lint.pipeline.results import AnalysisRunResult


def run_analysis(
    text: str,
    *,
    path: str,
    rules: Sequence[Rule] | None = None,
    model_registry: ModelRegistry | None = None,
) -> AnalysisRunResult:
    """Analyze `text` as if it were the file at `path`."""
    document = Document(identity=path, text=text, language_id=PHP_LANGUAGE_ID)
    return analyze_document(document, rules=rules, model_registry=model_registry)


def analyze_document(
    document: Document,
    *,
    rules: Sequence[Rule] | None = None,
    model_registry: ModelRegistry | None = None,
) -> AnalysisRunResult:
    resolved_rules = _resolve_rules(rules, model_registry)
    classification = classify(document.identity)
    diagnostics = run_rules(document.text, classification, resolved_rules)
    return AnalysisRunResult(
        document=document,
        classification=classification,
        diagnostics=diagnostics,
        has_errors=has_errors(diagnostics),
    )


def analyze_paths(
    paths: Iterable[str | Path],
    *,
    rules: Sequence[Rule] | None = None,
    model_registry: ModelRegistry | None = None,
) -> list[AnalysisRunResult]:
    """Analyze files on disk; directories are searched for `*.php` files."""
    resolved_rules = _resolve_rules(rules, model_registry)
    results: list[AnalysisRunResult] = []
    for file_path in expand_paths(paths):
        document = Document.from_path(file_path)
        results.append(analyze_document(document, rules=resolved_rules))
    return results


def _resolve_rules(
    rules: Sequence[Rule] | None,
    model_registry: ModelRegistry | None,
) -> tuple[Rule, ...]:
    if rules is not None:
        if model_registry is not None:
            raise ValueError("Pass either rules or model_registry, not both")
        resolved = tuple(rules)
    else:
        resolved = default_rules(model_registry)
    validate_rules(resolved)
    return resolved


def expand_paths(paths: Iterable[str | Path]) -> list[Path]:
    expanded: list[Path] = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            expanded.extend(sorted(candidate for candidate in path.rglob("*.php") if candidate.is_file()))
        else:
            expanded.append(path)
    return expanded
