"""Rule engine: classify a document, run its rules, position the results."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from ci3lint.classify import Classification, classify
from ci3lint.diagnostics import Diagnostic
from ci3lint.document import Document
from ci3lint.lint.rules import Rule, RuleMatch, default_rules, validate_rules
from ci3lint.text import range_from_text_range

if TYPE_CHECKING:
    from ci3lint.store import DiagnosticStore


def run_rules(
    text: str,
    classification: Classification,
    rules: Sequence[Rule],
) -> list[Diagnostic]:
    """Evaluate `rules` applicable to `classification` over `text`.

    Diagnostics are ordered by rule declaration order, then by match order.
    UNCLASSIFIED runs nothing.
    """
    if not classification:
        return []
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        if not rule.applies_to(classification):
            continue
        for match in rule.evaluate(text):
            diagnostics.append(_to_diagnostic(text, rule, match))
    return diagnostics


class RuleEngine:
    """Ordered rule set applied to whole documents.

    When a store is attached, each analysis replaces that document's entry.
    """

    def __init__(
        self,
        rules: Sequence[Rule] | None = None,
        *,
        store: DiagnosticStore | None = None,
    ) -> None:
        resolved_rules = tuple(rules) if rules is not None else default_rules()
        validate_rules(resolved_rules)
        self._rules = resolved_rules
        self._store = store

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    def rules_for(self, classification: Classification) -> tuple[Rule, ...]:
        return tuple(rule for rule in self._rules if rule.applies_to(classification))

    def analyze(self, document: Document) -> list[Diagnostic]:
        diagnostics = run_rules(document.text, classify(document.identity), self._rules)
        if self._store is not None:
            self._store.replace(document.identity, diagnostics)
        return diagnostics


def _to_diagnostic(text: str, rule: Rule, match: RuleMatch) -> Diagnostic:
    spec = match.spec
    return Diagnostic(
        range=range_from_text_range(text, match.range),
        message=match.message,
        severity=match.severity,
        rule_id=rule.rule_id,
        code=spec.code if spec is not None else None,
        hint=spec.hint if spec is not None else None,
        category=spec.category if spec is not None else None,
    )
