"""CodeIgniter 3 convention rules and the rule contract."""

from __future__ import annotations

from dataclasses import dataclass, field
import re
from typing import Protocol

from ci3lint.classify import Classification
from ci3lint.diagnostics import (
    CONTROLLER_MISSING_BASE_CLASS,
    DIRECT_QUERY,
    MODEL_MAY_NOT_EXIST,
    MODEL_MISSING_BASE_CLASS,
    DiagnosticSpec,
    Severity,
)
from ci3lint.lint.models import ModelRegistry, NullModelRegistry
from ci3lint.text import ZERO, TextRange, TextSize

CLASS_DECLARATION_PATTERN: re.Pattern[str] = re.compile(r"class\s+[A-Za-z0-9_]+")
MODEL_LOAD_PATTERN: re.Pattern[str] = re.compile(r"\$this->load->model\(['\"]([^'\"]+)['\"]\)")
DIRECT_QUERY_PATTERN: re.Pattern[str] = re.compile(r"\$this->db->query\(['\"]([^'\"]+)['\"]\)")


@dataclass(frozen=True, slots=True)
class RuleMatch:
    """One rule hit, still expressed as an offset range into the source text."""

    range: TextRange
    message: str
    severity: Severity
    spec: DiagnosticSpec | None = None

    @property
    def offset(self) -> int:
        return self.range.start.value

    @property
    def length(self) -> int:
        return self.range.len().value

    @staticmethod
    def from_spec(spec: DiagnosticSpec, range: TextRange, message: str | None = None) -> "RuleMatch":
        return RuleMatch(
            range=range,
            message=spec.message if message is None else message,
            severity=spec.severity,
            spec=spec,
        )


class Rule(Protocol):
    """Named check over raw source text for documents of one classification."""

    @property
    def rule_id(self) -> str: ...

    def applies_to(self, classification: Classification) -> bool: ...

    def evaluate(self, text: str) -> list[RuleMatch]: ...


@dataclass(frozen=True, slots=True)
class ControllerInheritanceRule:
    """Controllers must extend `CI_Controller`."""

    rule_id: str = "ControllerInheritanceRule"
    target: Classification = Classification.CONTROLLER
    base_class: str = "CI_Controller"
    spec: DiagnosticSpec = CONTROLLER_MISSING_BASE_CLASS

    def applies_to(self, classification: Classification) -> bool:
        return self.target in classification

    def evaluate(self, text: str) -> list[RuleMatch]:
        return _check_inheritance(text, self.base_class, self.spec)


@dataclass(frozen=True, slots=True)
class ModelInheritanceRule:
    """Models must extend `CI_Model`."""

    rule_id: str = "ModelInheritanceRule"
    target: Classification = Classification.MODEL
    base_class: str = "CI_Model"
    spec: DiagnosticSpec = MODEL_MISSING_BASE_CLASS

    def applies_to(self, classification: Classification) -> bool:
        return self.target in classification

    def evaluate(self, text: str) -> list[RuleMatch]:
        return _check_inheritance(text, self.base_class, self.spec)


@dataclass(frozen=True, slots=True)
class ModelLoadExistenceRule:
    """Flags `$this->load->model('name')` calls the registry cannot confirm.

    The default registry is a stub that never confirms a model, so every
    load call is reported.
    """

    rule_id: str = "ModelLoadExistenceRule"
    target: Classification = Classification.CONTROLLER
    registry: ModelRegistry = field(default_factory=NullModelRegistry)
    spec: DiagnosticSpec = MODEL_MAY_NOT_EXIST

    def applies_to(self, classification: Classification) -> bool:
        return self.target in classification

    def evaluate(self, text: str) -> list[RuleMatch]:
        matches: list[RuleMatch] = []
        for match in MODEL_LOAD_PATTERN.finditer(text):
            model_name = match.group(1)
            if self.registry.lookup(model_name).exists:
                continue
            matches.append(
                RuleMatch.from_spec(
                    self.spec,
                    _match_range(match),
                    message=self.spec.message.format(name=model_name),
                )
            )
        return matches


@dataclass(frozen=True, slots=True)
class DirectQueryStyleRule:
    """Suggests Query Builder over raw `$this->db->query('...')` calls in models."""

    rule_id: str = "DirectQueryStyleRule"
    target: Classification = Classification.MODEL
    spec: DiagnosticSpec = DIRECT_QUERY

    def applies_to(self, classification: Classification) -> bool:
        return self.target in classification

    def evaluate(self, text: str) -> list[RuleMatch]:
        return [RuleMatch.from_spec(self.spec, _match_range(match)) for match in DIRECT_QUERY_PATTERN.finditer(text)]


def default_rules(model_registry: ModelRegistry | None = None) -> tuple[Rule, ...]:
    """Rules in declaration order: controller checks first, then model checks."""
    registry = model_registry if model_registry is not None else NullModelRegistry()
    return (
        ControllerInheritanceRule(),
        ModelLoadExistenceRule(registry=registry),
        ModelInheritanceRule(),
        DirectQueryStyleRule(),
    )


def validate_rules(rules: tuple[Rule, ...]) -> None:
    seen: set[str] = set()
    for rule in rules:
        if not rule.rule_id:
            raise ValueError(f"Rule `{type(rule).__name__}` has an empty rule id.")
        if rule.rule_id in seen:
            raise ValueError(f"Rule id `{rule.rule_id}` is registered more than once.")
        seen.add(rule.rule_id)


def find_class_declaration_range(text: str) -> TextRange:
    """Range of the first `class <identifier>`, or an empty range at offset 0."""
    match = CLASS_DECLARATION_PATTERN.search(text)
    if match is None:
        return TextRange.empty(ZERO)
    return _match_range(match)


def _check_inheritance(text: str, base_class: str, spec: DiagnosticSpec) -> list[RuleMatch]:
    if f"extends {base_class}" in text:
        return []
    return [RuleMatch.from_spec(spec, find_class_declaration_range(text))]


def _match_range(match: re.Match[str]) -> TextRange:
    return TextRange.at(TextSize(match.start()), TextSize(match.end() - match.start()))
