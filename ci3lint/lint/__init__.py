"""CodeIgniter 3 convention rules and the rule engine."""

from ci3lint.lint.models import (
    ModelLookup,
    ModelLookupStatus,
    ModelRegistry,
    NullModelRegistry,
    SetModelRegistry,
)
from ci3lint.lint.rules import (
    ControllerInheritanceRule,
    DirectQueryStyleRule,
    ModelInheritanceRule,
    ModelLoadExistenceRule,
    Rule,
    RuleMatch,
    default_rules,
    find_class_declaration_range,
    validate_rules,
)
from ci3lint.lint.runner import RuleEngine, run_rules

__all__ = [
    "ControllerInheritanceRule",
    "DirectQueryStyleRule",
    "ModelInheritanceRule",
    "ModelLoadExistenceRule",
    "ModelLookup",
    "ModelLookupStatus",
    "ModelRegistry",
    "NullModelRegistry",
    "Rule",
    "RuleEngine",
    "RuleMatch",
    "SetModelRegistry",
    "default_rules",
    "find_class_declaration_range",
    "run_rules",
    "validate_rules",
]
