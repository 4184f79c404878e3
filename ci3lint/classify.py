"""Path-based classification of CodeIgniter 3 source files."""

from __future__ import annotations

from enum import Flag, auto
from typing import Final

CONTROLLERS_SEGMENT: Final[str] = "controllers"
MODELS_SEGMENT: Final[str] = "models"
PHP_SUFFIX: Final[str] = ".php"


class Classification(Flag):
    """File role derived from its path.

    Both CONTROLLER and MODEL can be set at once when a path mentions both
    directories; each role's rules then run independently.
    """

    UNCLASSIFIED = 0
    CONTROLLER = auto()
    MODEL = auto()


def classify(path: str) -> Classification:
    """Classify a document path by substring tests; pure and uncached."""
    if not path.endswith(PHP_SUFFIX):
        return Classification.UNCLASSIFIED
    classification = Classification.UNCLASSIFIED
    if CONTROLLERS_SEGMENT in path:
        classification |= Classification.CONTROLLER
    if MODELS_SEGMENT in path:
        classification |= Classification.MODEL
    return classification
