"""Lookup of CodeIgniter models named by `$this->load->model()` calls."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol


class ModelLookupStatus(StrEnum):
    """Whether a loaded model name resolves to a model class in the application."""

    FOUND = "found"
    MISSING = "missing"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class ModelLookup:
    """Answer for one `$this->load->model('<name>')` argument."""

    status: ModelLookupStatus
    normalized_name: str

    @property
    def exists(self) -> bool:
        return self.status == ModelLookupStatus.FOUND


class ModelRegistry(Protocol):
    """Knows which models live under the application's `models/` directory."""

    def lookup(self, name: str) -> ModelLookup: ...


@dataclass(frozen=True, slots=True)
class NullModelRegistry:
    """Stub registry that never looks at `application/models/`.

    Every loaded model comes back as unknown, so each load call is reported
    as possibly missing. This is a known limitation, not a defect.
    """

    def lookup(self, name: str) -> ModelLookup:
        return ModelLookup(status=ModelLookupStatus.UNKNOWN, normalized_name=normalize_model_name(name))


@dataclass(frozen=True, slots=True)
class SetModelRegistry:
    """Registry over a fixed set of model names, e.g. `Blog_model` or `admin/User_model`."""

    known_models: frozenset[str]

    def lookup(self, name: str) -> ModelLookup:
        normalized = normalize_model_name(name)
        known = {normalize_model_name(model) for model in self.known_models}
        if normalized in known:
            return ModelLookup(status=ModelLookupStatus.FOUND, normalized_name=normalized)
        return ModelLookup(status=ModelLookupStatus.MISSING, normalized_name=normalized)


def normalize_model_name(name: str) -> str:
    # CodeIgniter resolves `blog_model` to `Blog_model.php`, so compare case-insensitively.
    stripped = name.strip()
    if not stripped:
        return ""
    return stripped.replace("\\", "/").lower()
