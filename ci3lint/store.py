"""Process-wide registry of the current diagnostics per document identity."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import Protocol

from ci3lint.diagnostics import Diagnostic

logger = logging.getLogger(__name__)


class DiagnosticPublisher(Protocol):
    """Host display surface that mirrors the store."""

    def publish(self, identity: str, diagnostics: Sequence[Diagnostic]) -> None: ...

    def clear(self) -> None: ...


class DiagnosticStore:
    """Identity -> diagnostics mapping with whole-entry replacement.

    A new analysis for an identity replaces the previous entry; nothing is
    merged or appended. Created by `activate` and torn down by `dispose`.
    """

    def __init__(self, name: str, publisher: DiagnosticPublisher | None = None) -> None:
        self.name = name
        self._publisher = publisher
        self._entries: dict[str, tuple[Diagnostic, ...]] = {}
        self._disposed = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    def replace(self, identity: str, diagnostics: Sequence[Diagnostic]) -> None:
        self._ensure_open()
        entry = tuple(diagnostics)
        self._entries[identity] = entry
        logger.debug("Stored %d diagnostic(s) for %s in %s", len(entry), identity, self.name)
        if self._publisher is not None:
            self._publisher.publish(identity, entry)

    def get(self, identity: str) -> tuple[Diagnostic, ...]:
        return self._entries.get(identity, ())

    def delete(self, identity: str) -> None:
        self._ensure_open()
        if self._entries.pop(identity, None) is not None and self._publisher is not None:
            self._publisher.publish(identity, ())

    def identities(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def dispose(self) -> None:
        if self._disposed:
            return
        self._entries.clear()
        if self._publisher is not None:
            self._publisher.clear()
        self._disposed = True
        logger.debug("Disposed diagnostic store %s", self.name)

    def __contains__(self, identity: object) -> bool:
        return identity in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def _ensure_open(self) -> None:
        if self._disposed:
            raise RuntimeError(f"Diagnostic store `{self.name}` has been disposed")
