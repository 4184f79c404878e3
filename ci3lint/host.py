"""Editor host adapter: lifecycle, triggers and diagnostic publication.

The host owns event dispatch and calls into `Ci3Extension` one invocation at
a time. Nothing here assumes a particular threading or callback queue.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol, TypeAlias

from ci3lint.diagnostics import Diagnostic
from ci3lint.document import Document
from ci3lint.lint import RuleEngine, default_rules
from ci3lint.options import AnalyzerOptions
from ci3lint.store import DiagnosticPublisher, DiagnosticStore

logger = logging.getLogger(__name__)

DocumentCallback: TypeAlias = Callable[[Document], None]
CommandCallback: TypeAlias = Callable[[], None]


class Disposable(Protocol):
    def dispose(self) -> None: ...


class ExtensionHost(Protocol):
    """Subset of the editor API the analyzer subscribes to and publishes through."""

    def on_did_open_document(self, callback: DocumentCallback) -> Disposable: ...

    def on_did_save_document(self, callback: DocumentCallback) -> Disposable: ...

    def register_command(self, command_id: str, callback: CommandCallback) -> Disposable: ...

    def active_document(self) -> Document | None: ...

    def create_diagnostic_collection(self, name: str) -> DiagnosticPublisher: ...


class Ci3Extension:
    """Explicit activate/deactivate lifecycle around one DiagnosticStore."""

    def __init__(self, options: AnalyzerOptions | None = None) -> None:
        self.options = options if options is not None else AnalyzerOptions()
        self._host: ExtensionHost | None = None
        self._store: DiagnosticStore | None = None
        self._engine: RuleEngine | None = None
        self._subscriptions: list[Disposable] = []

    @property
    def active(self) -> bool:
        return self._store is not None

    @property
    def store(self) -> DiagnosticStore:
        if self._store is None:
            raise RuntimeError("Extension is not active")
        return self._store

    def activate(self, host: ExtensionHost) -> list[Disposable]:
        if self.active:
            raise RuntimeError("Extension is already active")
        publisher = host.create_diagnostic_collection(self.options.collection_name)
        self._host = host
        self._store = DiagnosticStore(self.options.collection_name, publisher=publisher)
        self._engine = RuleEngine(default_rules(self.options.model_registry), store=self._store)
        self._subscriptions = [
            host.on_did_open_document(self.on_document_opened),
            host.on_did_save_document(self.on_document_saved),
            host.register_command(self.options.command_id, self.on_analyze_current_file_command),
        ]
        logger.info("Activated %s with %d rule(s)", self.options.collection_name, len(self._engine.rules))
        return list(self._subscriptions)

    def deactivate(self) -> None:
        for subscription in self._subscriptions:
            subscription.dispose()
        self._subscriptions = []
        if self._store is not None:
            self._store.dispose()
        self._store = None
        self._engine = None
        self._host = None
        logger.info("Deactivated %s", self.options.collection_name)

    def on_document_opened(self, document: Document) -> None:
        self._analyze_if_php(document)

    def on_document_saved(self, document: Document) -> None:
        self._analyze_if_php(document)

    def on_analyze_current_file_command(self) -> None:
        if self._host is None:
            raise RuntimeError("Extension is not active")
        document = self._host.active_document()
        if document is None:
            logger.debug("No active document; %s ignored", self.options.command_id)
            return
        self._analyze_if_php(document)

    def _analyze_if_php(self, document: Document) -> list[Diagnostic] | None:
        if self._engine is None:
            raise RuntimeError("Extension is not active")
        if document.language_id != self.options.language_id:
            return None
        if not document.identity:
            logger.debug("Skipping document without identity")
            return None
        diagnostics = self._engine.analyze(document)
        logger.debug("Analyzed %s: %d diagnostic(s)", document.identity, len(diagnostics))
        return diagnostics
