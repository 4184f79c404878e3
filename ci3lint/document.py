"""Immutable document snapshots handed to analysis."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

PHP_LANGUAGE_ID: Final[str] = "php"


@dataclass(frozen=True, slots=True)
class Document:
    """One fixed snapshot of a source document.

    `identity` is the stable path or URI used to key stored diagnostics.
    """

    identity: str
    text: str
    language_id: str = PHP_LANGUAGE_ID

    @property
    def is_php(self) -> bool:
        return self.language_id == PHP_LANGUAGE_ID

    @staticmethod
    def from_path(path: str | Path) -> "Document":
        """Snapshot a file from disk; `.php` files are tagged `php`."""
        file_path = Path(path)
        decoded = file_path.read_bytes().decode("utf-8")
        text = decoded[1:] if decoded.startswith("\ufeff") else decoded
        language_id = PHP_LANGUAGE_ID if file_path.suffix == ".php" else "plaintext"
        return Document(identity=str(file_path), text=text, language_id=language_id)
