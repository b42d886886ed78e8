"""Backend protocol for PDF operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol


@dataclass
class BackendDocument:
    """Represents a loaded PDF document with backend-specific helpers."""

    num_pages: int

    def get_page(self, index: int) -> object:
        raise NotImplementedError

    @property
    def is_encrypted(self) -> bool:
        raise NotImplementedError

    def metadata(self) -> Dict[str, str]:
        """Return document information keyed by PDF name (``/Title`` ...)."""
        raise NotImplementedError

    def copy_metadata(self, writer: object, *, overrides: Optional[Dict[str, str]] = None) -> None:
        raise NotImplementedError


class PDFBackend(Protocol):
    """Protocol defining backend operations for PDF reading/writing."""

    def load(self, data: bytes, password: str | None = None) -> BackendDocument:
        """Load PDF bytes and return a backend document wrapper."""

    def is_encrypted(self, data: bytes) -> bool:
        """Return whether ``data`` carries an encryption dictionary."""

    def new_writer(self) -> Any:
        """Return a backend writer instance."""

    def save(self, writer: Any, *, password: str | None = None) -> bytes:
        """Serialize a writer, encrypting it when ``password`` is given."""
