"""Adapter utilities for interacting with PDF documents via pluggable backends."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from .backends import BackendDocument, PypdfBackend
from .backends.base import PDFBackend
from .types import PDFInfo


class PDFDocumentAdapter:
    """High level helper around a backend-specific PDF document loaded from bytes."""

    def __init__(
        self,
        data: bytes,
        password: Optional[str] = None,
        *,
        backend: Optional[PDFBackend] = None,
    ) -> None:
        self.backend: PDFBackend = backend or PypdfBackend()
        self._document: BackendDocument = self.backend.load(data, password=password)
        self._metadata_cache: Optional[Dict[str, str]] = None

    # ------------------------------------------------------------------
    # Basic document information helpers
    # ------------------------------------------------------------------
    @property
    def num_pages(self) -> int:
        return self._document.num_pages

    @property
    def is_encrypted(self) -> bool:
        return self._document.is_encrypted

    @property
    def metadata(self) -> Dict[str, str]:
        if self._metadata_cache is None:
            self._metadata_cache = self._document.metadata()
        return self._metadata_cache

    @property
    def title(self) -> Optional[str]:
        return self.metadata.get("/Title") or None

    @property
    def author(self) -> Optional[str]:
        return self.metadata.get("/Author") or None

    @property
    def subject(self) -> Optional[str]:
        return self.metadata.get("/Subject") or None

    # ------------------------------------------------------------------
    # Interaction helpers
    # ------------------------------------------------------------------
    def get_page(self, page_number_zero_indexed: int) -> Any:
        return self._document.get_page(page_number_zero_indexed)

    def new_writer(self) -> Any:
        return self.backend.new_writer()

    def copy_pages(self, writer: Any, indices: Optional[Sequence[int]] = None) -> List[Any]:
        """Append the pages at ``indices`` (all pages by default) to ``writer``.

        Returns the writer-side page objects in the order they were added.
        """

        if indices is None:
            indices = range(self.num_pages)
        return [writer.add_page(self.get_page(index)) for index in indices]

    def copy_metadata(self, writer: Any, **overrides: Optional[str]) -> None:
        """Copy document information to ``writer``, replacing the given fields.

        Keyword names are ``title``, ``author`` and ``subject``; ``None`` or
        empty values keep the existing entry.
        """

        mapped = {
            f"/{key.capitalize()}": value for key, value in overrides.items() if value
        }
        self._document.copy_metadata(writer, overrides=mapped)

    def save(self, writer: Any, *, password: Optional[str] = None) -> bytes:
        return self.backend.save(writer, password=password)

    # ------------------------------------------------------------------
    # Reporting helpers
    # ------------------------------------------------------------------
    def to_pdf_info(self) -> PDFInfo:
        return PDFInfo(
            page_count=self.num_pages,
            title=self.title,
            author=self.author,
            subject=self.subject,
            encrypted=self.is_encrypted,
        )


__all__ = ["PDFDocumentAdapter"]
