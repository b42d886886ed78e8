"""pypdf backend implementation for PDF Worker."""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Dict, Optional

from pypdf import PdfReader, PdfWriter
from pypdf.errors import FileNotDecryptedError, PdfReadError, PyPdfError

from ..exceptions import CollaboratorError, EncryptedPDFError, InvalidPDFError
from ..utils import get_logger
from .base import BackendDocument, PDFBackend

LOGGER = get_logger("pdf_worker.backends.pypdf")


@dataclass
class PypdfDocument(BackendDocument):
    reader: PdfReader
    encrypted: bool = False
    producer: str = "PDF Worker"

    def get_page(self, index: int) -> object:
        return self.reader.pages[index]

    @property
    def is_encrypted(self) -> bool:
        return self.encrypted

    def metadata(self) -> Dict[str, str]:
        metadata = self.reader.metadata
        if not metadata:
            return {}
        return {
            key: str(value)
            for key, value in metadata.items()
            if isinstance(key, str) and value is not None
        }

    def copy_metadata(self, writer: PdfWriter, *, overrides: Optional[Dict[str, str]] = None) -> None:
        metadata_dict = self.metadata()
        if overrides:
            metadata_dict.update({key: value for key, value in overrides.items() if value})
        metadata_dict['/Producer'] = self.producer
        writer.add_metadata(metadata_dict)


class PypdfBackend(PDFBackend):
    """Backend implementation that uses `pypdf` under the hood."""

    def __init__(self, producer: str = "PDF Worker") -> None:
        self.producer = producer

    @staticmethod
    def _open(data: bytes) -> PdfReader:
        if not data:
            raise InvalidPDFError("Input document is empty.")
        try:
            return PdfReader(io.BytesIO(data))
        except PdfReadError as exc:
            raise InvalidPDFError(f"Corrupted or invalid PDF file. Error: {exc}") from exc
        except Exception as exc:
            raise InvalidPDFError(f"Unexpected error reading PDF. Error: {exc}") from exc

    def is_encrypted(self, data: bytes) -> bool:
        return self._open(data).is_encrypted

    def load(self, data: bytes, password: str | None = None) -> PypdfDocument:
        reader = self._open(data)
        encrypted = reader.is_encrypted
        if encrypted:
            if password is not None:
                try:
                    status = reader.decrypt(password)
                except (PyPdfError, NotImplementedError) as exc:
                    raise EncryptedPDFError(f"Failed to decrypt PDF: {exc}") from exc
                if status == 0 and not password:
                    raise EncryptedPDFError("PDF is encrypted. Supply a password to process this file.")
                if status == 0:
                    raise EncryptedPDFError("Failed to decrypt PDF with supplied password.")
            else:
                raise EncryptedPDFError("PDF is encrypted. Supply a password to process this file.")

        try:
            num_pages = len(reader.pages)
        except FileNotDecryptedError as exc:
            raise EncryptedPDFError("PDF is encrypted. Supply a password to process this file.") from exc
        except PdfReadError as exc:
            raise InvalidPDFError(f"Unable to read PDF page tree. Error: {exc}") from exc

        LOGGER.debug("Loaded %d page(s) from %d byte(s)", num_pages, len(data))
        return PypdfDocument(
            num_pages=num_pages,
            reader=reader,
            encrypted=encrypted,
            producer=self.producer,
        )

    def new_writer(self) -> PdfWriter:
        return PdfWriter()

    def save(self, writer: PdfWriter, *, password: str | None = None) -> bytes:
        if password:
            try:
                writer.encrypt(user_password=password, owner_password=password)
            except Exception as exc:  # pragma: no cover - encryption errors vary
                raise CollaboratorError(f"Failed to encrypt PDF: {exc}") from exc

        buffer = io.BytesIO()
        try:
            writer.write(buffer)
        except Exception as exc:  # pragma: no cover - serialization errors vary
            raise CollaboratorError(f"Unable to serialize PDF. Error: {exc}") from exc
        return buffer.getvalue()

