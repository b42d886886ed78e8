"""Operation handlers. Each one loads its input, mutates it through the backend and serializes it."""

from __future__ import annotations

from typing import List

from .exceptions import (
    EmptyPasswordError,
    EmptyWatermarkError,
    InsufficientInputsError,
    InvalidInputError,
)
from .overlays import page_number_overlay, stamp, watermark_overlay
from .pipeline import BaseOperation, register_operation
from .ranges import RangeMode, resolve_pages
from .types import Operation, PDFInfo
from .utils import get_logger

LOGGER = get_logger("pdf_worker.operations")


@register_operation(Operation.MERGE)
class MergeOperation(BaseOperation):
    """Concatenate every input document, in input order."""

    def run(self) -> bytes:
        documents = self.context.documents
        if len(documents) < 2:
            raise InsufficientInputsError()

        adapters = [self.context.load(index) for index in range(len(documents))]
        writer = adapters[0].new_writer()
        for index, adapter in enumerate(adapters):
            LOGGER.debug("Adding %d page(s) from input %d", adapter.num_pages, index)
            adapter.copy_pages(writer)

        adapters[0].copy_metadata(writer)
        LOGGER.info("Merged %d PDFs into %d page(s)", len(adapters), len(writer.pages))
        return adapters[0].save(writer)


@register_operation(Operation.ROTATE)
class RotateOperation(BaseOperation):
    """Add a rotation angle to every page."""

    def run(self) -> bytes:
        angle = self.options.rotation_angle
        if angle is None:
            raise InvalidInputError("Please choose a rotation angle.")
        if angle % 90:
            raise InvalidInputError(f"Rotation angle must be a multiple of 90 degrees, got {angle}.")

        adapter = self.context.load()
        writer = adapter.new_writer()
        for page in adapter.copy_pages(writer):
            page.rotation = (page.rotation + angle) % 360
        adapter.copy_metadata(writer)
        LOGGER.debug("Rotated %d page(s) by %d degrees", adapter.num_pages, angle)
        return adapter.save(writer)


@register_operation(Operation.PROTECT)
class ProtectOperation(BaseOperation):
    """Encrypt the document with the same user and owner password."""

    def run(self) -> bytes:
        password = self.options.password
        if not password:
            raise EmptyPasswordError()

        adapter = self.context.load()
        writer = adapter.new_writer()
        adapter.copy_pages(writer)
        adapter.copy_metadata(writer)
        LOGGER.debug("Encrypting %d page(s)", adapter.num_pages)
        return adapter.save(writer, password=password)


@register_operation(Operation.UNLOCK)
class UnlockOperation(BaseOperation):
    """Decrypt a password-protected document and save it without encryption."""

    def run(self) -> bytes:
        password = self.options.password
        if not password:
            raise EmptyPasswordError("Password field cannot be empty for unlocking.")

        adapter = self.context.load(password=password)
        if not adapter.is_encrypted:
            LOGGER.info("Input PDF is not encrypted; saving it unchanged")
        writer = adapter.new_writer()
        adapter.copy_pages(writer)
        adapter.copy_metadata(writer)
        return adapter.save(writer)


class _PageSelectionOperation(BaseOperation):
    mode: RangeMode

    def _missing_pages_message(self) -> str:
        return f"Please specify the pages you wish to {self.mode.value}."

    def run(self) -> bytes:
        page_spec = self.options.pages
        if page_spec is None:
            raise InvalidInputError(self._missing_pages_message())

        adapter = self.context.load()
        indices: List[int] = resolve_pages(page_spec, adapter.num_pages, self.mode)
        writer = adapter.new_writer()
        adapter.copy_pages(writer, indices)
        adapter.copy_metadata(writer)
        LOGGER.debug(
            "%s kept %d of %d page(s)", self.mode.value.capitalize(), len(indices), adapter.num_pages
        )
        return adapter.save(writer)


@register_operation(Operation.REMOVE)
class RemovePagesOperation(_PageSelectionOperation):
    mode = RangeMode.REMOVE


@register_operation(Operation.EXTRACT)
class ExtractPagesOperation(_PageSelectionOperation):
    mode = RangeMode.EXTRACT


@register_operation(Operation.REORDER)
class ReorderPagesOperation(_PageSelectionOperation):
    mode = RangeMode.REORDER

    def _missing_pages_message(self) -> str:
        return "Please specify the new page order (e.g., 5, 3, 1, 2)."


@register_operation(Operation.NUMBER)
class NumberPagesOperation(BaseOperation):
    """Stamp ``"<page> / <total>"`` centred at the bottom of every page."""

    def run(self) -> bytes:
        settings = self.context.settings
        adapter = self.context.load()
        writer = adapter.new_writer()
        total = adapter.num_pages
        for index, page in enumerate(adapter.copy_pages(writer)):
            overlay = page_number_overlay(page.mediabox, f"{index + 1} / {total}", settings)
            stamp(page, overlay)
        adapter.copy_metadata(writer)
        return adapter.save(writer)


@register_operation(Operation.WATERMARK)
class WatermarkOperation(BaseOperation):
    """Stamp translucent diagonal text across every page."""

    def run(self) -> bytes:
        text = self.options.watermark_text
        if not text or not text.strip():
            raise EmptyWatermarkError()

        settings = self.context.settings
        adapter = self.context.load()
        writer = adapter.new_writer()
        for page in adapter.copy_pages(writer):
            stamp(page, watermark_overlay(page.mediabox, text, settings))
        adapter.copy_metadata(writer)
        return adapter.save(writer)


@register_operation(Operation.METADATA)
class MetadataOperation(BaseOperation):
    """Replace title, author and subject; empty fields keep their current value."""

    def run(self) -> bytes:
        metadata = self.options.metadata
        adapter = self.context.load()
        writer = adapter.new_writer()
        adapter.copy_pages(writer)
        adapter.copy_metadata(
            writer,
            title=metadata.title,
            author=metadata.author,
            subject=metadata.subject,
        )
        return adapter.save(writer)


@register_operation(Operation.FLATTEN)
class FlattenOperation(BaseOperation):
    """Round-trip the document through the backend writer."""

    def run(self) -> bytes:
        adapter = self.context.load()
        writer = adapter.new_writer()
        adapter.copy_pages(writer)
        adapter.copy_metadata(writer)
        return adapter.save(writer)


@register_operation(Operation.INFO)
class InfoOperation(BaseOperation):
    """Report page count, title, author, subject and encryption state."""

    def run(self) -> PDFInfo:
        # An empty password opens documents that only carry an owner password.
        adapter = self.context.load(password=self.options.password or "")
        info = adapter.to_pdf_info()
        info.encrypted = self.context.backend.is_encrypted(self.context.documents[0])
        return info


__all__ = [
    "MergeOperation",
    "RotateOperation",
    "ProtectOperation",
    "UnlockOperation",
    "RemovePagesOperation",
    "ExtractPagesOperation",
    "ReorderPagesOperation",
    "NumberPagesOperation",
    "WatermarkOperation",
    "MetadataOperation",
    "FlattenOperation",
    "InfoOperation",
]
