from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Callable, Mapping
import sys

import pytest
from pypdf import PdfReader, PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

PdfFactory = Callable[..., bytes]


def _to_bytes(writer: PdfWriter) -> bytes:
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def read_pdf(data: bytes, password: str | None = None) -> PdfReader:
    reader = PdfReader(io.BytesIO(data))
    if password is not None:
        reader.decrypt(password)
    return reader


@pytest.fixture()
def pdf_factory() -> PdfFactory:
    def _create(
        pages: int = 1,
        *,
        metadata: Mapping[str, str] | None = None,
        widths: list[float] | None = None,
        password: str | None = None,
        owner_password: str | None = None,
    ) -> bytes:
        writer = PdfWriter()
        for index in range(pages):
            width = widths[index] if widths else 200
            writer.add_blank_page(width=width, height=200)
        if metadata:
            writer.add_metadata(dict(metadata))
        if password or owner_password:
            writer.encrypt(user_password=password or "", owner_password=owner_password or password)
        return _to_bytes(writer)

    return _create


@pytest.fixture()
def sample_pdf(pdf_factory: PdfFactory) -> bytes:
    return pdf_factory(5, metadata={"/Producer": "pdf-worker-tests", "/Title": "Sample", "/Author": "Tester"})


@pytest.fixture()
def encrypted_pdf(pdf_factory: PdfFactory) -> bytes:
    return pdf_factory(3, metadata={"/Title": "Locked"}, password="secret")


@pytest.fixture()
def sample_pdf_path(sample_pdf: bytes, tmp_path: Path) -> Path:
    path = tmp_path / "sample.pdf"
    path.write_bytes(sample_pdf)
    return path


@pytest.fixture()
def package_log(caplog: pytest.LogCaptureFixture):
    """Capture records from the ``pdf_worker`` loggers, which do not propagate to root."""

    package_logger = logging.getLogger("pdf_worker")
    package_logger.addHandler(caplog.handler)
    try:
        yield caplog
    finally:
        package_logger.removeHandler(caplog.handler)
