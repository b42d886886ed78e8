"""Single-page text overlays drawn with reportlab and stamped onto pages with pypdf."""

from __future__ import annotations

import io
from typing import Any

from pypdf import PdfReader, Transformation
from pypdf.generic import RectangleObject
from reportlab.pdfgen import canvas

from .config import DEFAULT_SETTINGS, WorkerSettings


def _overlay_page(packet: io.BytesIO) -> Any:
    packet.seek(0)
    return PdfReader(packet).pages[0]


def page_number_overlay(
    box: RectangleObject,
    text: str,
    settings: WorkerSettings = DEFAULT_SETTINGS,
) -> Any:
    """Return a page the size of ``box`` with ``text`` centred near the bottom edge."""

    width, height = float(box.width), float(box.height)
    packet = io.BytesIO()
    c = canvas.Canvas(packet, pagesize=(width, height))
    c.setFont(settings.number_font, settings.number_font_size)
    c.setFillColorRGB(*settings.number_color)
    c.drawCentredString(width / 2, settings.number_padding, text)
    c.save()
    return _overlay_page(packet)


def watermark_overlay(
    box: RectangleObject,
    text: str,
    settings: WorkerSettings = DEFAULT_SETTINGS,
) -> Any:
    """Return a page the size of ``box`` with ``text`` stamped diagonally across its centre."""

    width, height = float(box.width), float(box.height)
    font_size = settings.watermark_font_size
    packet = io.BytesIO()
    c = canvas.Canvas(packet, pagesize=(width, height))
    c.saveState()
    c.setFont(settings.watermark_font, font_size)
    c.setFillColorRGB(*settings.watermark_color, alpha=settings.watermark_opacity)
    c.translate(width / 2, height / 2)
    c.rotate(settings.watermark_angle)
    c.drawCentredString(0, -font_size * 0.35, text)
    c.restoreState()
    c.save()
    return _overlay_page(packet)


def stamp(page: Any, overlay: Any) -> None:
    """Merge ``overlay`` on top of ``page``, aligned to the page's lower-left corner."""

    box = page.mediabox
    left, bottom = float(box.left), float(box.bottom)
    if left or bottom:
        page.merge_transformed_page(overlay, Transformation().translate(left, bottom))
    else:
        page.merge_page(overlay)


__all__ = ["page_number_overlay", "watermark_overlay", "stamp"]
