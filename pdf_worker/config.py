"""Runtime settings for PDF Worker."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional, Tuple

RGB = Tuple[float, float, float]


@dataclass(frozen=True)
class WorkerSettings:
    """
    Tunable values used by the operation handlers.

    Attributes:
        number_font: Standard font used for page numbers
        number_font_size: Page number font size in points
        number_padding: Distance of the page number baseline from the bottom edge
        number_color: Grey level of page numbers as an RGB triple
        watermark_font: Standard font used for watermarks
        watermark_font_size: Watermark font size in points
        watermark_color: Watermark fill colour as an RGB triple
        watermark_opacity: Watermark fill alpha
        watermark_angle: Watermark rotation in degrees; negative values run top-left to bottom-right
        producer: Value written to the /Producer entry of output documents
        log_level: Level applied to the ``pdf_worker`` loggers
    """

    number_font: str = "Helvetica"
    number_font_size: float = 10
    number_padding: float = 20
    number_color: RGB = (0.5, 0.5, 0.5)
    watermark_font: str = "Helvetica-Bold"
    watermark_font_size: float = 70
    watermark_color: RGB = (0.1, 0.1, 0.1)
    watermark_opacity: float = 0.2
    watermark_angle: float = -45
    producer: str = "PDF Worker"
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "WorkerSettings":
        """Build settings from ``PDF_WORKER_*`` environment variables."""

        env = os.environ if environ is None else environ
        settings = cls()
        log_level = env.get("PDF_WORKER_LOG_LEVEL")
        if log_level:
            settings = replace(settings, log_level=log_level.upper())
        producer = env.get("PDF_WORKER_PRODUCER")
        if producer:
            settings = replace(settings, producer=producer)
        return settings


DEFAULT_SETTINGS = WorkerSettings()

__all__ = ["WorkerSettings", "DEFAULT_SETTINGS"]
