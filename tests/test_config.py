from __future__ import annotations

import logging

from pdf_worker.config import DEFAULT_SETTINGS, WorkerSettings
from pdf_worker.utils import build_output_filename, configure_logging, format_file_size


def test_defaults() -> None:
    assert DEFAULT_SETTINGS == WorkerSettings()
    assert DEFAULT_SETTINGS.producer == "PDF Worker"
    assert DEFAULT_SETTINGS.log_level == "WARNING"


def test_from_env_reads_overrides() -> None:
    settings = WorkerSettings.from_env(
        {"PDF_WORKER_LOG_LEVEL": "debug", "PDF_WORKER_PRODUCER": "Acme"}
    )

    assert settings.log_level == "DEBUG"
    assert settings.producer == "Acme"
    assert settings.watermark_opacity == DEFAULT_SETTINGS.watermark_opacity


def test_from_env_ignores_blank_values() -> None:
    assert WorkerSettings.from_env({"PDF_WORKER_PRODUCER": ""}) == WorkerSettings()


def test_from_env_defaults_to_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("PDF_WORKER_PRODUCER", "From Env")

    assert WorkerSettings.from_env().producer == "From Env"


def test_configure_logging_sets_package_level() -> None:
    configure_logging("DEBUG")
    assert logging.getLogger("pdf_worker").level == logging.DEBUG
    configure_logging("WARNING")
    assert logging.getLogger("pdf_worker").level == logging.WARNING


def test_build_output_filename() -> None:
    assert build_output_filename("Merge", 1700000000123) == "Merge_1700000000123.pdf"
    assert build_output_filename("Rotate").startswith("Rotate_")


def test_format_file_size() -> None:
    assert format_file_size(512) == "512.0 B"
    assert format_file_size(2048) == "2.0 KB"


def test_watermark_runs_top_left_to_bottom_right() -> None:
    assert DEFAULT_SETTINGS.watermark_angle == -45
