"""
PDF Worker - batch PDF editing tasks executed off the caller's thread.

A task names an operation, carries the input documents as bytes and the
operation's options. The dispatcher turns every task into exactly one
response: a transformed document, document information, or an error.

Quick Start:
    >>> from pdf_worker import PDFWorker, TaskRequest, TaskOptions
    >>> with PDFWorker() as worker:
    ...     future = worker.submit(
    ...         TaskRequest("Extract", (pdf_bytes,), TaskOptions(pages="1,3-5"))
    ...     )
    ...     response = future.result()

Main Classes:
    - PDFWorker: Background execution context returning futures
    - Dispatcher: Synchronous routing of a request to its handler

Data Classes:
    - TaskRequest, TaskOptions, MetadataOptions: Inbound task description
    - SuccessResponse, InfoResponse, ErrorResponse: Outbound responses
    - PDFInfo: Result of the Info operation

Page specifications:
    - parse_page_spec, parse_page_order, resolve_pages, RangeMode

For CLI usage, use the 'pdf-worker' command after installation.
"""

# Core classes
from pdf_worker.dispatcher import Dispatcher, dispatch
from pdf_worker.worker import PDFWorker

# Data types
from pdf_worker.config import WorkerSettings
from pdf_worker.types import (
    ErrorResponse,
    InfoResponse,
    MetadataOptions,
    Operation,
    PDFInfo,
    SuccessResponse,
    TaskOptions,
    TaskRequest,
    TaskResponse,
)

# Exceptions
from pdf_worker.exceptions import (
    PDFWorkerException,
    InvalidInputError,
    EmptyPasswordError,
    EmptyWatermarkError,
    InvalidRangeError,
    RangeMismatchError,
    InsufficientInputsError,
    UnsupportedOperationError,
    CollaboratorError,
    InvalidPDFError,
    EncryptedPDFError,
)

# Page specifications
from pdf_worker.ranges import RangeMode, parse_page_order, parse_page_spec, resolve_pages

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    # Main classes
    "PDFWorker",
    "Dispatcher",
    "dispatch",
    # Data types
    "WorkerSettings",
    "Operation",
    "TaskRequest",
    "TaskOptions",
    "MetadataOptions",
    "TaskResponse",
    "SuccessResponse",
    "InfoResponse",
    "ErrorResponse",
    "PDFInfo",
    # Exceptions
    "PDFWorkerException",
    "InvalidInputError",
    "EmptyPasswordError",
    "EmptyWatermarkError",
    "InvalidRangeError",
    "RangeMismatchError",
    "InsufficientInputsError",
    "UnsupportedOperationError",
    "CollaboratorError",
    "InvalidPDFError",
    "EncryptedPDFError",
    # Page specifications
    "RangeMode",
    "parse_page_spec",
    "parse_page_order",
    "resolve_pages",
    # Version info
    "__version__",
]
