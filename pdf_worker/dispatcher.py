"""Single entry point turning a task request into exactly one response."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from . import operations  # noqa: F401  # register the operation handlers
from .backends import PypdfBackend
from .backends.base import PDFBackend
from .config import DEFAULT_SETTINGS, WorkerSettings
from .exceptions import CollaboratorError, PDFWorkerException
from .pipeline import OperationRegistry, TaskContext, registry
from .types import (
    ErrorResponse,
    InfoResponse,
    PDFInfo,
    SuccessResponse,
    TaskRequest,
    TaskResponse,
)
from .utils import build_output_filename, get_logger

LOGGER = get_logger("pdf_worker.dispatcher")

UNKNOWN_ERROR_MESSAGE = "An unknown processing error occurred."

registry.verify_complete()


class Dispatcher:
    """Route :class:`TaskRequest` objects to their handlers and normalise the outcome.

    Errors never propagate out of :meth:`dispatch`; every failure becomes an
    :class:`ErrorResponse`.
    """

    def __init__(
        self,
        *,
        backend: Optional[PDFBackend] = None,
        settings: Optional[WorkerSettings] = None,
        operation_registry: OperationRegistry = registry,
    ) -> None:
        self.settings = settings or DEFAULT_SETTINGS
        self.backend: PDFBackend = backend or PypdfBackend(producer=self.settings.producer)
        self.registry = operation_registry

    def dispatch(self, request: TaskRequest) -> TaskResponse:
        operation = getattr(request, "operation", None)
        try:
            LOGGER.info(
                "Processing %s with %d input document(s)", operation, len(request.input_documents)
            )
            context = TaskContext(
                documents=request.input_documents,
                options=request.options,
                backend=self.backend,
                settings=self.settings,
            )
            handler = self.registry.create(operation, context)
            result = handler.run()
        except PDFWorkerException as exc:
            LOGGER.info("%s failed: %s", operation, exc.message)
            return ErrorResponse(message=exc.message, error_type=exc.error_type)
        except Exception as exc:
            LOGGER.exception("Unexpected error while processing %s", operation)
            return ErrorResponse(
                message=str(exc) or UNKNOWN_ERROR_MESSAGE,
                error_type=CollaboratorError.error_type,
            )

        if isinstance(result, PDFInfo):
            return InfoResponse(info=result)
        return SuccessResponse(data=result, file_name=build_output_filename(operation.value))

    def dispatch_message(self, message: Mapping[str, Any]) -> Dict[str, Any]:
        """Handle a ``{"tool", "fileBuffers", "options"}`` message and return the reply message."""

        try:
            request = TaskRequest.from_message(message)
        except PDFWorkerException as exc:
            LOGGER.warning("Rejected task message: %s", exc.message)
            return ErrorResponse(message=exc.message, error_type=exc.error_type).to_message()
        except Exception as exc:
            LOGGER.exception("Malformed task message")
            return ErrorResponse(message=str(exc) or UNKNOWN_ERROR_MESSAGE).to_message()
        return self.dispatch(request).to_message()


def dispatch(request: TaskRequest) -> TaskResponse:
    """Dispatch ``request`` with the default backend and settings."""

    return Dispatcher().dispatch(request)


__all__ = ["Dispatcher", "dispatch", "UNKNOWN_ERROR_MESSAGE"]
