"""Off-thread execution of tasks.

:class:`PDFWorker` owns a single worker thread, so tasks submitted from the
caller's thread run one at a time, in submission order, without blocking it.
Every submitted task resolves to exactly one response.
"""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Dict, Mapping, Optional

from .backends.base import PDFBackend
from .config import WorkerSettings
from .dispatcher import Dispatcher
from .types import TaskRequest, TaskResponse
from .utils import configure_logging, get_logger

LOGGER = get_logger("pdf_worker.worker")

ResponseCallback = Callable[[TaskResponse], None]
MessageCallback = Callable[[Dict[str, Any]], None]


class PDFWorker:
    """Run :class:`TaskRequest` objects on a dedicated background thread."""

    def __init__(
        self,
        *,
        settings: Optional[WorkerSettings] = None,
        backend: Optional[PDFBackend] = None,
        thread_name_prefix: str = "pdf-worker",
    ) -> None:
        self.settings = settings or WorkerSettings.from_env()
        configure_logging(self.settings.log_level)
        self.dispatcher = Dispatcher(backend=backend, settings=self.settings)
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix=thread_name_prefix)

    def submit(self, request: TaskRequest, callback: Optional[ResponseCallback] = None) -> "Future[TaskResponse]":
        """Queue ``request`` and return a future resolving to its response.

        ``callback`` is invoked on the worker thread with the response.
        """

        future = self._executor.submit(self.dispatcher.dispatch, request)
        if callback is not None:
            future.add_done_callback(lambda done: self._notify(callback, done))
        return future

    def submit_message(
        self,
        message: Mapping[str, Any],
        callback: Optional[MessageCallback] = None,
    ) -> "Future[Dict[str, Any]]":
        """Queue a ``{"tool", "fileBuffers", "options"}`` message; the future yields the reply message."""

        future = self._executor.submit(self.dispatcher.dispatch_message, dict(message))
        if callback is not None:
            future.add_done_callback(lambda done: self._notify(callback, done))
        return future

    def run(self, request: TaskRequest) -> TaskResponse:
        """Submit ``request`` and block until its response is ready."""

        return self.submit(request).result()

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "PDFWorker":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown(wait=True)

    @staticmethod
    def _notify(callback: Callable[[Any], None], future: Future) -> None:
        try:
            callback(future.result())
        except Exception:
            LOGGER.exception("Response callback raised")


__all__ = ["PDFWorker"]
