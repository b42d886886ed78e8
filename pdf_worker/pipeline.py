"""Operation registry and the context object handed to each operation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Sequence, Union

from .backends import PypdfBackend
from .backends.base import PDFBackend
from .config import DEFAULT_SETTINGS, WorkerSettings
from .document import PDFDocumentAdapter
from .exceptions import InsufficientInputsError, UnsupportedOperationError
from .types import Operation, PDFInfo, TaskOptions

OperationResult = Union[bytes, PDFInfo]


@dataclass
class TaskContext:
    """Holds the inputs and collaborators for one operation invocation."""

    documents: Sequence[bytes]
    options: TaskOptions = field(default_factory=TaskOptions)
    backend: PDFBackend = field(default_factory=PypdfBackend)
    settings: WorkerSettings = DEFAULT_SETTINGS

    def load(self, index: int = 0, *, password: Optional[str] = None) -> PDFDocumentAdapter:
        if index >= len(self.documents):
            raise InsufficientInputsError(
                f"Expected at least {index + 1} PDF file(s), received {len(self.documents)}."
            )
        return PDFDocumentAdapter(self.documents[index], password=password, backend=self.backend)


class BaseOperation:
    """Base class for all operation handlers."""

    operation: Operation

    def __init__(self, context: TaskContext) -> None:
        self.context = context

    @property
    def options(self) -> TaskOptions:
        return self.context.options

    def run(self) -> OperationResult:  # pragma: no cover - to be implemented by subclasses
        raise NotImplementedError


class OperationRegistry:
    """Registry mapping each :class:`Operation` to its handler class."""

    def __init__(self) -> None:
        self._operations: Dict[Operation, type[BaseOperation]] = {}

    def register(self, operation: Operation, handler: type[BaseOperation]) -> None:
        if operation in self._operations:
            raise ValueError(f"Operation '{operation}' is already registered")
        self._operations[operation] = handler

    def create(self, operation: Operation, context: TaskContext) -> BaseOperation:
        try:
            handler = self._operations[operation]
        except KeyError as exc:
            raise UnsupportedOperationError(operation) from exc
        return handler(context)

    def names(self) -> Iterable[str]:
        return sorted(operation.value for operation in self._operations)

    def missing(self) -> list[Operation]:
        return [operation for operation in Operation if operation not in self._operations]

    def verify_complete(self) -> None:
        """Raise ``RuntimeError`` unless every :class:`Operation` has a handler."""

        missing = self.missing()
        if missing:
            names = ", ".join(operation.value for operation in missing)
            raise RuntimeError(f"No handler registered for: {names}")


registry = OperationRegistry()


def register_operation(operation: Operation):
    def decorator(cls: type[BaseOperation]) -> type[BaseOperation]:
        cls.operation = operation
        registry.register(operation, cls)
        return cls

    return decorator


__all__ = [
    "OperationRegistry",
    "registry",
    "register_operation",
    "TaskContext",
    "BaseOperation",
    "OperationResult",
]
