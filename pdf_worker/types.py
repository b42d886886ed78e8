"""
Type definitions and dataclasses for PDF Worker.

This module defines the task request, the per-operation options and the
three response variants exchanged with the dispatcher. Every type offers a
``to_message``/``from_message`` pair for the dictionary form used across the
worker boundary.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

from .exceptions import InvalidInputError, UnsupportedOperationError


class Operation(str, Enum):
    """Supported tools. Values are the names used in task messages."""

    MERGE = "Merge"
    ROTATE = "Rotate"
    PROTECT = "Protect"
    UNLOCK = "Unlock"
    REMOVE = "Remove"
    EXTRACT = "Extract"
    REORDER = "Reorder"
    NUMBER = "Number"
    WATERMARK = "Watermark"
    METADATA = "Metadata"
    FLATTEN = "Flatten"
    INFO = "Info"

    @classmethod
    def parse(cls, name: Union[str, "Operation"]) -> "Operation":
        """Return the operation called ``name``, case-insensitively."""

        if isinstance(name, cls):
            return name
        for member in cls:
            if str(name).strip().lower() == member.value.lower():
                return member
        raise UnsupportedOperationError(name)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class MetadataOptions:
    """Document information fields to set; ``None`` keeps the existing value."""

    title: Optional[str] = None
    author: Optional[str] = None
    subject: Optional[str] = None

    @classmethod
    def from_message(cls, data: Optional[Mapping[str, Any]]) -> "MetadataOptions":
        data = data or {}
        return cls(
            title=data.get("title") or None,
            author=data.get("author") or None,
            subject=data.get("subject") or None,
        )


@dataclass(frozen=True)
class TaskOptions:
    """
    Operation-specific parameters.

    Attributes:
        rotation_angle: Degrees added to each page's rotation (Rotate)
        password: User and owner password (Protect, Unlock)
        pages: Page specification or page order string (Remove, Extract, Reorder)
        watermark_text: Text stamped across each page (Watermark)
        metadata: Replacement document information (Metadata)
    """

    rotation_angle: Optional[int] = None
    password: Optional[str] = None
    pages: Optional[str] = None
    watermark_text: Optional[str] = None
    metadata: MetadataOptions = field(default_factory=MetadataOptions)

    @classmethod
    def from_message(cls, data: Optional[Mapping[str, Any]]) -> "TaskOptions":
        data = data or {}
        angle = data.get("rotationAngle")
        if angle is not None and angle != "":
            try:
                angle = int(angle)
            except (TypeError, ValueError) as exc:
                raise InvalidInputError(f"Rotation angle must be an integer, got {angle!r}.") from exc
        else:
            angle = None
        return cls(
            rotation_angle=angle,
            password=data.get("password"),
            pages=data.get("pages"),
            watermark_text=data.get("watermarkText"),
            metadata=MetadataOptions.from_message(data.get("metadata")),
        )


@dataclass(frozen=True)
class TaskRequest:
    """One unit of work for the dispatcher. Immutable once created."""

    operation: Operation
    input_documents: Tuple[bytes, ...] = ()
    options: TaskOptions = field(default_factory=TaskOptions)

    def __post_init__(self) -> None:
        object.__setattr__(self, "operation", Operation.parse(self.operation))
        object.__setattr__(
            self,
            "input_documents",
            tuple(bytes(document) for document in self.input_documents),
        )

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> "TaskRequest":
        """Build a request from ``{"tool", "fileBuffers", "options"}``.

        ``operation`` and ``inputDocuments`` are accepted as aliases.
        """

        operation = message.get("tool", message.get("operation"))
        documents: Sequence[bytes] = message.get("fileBuffers", message.get("inputDocuments")) or ()
        return cls(
            operation=Operation.parse(operation),
            input_documents=tuple(documents),
            options=TaskOptions.from_message(message.get("options")),
        )


@dataclass
class PDFInfo:
    """
    Summary returned by the Info operation.

    Attributes:
        page_count: Number of pages reported by the PDF library
        title: Title metadata, if present
        author: Author metadata, if present
        subject: Subject metadata, if present
        encrypted: Whether the source document is encrypted
    """

    page_count: int
    title: Optional[str] = None
    author: Optional[str] = None
    subject: Optional[str] = None
    encrypted: bool = False

    def to_message(self) -> Dict[str, Any]:
        return {
            "pageCount": self.page_count,
            "title": self.title,
            "author": self.author,
            "subject": self.subject,
            "encrypted": self.encrypted,
        }


@dataclass(frozen=True)
class SuccessResponse:
    """A transformed document and its suggested file name."""

    data: bytes
    file_name: str
    status: str = field(default="success", init=False)

    def to_message(self) -> Dict[str, Any]:
        return {"status": self.status, "data": self.data, "fileName": self.file_name}

    def __str__(self) -> str:
        return f"SuccessResponse(file_name='{self.file_name}', size={len(self.data)})"


@dataclass(frozen=True)
class InfoResponse:
    """Document information produced by the Info operation."""

    info: PDFInfo
    status: str = field(default="info", init=False)

    def to_message(self) -> Dict[str, Any]:
        return {"status": self.status, "info": self.info.to_message()}


@dataclass(frozen=True)
class ErrorResponse:
    """A failed task. Never carries partial output."""

    message: str
    error_type: str = "ProcessingError"
    status: str = field(default="error", init=False)

    def to_message(self) -> Dict[str, Any]:
        return {"status": self.status, "message": self.message}

    def __str__(self) -> str:
        return f"ErrorResponse(error_type='{self.error_type}', message='{self.message}')"


TaskResponse = Union[SuccessResponse, InfoResponse, ErrorResponse]

__all__ = [
    "Operation",
    "MetadataOptions",
    "TaskOptions",
    "TaskRequest",
    "PDFInfo",
    "SuccessResponse",
    "InfoResponse",
    "ErrorResponse",
    "TaskResponse",
]
