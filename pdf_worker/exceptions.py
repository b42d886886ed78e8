"""
Custom exceptions for PDF Worker.

Every error raised while processing a task derives from
:class:`PDFWorkerException`. The dispatcher converts them into a single error
response shape, using :attr:`PDFWorkerException.error_type` as the tag.
"""


class PDFWorkerException(Exception):
    """Base exception for all PDF Worker errors."""

    error_type = "ProcessingError"

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown processing error occurred."


class InvalidInputError(PDFWorkerException):
    """Raised when a required option is missing or empty."""

    error_type = "InvalidInput"

    @property
    def default_message(self) -> str:
        return "Invalid or missing task option."


class EmptyPasswordError(InvalidInputError):
    """Raised when a password operation receives an empty password."""

    @property
    def default_message(self) -> str:
        return "Password field cannot be empty."


class EmptyWatermarkError(InvalidInputError):
    """Raised when the watermark text is empty."""

    @property
    def default_message(self) -> str:
        return "Watermark text cannot be empty."


class InvalidRangeError(PDFWorkerException):
    """Raised when a page specification yields nothing usable."""

    error_type = "InvalidRange"

    @property
    def default_message(self) -> str:
        return "No valid pages found to process."


class RangeMismatchError(PDFWorkerException):
    """Raised when a page order does not list every page of the document."""

    error_type = "RangeMismatch"

    @property
    def default_message(self) -> str:
        return (
            "Mismatched page count. Please include ALL pages in the new sequence "
            "(e.g., 1, 2, 3, 4, 5)."
        )


class InsufficientInputsError(PDFWorkerException):
    """Raised when an operation receives fewer documents than it needs."""

    error_type = "InsufficientInputs"

    @property
    def default_message(self) -> str:
        return "Merging requires at least two PDF files."


class UnsupportedOperationError(PDFWorkerException):
    """Raised when a task names an operation that has no handler."""

    error_type = "UnsupportedOperation"

    def __init__(self, operation: object = None, message: str = "") -> None:
        self.operation = operation
        if not message and operation is not None:
            message = f"Tool {operation} is not implemented."
        super().__init__(message)

    @property
    def default_message(self) -> str:
        return "Requested tool is not implemented."


class CollaboratorError(PDFWorkerException):
    """Raised when the PDF library rejects a document."""

    error_type = "CollaboratorFailure"

    @property
    def default_message(self) -> str:
        return "The PDF library failed to process the document."


class InvalidPDFError(CollaboratorError):
    """Raised when PDF data is invalid or corrupted."""

    @property
    def default_message(self) -> str:
        return "Invalid or corrupted PDF file."


class EncryptedPDFError(CollaboratorError):
    """Raised when a PDF is encrypted and cannot be opened with the given password."""

    @property
    def default_message(self) -> str:
        return "PDF is encrypted and cannot be processed without a password."
