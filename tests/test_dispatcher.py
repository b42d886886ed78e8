from __future__ import annotations

import re

import pytest

from conftest import read_pdf
from pdf_worker import operations
from pdf_worker.dispatcher import UNKNOWN_ERROR_MESSAGE, Dispatcher
from pdf_worker.exceptions import UnsupportedOperationError
from pdf_worker.pipeline import OperationRegistry
from pdf_worker.types import (
    ErrorResponse,
    InfoResponse,
    Operation,
    SuccessResponse,
    TaskOptions,
    TaskRequest,
)


@pytest.fixture()
def dispatcher() -> Dispatcher:
    return Dispatcher()


def test_success_response_carries_document_and_name(dispatcher: Dispatcher, sample_pdf: bytes) -> None:
    response = dispatcher.dispatch(
        TaskRequest(Operation.EXTRACT, (sample_pdf,), TaskOptions(pages="1-2"))
    )

    assert isinstance(response, SuccessResponse)
    assert re.fullmatch(r"Extract_\d+\.pdf", response.file_name)
    assert len(read_pdf(response.data).pages) == 2
    message = response.to_message()
    assert message["status"] == "success"
    assert message["fileName"] == response.file_name
    assert message["data"] == response.data


def test_info_uses_its_own_response_shape(dispatcher: Dispatcher, sample_pdf: bytes) -> None:
    response = dispatcher.dispatch(TaskRequest(Operation.INFO, (sample_pdf,)))

    assert isinstance(response, InfoResponse)
    assert response.to_message() == {
        "status": "info",
        "info": {
            "pageCount": 5,
            "title": "Sample",
            "author": "Tester",
            "subject": None,
            "encrypted": False,
        },
    }


def test_handler_errors_become_error_responses(dispatcher: Dispatcher, sample_pdf: bytes) -> None:
    response = dispatcher.dispatch(TaskRequest(Operation.MERGE, (sample_pdf,)))

    assert isinstance(response, ErrorResponse)
    assert response.error_type == "InsufficientInputs"
    assert response.to_message() == {
        "status": "error",
        "message": "Merging requires at least two PDF files.",
    }


def test_corrupt_input_is_a_collaborator_failure(dispatcher: Dispatcher) -> None:
    response = dispatcher.dispatch(TaskRequest(Operation.FLATTEN, (b"%PDF-broken",)))

    assert isinstance(response, ErrorResponse)
    assert response.error_type == "CollaboratorFailure"


def test_unexpected_exceptions_do_not_escape(
    dispatcher: Dispatcher, sample_pdf: bytes, monkeypatch: pytest.MonkeyPatch
) -> None:
    def explode(self):
        raise RuntimeError()

    monkeypatch.setattr(operations.FlattenOperation, "run", explode)
    response = dispatcher.dispatch(TaskRequest(Operation.FLATTEN, (sample_pdf,)))

    assert isinstance(response, ErrorResponse)
    assert response.message == UNKNOWN_ERROR_MESSAGE


def test_unregistered_operation(sample_pdf: bytes) -> None:
    dispatcher = Dispatcher(operation_registry=OperationRegistry())
    response = dispatcher.dispatch(TaskRequest(Operation.NUMBER, (sample_pdf,)))

    assert isinstance(response, ErrorResponse)
    assert response.error_type == "UnsupportedOperation"
    assert "Number" in response.message


def test_registry_reports_missing_operations() -> None:
    with pytest.raises(RuntimeError, match="Merge"):
        OperationRegistry().verify_complete()


def test_dispatch_message_round_trip(dispatcher: Dispatcher, pdf_factory) -> None:
    reply = dispatcher.dispatch_message(
        {
            "tool": "Rotate",
            "fileBuffers": [pdf_factory(2)],
            "options": {"rotationAngle": "90"},
        }
    )

    assert reply["status"] == "success"
    assert reply["fileName"].startswith("Rotate_")
    assert {page.rotation for page in read_pdf(reply["data"]).pages} == {90}


def test_dispatch_message_metadata_options(dispatcher: Dispatcher, sample_pdf: bytes) -> None:
    reply = dispatcher.dispatch_message(
        {
            "tool": "Metadata",
            "fileBuffers": [sample_pdf],
            "options": {"metadata": {"title": "New", "author": ""}},
        }
    )

    metadata = read_pdf(reply["data"]).metadata
    assert metadata.title == "New"
    assert metadata.author == "Tester"


def test_dispatch_message_unknown_tool_names_the_tool(dispatcher: Dispatcher) -> None:
    reply = dispatcher.dispatch_message({"tool": "Compress", "fileBuffers": [], "options": {}})

    assert reply == {"status": "error", "message": "Tool Compress is not implemented."}


def test_dispatch_message_bad_rotation(dispatcher: Dispatcher, sample_pdf: bytes) -> None:
    reply = dispatcher.dispatch_message(
        {"tool": "Rotate", "fileBuffers": [sample_pdf], "options": {"rotationAngle": "left"}}
    )

    assert reply["status"] == "error"
    assert "Rotation angle" in reply["message"]


def test_operation_names_are_case_insensitive() -> None:
    assert Operation.parse("watermark") is Operation.WATERMARK
    with pytest.raises(UnsupportedOperationError) as excinfo:
        Operation.parse("Split")
    assert excinfo.value.operation == "Split"


def test_request_is_immutable(sample_pdf: bytes) -> None:
    request = TaskRequest("Flatten", [bytearray(sample_pdf)])

    assert request.operation is Operation.FLATTEN
    assert request.input_documents == (sample_pdf,)
    with pytest.raises(AttributeError):
        request.operation = Operation.INFO  # type: ignore[misc]


def test_malformed_request_becomes_error_response(dispatcher: Dispatcher) -> None:
    response = dispatcher.dispatch(object())  # type: ignore[arg-type]

    assert isinstance(response, ErrorResponse)
    assert response.error_type == "CollaboratorFailure"


def test_info_on_document_without_pages(dispatcher: Dispatcher, pdf_factory) -> None:
    response = dispatcher.dispatch(TaskRequest(Operation.INFO, (pdf_factory(0),)))

    assert isinstance(response, InfoResponse)
    assert response.info.page_count == 0
