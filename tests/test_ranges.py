from __future__ import annotations

import logging

import pytest

from pdf_worker.exceptions import InvalidRangeError, RangeMismatchError
from pdf_worker.ranges import RangeMode, parse_page_order, parse_page_spec, resolve_pages


def test_parse_page_spec_singles_and_ranges() -> None:
    assert parse_page_spec("2,4-6,9", total_pages=10) == {1, 3, 4, 5, 8}


def test_parse_page_spec_trims_whitespace() -> None:
    assert parse_page_spec(" 1 , 3-4 ,  7", total_pages=10) == {0, 2, 3, 6}


@pytest.mark.parametrize("spec", ["1-3", "2,5-7", "4-4", "8-10"])
def test_reversed_range_matches_forward_range(spec: str) -> None:
    reversed_spec = ",".join(
        "-".join(reversed(token.split("-"))) if "-" in token else token
        for token in spec.split(",")
    )
    assert parse_page_spec(reversed_spec, 10) == parse_page_spec(spec, 10)
    for mode in (RangeMode.REMOVE, RangeMode.EXTRACT):
        assert resolve_pages(reversed_spec, 10, mode) == resolve_pages(spec, 10, mode)


def test_range_is_clipped_to_document() -> None:
    assert resolve_pages("3-10", 5, RangeMode.EXTRACT) == [2, 3, 4]
    assert parse_page_spec("0-2", 5) == {0, 1}


def test_out_of_range_singles_and_garbage_are_ignored() -> None:
    assert parse_page_spec("0,2,99,abc,3-x,,-1", total_pages=5) == {1}


@pytest.mark.parametrize("spec", ["1", "2,4", "1-3", "5,1-2", "2-100"])
def test_remove_and_extract_are_complementary(spec: str) -> None:
    total = 5
    kept = resolve_pages(spec, total, RangeMode.REMOVE)
    extracted = resolve_pages(spec, total, RangeMode.EXTRACT)

    assert set(kept).isdisjoint(extracted)
    assert sorted(kept + extracted) == list(range(total))
    assert kept == sorted(kept)
    assert extracted == sorted(extracted)


def test_remove_keeps_unnamed_pages_in_order() -> None:
    assert resolve_pages("2,4", 5, RangeMode.REMOVE) == [0, 2, 4]


def test_extract_deduplicates_and_sorts() -> None:
    assert resolve_pages("5,1,1-2,5", 5, RangeMode.EXTRACT) == [0, 1, 4]


@pytest.mark.parametrize("spec", ["", "   ", "abc", "0", "7-9", "x-y,z"])
@pytest.mark.parametrize("mode", [RangeMode.REMOVE, RangeMode.EXTRACT])
def test_empty_or_invalid_spec_fails(spec: str, mode: RangeMode) -> None:
    with pytest.raises(InvalidRangeError):
        resolve_pages(spec, 5, mode)


def test_removing_every_page_fails() -> None:
    with pytest.raises(InvalidRangeError) as excinfo:
        resolve_pages("1-5", 5, RangeMode.REMOVE)
    assert "empty document" in str(excinfo.value)


def test_mode_accepts_plain_string() -> None:
    assert resolve_pages("1", 3, "extract") == [0]


def test_reorder_preserves_given_order() -> None:
    assert resolve_pages("3, 1, 2", 3, RangeMode.REORDER) == [2, 0, 1]


def test_reorder_length_mismatch() -> None:
    with pytest.raises(RangeMismatchError):
        parse_page_order("1,2", 3)
    with pytest.raises(RangeMismatchError):
        parse_page_order("1,2,3,1", 3)


def test_reorder_rejects_ranges_and_out_of_bounds_tokens() -> None:
    with pytest.raises(RangeMismatchError):
        parse_page_order("1-3", 3)
    with pytest.raises(RangeMismatchError):
        parse_page_order("1,2,4", 3)


def test_reorder_checks_count_only() -> None:
    assert parse_page_order("1,1,1", 3) == [0, 0, 0]


def test_reorder_empty_spec() -> None:
    with pytest.raises(InvalidRangeError):
        parse_page_order("", 3)


def test_reorder_tokens_must_be_whole_numbers() -> None:
    with pytest.raises(RangeMismatchError):
        parse_page_order("1,2,3x", 3)


def test_reorder_warns_about_repeated_pages(package_log) -> None:
    with package_log.at_level(logging.WARNING, logger="pdf_worker"):
        parse_page_order("2,2,1", 3)

    assert any("repeats pages" in record.getMessage() for record in package_log.records)


@pytest.mark.parametrize("mode", list(RangeMode))
def test_document_without_pages_has_nothing_to_resolve(mode: RangeMode) -> None:
    with pytest.raises(InvalidRangeError, match="no pages"):
        resolve_pages("1", 0, mode)
