"""Page specification parsing for the remove, extract and reorder operations.

A specification is a comma-separated list of 1-based page numbers and
inclusive ranges, e.g. ``"2,4-6,9"``. Results are always 0-based page indices.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import List, Set

from .exceptions import InvalidRangeError, RangeMismatchError
from .utils import get_logger

LOGGER = get_logger("pdf_worker.ranges")

_RANGE_TOKEN = re.compile(r"^\s*(\d+)-(\d+)\s*$")
_SINGLE_TOKEN = re.compile(r"^\s*(\d+)\s*$")


class RangeMode(str, Enum):
    REMOVE = "remove"
    EXTRACT = "extract"
    REORDER = "reorder"


def parse_page_spec(page_spec: str, total_pages: int) -> Set[int]:
    """Return the 0-based indices named by ``page_spec``.

    Range ends are swapped when reversed and clipped to ``1..total_pages``.
    Single pages outside that interval and tokens that are neither a number
    nor a range are skipped.
    """

    pages: Set[int] = set()
    for token in page_spec.split(","):
        range_match = _RANGE_TOKEN.match(token)
        if range_match:
            start, end = int(range_match.group(1)), int(range_match.group(2))
            if start > end:
                start, end = end, start
            pages.update(range(max(start, 1) - 1, min(end, total_pages)))
            continue

        single_match = _SINGLE_TOKEN.match(token)
        if single_match:
            page_num = int(single_match.group(1))
            if 1 <= page_num <= total_pages:
                pages.add(page_num - 1)
            continue

        if token.strip():
            LOGGER.debug("Ignoring unrecognised page token %r", token)

    return pages


def parse_page_order(order_spec: str, total_pages: int) -> List[int]:
    """Return the 0-based page sequence named by ``order_spec``.

    Every token must be a single page number; ranges are not accepted here.
    Tokens with trailing characters such as ``"3x"`` are not page numbers.
    Tokens that do not parse or fall outside ``1..total_pages`` are dropped and
    duplicates are kept, so the only structural check is that the sequence
    length equals ``total_pages``.

    Raises:
        InvalidRangeError: If ``order_spec`` is empty.
        RangeMismatchError: If the sequence length differs from ``total_pages``.
    """

    if not order_spec or not order_spec.strip():
        raise InvalidRangeError("Please specify the new page order (e.g., 5, 3, 1, 2).")

    order: List[int] = []
    for token in order_spec.split(","):
        match = _SINGLE_TOKEN.match(token)
        if not match:
            continue
        page_num = int(match.group(1))
        if 1 <= page_num <= total_pages:
            order.append(page_num - 1)

    if len(order) != total_pages:
        raise RangeMismatchError()

    if len(set(order)) != len(order):
        LOGGER.warning(
            "Page order %r repeats pages; %d page(s) will be dropped",
            order_spec,
            total_pages - len(set(order)),
        )
    return order


def resolve_pages(page_spec: str, total_pages: int, mode: RangeMode) -> List[int]:
    """Resolve ``page_spec`` into the 0-based pages to keep under ``mode``.

    Args:
        page_spec: Raw specification entered by the user.
        total_pages: Page count of the subject document.
        mode: ``REMOVE`` keeps every page not named, ``EXTRACT`` keeps the
            named pages, both in document order. ``REORDER`` returns the
            caller's sequence as described in :func:`parse_page_order`.

    Raises:
        InvalidRangeError: If nothing valid is named, the document has no pages,
            or the result is empty.
        RangeMismatchError: In ``REORDER`` mode when not every page is listed.
    """

    mode = RangeMode(mode)
    if total_pages < 1:
        raise InvalidRangeError("The document has no pages to process.")
    if mode is RangeMode.REORDER:
        return parse_page_order(page_spec, total_pages)

    if not page_spec or not page_spec.strip():
        raise InvalidRangeError(f"Please specify the pages you wish to {mode.value}.")

    specified = parse_page_spec(page_spec, total_pages)
    if not specified:
        raise InvalidRangeError("No valid pages found to process.")

    if mode is RangeMode.REMOVE:
        selected = [index for index in range(total_pages) if index not in specified]
    else:
        selected = sorted(specified)

    if not selected:
        raise InvalidRangeError("Processing those pages would result in an empty document.")

    LOGGER.debug("Resolved %r (%s) to %d page(s)", page_spec, mode.value, len(selected))
    return selected


__all__ = ["RangeMode", "parse_page_spec", "parse_page_order", "resolve_pages"]
