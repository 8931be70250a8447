import logging

import pytest
from pydantic import ValidationError

from paginator import InvalidArgument, PaginationMetadata, build_metadata, parse_page_number


@pytest.mark.parametrize(
    "page_number, page_size, total_items, expected",
    [
        (1, 20, 45, (1, 2, None, 2)),
        (2, 20, 45, (2, None, 1, 2)),
        # beyond the last page: no error, no next page
        (3, 20, 45, (3, None, 2, 2)),
        (1, 20, 5, (1, None, None, 0)),
        (1, 10, 100, (1, 2, None, 10)),
        (5, 10, 100, (5, 6, 4, 10)),
        (10, 10, 100, (10, None, 9, 10)),
        (1, 1, 1, (1, None, None, 1)),
    ],
)
def test_build_metadata(page_number, page_size, total_items, expected):
    paginator = build_metadata(page_number, page_size, total_items)

    assert (
        paginator.current_page_number,
        paginator.next_page_number,
        paginator.previous_page_number,
        paginator.num_pages,
    ) == expected


def test_num_pages_counts_full_pages_only():
    assert build_metadata(1, 20, 45).num_pages == 2
    assert build_metadata(1, 20, 59).num_pages == 2
    assert build_metadata(1, 20, 60).num_pages == 3


def test_links():
    first = build_metadata(1, 20, 45)
    assert first.has_next
    assert not first.has_previous

    last = build_metadata(2, 20, 45)
    assert not last.has_next
    assert last.has_previous


def test_same_inputs_equal_results():
    assert build_metadata(2, 20, 45) == build_metadata(2, 20, 45)
    assert build_metadata(2, 20, 45) == PaginationMetadata(
        current_page_number=2,
        next_page_number=None,
        previous_page_number=1,
        num_pages=2,
    )


def test_metadata_is_immutable():
    paginator = build_metadata(1, 20, 45)

    with pytest.raises(ValidationError):
        paginator.num_pages = 10


@pytest.mark.parametrize(
    "args",
    [
        (0, 20, 45),
        (-1, 20, 45),
        (1, 0, 45),
        (1, -20, 45),
        (1, 20, 0),
        (1, 20, -45),
        (1.0, 20, 45),
        (1, "20", 45),
        (1, 20, 45.5),
        (True, 20, 45),
        (None, 20, 45),
    ],
)
def test_rejects_non_positive_integers(args):
    with pytest.raises(InvalidArgument):
        build_metadata(*args)


def test_empty_total_when_allowed():
    paginator = build_metadata(1, 20, 0, allow_empty=True)

    assert paginator.num_pages == 0
    assert paginator.next_page_number is None
    assert paginator.previous_page_number is None


@pytest.mark.parametrize("total_items", [-1, 0.0, False])
def test_empty_total_still_requires_integer_zero(total_items):
    with pytest.raises(InvalidArgument, match="total_items"):
        build_metadata(1, 20, total_items, allow_empty=True)


@pytest.mark.parametrize(
    "raw, expected",
    [(None, 1), ("", 1), ("  ", 1), ("1", 1), ("3", 3), (" 12 ", 12), (7, 7)],
)
def test_parse_page_number(raw, expected):
    assert parse_page_number(raw) == expected


def test_parse_page_number_default():
    assert parse_page_number(None, default=4) == 4


@pytest.mark.parametrize("raw", ["0", "-2", "two", "1.5", 0, -3, 2.0, True])
def test_parse_page_number_rejects(raw):
    with pytest.raises(InvalidArgument):
        parse_page_number(raw)


def test_out_of_range_page_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="paginator")

    build_metadata(3, 20, 45)

    assert "Page 3 requested but only 2 pages exist" in caplog.text
