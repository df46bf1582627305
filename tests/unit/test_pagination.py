"""Tests for the auto-paginator."""

from __future__ import annotations

import pytest

from ptcg_cli.client.envelope import ApiError, DataEnvelope, ErrorEnvelope
from ptcg_cli.client.errors import NotFoundError, ServerError
from ptcg_cli.client.pagination import PageCursor, PagePolicy, paginate


def page(items, total_count=None):
    return DataEnvelope[list[str]](data=items, total_count=total_count)


def failure(code, message="boom"):
    return ErrorEnvelope(error=ApiError(message=message, code=code))


class FakePages:
    """Serves canned envelopes by page number and records requests."""

    def __init__(self, *envelopes):
        self.envelopes = list(envelopes)
        self.requested: list[int] = []

    def __call__(self, page_number: int):
        self.requested.append(page_number)
        return self.envelopes[page_number - 1]


def full(prefix: str, n: int = 250) -> list[str]:
    return [f"{prefix}{i}" for i in range(n)]


class TestPageCursor:
    def test_initial_state(self):
        cursor = PageCursor()
        assert cursor.page == 1
        assert cursor.page_size == 250
        assert cursor.total_pages == 0

    def test_observe_rounds_up(self):
        cursor = PageCursor()
        cursor.observe(251)
        assert cursor.total_pages == 2

    def test_observe_none_keeps_previous(self):
        cursor = PageCursor()
        cursor.observe(750)
        cursor.observe(None)
        assert cursor.total_pages == 3


class TestCardPolicy:
    def test_no_count_fetches_one_page(self):
        pages = FakePages(page(full("a")), page(full("b")))
        items = paginate(pages, PagePolicy.CARDS)
        assert pages.requested == [1]
        assert len(items) == 250

    def test_count_drives_page_total(self):
        pages = FakePages(
            page(full("a"), 600), page(full("b"), 600), page(full("c", 100), 600),
        )
        items = paginate(pages, PagePolicy.CARDS)
        assert pages.requested == [1, 2, 3]
        assert len(items) == 600

    def test_251_needs_two_pages(self):
        pages = FakePages(page(["x"], 251), page(["y"], 251), page(["z"], 251))
        items = paginate(pages, PagePolicy.CARDS)
        assert pages.requested == [1, 2]
        assert items == ["x", "y"]

    def test_exact_multiple_does_not_overfetch(self):
        pages = FakePages(page(full("a"), 500), page(full("b"), 500), page([], 500))
        items = paginate(pages, PagePolicy.CARDS)
        assert pages.requested == [1, 2]
        assert len(items) == 500

    def test_short_page_does_not_stop_cards(self):
        pages = FakePages(page(["a"], 500), page(["b"], 500))
        assert paginate(pages, PagePolicy.CARDS) == ["a", "b"]
        assert pages.requested == [1, 2]

    def test_sticky_total_count(self):
        pages = FakePages(page(full("a"), 750), page(full("b")), page(full("c")))
        items = paginate(pages, PagePolicy.CARDS)
        assert pages.requested == [1, 2, 3]
        assert len(items) == 750

    def test_order_preserved_across_pages(self):
        pages = FakePages(page(["1", "2"], 251), page(["3", "4"], 251))
        assert paginate(pages, PagePolicy.CARDS) == ["1", "2", "3", "4"]

    def test_zero_count(self):
        pages = FakePages(page([], 0))
        assert paginate(pages, PagePolicy.CARDS) == []
        assert pages.requested == [1]


class TestSetPolicy:
    def test_short_first_page_stops(self):
        pages = FakePages(page(["s1", "s2"], 1000), page(["s3"], 1000))
        items = paginate(pages, PagePolicy.SETS)
        assert pages.requested == [1]
        assert items == ["s1", "s2"]

    def test_full_then_short_page(self):
        pages = FakePages(page(full("a"), 300), page(full("b", 50), 300))
        items = paginate(pages, PagePolicy.SETS)
        assert pages.requested == [1, 2]
        assert len(items) == 300

    def test_full_page_without_count_stops(self):
        pages = FakePages(page(full("a")), page(full("b")))
        assert len(paginate(pages, PagePolicy.SETS)) == 250
        assert pages.requested == [1]

    def test_custom_page_size(self):
        pages = FakePages(page(["a", "b"], 5), page(["c", "d"]), page(["e"]))
        items = paginate(pages, PagePolicy.SETS, page_size=2)
        assert pages.requested == [1, 2, 3]
        assert items == ["a", "b", "c", "d", "e"]


class TestFailures:
    def test_first_page_error(self):
        pages = FakePages(failure(404, "Not found"))
        with pytest.raises(NotFoundError, match="Not found"):
            paginate(pages, PagePolicy.CARDS)

    def test_mid_sequence_error_discards_progress(self):
        pages = FakePages(page(full("a"), 750), failure(503, "unavailable"), page(full("c")))
        with pytest.raises(ServerError) as exc_info:
            paginate(pages, PagePolicy.CARDS)
        assert exc_info.value.code == 503
        assert pages.requested == [1, 2]

    @pytest.mark.parametrize("policy", list(PagePolicy))
    def test_error_raised_for_every_policy(self, policy):
        pages = FakePages(failure(404))
        with pytest.raises(NotFoundError):
            paginate(pages, policy)
