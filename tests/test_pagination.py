"""Tests for the "Load more" pagination window."""

import pytest

from stockroom.services.pagination import PaginationWindow
from stockroom.utils.constants import PAGE_SIZE


@pytest.fixture
def forty_five(make_material):
    return [make_material(name=f"Item {i:02d}", id=f"id-{i:02d}") for i in range(45)]


class TestReset:
    def test_page_size_is_thirty(self):
        assert PAGE_SIZE == 30

    def test_first_page_of_45(self, forty_five):
        window = PaginationWindow.reset(forty_five)
        assert window.displayed == 30
        assert window.has_more is True
        assert window.visible == tuple(forty_five[:30])
        assert window.total == 45

    def test_short_view_fits_in_one_page(self, forty_five):
        window = PaginationWindow.reset(forty_five[:10])
        assert window.displayed == 10
        assert window.has_more is False

    def test_exactly_one_page(self, forty_five):
        window = PaginationWindow.reset(forty_five[:30])
        assert window.displayed == 30
        assert window.has_more is False

    def test_empty_view(self):
        window = PaginationWindow.reset([])
        assert window.displayed == 0
        assert window.visible == ()
        assert window.has_more is False

    def test_default_window_is_empty(self):
        assert PaginationWindow().visible == ()


class TestLoadMore:
    def test_second_page_of_45(self, forty_five):
        window = PaginationWindow.reset(forty_five).load_more()
        assert window.displayed == 45
        assert window.has_more is False
        assert window.visible == tuple(forty_five)

    def test_exhausted_window_unchanged(self, forty_five):
        window = PaginationWindow.reset(forty_five).load_more()
        assert window.load_more() == window
        assert window.load_more().load_more().visible == window.visible

    @pytest.mark.parametrize("page_size,calls", [(7, 0), (7, 3), (10, 2), (30, 1), (4, 20)])
    def test_displayed_after_k_calls(self, forty_five, page_size, calls):
        window = PaginationWindow.reset(forty_five, page_size)
        for _ in range(calls):
            window = window.load_more()
        assert window.displayed == min(len(forty_five), page_size * (calls + 1))

    def test_displayed_never_decreases(self, forty_five):
        window = PaginationWindow.reset(forty_five, 8)
        previous = window.displayed
        while window.has_more:
            window = window.load_more()
            assert window.displayed > previous
            previous = window.displayed

    def test_load_more_returns_new_window(self, forty_five):
        first = PaginationWindow.reset(forty_five)
        second = first.load_more()
        assert first.displayed == 30
        assert second is not first


class TestValidation:
    def test_rejects_non_positive_page_size(self):
        with pytest.raises(ValueError):
            PaginationWindow(page_size=0)

    def test_rejects_displayed_beyond_view(self, forty_five):
        with pytest.raises(ValueError):
            PaginationWindow(view=tuple(forty_five[:3]), displayed=4)
