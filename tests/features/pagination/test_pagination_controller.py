"""Tests for the pagination controller and client-side adapter."""

import pytest

from neo_datastate.features.pagination.entities.pagination_state import ELLIPSIS, PageRange
from neo_datastate.features.pagination.services.client_pagination import ClientPagination
from neo_datastate.features.pagination.services.pagination_controller import PaginationController


class TestPaginationController:
    """Test navigation on the pagination controller."""

    @pytest.fixture
    def controller(self):
        return PaginationController(initial_page=1, initial_page_size=10, total_items=47)

    def test_defaults(self):
        controller = PaginationController()
        assert controller.current_page == 1
        assert controller.page_size == 20
        assert controller.total_items == 0
        assert controller.total_pages == 1

    def test_go_to_page_clamps(self, controller):
        controller.go_to_page(-5)
        assert controller.current_page == 1

        controller.go_to_page(9999)
        assert controller.current_page == controller.total_pages == 5

        controller.go_to_page(3)
        assert controller.current_page == 3
        assert controller.range == PageRange(start=21, end=30)

    def test_next_and_prev_stop_at_bounds(self, controller):
        controller.prev_page()
        assert controller.current_page == 1

        for _ in range(10):
            controller.next_page()
        assert controller.current_page == 5
        assert not controller.can_go_next

        controller.prev_page()
        assert controller.current_page == 4

    def test_first_and_last(self, controller):
        controller.last_page()
        assert controller.current_page == 5
        controller.first_page()
        assert controller.current_page == 1

    @pytest.mark.parametrize("start_page", [1, 3, 5])
    def test_change_page_size_returns_to_first_page(self, controller, start_page):
        controller.go_to_page(start_page)
        controller.change_page_size(25)

        assert controller.current_page == 1
        assert controller.page_size == 25
        assert controller.total_pages == 2

    def test_change_page_size_clamps_to_one(self, controller):
        controller.change_page_size(0)
        assert controller.page_size == 1
        assert controller.total_pages == 47

    def test_set_total_items_reclamps(self, controller):
        controller.last_page()
        controller.set_total_items(12)

        assert controller.total_pages == 2
        assert controller.current_page == 2

    def test_reset_restores_initial_page_and_size(self):
        controller = PaginationController(initial_page=2, initial_page_size=10, total_items=100)
        controller.change_page_size(50)
        controller.go_to_page(2)

        controller.reset()

        assert controller.current_page == 2
        assert controller.page_size == 10
        assert controller.total_items == 100

    def test_initial_page_is_clamped(self):
        controller = PaginationController(initial_page=9, initial_page_size=10, total_items=30)
        assert controller.current_page == 3

    def test_initial_page_kept_until_total_arrives(self):
        controller = PaginationController(initial_page=3, initial_page_size=10)
        assert controller.current_page == 3

        controller.set_total_items(47)

        assert controller.current_page == 3
        assert controller.range.start == 21
        assert controller.range.end == 30

    def test_late_total_below_initial_page_clamps(self):
        controller = PaginationController(initial_page=9, initial_page_size=10)
        controller.set_total_items(30)
        assert controller.current_page == 3

    def test_page_numbers(self):
        controller = PaginationController(initial_page=5, initial_page_size=10, total_items=100)
        assert controller.get_page_numbers() == [1, ELLIPSIS, 4, 5, 6, ELLIPSIS, 10]

        controller.set_total_items(30)
        assert controller.get_page_numbers() == [1, 2, 3]

    def test_from_settings(self, settings):
        settings.default_page_size = 5000
        controller = PaginationController.from_settings(settings, total_items=10)

        assert controller.page_size == settings.max_page_size
        assert controller.current_page == 1


class TestClientPagination:
    """Test client-side slicing."""

    def test_last_page_holds_remainder(self):
        """Test 25 items at 10 per page, on page 3."""
        pagination = ClientPagination(list(range(25)), page_size=10)
        pagination.go_to_page(3)

        assert pagination.items == [20, 21, 22, 23, 24]
        assert len(pagination.items) == 5

    def test_first_page(self):
        pagination = ClientPagination(list("abcdefghij"), page_size=4)

        assert pagination.items == ["a", "b", "c", "d"]
        assert pagination.total_items == 10
        assert pagination.total_pages == 3

    def test_empty_source(self):
        pagination = ClientPagination([], page_size=10)

        assert pagination.items == []
        assert pagination.total_pages == 1
        assert pagination.current_page == 1

    def test_source_is_not_copied_or_mutated(self):
        source = [3, 1, 2]
        pagination = ClientPagination(source, page_size=2)
        pagination.next_page()

        assert pagination.source is source
        assert source == [3, 1, 2]
        assert pagination.items == [2]

    def test_external_removal_reclamps_page(self):
        """Test shrinking the source moves the page back into range."""
        source = list(range(21))
        pagination = ClientPagination(source, page_size=10)
        pagination.last_page()
        assert pagination.current_page == 3

        source.pop()

        assert pagination.total_items == 20
        assert pagination.current_page == 2
        assert pagination.items == list(range(10, 20))

    def test_external_growth_keeps_page(self):
        source = list(range(15))
        pagination = ClientPagination(source, page_size=10)
        pagination.go_to_page(2)

        source.extend(range(15, 30))

        assert pagination.total_pages == 3
        assert pagination.current_page == 2
        assert pagination.can_go_next

    def test_set_source(self):
        pagination = ClientPagination(list(range(50)), page_size=10)
        pagination.go_to_page(5)

        pagination.set_source(list(range(12)))

        assert pagination.current_page == 2
        assert pagination.items == [10, 11]

    def test_page_size_change_resets_page(self):
        pagination = ClientPagination(list(range(50)), page_size=10)
        pagination.go_to_page(4)

        pagination.change_page_size(20)

        assert pagination.current_page == 1
        assert pagination.items == list(range(20))

    def test_exposes_controller_surface(self):
        pagination = ClientPagination(list(range(100)), page_size=10)
        pagination.go_to_page(5)

        assert pagination.get_page_numbers() == [1, ELLIPSIS, 4, 5, 6, ELLIPSIS, 10]
        assert pagination.range == PageRange(start=41, end=50)
        assert pagination.can_go_prev
        pagination.prev_page()
        pagination.first_page()
        assert pagination.current_page == 1
        pagination.reset()
        assert pagination.page_size == 10

    def test_tuple_source(self):
        pagination = ClientPagination(tuple(range(5)), page_size=2)
        pagination.last_page()
        assert pagination.items == [4]
