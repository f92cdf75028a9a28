"""Tests for catalogue page-bounds computation."""

import pytest
from storefront.catalogue.pagination import last_page_for, paginate


class TestPageClamping:
    def test_twelve_items_page_ten(self):
        page = paginate(total=12, requested=10, page_size=2)
        assert page.number == 6
        assert page.last_page == 6
        assert page.offset == 10
        assert page.has_next_page is False
        assert page.has_previous_page is True
        assert page.previous_page == 5

    def test_first_page(self):
        page = paginate(total=12, requested=1, page_size=2)
        assert page.number == 1
        assert page.offset == 0
        assert page.has_next_page is True
        assert page.has_previous_page is False
        assert page.next_page == 2

    def test_empty_catalogue_serves_page_one(self):
        page = paginate(total=0, requested=5, page_size=2)
        assert page.number == 1
        assert page.last_page == 1
        assert page.offset == 0
        assert page.has_next_page is False
        assert page.has_previous_page is False

    @pytest.mark.parametrize("requested", [0, -3, None, "", "abc", "NaN", "-Infinity", True])
    def test_unusable_or_low_input_means_page_one(self, requested):
        assert paginate(total=12, requested=requested, page_size=2).number == 1

    @pytest.mark.parametrize("requested,expected", [("2.7", 2), (2.7, 2), ("3", 3), (" 4 ", 4), ("1e1", 6)])
    def test_fractions_are_floored_then_clamped(self, requested, expected):
        assert paginate(total=12, requested=requested, page_size=2).number == expected

    @pytest.mark.parametrize("requested", ["1e999999999", "9" * 40, "1E+400000000"])
    def test_huge_finite_input_means_last_page(self, requested):
        assert paginate(total=12, requested=requested, page_size=2).number == 6

    def test_tiny_positive_exponent_means_page_one(self):
        assert paginate(total=12, requested="1e-999999999", page_size=2).number == 1

    def test_positive_infinity_means_last_page(self):
        assert paginate(total=12, requested="Infinity", page_size=2).number == 6
        assert paginate(total=12, requested=float("inf"), page_size=2).number == 6

    def test_partial_last_page(self):
        page = paginate(total=5, requested=3, page_size=2)
        assert page.last_page == 3
        assert page.offset == 4
        assert page.has_next_page is False

    def test_invalid_bounds_are_rejected(self):
        with pytest.raises(ValueError):
            paginate(total=-1, requested=1, page_size=2)
        with pytest.raises(ValueError):
            paginate(total=3, requested=1, page_size=0)


@pytest.mark.parametrize("total", [0, 1, 2, 3, 7, 12, 13])
@pytest.mark.parametrize("requested", [-1, 0, 1, 2, 4, 7, 100, "1e999999999", "-1e999999999", "2.5"])
@pytest.mark.parametrize("size", [1, 2, 5])
def test_page_always_within_bounds(total, requested, size):
    page = paginate(total=total, requested=requested, page_size=size)
    assert 1 <= page.number <= page.last_page
    assert page.last_page == last_page_for(total, size)
    assert page.has_next_page == (page.number * size < total)
    assert page.has_previous_page == (page.number > 1)
    assert page.offset == (page.number - 1) * size


def test_last_page_for():
    assert last_page_for(0, 2) == 1
    assert last_page_for(1, 2) == 1
    assert last_page_for(12, 2) == 6
    assert last_page_for(13, 2) == 7
