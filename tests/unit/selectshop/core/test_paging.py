"""Unit tests for paging models."""

import pytest
from pydantic import ValidationError

from src.selectshop.core.models.paging import Page, PageRequest


class TestPageRequest:
    def test_defaults(self):
        request = PageRequest()

        assert request.page == 0
        assert request.size == 10
        assert request.sort_by == "id"
        assert request.ascending is True
        assert request.offset == 0

    def test_offset(self):
        assert PageRequest(page=3, size=20).offset == 60

    @pytest.mark.parametrize("page,size", [(-1, 10), (0, 0), (0, -5)])
    def test_rejects_invalid_window(self, page, size):
        with pytest.raises(ValidationError):
            PageRequest(page=page, size=size)


class TestPage:
    def test_total_pages(self):
        request = PageRequest(page=0, size=4)

        assert Page.of([], 0, request).total_pages == 0
        assert Page.of([1, 2, 3, 4], 4, request).total_pages == 1
        assert Page.of([1, 2, 3, 4], 9, request).total_pages == 3

    def test_first_and_last(self):
        first = Page.of([1, 2], 5, PageRequest(page=0, size=2))
        last = Page.of([5], 5, PageRequest(page=2, size=2))

        assert first.is_first and not first.is_last
        assert last.is_last and not last.is_first

    def test_map_keeps_metadata(self):
        page = Page.of([1, 2, 3], 7, PageRequest(page=1, size=3))

        mapped = page.map(str)

        assert mapped.items == ["1", "2", "3"]
        assert (mapped.total, mapped.page, mapped.size) == (7, 1, 3)

    def test_serializes_total_pages(self):
        dumped = Page.of(["a"], 3, PageRequest(size=2)).model_dump()

        assert dumped["total_pages"] == 2
        assert dumped["items"] == ["a"]
