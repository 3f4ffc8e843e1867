"""Pagination request and page result models."""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Generic, TypeVar

from pydantic import BaseModel, Field, computed_field

T = TypeVar("T")
U = TypeVar("U")


class PageRequest(BaseModel):
    """Zero-based page window with a single sort key."""

    page: int = Field(default=0, ge=0, description="Zero-based page index")
    size: int = Field(default=10, ge=1, description="Items per page")
    sort_by: str = Field(default="id", description="Field to sort by")
    ascending: bool = Field(default=True, description="Sort direction")

    @property
    def offset(self) -> int:
        return self.page * self.size


class Page(BaseModel, Generic[T]):
    """One page of results plus the metadata needed to navigate the rest."""

    items: list[T] = Field(default_factory=list)
    total: int = Field(default=0, ge=0, description="Total matching items")
    page: int = Field(default=0, ge=0)
    size: int = Field(default=10, ge=1)

    @computed_field
    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.size) if self.total else 0

    @property
    def is_first(self) -> bool:
        return self.page == 0

    @property
    def is_last(self) -> bool:
        return self.page + 1 >= self.total_pages

    @classmethod
    def of(cls, items: list[T], total: int, request: PageRequest) -> Page[T]:
        return cls(items=items, total=total, page=request.page, size=request.size)

    def map(self, fn: Callable[[T], U]) -> Page[U]:
        """Return a page with the same metadata and ``fn`` applied to each item."""
        return Page(
            items=[fn(item) for item in self.items],
            total=self.total,
            page=self.page,
            size=self.size,
        )
