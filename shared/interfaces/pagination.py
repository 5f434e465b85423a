"""
Pagination helpers for in-memory lists.
"""
from dataclasses import dataclass
from typing import Generic, List, Sequence, TypeVar

from django.core.paginator import Paginator

T = TypeVar('T')


@dataclass
class PageResult(Generic[T]):
    """One page of results."""
    items: List[T]
    page: int
    page_size: int
    num_pages: int
    total: int

    @property
    def has_next(self) -> bool:
        return self.page < self.num_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1


class StandardPagination:
    """Product grid pagination."""
    page_size = 12
    max_page_size = 100

    def paginate(self, items: Sequence[T], page: int = 1, page_size: int = None) -> PageResult[T]:
        size = min(page_size or self.page_size, self.max_page_size)
        paginator = Paginator(items, size, allow_empty_first_page=True)
        current = paginator.get_page(page)
        return PageResult(
            items=list(current.object_list),
            page=current.number,
            page_size=size,
            num_pages=paginator.num_pages,
            total=paginator.count,
        )
