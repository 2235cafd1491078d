"""Page arithmetic for the product list."""

import math
from dataclasses import dataclass


def total_pages(total_records: int, page_size: int) -> int:
    """Number of pages needed for ``total_records``; never less than 1."""
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    return max(1, math.ceil(total_records / page_size))


def parse_page(raw: str | None) -> int:
    """Read a ``page`` query value; anything that is not an integer means page 1."""
    if raw is None:
        return 1
    try:
        return int(raw.strip())
    except ValueError:
        return 1


def clamp_page(page: int, last_page: int) -> int:
    """Pull ``page`` into ``1..last_page``."""
    return max(1, min(page, max(1, last_page)))


def page_offset(page: int, page_size: int) -> int:
    """Rows to skip before ``page`` starts."""
    return (page - 1) * page_size


@dataclass(frozen=True)
class Pagination:
    """Position of one page within a listing."""

    current_page: int
    total_pages: int
    total_records: int
    page_size: int

    @classmethod
    def build(cls, requested_page: int, total_records: int, page_size: int) -> "Pagination":
        """Resolve a requested page number against the record count.

        Out-of-range requests are clamped rather than rejected, so a stale
        link past the last page still lands on the last page.
        """
        pages = total_pages(total_records, page_size)
        return cls(
            current_page=clamp_page(requested_page, pages),
            total_pages=pages,
            total_records=total_records,
            page_size=page_size,
        )

    @property
    def offset(self) -> int:
        return page_offset(self.current_page, self.page_size)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def previous_page(self) -> int | None:
        return self.current_page - 1 if self.has_previous else None

    @property
    def next_page(self) -> int | None:
        return self.current_page + 1 if self.has_next else None

    @property
    def page_numbers(self) -> range:
        return range(1, self.total_pages + 1)
