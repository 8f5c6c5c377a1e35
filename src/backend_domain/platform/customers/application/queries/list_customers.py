"""List customers query."""

import math
from dataclasses import dataclass
from typing import List, Optional

from .....core.shared import guard
from .....core.specifications import Specification, eq
from ...core.entities import Customer
from ...core.protocols import CustomerRepository
from ...core.specifications import customers_by_status
from ...core.value_objects import CustomerStatus

MAX_PAGE_SIZE = 100


@dataclass
class ListCustomersQuery:
    status: Optional[CustomerStatus] = None
    page: int = 1
    page_size: int = 20


@dataclass
class CustomerPage:
    items: List[Customer]
    total: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.page_size) if self.total else 0

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


class ListCustomersQueryHandler:
    """Pages through non-deleted customers ordered by last name."""

    def __init__(self, repository: CustomerRepository):
        self._repository = repository

    async def execute(self, query: ListCustomersQuery) -> CustomerPage:
        guard.against(query.page < 1, "page must be at least 1", "page")
        guard.against(
            not 1 <= query.page_size <= MAX_PAGE_SIZE,
            f"page_size must be between 1 and {MAX_PAGE_SIZE}",
            "page_size",
        )

        if query.status is not None:
            specification = customers_by_status(query.status)
        else:
            specification = Specification().where(eq("meta.is_deleted", False))
        specification = (
            specification
            .add_order_by("last_name")
            .apply_paging((query.page - 1) * query.page_size, query.page_size)
        )

        items, total = await self._repository.get_paged(specification)
        return CustomerPage(items=items, total=total, page=query.page, page_size=query.page_size)
