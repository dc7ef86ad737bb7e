"""Paginated list models."""
from typing import List

from pydantic import Field

from .base import ManagementModel
from .client import Client


class ListMeta(ManagementModel):
    """Pagination metadata returned alongside list payloads."""

    start: int = Field(0, description="Offset of the first item in this page")
    limit: int = Field(0, description="Requested page size")
    length: int = Field(0, description="Number of items in this page")
    total: int = Field(0, description="Total number of items, with include_totals")
    next: str = Field("", description="Checkpoint cursor for the next page")

    def has_next(self) -> bool:
        """Whether another page can be requested."""
        if self.next:
            return True
        return self.total > self.start + self.limit


class ClientList(ListMeta):
    clients: List[Client] = Field(default_factory=list)
