# 📄 File: authuser/shared/core/pagination.py
# 🧭 Purpose (Layman Explanation):
# Describes how long lists (of users or courses) are cut into pages, and what a page
# looks like when it is sent back to a client or received from another service.
# 🧪 Purpose (Technical Summary):
# Generic page envelope and page request value objects shared by the user listing
# endpoint and the course service client.
# 🔗 Dependencies:
# pydantic (generic models, camelCase aliases)
# 🔄 Connected Modules / Calls From:
# User repository, user service, users API, course client

import math
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")

MAX_PAGE_SIZE = 100
SORT_DIRECTIONS = ("asc", "desc")


class CamelModel(BaseModel):
    """Base model serializing to camelCase while accepting snake_case input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class PageRequest(BaseModel):
    """
    Page index, page size and sort order for a paginated query.

    ``sort`` follows the ``"<field>,<direction>"`` convention,
    e.g. ``"userId,asc"`` or ``"creationDate,desc"``.
    """

    page: int = Field(default=0, ge=0)
    size: int = Field(default=10, ge=1, le=MAX_PAGE_SIZE)
    sort: str = Field(default="userId,asc")

    @field_validator("sort")
    @classmethod
    def validate_sort(cls, v: str) -> str:
        field_name, _, direction = v.partition(",")
        field_name = field_name.strip()
        direction = (direction.strip() or "asc").lower()
        if not field_name:
            raise ValueError("Sort field is required")
        if direction not in SORT_DIRECTIONS:
            raise ValueError(f"Sort direction must be one of {SORT_DIRECTIONS}")
        return f"{field_name},{direction}"

    @property
    def sort_field(self) -> str:
        return self.sort.split(",", 1)[0]

    @property
    def sort_direction(self) -> str:
        return self.sort.split(",", 1)[1]

    @property
    def offset(self) -> int:
        return self.page * self.size


class Page(CamelModel, Generic[T]):
    """Paginated response envelope (content list plus page metadata)."""

    content: List[T] = Field(default_factory=list)
    total_elements: int = 0
    total_pages: int = 0
    number: int = 0
    size: int = 0
    number_of_elements: int = 0
    first: bool = True
    last: bool = True
    empty: bool = True

    @classmethod
    def of(cls, content: List[T], total_elements: int, page_request: PageRequest) -> "Page[T]":
        """Build a page from a content slice and the total row count."""
        total_pages = math.ceil(total_elements / page_request.size) if total_elements else 0
        return cls(
            content=content,
            total_elements=total_elements,
            total_pages=total_pages,
            number=page_request.page,
            size=page_request.size,
            number_of_elements=len(content),
            first=page_request.page == 0,
            last=page_request.page >= total_pages - 1,
            empty=not content,
        )

    @classmethod
    def empty_page(cls, page_request: Optional[PageRequest] = None) -> "Page[T]":
        """A page with zero elements."""
        page_request = page_request or PageRequest()
        return cls.of([], 0, page_request)
