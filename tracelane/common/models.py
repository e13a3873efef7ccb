"""Models shared by every API area."""

from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class ApiModel(BaseModel):  # type:ignore[misc]
    """Base for response models: snake_case attributes, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class ListMetadata(ApiModel):
    """
    Pagination information attached to every list response.

    Attributes:
        page: Current page number.
        limit: Page size used by the server.
        total_items: Number of items across all pages.
        total_pages: Number of pages available.
    """

    page: int = 0
    limit: int = 0
    total_items: int = 0
    total_pages: int = 0


class PaginatedResponse(ApiModel, Generic[T]):
    """One page of a list response: ``{"meta": {...}, "data": [...]}``."""

    meta: ListMetadata = Field(default_factory=ListMetadata)
    data: List[T] = []
