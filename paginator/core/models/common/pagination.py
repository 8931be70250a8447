from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class PaginationMetadata(BaseModel):
    current_page_number: int = Field(..., ge=1, description="Requested page number")
    next_page_number: Optional[int] = Field(
        default=None, description="Next page number, if within bounds"
    )
    previous_page_number: Optional[int] = Field(
        default=None, description="Previous page number, if any"
    )
    num_pages: int = Field(..., ge=0, description="Number of full pages")

    class Config:
        frozen = True

    @property
    def has_next(self) -> bool:
        return self.next_page_number is not None

    @property
    def has_previous(self) -> bool:
        return self.previous_page_number is not None


class Page(BaseModel, Generic[T]):
    items: List[T]
    pagination: PaginationMetadata

    class Config:
        from_attributes = True
