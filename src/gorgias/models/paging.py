from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class PageMeta(BaseModel):
    model_config = ConfigDict(extra="allow")

    prev_cursor: Optional[str] = None
    next_cursor: Optional[str] = None


class Page(BaseModel, Generic[T]):
    """One page of a cursor-paginated list endpoint.

    The absence of ``meta.next_cursor`` is the only end-of-list signal; an
    empty ``data`` list with a cursor still has more pages behind it.
    """

    model_config = ConfigDict(extra="allow")

    data: List[T] = Field(default_factory=list)
    object: str = "list"
    uri: Optional[str] = None
    meta: PageMeta = Field(default_factory=PageMeta)

    @property
    def next_cursor(self) -> Optional[str]:
        return self.meta.next_cursor

    @property
    def has_more(self) -> bool:
        return bool(self.meta.next_cursor)
