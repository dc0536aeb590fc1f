"""Cursor pagination helpers shared by the list endpoints."""

from typing import (
    AsyncIterator,
    Awaitable,
    Callable,
    Iterator,
    List,
    Optional,
    TypeVar,
)

from ..models.errors import NetworkError
from ..models.paging import Page
from ._cancellation import CancellationToken
from .constants import DEFAULT_PAGE_SIZE

T = TypeVar("T")


def _check_cancelled(cancel_token: Optional[CancellationToken]) -> None:
    if cancel_token is not None and cancel_token.cancelled:
        raise NetworkError("Pagination cancelled")


def paginate(
    fetch_page: Callable[[Optional[str], int], Page[T]],
    page_size: int = DEFAULT_PAGE_SIZE,
    cancel_token: Optional[CancellationToken] = None,
) -> Iterator[T]:
    """Lazily iterate over every item of a cursor-paginated endpoint.

    Pages are fetched on demand, one at a time, starting without a cursor and
    following ``meta.next_cursor`` until a page comes back without one.

    Args:
        fetch_page: Called as ``fetch_page(cursor, page_size)``.
        page_size: Number of items requested per page.
        cancel_token: Checked before every page fetch.

    Yields:
        The items of each page, in order.

    Raises:
        NetworkError: If ``cancel_token`` is cancelled before a page fetch.
    """
    cursor: Optional[str] = None

    while True:
        _check_cancelled(cancel_token)

        page = fetch_page(cursor, page_size)
        yield from page.data

        cursor = page.meta.next_cursor
        if not cursor:
            break


async def paginate_async(
    fetch_page: Callable[[Optional[str], int], Awaitable[Page[T]]],
    page_size: int = DEFAULT_PAGE_SIZE,
    cancel_token: Optional[CancellationToken] = None,
) -> AsyncIterator[T]:
    """Async version of :func:`paginate`."""
    cursor: Optional[str] = None

    while True:
        _check_cancelled(cancel_token)

        page = await fetch_page(cursor, page_size)
        for item in page.data:
            yield item

        cursor = page.meta.next_cursor
        if not cursor:
            break


def collect_all(
    fetch_page: Callable[[Optional[str], int], Page[T]],
    page_size: int = DEFAULT_PAGE_SIZE,
    cancel_token: Optional[CancellationToken] = None,
) -> List[T]:
    """Load every item into memory.

    Not suitable for unbounded result sets; iterate with :func:`paginate`
    instead.
    """
    return list(paginate(fetch_page, page_size, cancel_token))


async def collect_all_async(
    fetch_page: Callable[[Optional[str], int], Awaitable[Page[T]]],
    page_size: int = DEFAULT_PAGE_SIZE,
    cancel_token: Optional[CancellationToken] = None,
) -> List[T]:
    """Async version of :func:`collect_all`."""
    return [item async for item in paginate_async(fetch_page, page_size, cancel_token)]
