"""
Cursor pagination — single pages and a lazy iterator across them.
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

from jules_api.transport.http import HttpClient

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a list response plus the server's cursor for the next one."""

    items: list[T] = field(default_factory=list)
    next_page_token: Optional[str] = None

    @property
    def has_more(self) -> bool:
        return bool(self.next_page_token)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


class PageIterator(Generic[T]):
    """
    Pull-based iterator over every item of a paginated list.

    Only the current page is held in memory. The next page is requested when
    the current one is used up, so stopping early saves the remaining requests.
    Iteration ends when the server returns an empty or missing cursor.
    """

    def __init__(self, fetch_page: Callable[[Optional[str]], Page[T]]):
        self._fetch_page = fetch_page
        self._items: list[T] = []
        self._position = 0
        self._next_token: Optional[str] = None
        self._exhausted = False
        self.pages_fetched = 0

    def __iter__(self) -> "PageIterator[T]":
        return self

    def __next__(self) -> T:
        while self._position >= len(self._items):
            if self._exhausted:
                raise StopIteration
            page = self._fetch_page(self._next_token)
            self.pages_fetched += 1
            self._items = page.items
            self._position = 0
            self._next_token = page.next_page_token
            if not self._next_token:
                self._exhausted = True

        item = self._items[self._position]
        self._position += 1
        return item


class PaginatedResource:
    """Shared list/each plumbing for the Sources, Sessions and Activities APIs."""

    def __init__(self, http: HttpClient):
        self._http = http

    def _list_page(
        self,
        path: str,
        collection: str,
        parser: Callable[[dict[str, Any]], T],
        page_token: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> Page[T]:
        result = self._http.get(path, {"pageToken": page_token, "pageSize": page_size})
        return Page(
            items=[parser(item) for item in result.get(collection) or []],
            next_page_token=result.get("nextPageToken"),
        )


def normalize_path(name: Optional[str], kind: str) -> str:
    """Resource name with exactly one leading slash; blank names are rejected before any request."""
    if name is None or not str(name).strip():
        raise ValueError(f"{kind} name is required")
    return "/" + str(name).lstrip("/")


def session_path(name_or_id: Optional[str]) -> str:
    """`abc`, `sessions/abc` and `/sessions/abc` all become `/sessions/abc`."""
    if name_or_id is None or not str(name_or_id).strip():
        raise ValueError("Session name or ID is required")
    if name_or_id.startswith("/sessions/"):
        return name_or_id
    if name_or_id.startswith("sessions/"):
        return f"/{name_or_id}"
    return f"/sessions/{name_or_id}"
