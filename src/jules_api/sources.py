"""
Sources REST API — repositories connected to the account.
"""

from __future__ import annotations

from typing import Optional

from jules_api.models.source import Source
from jules_api.pagination import Page, PageIterator, PaginatedResource, normalize_path


class SourcesAPI(PaginatedResource):
    def list(self, page_token: Optional[str] = None, page_size: Optional[int] = None) -> Page[Source]:
        """List one page of sources."""
        return self._list_page("/sources", "sources", Source.from_dict, page_token, page_size)

    def find(self, name: str) -> Source:
        """Get a source by resource name, e.g. sources/github/owner/repo."""
        result = self._http.get(normalize_path(name, "Source"))
        return Source.from_dict(result)

    def each(self, page_size: Optional[int] = None) -> PageIterator[Source]:
        """Iterate every source, fetching pages as they are consumed."""
        return PageIterator(lambda token: self.list(page_token=token, page_size=page_size))

    def all(self, page_size: Optional[int] = None) -> list[Source]:
        return list(self.each(page_size=page_size))
