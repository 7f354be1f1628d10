"""
Activities REST API — the event stream of a session.
"""

from __future__ import annotations

from typing import Optional

from jules_api.models.activity import Activity
from jules_api.pagination import Page, PageIterator, PaginatedResource, normalize_path, session_path


class ActivitiesAPI(PaginatedResource):
    def list(
        self, session: str, page_token: Optional[str] = None, page_size: Optional[int] = None,
    ) -> Page[Activity]:
        """List one page of a session's activities."""
        path = f"{session_path(session)}/activities"
        return self._list_page(path, "activities", Activity.from_dict, page_token, page_size)

    def find(self, name: str) -> Activity:
        """Get an activity by its full name, e.g. sessions/123/activities/abc."""
        return Activity.from_dict(self._http.get(normalize_path(name, "Activity")))

    def each(self, session: str, page_size: Optional[int] = None) -> PageIterator[Activity]:
        """Iterate a session's activities in server order, fetching pages as they are consumed."""
        return PageIterator(lambda token: self.list(session, page_token=token, page_size=page_size))

    def all(self, session: str, page_size: Optional[int] = None) -> list[Activity]:
        return list(self.each(session, page_size=page_size))

    def latest(self, session: str) -> Optional[Activity]:
        """Most recent activity of a session, or None when it has none yet."""
        latest = None
        for activity in self.each(session):
            latest = activity
        return latest
