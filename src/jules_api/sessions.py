"""
Sessions REST API — create, inspect, steer and delete coding sessions.

Every method taking `name_or_id` accepts a bare ID (`abc123`) or a full
resource name (`sessions/abc123`, `/sessions/abc123`).
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

from jules_api.models.session import AutomationMode, Session
from jules_api.models.source import SourceContext
from jules_api.pagination import Page, PageIterator, PaginatedResource, session_path

logger = logging.getLogger(__name__)


class SessionsAPI(PaginatedResource):
    def list(self, page_token: Optional[str] = None, page_size: Optional[int] = None) -> Page[Session]:
        """List one page of sessions."""
        return self._list_page("/sessions", "sessions", Session.from_dict, page_token, page_size)

    def find(self, name_or_id: str) -> Session:
        """Get a session."""
        return Session.from_dict(self._http.get(session_path(name_or_id)))

    def each(self, page_size: Optional[int] = None) -> PageIterator[Session]:
        """Iterate every session, fetching pages as they are consumed."""
        return PageIterator(lambda token: self.list(page_token=token, page_size=page_size))

    def all(self, page_size: Optional[int] = None) -> list[Session]:
        return list(self.each(page_size=page_size))

    def create(
        self,
        prompt: str,
        source_context: Union[SourceContext, dict[str, Any]],
        title: Optional[str] = None,
        require_plan_approval: Optional[bool] = None,
        automation_mode: Optional[Union[AutomationMode, str]] = None,
    ) -> Session:
        """
        Create a session.

        Args:
            prompt: Task for the agent
            source_context: Wire-shaped dict (see SourceContext.build) or a SourceContext
            title: Optional session title
            require_plan_approval: Wait for approve_plan() before working; False is sent explicitly
            automation_mode: e.g. AUTO_CREATE_PR

        Returns:
            The created Session
        """
        if isinstance(source_context, SourceContext):
            source_context = source_context.to_wire()

        body: dict[str, Any] = {"prompt": prompt, "sourceContext": source_context}
        if title:
            body["title"] = title
        if require_plan_approval is not None:
            body["requirePlanApproval"] = require_plan_approval
        if automation_mode:
            body["automationMode"] = str(automation_mode)

        session = Session.from_dict(self._http.post("/sessions", body))
        logger.info(f"Created session {session.name}")
        return session

    def approve_plan(self, name_or_id: str) -> Session:
        """Approve the plan the agent generated."""
        return Session.from_dict(self._http.post(f"{session_path(name_or_id)}:approvePlan", {}))

    def send_message(self, name_or_id: str, prompt: str) -> Session:
        """Send a follow-up message to the agent."""
        return Session.from_dict(self._http.post(f"{session_path(name_or_id)}:sendMessage", {"prompt": prompt}))

    def destroy(self, name_or_id: str) -> None:
        """Delete a session."""
        self._http.delete(session_path(name_or_id))
        logger.info(f"Deleted session {name_or_id}")
