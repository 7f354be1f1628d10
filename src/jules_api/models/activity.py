"""
Activity models — one event in a session's timeline.

Each activity carries exactly one payload (agentMessaged, userMessaged,
planGenerated, planApproved, progressUpdated, sessionCompleted or
sessionFailed). Its type is fixed when the activity is parsed, by taking the
first non-null payload in that order.
"""

from typing import Any, Optional

from pydantic import ConfigDict, field_validator, model_validator

from jules_api.models.artifact import Artifact
from jules_api.models.base import JulesModel, OpenEnum, probe_union
from jules_api.models.plan import Plan


class ActivityType(OpenEnum):
    AGENT_MESSAGED = "agent_messaged"
    USER_MESSAGED = "user_messaged"
    PLAN_GENERATED = "plan_generated"
    PLAN_APPROVED = "plan_approved"
    PROGRESS_UPDATED = "progress_updated"
    SESSION_COMPLETED = "session_completed"
    SESSION_FAILED = "session_failed"
    UNKNOWN = "unknown"


class Originator(OpenEnum):
    USER = "user"
    AGENT = "agent"
    SYSTEM = "system"
    UNKNOWN = "unknown"


class AgentMessaged(JulesModel):
    agent_message: Optional[str] = None


class UserMessaged(JulesModel):
    user_message: Optional[str] = None


class PlanGenerated(JulesModel):
    plan: Optional[Plan] = None


class PlanApproved(JulesModel):
    plan_id: Optional[str] = None


class ProgressUpdated(JulesModel):
    title: Optional[str] = None
    description: Optional[str] = None


class SessionCompleted(JulesModel):
    # Empty on the wire today; keep whatever the server adds.
    model_config = ConfigDict(extra="allow")


class SessionFailed(JulesModel):
    reason: Optional[str] = None


ACTIVITY_PAYLOADS = (
    ("agentMessaged", "agent_messaged", ActivityType.AGENT_MESSAGED),
    ("userMessaged", "user_messaged", ActivityType.USER_MESSAGED),
    ("planGenerated", "plan_generated", ActivityType.PLAN_GENERATED),
    ("planApproved", "plan_approved", ActivityType.PLAN_APPROVED),
    ("progressUpdated", "progress_updated", ActivityType.PROGRESS_UPDATED),
    ("sessionCompleted", "session_completed", ActivityType.SESSION_COMPLETED),
    ("sessionFailed", "session_failed", ActivityType.SESSION_FAILED),
)


class Activity(JulesModel):
    name: Optional[str] = None
    id: Optional[str] = None
    description: Optional[str] = None
    create_time: Optional[str] = None
    originator: Optional[Originator] = None
    type: ActivityType = ActivityType.UNKNOWN
    artifacts: list[Artifact] = []

    agent_messaged: Optional[AgentMessaged] = None
    user_messaged: Optional[UserMessaged] = None
    plan_generated: Optional[PlanGenerated] = None
    plan_approved: Optional[PlanApproved] = None
    progress_updated: Optional[ProgressUpdated] = None
    session_completed: Optional[SessionCompleted] = None
    session_failed: Optional[SessionFailed] = None

    @model_validator(mode="before")
    @classmethod
    def _discriminate(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        return {**data, "type": probe_union(data, ACTIVITY_PAYLOADS, ActivityType.UNKNOWN)}

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(
            mode="json",
            by_alias=True,
            exclude_none=True,
            exclude={"type": True, "artifacts": {"__all__": {"type"}}},
        )

    @field_validator("originator", mode="before")
    @classmethod
    def _parse_originator(cls, value: Any) -> Optional[Originator]:
        return Originator.parse(value)

    @field_validator("artifacts", mode="before")
    @classmethod
    def _default_artifacts(cls, value: Any) -> Any:
        return value or []

    @property
    def is_agent_message(self) -> bool:
        return self.type == ActivityType.AGENT_MESSAGED

    @property
    def is_user_message(self) -> bool:
        return self.type == ActivityType.USER_MESSAGED

    @property
    def is_plan_generated(self) -> bool:
        return self.type == ActivityType.PLAN_GENERATED

    @property
    def is_plan_approved(self) -> bool:
        return self.type == ActivityType.PLAN_APPROVED

    @property
    def is_progress_update(self) -> bool:
        return self.type == ActivityType.PROGRESS_UPDATED

    @property
    def is_session_completed(self) -> bool:
        return self.type == ActivityType.SESSION_COMPLETED

    @property
    def is_session_failed(self) -> bool:
        return self.type == ActivityType.SESSION_FAILED

    @property
    def from_agent(self) -> bool:
        return self.originator == Originator.AGENT

    @property
    def from_user(self) -> bool:
        return self.originator == Originator.USER

    @property
    def from_system(self) -> bool:
        return self.originator == Originator.SYSTEM

    @property
    def message(self) -> Optional[str]:
        if self.agent_messaged and self.agent_messaged.agent_message:
            return self.agent_messaged.agent_message
        if self.user_messaged:
            return self.user_messaged.user_message
        return None

    @property
    def plan(self) -> Optional[Plan]:
        return self.plan_generated.plan if self.plan_generated else None

    @property
    def approved_plan_id(self) -> Optional[str]:
        return self.plan_approved.plan_id if self.plan_approved else None

    @property
    def progress_title(self) -> Optional[str]:
        return self.progress_updated.title if self.progress_updated else None

    @property
    def progress_description(self) -> Optional[str]:
        return self.progress_updated.description if self.progress_updated else None

    @property
    def failure_reason(self) -> Optional[str]:
        return self.session_failed.reason if self.session_failed else None
