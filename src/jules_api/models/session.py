"""
Session models — one coding task from prompt through plan, work and completion.
"""

from typing import Any, Optional, Union

from pydantic import SerializationInfo, field_serializer, field_validator

from jules_api.models.base import JulesModel, OpenEnum
from jules_api.models.source import SourceContext


class SessionState(OpenEnum):
    STATE_UNSPECIFIED = "STATE_UNSPECIFIED"
    QUEUED = "QUEUED"
    PLANNING = "PLANNING"
    AWAITING_PLAN_APPROVAL = "AWAITING_PLAN_APPROVAL"
    AWAITING_USER_FEEDBACK = "AWAITING_USER_FEEDBACK"
    IN_PROGRESS = "IN_PROGRESS"
    PAUSED = "PAUSED"
    FAILED = "FAILED"
    COMPLETED = "COMPLETED"
    UNKNOWN = "UNKNOWN"


ACTIVE_STATES = frozenset({
    SessionState.QUEUED,
    SessionState.PLANNING,
    SessionState.AWAITING_PLAN_APPROVAL,
    SessionState.AWAITING_USER_FEEDBACK,
    SessionState.IN_PROGRESS,
})


class AutomationMode(OpenEnum):
    AUTOMATION_MODE_UNSPECIFIED = "AUTOMATION_MODE_UNSPECIFIED"
    AUTO_CREATE_PR = "AUTO_CREATE_PR"
    UNKNOWN = "UNKNOWN"


class PullRequest(JulesModel):
    url: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None


# Outputs are an open union: pull requests are typed, anything else stays a plain dict.
SessionOutput = Union[PullRequest, dict[str, Any]]


class Session(JulesModel):
    name: Optional[str] = None
    id: Optional[str] = None
    prompt: Optional[str] = None
    title: Optional[str] = None
    source_context: Optional[SourceContext] = None
    state: Optional[SessionState] = None
    url: Optional[str] = None
    outputs: list[Any] = []
    create_time: Optional[str] = None
    update_time: Optional[str] = None
    require_plan_approval: Optional[bool] = None
    automation_mode: Optional[AutomationMode] = None

    @field_validator("state", mode="before")
    @classmethod
    def _parse_state(cls, value: Any) -> Optional[SessionState]:
        return SessionState.parse(value)

    @field_validator("automation_mode", mode="before")
    @classmethod
    def _parse_automation_mode(cls, value: Any) -> Optional[AutomationMode]:
        return AutomationMode.parse(value)

    @field_validator("outputs", mode="before")
    @classmethod
    def _parse_outputs(cls, value: Any) -> list[SessionOutput]:
        outputs: list[SessionOutput] = []
        for output in value or []:
            if isinstance(output, PullRequest):
                outputs.append(output)
            elif isinstance(output, dict) and output.get("pullRequest") is not None:
                outputs.append(PullRequest.model_validate(output["pullRequest"]))
            elif isinstance(output, dict) and output.get("pull_request") is not None:
                outputs.append(PullRequest.model_validate(output["pull_request"]))
            else:
                outputs.append(output)
        return outputs

    @field_serializer("outputs")
    def _serialize_outputs(self, outputs: list[Any], info: SerializationInfo) -> list[Any]:
        key = "pullRequest" if info.by_alias else "pull_request"
        serialized = []
        for output in outputs:
            if isinstance(output, PullRequest):
                serialized.append({key: output.model_dump(
                    mode="json", by_alias=info.by_alias, exclude_none=info.exclude_none,
                )})
            else:
                serialized.append(output)
        return serialized

    @property
    def pull_requests(self) -> list[PullRequest]:
        return [o for o in self.outputs if isinstance(o, PullRequest)]

    @property
    def is_queued(self) -> bool:
        return self.state == SessionState.QUEUED

    @property
    def is_planning(self) -> bool:
        return self.state == SessionState.PLANNING

    @property
    def is_awaiting_plan_approval(self) -> bool:
        return self.state == SessionState.AWAITING_PLAN_APPROVAL

    @property
    def is_awaiting_user_feedback(self) -> bool:
        return self.state == SessionState.AWAITING_USER_FEEDBACK

    @property
    def is_in_progress(self) -> bool:
        return self.state == SessionState.IN_PROGRESS

    @property
    def is_paused(self) -> bool:
        return self.state == SessionState.PAUSED

    @property
    def is_failed(self) -> bool:
        return self.state == SessionState.FAILED

    @property
    def is_completed(self) -> bool:
        return self.state == SessionState.COMPLETED

    @property
    def is_active(self) -> bool:
        return self.state in ACTIVE_STATES
