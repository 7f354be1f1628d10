from typing import Any, Optional

from pydantic import field_validator

from jules_api.models.base import JulesModel


class PlanStep(JulesModel):
    id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    index: Optional[int] = None


class Plan(JulesModel):
    """Ordered steps the agent proposes before it starts working."""

    id: Optional[str] = None
    steps: list[PlanStep] = []
    create_time: Optional[str] = None

    @field_validator("steps", mode="before")
    @classmethod
    def _default_steps(cls, value: Any) -> Any:
        return value or []
