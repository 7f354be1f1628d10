"""
Shared base for API resource models: camelCase on the wire, snake_case in Python, frozen.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class JulesModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @classmethod
    def from_dict(cls, data: dict[str, Any]):
        """Create from API response dict."""
        return cls.model_validate(data)

    def to_dict(self) -> dict[str, Any]:
        """Plain snake_case data, enums as their string values."""
        return self.model_dump(mode="json")

    def to_wire(self) -> dict[str, Any]:
        """camelCase data in the API's own shape, unset fields dropped."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class OpenEnum(str, Enum):
    """String enum that maps unrecognised server values to UNKNOWN instead of failing."""

    @classmethod
    def _missing_(cls, value: object) -> Any:
        return cls.__members__.get("UNKNOWN")

    @classmethod
    def parse(cls, value: Any) -> Any:
        if value is None or isinstance(value, cls):
            return value
        return cls(value)

    def __str__(self) -> str:
        return self.value


def probe_union(data: dict[str, Any], payloads: tuple[tuple[str, str, Any], ...], default: Any) -> Any:
    """Tag of the first payload that is present and non-null, by wire key or field name."""
    for wire_key, field_name, tag in payloads:
        if data.get(wire_key) is not None or data.get(field_name) is not None:
            return tag
    return default
