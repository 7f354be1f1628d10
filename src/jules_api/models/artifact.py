"""
Artifacts attached to activities — exactly one of changeSet, media or bashOutput.
"""

from typing import Any, Optional

from pydantic import model_validator

from jules_api.models.base import JulesModel, OpenEnum, probe_union


class ArtifactType(OpenEnum):
    CHANGE_SET = "change_set"
    MEDIA = "media"
    BASH_OUTPUT = "bash_output"
    UNKNOWN = "unknown"


class GitPatch(JulesModel):
    unidiff_patch: Optional[str] = None
    base_commit_id: Optional[str] = None
    suggested_commit_message: Optional[str] = None


class ChangeSet(JulesModel):
    source: Optional[str] = None
    git_patch: Optional[GitPatch] = None


class Media(JulesModel):
    data: Optional[str] = None
    mime_type: Optional[str] = None


class BashOutput(JulesModel):
    command: Optional[str] = None
    output: Optional[str] = None
    exit_code: Optional[int] = None


# Probe order decides the type when more than one payload is present.
ARTIFACT_PAYLOADS = (
    ("changeSet", "change_set", ArtifactType.CHANGE_SET),
    ("media", "media", ArtifactType.MEDIA),
    ("bashOutput", "bash_output", ArtifactType.BASH_OUTPUT),
)


class Artifact(JulesModel):
    type: ArtifactType = ArtifactType.UNKNOWN
    change_set: Optional[ChangeSet] = None
    media: Optional[Media] = None
    bash_output: Optional[BashOutput] = None

    @model_validator(mode="before")
    @classmethod
    def _discriminate(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        return {**data, "type": probe_union(data, ARTIFACT_PAYLOADS, ArtifactType.UNKNOWN)}

    def to_wire(self) -> dict[str, Any]:
        # type is derived from the payload keys; the API never sends it.
        return self.model_dump(mode="json", by_alias=True, exclude_none=True, exclude={"type"})

    @property
    def source(self) -> Optional[str]:
        return self.change_set.source if self.change_set else None

    @property
    def git_patch(self) -> Optional[GitPatch]:
        return self.change_set.git_patch if self.change_set else None

    @property
    def unidiff_patch(self) -> Optional[str]:
        return self.git_patch.unidiff_patch if self.git_patch else None

    @property
    def base_commit_id(self) -> Optional[str]:
        return self.git_patch.base_commit_id if self.git_patch else None

    @property
    def suggested_commit_message(self) -> Optional[str]:
        return self.git_patch.suggested_commit_message if self.git_patch else None

    @property
    def media_data(self) -> Optional[str]:
        return self.media.data if self.media else None

    @property
    def media_mime_type(self) -> Optional[str]:
        return self.media.mime_type if self.media else None

    @property
    def bash_command(self) -> Optional[str]:
        return self.bash_output.command if self.bash_output else None

    @property
    def bash_output_text(self) -> Optional[str]:
        return self.bash_output.output if self.bash_output else None

    @property
    def bash_exit_code(self) -> Optional[int]:
        return self.bash_output.exit_code if self.bash_output else None
