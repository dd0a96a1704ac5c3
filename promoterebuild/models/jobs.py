"""Job configuration shapes — a tagged variant keyed on ``kind``.

Three shapes matter when locating a job's base repository:

- ``multibranch`` — a branch job inside a multi-branch container; its SCM
  lives on the branch job property.
- ``pipeline``    — a standalone pipeline job; its SCM (if any) lives on a
  script-from-SCM flow definition.
- ``other``       — anything else (freestyle, matrix, folders, ...).

Each shape carries only what the locator reads.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from promoterebuild.models.scm import ScmDescriptor


class Branch(BaseModel):
    """A branch discovered by a multi-branch container."""

    model_config = ConfigDict(frozen=True)

    scm: ScmDescriptor | None = None


class BranchJobProperty(BaseModel):
    """Property the multi-branch container attaches to each branch job."""

    model_config = ConfigDict(frozen=True)

    branch: Branch | None = None


class ScmFlowDefinition(BaseModel):
    """Pipeline script fetched from a repository at run time."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["cps-scm"] = "cps-scm"
    scm: ScmDescriptor | None = None


class InlineFlowDefinition(BaseModel):
    """Pipeline script embedded directly in the job configuration."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["cps-inline"] = "cps-inline"


FlowDefinition = Annotated[
    ScmFlowDefinition | InlineFlowDefinition, Field(discriminator="kind")
]


class JobBase(BaseModel):
    """Fields shared by every job shape."""

    model_config = ConfigDict(frozen=True)

    full_name: str  # e.g. "mobile/app/main"
    url: str | None = None  # job URL, reported as the upstream URL


class BranchJob(JobBase):
    """A branch job whose parent is a multi-branch container."""

    kind: Literal["multibranch"] = "multibranch"
    branch_property: BranchJobProperty | None = None


class PipelineJob(JobBase):
    """A standalone pipeline job."""

    kind: Literal["pipeline"] = "pipeline"
    definition: FlowDefinition | None = None


class OtherJob(JobBase):
    """A job with no resolvable base repository."""

    kind: Literal["other"] = "other"


JobConfiguration = Annotated[
    BranchJob | PipelineJob | OtherJob, Field(discriminator="kind")
]
