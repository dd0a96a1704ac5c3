"""Build handle and upstream cause models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from promoterebuild.models.jobs import JobConfiguration
from promoterebuild.models.scm import CheckoutRecord


class UpstreamCause(BaseModel):
    """The host's standard upstream-trigger metadata for a build.

    The promoted build becomes the upstream of the rebuild, so these are
    its job's name and URL plus its own number.
    """

    model_config = ConfigDict(frozen=True)

    upstream_project: str
    upstream_build: int
    upstream_url: str | None = None

    @classmethod
    def from_build(cls, build: Build) -> UpstreamCause:
        """Copy the three upstream scalars from *build* verbatim."""
        return cls(
            upstream_project=build.job.full_name,
            upstream_build=build.number,
            upstream_url=build.job.url,
        )


class Build(BaseModel):
    """Read-only handle on a completed or in-progress build.

    ``checkouts`` is kept in attachment order; resolution depends on it.
    """

    model_config = ConfigDict(frozen=True)

    job: JobConfiguration
    number: int
    checkouts: list[CheckoutRecord] = []

    @property
    def full_display_name(self) -> str:
        return f"{self.job.full_name} #{self.number}"

    def upstream_cause(self) -> UpstreamCause:
        return UpstreamCause.from_build(self)
