"""Source-control models — SCM descriptors and per-build checkout records.

An SCM descriptor is what a job is *configured* to build from. A checkout
record is what the host recorded after a build actually fetched a repository.
Both are read-only snapshots of host state.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class UserRemoteConfig(BaseModel):
    """A single remote configured on a git SCM descriptor."""

    model_config = ConfigDict(frozen=True)

    url: str | None = None


class GitSCM(BaseModel):
    """A git-backed SCM descriptor with one or more configured remotes."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["git"] = "git"
    user_remote_configs: list[UserRemoteConfig] = []

    @property
    def first_remote_url(self) -> str | None:
        """URL of the first configured remote.

        Later remotes are ignored: a descriptor listing several fetch URLs
        resolves to its first one only.
        """
        if not self.user_remote_configs:
            return None
        return self.user_remote_configs[0].url


class OtherSCM(BaseModel):
    """Any non-git SCM (Subversion, Mercurial, "none", ...)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["other"] = "other"


ScmDescriptor = Annotated[GitSCM | OtherSCM, Field(discriminator="kind")]


class Revision(BaseModel):
    """A revision the host built, identified by its commit SHA-1."""

    model_config = ConfigDict(frozen=True)

    sha1: str | None = None


class CheckoutRecord(BaseModel):
    """Host evidence that a repository was checked out during a build.

    A build carries one record per checkout, in attachment order. A
    multi-repository pipeline therefore has several.
    """

    model_config = ConfigDict(frozen=True)

    remote_urls: list[str] = []
    last_built_revision: Revision | None = None

    @property
    def first_remote_url(self) -> str | None:
        return self.remote_urls[0] if self.remote_urls else None

    @property
    def last_built_hash(self) -> str | None:
        if self.last_built_revision is None:
            return None
        return self.last_built_revision.sha1
