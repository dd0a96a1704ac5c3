"""Shared test fixtures for promoterebuild."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from promoterebuild.models.build import Build
from promoterebuild.models.jobs import (
    Branch,
    BranchJob,
    BranchJobProperty,
    InlineFlowDefinition,
    OtherJob,
    PipelineJob,
    ScmFlowDefinition,
)
from promoterebuild.models.scm import (
    CheckoutRecord,
    GitSCM,
    Revision,
    UserRemoteConfig,
)

_BASE_REMOTE = "https://x/repo.git"
_OTHER_REMOTE = "https://y/other.git"


@pytest.fixture
def base_remote() -> str:
    """The repository every SCM-backed job fixture is configured against."""
    return _BASE_REMOTE


@pytest.fixture
def other_remote() -> str:
    """A repository checked out during builds but never configured on a job."""
    return _OTHER_REMOTE


# ---------------------------------------------------------------------------
# SCM and checkout factories
# ---------------------------------------------------------------------------


@pytest.fixture
def make_git_scm() -> Callable[..., GitSCM]:
    """Factory fixture: a GitSCM with the given remote URLs, in order."""

    def _factory(*urls: str) -> GitSCM:
        return GitSCM(
            user_remote_configs=[UserRemoteConfig(url=url) for url in urls]
        )

    return _factory


@pytest.fixture
def make_checkout() -> Callable[..., CheckoutRecord]:
    """Factory fixture: a CheckoutRecord for *remote* built at *sha1*."""

    def _factory(
        remote: str | None = _BASE_REMOTE,
        sha1: str | None = "abc123",
        *,
        extra_remotes: tuple[str, ...] = (),
        with_revision: bool = True,
    ) -> CheckoutRecord:
        remotes = ([remote] if remote else []) + list(extra_remotes)
        revision = Revision(sha1=sha1) if with_revision else None
        return CheckoutRecord(remote_urls=remotes, last_built_revision=revision)

    return _factory


# ---------------------------------------------------------------------------
# Job shapes
# ---------------------------------------------------------------------------


@pytest.fixture
def branch_job(make_git_scm: Callable[..., GitSCM], base_remote: str) -> BranchJob:
    """A multi-branch branch job configured against ``base_remote``."""
    return BranchJob(
        full_name="mobile/app/main",
        url="job/mobile/job/app/job/main/",
        branch_property=BranchJobProperty(
            branch=Branch(scm=make_git_scm(base_remote)),
        ),
    )


@pytest.fixture
def scm_pipeline_job(make_git_scm: Callable[..., GitSCM], base_remote: str) -> PipelineJob:
    """A standalone pipeline whose script comes from ``base_remote``."""
    return PipelineJob(
        full_name="build-123",
        url="job/build-123/",
        definition=ScmFlowDefinition(scm=make_git_scm(base_remote)),
    )


@pytest.fixture
def inline_pipeline_job() -> PipelineJob:
    """A standalone pipeline with an embedded script."""
    return PipelineJob(full_name="build-123", definition=InlineFlowDefinition())


@pytest.fixture
def freestyle_job() -> OtherJob:
    return OtherJob(full_name="legacy-freestyle", url="job/legacy-freestyle/")


# ---------------------------------------------------------------------------
# Builds
# ---------------------------------------------------------------------------


@pytest.fixture
def make_build() -> Callable[..., Build]:
    """Factory fixture: build a Build, number 42 unless overridden."""

    def _factory(job: Any, checkouts: list[CheckoutRecord] | None = None, **overrides: Any) -> Build:
        defaults: dict[str, Any] = {
            "job": job,
            "number": 42,
            "checkouts": checkouts or [],
        }
        defaults.update(overrides)
        return Build(**defaults)

    return _factory


@pytest.fixture
def write_build(tmp_path: Path) -> Callable[[Build], Path]:
    """Factory fixture: write a Build as a JSON export and return its path."""

    def _factory(build: Build, name: str = "build.json") -> Path:
        path = tmp_path / name
        path.write_text(build.model_dump_json(), encoding="utf-8")
        return path

    return _factory
