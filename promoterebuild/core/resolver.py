"""Rebuild provenance resolver.

Runs the locator and then the matcher against one build handle and
assembles the immutable :class:`ProvenanceRecord`. Nothing here raises for
missing data: an unresolvable field is simply ``None`` on the record.
"""

from __future__ import annotations

import logging

from promoterebuild.core.locator import locate_base_repository
from promoterebuild.core.matcher import match_commit
from promoterebuild.models.build import Build
from promoterebuild.models.provenance import RELEASE_REASON, ProvenanceRecord

logger = logging.getLogger(__name__)


def resolve_provenance(build: Build) -> ProvenanceRecord:
    """Compute the provenance record for *build*.

    Pure: reads the build handle only, and the same build always yields an
    equal record.
    """
    cause = build.upstream_cause()
    build_remote = locate_base_repository(build.job)
    build_hash = match_commit(build.checkouts, build_remote)

    record = ProvenanceRecord(
        upstream_project=cause.upstream_project,
        upstream_build=cause.upstream_build,
        upstream_url=cause.upstream_url,
        build_remote=build_remote,
        build_hash=build_hash,
        reason=RELEASE_REASON,
    )
    logger.debug(
        "Provenance for %s: remote=%s hash=%s",
        build.full_display_name, build_remote, build_hash,
    )
    return record


class ProvenanceResolver:
    """Resolves a build's provenance once, at construction.

    Parameters
    ----------
    build:
        The build handle to annotate. It is read, never modified.
    """

    def __init__(self, build: Build) -> None:
        self._record = resolve_provenance(build)

    @property
    def record(self) -> ProvenanceRecord:
        return self._record

    @property
    def upstream_project(self) -> str:
        return self._record.upstream_project

    @property
    def upstream_build(self) -> int:
        return self._record.upstream_build

    @property
    def upstream_url(self) -> str | None:
        return self._record.upstream_url

    @property
    def build_remote(self) -> str | None:
        return self._record.build_remote

    @property
    def build_hash(self) -> str | None:
        return self._record.build_hash

    @property
    def reason(self) -> str:
        return self._record.reason
