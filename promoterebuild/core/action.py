"""Host-facing build action carrying the rebuild provenance record.

The host attaches one ``PromoteRebuildCauseAction`` to a build when it is
marked promoted. ``display_name`` and ``url_name`` are fixed strings the
host uses to label and route the action; the action has no icon.
"""

from __future__ import annotations

from typing import Any, ClassVar

from promoterebuild.core.resolver import ProvenanceResolver
from promoterebuild.models.build import Build
from promoterebuild.models.provenance import ProvenanceRecord

DISPLAY_NAME = "PromoteRebuildAction"
URL_NAME = "promoteRebuildAction"


class PromoteRebuildCauseAction:
    """Rebuild annotation attached to a promoted build."""

    display_name: ClassVar[str] = DISPLAY_NAME
    url_name: ClassVar[str] = URL_NAME
    icon_file_name: ClassVar[str | None] = None

    def __init__(self, build: Build) -> None:
        self._cause = ProvenanceResolver(build).record

    @property
    def promote_rebuild_cause(self) -> ProvenanceRecord:
        return self._cause

    def exported(self) -> dict[str, Any]:
        """Metadata view published by the host for this action."""
        return {"promoteRebuildCause": self._cause.exported()}
