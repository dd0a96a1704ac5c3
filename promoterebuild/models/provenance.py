"""Provenance record — the immutable rebuild annotation for one build."""

from __future__ import annotations

from typing import Any, Final, Literal

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

RELEASE_REASON: Final = "RELEASE"


class ProvenanceRecord(BaseModel):
    """Which upstream build and which commit produced a rebuild.

    Computed once when the build is marked promoted and never mutated.
    ``build_remote`` is the job's base repository URL and ``build_hash`` the
    commit last built from it; either may be absent.

    Field names are exported in camelCase (``upstreamProject``,
    ``buildHash``, ...) to match the host's metadata conventions.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    upstream_project: str
    upstream_build: int
    upstream_url: str | None = None
    build_remote: str | None = None
    build_hash: str | None = None
    reason: Literal["RELEASE"] = RELEASE_REASON

    @model_validator(mode="after")
    def check_hash_requires_remote(self) -> ProvenanceRecord:
        if self.build_hash is not None and self.build_remote is None:
            raise ValueError("build_hash cannot be set without build_remote")
        return self

    @property
    def is_resolved(self) -> bool:
        """Whether a commit was resolved for the base repository."""
        return self.build_hash is not None

    def exported(self) -> dict[str, Any]:
        """Queryable metadata view, keyed by the camelCase export names."""
        return self.model_dump(mode="json", by_alias=True)
