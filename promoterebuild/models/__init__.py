"""promoterebuild data models — all Pydantic v2, all frozen (immutable)."""

from promoterebuild.models.build import Build, UpstreamCause
from promoterebuild.models.jobs import (
    Branch,
    BranchJob,
    BranchJobProperty,
    FlowDefinition,
    InlineFlowDefinition,
    JobConfiguration,
    OtherJob,
    PipelineJob,
    ScmFlowDefinition,
)
from promoterebuild.models.provenance import RELEASE_REASON, ProvenanceRecord
from promoterebuild.models.scm import (
    CheckoutRecord,
    GitSCM,
    OtherSCM,
    Revision,
    ScmDescriptor,
    UserRemoteConfig,
)

__all__ = [
    # scm
    "UserRemoteConfig",
    "GitSCM",
    "OtherSCM",
    "ScmDescriptor",
    "Revision",
    "CheckoutRecord",
    # jobs
    "Branch",
    "BranchJobProperty",
    "ScmFlowDefinition",
    "InlineFlowDefinition",
    "FlowDefinition",
    "BranchJob",
    "PipelineJob",
    "OtherJob",
    "JobConfiguration",
    # build
    "Build",
    "UpstreamCause",
    # provenance
    "RELEASE_REASON",
    "ProvenanceRecord",
]
