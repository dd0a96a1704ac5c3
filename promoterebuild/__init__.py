"""promoterebuild: rebuild provenance for promoted CI builds.

Given a build handle, records which upstream build triggered the rebuild
and which commit of the job's base repository that build was made from.
"""

__version__ = "0.1.0"
__description__ = "Rebuild provenance records for promoted CI builds"

from promoterebuild.core.action import PromoteRebuildCauseAction
from promoterebuild.core.resolver import ProvenanceResolver, resolve_provenance
from promoterebuild.models.provenance import ProvenanceRecord

__all__ = [
    "PromoteRebuildCauseAction",
    "ProvenanceRecord",
    "ProvenanceResolver",
    "resolve_provenance",
    "__version__",
]
