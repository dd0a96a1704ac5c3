"""Base-repository locator — which repository a job is configured against.

Dispatches on the job's ``kind`` tag:

    multibranch -> branch job property -> branch -> SCM
    pipeline    -> script-from-SCM flow definition -> SCM
    other       -> nothing

Only the first applicable shape is consulted and only git descriptors
resolve. Every gap along the way (no property, no branch, inline script,
non-git SCM, no remotes) yields ``None`` rather than an error.
"""

from __future__ import annotations

import logging

from promoterebuild.models.jobs import JobConfiguration
from promoterebuild.models.scm import GitSCM, ScmDescriptor

logger = logging.getLogger(__name__)


def configured_scm(job: JobConfiguration) -> ScmDescriptor | None:
    """Return the SCM descriptor the job was defined against, if any."""
    match job.kind:
        case "multibranch":
            prop = job.branch_property
            if prop is None or prop.branch is None:
                logger.debug("Branch job %s has no branch property", job.full_name)
                return None
            return prop.branch.scm
        case "pipeline":
            definition = job.definition
            if definition is None or definition.kind != "cps-scm":
                logger.debug("Pipeline job %s has no SCM-backed script", job.full_name)
                return None
            return definition.scm
        case _:
            return None


def git_scm(job: JobConfiguration) -> GitSCM | None:
    """Return the job's configured SCM when it is git-backed."""
    scm = configured_scm(job)
    if scm is None or scm.kind != "git":
        return None
    return scm


def locate_base_repository(job: JobConfiguration) -> str | None:
    """Return the first configured remote URL of the job's git SCM."""
    scm = git_scm(job)
    if scm is None:
        logger.debug("No git SCM configured for %s", job.full_name)
        return None
    return scm.first_remote_url
