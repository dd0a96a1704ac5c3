"""Commit matcher — maps the base repository to the commit actually built."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from promoterebuild.models.scm import CheckoutRecord

logger = logging.getLogger(__name__)


def collect_commit_hashes(checkouts: Iterable[CheckoutRecord]) -> dict[str, str]:
    """Build a ``remote URL -> last built commit`` map from checkout records.

    Records are visited in attachment order. Each contributes at most one
    entry, keyed by its first remote URL, and only when it carries a
    last-built revision with a hash. A later record for the same URL
    overwrites an earlier one.
    """
    hashes: dict[str, str] = {}
    for checkout in checkouts:
        remote = checkout.first_remote_url
        if remote is None:
            continue
        commit = checkout.last_built_hash
        if commit is None:
            continue
        if remote in hashes and hashes[remote] != commit:
            logger.debug(
                "Remote %s checked out again: %s replaces %s",
                remote, commit, hashes[remote],
            )
        hashes[remote] = commit
    return hashes


def match_commit(
    checkouts: Iterable[CheckoutRecord],
    base_repository_url: str | None,
) -> str | None:
    """Return the commit built from *base_repository_url*, if recorded.

    With no base repository the checkout records are not read at all.
    """
    if base_repository_url is None:
        return None
    commit = collect_commit_hashes(checkouts).get(base_repository_url)
    if commit is None:
        logger.debug("No checkout recorded for base remote %s", base_repository_url)
    return commit
