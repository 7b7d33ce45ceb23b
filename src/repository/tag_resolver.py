"""Tag resolution for changed dependencies.

A resolver maps an import path to a tag index (tag name -> abbreviated commit)
so the reconciler can tell a real version change from a tag/revision alias of
the same commit.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional, Protocol, Tuple

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled
from common.revision import short_revision
from repository.github import GitHubClient

logger = logging.getLogger(__name__)

TagIndex = Dict[str, str]


class TagResolver(Protocol):
    """Capability returning the tag index of a dependency's repository."""

    def resolve(self, identifier: str) -> Optional[TagIndex]:
        """Return the tag index, or None when the host is not supported.

        Raises:
            ResolutionError: The repository is supported but lookup failed.
        """


class NullTagResolver:
    """Resolver that never has data; used when lookups are disabled."""

    def resolve(self, identifier: str) -> Optional[TagIndex]:  # pylint: disable=unused-argument
        return None


def parse_github_identifier(identifier: str) -> Optional[Tuple[str, str]]:
    """Extract (owner, repo) from an import path like github.com/owner/repo/v2."""
    if not identifier.startswith(Constants.GITHUB_HOST_PREFIX):
        return None
    parts = identifier[len(Constants.GITHUB_HOST_PREFIX):].split("/")
    if len(parts) < 2 or not parts[0] or not parts[1]:
        return None
    return parts[0], parts[1]


def build_tag_index(tags: Iterable[Any]) -> TagIndex:
    """Map tag names to abbreviated commit identifiers.

    Entries without a name or a commit sha are skipped.
    """
    index: TagIndex = {}
    for tag in tags:
        if not isinstance(tag, dict):
            continue
        name = tag.get("name")
        commit = tag.get("commit")
        sha = commit.get("sha") if isinstance(commit, dict) else None
        if isinstance(name, str) and name and isinstance(sha, str) and sha:
            index[name] = short_revision(sha)
    return index


class GitHubTagResolver:
    """Resolve tags for dependencies hosted on github.com."""

    def __init__(self, client: Optional[GitHubClient] = None):
        self.client = client or GitHubClient()

    def resolve(self, identifier: str) -> Optional[TagIndex]:
        owner_repo = parse_github_identifier(identifier)
        if owner_repo is None:
            if is_debug_enabled(logger):
                logger.debug(
                    "No tag resolver for identifier",
                    extra=extra_context(
                        event="decision",
                        component="tag_resolver",
                        action="resolve",
                        outcome="unsupported_host",
                        target=identifier
                    )
                )
            return None

        owner, repo = owner_repo
        index = build_tag_index(self.client.get_tags(owner, repo))
        logger.debug("Resolved %d tags for %s/%s", len(index), owner, repo)
        return index
