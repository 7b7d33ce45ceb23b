"""Compare the dep lock mapping against the Go modules mapping."""

from __future__ import annotations

import logging
from typing import List, Mapping, Optional

from common.errors import ResolutionError
from common.logging_utils import extra_context, is_debug_enabled
from repository.tag_resolver import NullTagResolver, TagIndex, TagResolver

from .models import Classification, DependencyChange, DiffReport

logger = logging.getLogger(__name__)


def sorted_identifiers(*mappings: Mapping[str, str]) -> List[str]:
    """Return the union of keys across ``mappings`` in lexicographic order."""
    keys = set()
    for mapping in mappings:
        keys.update(mapping)
    return sorted(keys)


def is_alias(old: str, new: str, tags: Optional[TagIndex]) -> bool:
    """Whether ``old`` and ``new`` name the same commit according to ``tags``.

    Covers tag -> tag via a shared commit and tag <-> revision in either
    direction. Without tag data nothing is an alias.
    """
    if not tags:
        return False
    old_commit = tags.get(old)
    new_commit = tags.get(new)
    if old_commit is not None and old_commit == new_commit:
        return True
    return old_commit == new or new_commit == old


def _lookup_tags(identifier: str, resolver: TagResolver, report: DiffReport) -> Optional[TagIndex]:
    try:
        return resolver.resolve(identifier)
    except ResolutionError as e:
        message = f"{identifier}: {e}"
        logger.warning("Error retrieving alternative tags: %s", e)
        report.resolution_errors.append(message)
        return None


def reconcile(
    legacy: Mapping[str, str],
    modules: Mapping[str, str],
    resolver: Optional[TagResolver] = None,
) -> DiffReport:
    """Classify every import path found in either mapping.

    Args:
        legacy: Import path -> version token from Gopkg.lock
        modules: Import path -> version token from ``go list -m all``
        resolver: Tag resolver consulted for changed entries only

    Returns:
        DiffReport with removed, added, changed and suppressed entries
    """
    resolver = resolver or NullTagResolver()
    report = DiffReport()

    identifiers = sorted_identifiers(legacy, modules)
    for identifier in identifiers:
        old = legacy.get(identifier)
        new = modules.get(identifier)

        if new is None:
            report.removed.append(
                DependencyChange(identifier, Classification.REMOVED, old, None)
            )
            continue
        if old is None:
            report.added.append(
                DependencyChange(identifier, Classification.ADDED, None, new)
            )
            continue
        if old == new:
            continue

        tags = _lookup_tags(identifier, resolver, report)
        if is_alias(old, new, tags):
            if is_debug_enabled(logger):
                logger.debug(
                    "Suppressed aliased version change",
                    extra=extra_context(
                        event="decision",
                        component="reconciler",
                        action="classify",
                        outcome="insignificant",
                        target=identifier
                    )
                )
            report.suppressed.append(
                DependencyChange(identifier, Classification.CHANGED_INSIGNIFICANT, old, new)
            )
        else:
            report.changed.append(
                DependencyChange(identifier, Classification.CHANGED_SIGNIFICANT, old, new)
            )

    logger.info(
        "Compared %d dependencies: %d removed, %d added, %d changed, %d suppressed",
        len(identifiers),
        len(report.removed),
        len(report.added),
        len(report.changed),
        len(report.suppressed),
    )
    return report

