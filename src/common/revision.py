"""Commit identifier helpers."""

from __future__ import annotations

from constants import Constants


def short_revision(revision: str, length: int = Constants.SHORT_REVISION_LENGTH) -> str:
    """Return the abbreviated form of a commit identifier.

    Revisions shorter than ``length`` are returned unchanged.
    """
    return (revision or "")[:length]
