"""Data models for dependency reconciliation."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Classification(Enum):
    """How a dependency differs between the lock file and the module list."""
    REMOVED = "removed"
    ADDED = "added"
    CHANGED_SIGNIFICANT = "changed"
    CHANGED_INSIGNIFICANT = "suppressed"


@dataclass(frozen=True)
class DependencyChange:
    """One reported difference for an import path."""
    identifier: str
    classification: Classification
    old_version: Optional[str]
    new_version: Optional[str]


@dataclass
class DiffReport:
    """Reconciliation outcome, each list sorted by identifier."""
    removed: List[DependencyChange] = field(default_factory=list)
    added: List[DependencyChange] = field(default_factory=list)
    changed: List[DependencyChange] = field(default_factory=list)
    suppressed: List[DependencyChange] = field(default_factory=list)
    resolution_errors: List[str] = field(default_factory=list)
