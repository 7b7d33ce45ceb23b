"""Dependency reconciliation package.

- models.py: classification enum and report dataclasses
- reconciler.py: removed/added/changed classification with tag alias suppression
- report.py: text and JSON rendering
"""

from .models import Classification, DependencyChange, DiffReport
from .reconciler import is_alias, reconcile, sorted_identifiers
from .report import export_report, render, render_json, render_text, report_to_dict, write_report

__all__ = [
    "Classification",
    "DependencyChange",
    "DiffReport",
    "is_alias",
    "reconcile",
    "sorted_identifiers",
    "export_report",
    "render",
    "render_json",
    "render_text",
    "report_to_dict",
    "write_report",
]
