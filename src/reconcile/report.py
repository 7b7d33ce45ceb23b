"""Report rendering and export."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, TextIO

from constants import ReportFormats

from .models import DependencyChange, DiffReport

logger = logging.getLogger(__name__)


def render_text(report: DiffReport) -> str:
    """Render the Removed, Added and Changed sections as plain text."""
    lines: List[str] = ["Removed:"]
    lines.extend(f"-  {c.identifier} {c.old_version}" for c in report.removed)
    lines.append("")
    lines.append("Added:")
    lines.extend(f"+  {c.identifier} {c.new_version}" for c in report.added)
    lines.append("")
    lines.append("Changed:")
    lines.extend(
        f"!  {c.identifier} {c.old_version} => {c.new_version}" for c in report.changed
    )
    return "\n".join(lines) + "\n"


def _change_pair(change: DependencyChange) -> Dict[str, Any]:
    return {"name": change.identifier, "from": change.old_version, "to": change.new_version}


def report_to_dict(report: DiffReport) -> Dict[str, Any]:
    """Serialize the report into the JSON export shape."""
    return {
        "removed": [{"name": c.identifier, "version": c.old_version} for c in report.removed],
        "added": [{"name": c.identifier, "version": c.new_version} for c in report.added],
        "changed": [_change_pair(c) for c in report.changed],
        "suppressed": [_change_pair(c) for c in report.suppressed],
    }


def render_json(report: DiffReport) -> str:
    """Render the report as an indented JSON document."""
    return json.dumps(report_to_dict(report), ensure_ascii=False, indent=4) + "\n"


def render(report: DiffReport, fmt: str) -> str:
    """Render ``report`` in the requested format (text or json)."""
    if fmt == ReportFormats.JSON.value:
        return render_json(report)
    return render_text(report)


def write_report(report: DiffReport, fmt: str, stream: TextIO) -> None:
    """Write the rendered report to an open text stream and flush it."""
    stream.write(render(report, fmt))
    stream.flush()


def export_report(report: DiffReport, fmt: str, path: str) -> None:
    """Write the rendered report to ``path``.

    Raises:
        OSError: The file cannot be written.
    """
    with open(path, "w", encoding="utf-8") as file:
        file.write(render(report, fmt))
    logger.info("Report has been successfully exported at: %s", path)
