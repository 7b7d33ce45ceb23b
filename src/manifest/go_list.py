"""Parser for the text output of ``go list -m all``.

Each line holds a module path, its resolved version and optionally a
replacement (``=> path version``). The first line names the main module and
has no version; it is skipped along with any other short line.
"""

from __future__ import annotations

import logging
from typing import Dict

from common.errors import ManifestReadError

logger = logging.getLogger(__name__)

# v0.0.0-20190101000000-abcdef123456 -> ["v0.0.0", "20190101000000", "abcdef123456"]
_PSEUDO_VERSION_REVISION_INDEX = 2


def normalize_module_version(version: str) -> str:
    """Reduce a module version to the token dep would have recorded.

    Build metadata after ``+`` is dropped. Pseudo-versions are reduced to
    their trailing revision segment. Versions with fewer than three
    ``-``-delimited segments (e.g. ``v2.0.0-rc1``) are left as they are.
    """
    if "+" in version:
        version = version.split("+", 1)[0]
    if "-" in version:
        segments = version.split("-")
        if len(segments) > _PSEUDO_VERSION_REVISION_INDEX:
            return segments[_PSEUDO_VERSION_REVISION_INDEX]
        logger.debug("Version %s is not a pseudo-version; keeping it whole", version)
    return version


def parse_go_list_text(content: str) -> Dict[str, str]:
    """Build a module path -> version token map from ``go list -m all`` text."""
    modules: Dict[str, str] = {}
    for line in content.splitlines():
        fields = line.split()
        if len(fields) < 2:
            continue
        token = normalize_module_version(fields[1])
        if not token:
            logger.debug("Skipping module %s: version %s has no usable token", fields[0], fields[1])
            continue
        modules[fields[0]] = token
    return modules


def parse_go_list(list_path: str) -> Dict[str, str]:
    """Read a file holding ``go list -m all`` output.

    Args:
        list_path: Path to the saved command output

    Returns:
        Dict of module path -> version token

    Raises:
        ManifestReadError: The file cannot be opened or read.
    """
    try:
        with open(list_path, "r", encoding="utf-8") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestReadError(
            f"error reading file containing the output of 'go list -m all': {e}",
            list_path,
        ) from e

    modules = parse_go_list_text(content)
    logger.debug("Loaded %d modules from %s", len(modules), list_path)
    return modules
