"""Parser for dep's Gopkg.lock file.

Gopkg.lock is a TOML file with [[projects]] sections. Each project records a
"name" (import path), a "revision" (full commit hash) and, when the project
was pinned to a release, a "version" tag.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from common.errors import ManifestParseError, ManifestReadError
from common.revision import short_revision

logger = logging.getLogger(__name__)


def _field(record: Mapping[str, Any], key: str) -> Optional[Any]:
    """Look up ``key`` case-insensitively; dep writes lowercase keys."""
    for candidate, value in record.items():
        if isinstance(candidate, str) and candidate.lower() == key:
            return value
    return None


def _string_field(record: Mapping[str, Any], key: str, index: int, lockfile_path: str) -> str:
    value = _field(record, key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ManifestParseError(
            f"error decoding dep Gopkg.lock file: projects[{index}].{key} is not a string",
            lockfile_path,
        )
    return value


def _project_token(version: str, revision: str) -> str:
    """Prefer the release tag; fall back to the abbreviated revision."""
    if version:
        return version
    return short_revision(revision)


def parse_gopkg_lock(lockfile_path: str) -> Dict[str, str]:
    """Map each locked project to its version tag or abbreviated revision.

    Args:
        lockfile_path: Path to Gopkg.lock file

    Returns:
        Dict of import path -> version token

    Raises:
        ManifestReadError: The file cannot be opened or read.
        ManifestParseError: The file is not valid TOML or projects is malformed.
    """
    try:
        import tomllib as toml  # type: ignore
    except Exception:  # pylint: disable=broad-exception-caught
        import tomli as toml  # type: ignore

    try:
        with open(lockfile_path, "rb") as f:
            raw = f.read()
    except OSError as e:
        raise ManifestReadError(f"error reading dep Gopkg.lock file: {e}", lockfile_path) from e

    try:
        data = toml.loads(raw.decode("utf-8")) or {}
    except (UnicodeDecodeError, toml.TOMLDecodeError) as e:
        raise ManifestParseError(f"error decoding dep Gopkg.lock file: {e}", lockfile_path) from e

    projects = _field(data, "projects")
    if projects is None:
        logger.warning("No projects found in %s", lockfile_path)
        return {}
    if not isinstance(projects, list):
        raise ManifestParseError(
            "error decoding dep Gopkg.lock file: projects is not an array of tables",
            lockfile_path,
        )

    deps: Dict[str, str] = {}
    for index, project in enumerate(projects):
        if not isinstance(project, dict):
            raise ManifestParseError(
                f"error decoding dep Gopkg.lock file: projects[{index}] is not a table",
                lockfile_path,
            )
        name = _string_field(project, "name", index, lockfile_path)
        revision = _string_field(project, "revision", index, lockfile_path)
        version = _string_field(project, "version", index, lockfile_path)

        if not name:
            logger.warning("Skipping Gopkg.lock project #%d without a name", index)
            continue

        token = _project_token(version, revision)
        if not token:
            logger.warning("Skipping %s: neither version nor revision is set", name)
            continue
        deps[name] = token

    logger.debug("Loaded %d projects from %s", len(deps), lockfile_path)
    return deps
