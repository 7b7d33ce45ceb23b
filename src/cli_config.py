"""Run configuration assembled once at the CLI boundary.

Values come from, in order of precedence: CLI flags, environment variables,
the optional YAML/JSON config file, then Constants defaults.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml

from constants import Constants, ReportFormats
from common.errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiffConfig:
    """Inputs and options for one moddiff run."""

    gopkg_lock_path: str
    go_list_path: str
    github_username: Optional[str] = None
    github_password: Optional[str] = None
    github_token: Optional[str] = None
    github_api_base: str = Constants.GITHUB_API_BASE
    request_timeout: float = Constants.REQUEST_TIMEOUT
    offline: bool = False
    output_path: Optional[str] = None
    output_format: str = ReportFormats.TEXT.value


def load_config_file(config_path: Optional[str]) -> Dict[str, Any]:
    """Load a YAML or JSON config file.

    Args:
        config_path: Path to the config file; None means no file.

    Returns:
        Parsed mapping (empty when no path is given or the file is empty).

    Raises:
        ConfigError: The file cannot be read, parsed, or is not a mapping.
    """
    if not config_path:
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Failed to read config file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse config file {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")
    return data


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = data.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"Config section '{name}' must be a mapping")
    return value


def _infer_format(args: Any) -> str:
    fmt = getattr(args, "OUTPUT_FORMAT", None)
    if fmt:
        return fmt.lower()
    output = getattr(args, "OUTPUT", None)
    if output and output.lower().endswith(".json"):
        return ReportFormats.JSON.value
    return ReportFormats.TEXT.value


def build_config(args: Any, environ: Optional[Dict[str, str]] = None) -> DiffConfig:
    """Create the run configuration from parsed CLI arguments.

    Args:
        args: Parsed CLI arguments namespace.
        environ: Environment mapping (defaults to os.environ).

    Returns:
        DiffConfig instance.

    Raises:
        ConfigError: The config file is invalid.
    """
    environ = os.environ if environ is None else environ
    file_cfg = load_config_file(getattr(args, "CONFIG", None))
    github_cfg = _section(file_cfg, "github")
    http_cfg = _section(file_cfg, "http")

    username = getattr(args, "GITHUB_USERNAME", None) or github_cfg.get("username")
    password = getattr(args, "GITHUB_PASSWORD", None) or github_cfg.get("password")
    token = environ.get(Constants.ENV_GITHUB_TOKEN) or github_cfg.get("token")

    timeout = http_cfg.get("timeout", Constants.REQUEST_TIMEOUT)
    try:
        timeout = float(timeout)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid http.timeout value: {timeout!r}") from e
    if timeout <= 0:
        raise ConfigError(f"Invalid http.timeout value: {timeout!r}")

    if username and not password:
        logger.warning("GitHub username given without a password; requests will not use Basic auth")

    return DiffConfig(
        gopkg_lock_path=args.GOPKG_LOCK,
        go_list_path=args.GO_LIST,
        github_username=username or None,
        github_password=password or None,
        github_token=token or None,
        github_api_base=github_cfg.get("api_base") or Constants.GITHUB_API_BASE,
        request_timeout=timeout,
        offline=bool(getattr(args, "OFFLINE", False)),
        output_path=getattr(args, "OUTPUT", None),
        output_format=_infer_format(args),
    )
