"""moddiff - dep to Go modules dependency change reporter

    Compares dep's Gopkg.lock with the output of 'go list -m all' and prints
    the dependencies that were removed, added or changed.

    Returns:
        int: Exit code
"""
import logging
import sys
from typing import Optional

from constants import ExitCodes
from common.errors import ConfigError, ManifestError
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from args import parse_args
from cli_config import DiffConfig, build_config
from manifest import parse_go_list, parse_gopkg_lock
from reconcile import DiffReport, export_report, reconcile, write_report
from repository.github import GitHubClient
from repository.tag_resolver import GitHubTagResolver, NullTagResolver, TagResolver


def build_resolver(config: DiffConfig) -> TagResolver:
    """Create the tag resolver described by ``config``."""
    if config.offline:
        return NullTagResolver()
    client = GitHubClient(
        base_url=config.github_api_base,
        username=config.github_username,
        password=config.github_password,
        token=config.github_token,
        timeout=config.request_timeout,
    )
    return GitHubTagResolver(client)


def run(config: DiffConfig, resolver: Optional[TagResolver] = None, stream=None) -> DiffReport:
    """Parse both manifests, reconcile them and emit the report.

    Args:
        config: Run configuration.
        resolver: Tag resolver; built from ``config`` when omitted.
        stream: Text stream for the report when no output path is set.

    Raises:
        ManifestError: Either manifest could not be read or parsed.
        OSError: The report file could not be written.
    """
    logger = logging.getLogger(__name__)

    legacy = parse_gopkg_lock(config.gopkg_lock_path)
    modules = parse_go_list(config.go_list_path)
    logger.info("Loaded %d dep projects and %d modules.", len(legacy), len(modules))

    report = reconcile(legacy, modules, resolver or build_resolver(config))

    if config.output_path:
        export_report(report, config.output_format, config.output_path)
    else:
        write_report(report, config.output_format, stream or sys.stdout)
    return report


def main(argv=None):
    """Main function of the program."""
    logger = logging.getLogger(__name__)

    args = parse_args(argv)
    configure_logging(args.LOG_LEVEL, args.LOG_FILE)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action="main")
        )

    if not args.GOPKG_LOCK:
        logging.error("No dep Gopkg.lock file provided.")
        sys.exit(ExitCodes.FILE_ERROR.value)

    if not args.GO_LIST:
        logging.error("No file containing the output of 'go list -m all' provided.")
        sys.exit(ExitCodes.FILE_ERROR.value)

    try:
        config = build_config(args)
    except ConfigError as e:
        logging.error("%s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)

    try:
        report = run(config)
    except ManifestError as e:
        logging.error("%s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)
    except OSError as e:
        logging.error("Report couldn't be written to disk: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)

    if report.resolution_errors:
        logging.warning(
            "Tags could not be retrieved for %d dependencies; their changes are reported unfiltered.",
            len(report.resolution_errors),
        )

    if is_debug_enabled(logger):
        logger.debug(
            "CLI finished",
            extra=extra_context(
                event="function_exit",
                component="cli",
                action="main",
                outcome="success"
            )
        )
    sys.exit(ExitCodes.SUCCESS.value)

if __name__ == "__main__":
    main()
