"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1


class ReportFormats(Enum):
    """Report formats supported by the program.

    Args:
        Enum (string): Report formats supported by the program.
    """

    TEXT = "text"
    JSON = "json"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    SUPPORTED_FORMATS = [
        ReportFormats.TEXT.value,
        ReportFormats.JSON.value,
    ]
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    ENV_LOG_LEVEL = "MODDIFF_LOG_LEVEL"
    REQUEST_TIMEOUT = 30  # Timeout in seconds for all HTTP requests

    # Length of the abbreviated commit identifiers compared across sources
    SHORT_REVISION_LENGTH = 12

    # Repository API constants
    GITHUB_HOST_PREFIX = "github.com/"
    GITHUB_API_BASE = "https://api.github.com"
    ENV_GITHUB_TOKEN = "GITHUB_TOKEN"
    REPO_API_PER_PAGE = 100
