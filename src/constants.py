"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    PARSE_ERROR = 4


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    PROG_NAME = "latest-version"
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    ENV_LOG_LEVEL = "LATEST_VERSION_LOG_LEVEL"
    ENV_CONFIG = "LATEST_VERSION_CONFIG"
    RANGE_SYNTAX_URL = "https://www.npmjs.com/package/semver#advanced-range-syntax"
    # Key separator in versions documents: "<ecosystem>:<package>"
    LOOKUP_KEY_SEPARATOR = ":"
