"""latest-version - show the latest published version of packages per range.

Every check names a package and an ordered list of version ranges. Each
published version is counted for the first range it satisfies only, and the
highest version per range is printed:

    $ latest-version --versions versions.yml org.neo4j.gds:proc:~1.1:~1.3:1
    Latest version for maven:org.neo4j.gds:proc matching ~1.1: 1.1.6
    Latest version for maven:org.neo4j.gds:proc matching ~1.3: 1.3.5
    Latest version for maven:org.neo4j.gds:proc matching 1: 1.6.0

Returns:
    int: Exit code
"""
import logging
import sys
from typing import List, Optional, Tuple

from constants import ExitCodes
from common.logging_utils import add_file_handler, configure_logging, extra_context, is_debug_enabled
from args import parse_args
from cli_config import ConfigError, apply_config_defaults, load_config, resolve_config_path

# Version resolution imports support both source and installed modes:
# - Source/tests: import via src.versioning.*
# - Installed console script: import via versioning.*
try:
    from src.versioning.buckets import BucketResult, select_latest
    from src.versioning.errors import ParseError, VersionsSourceError
    from src.versioning.models import VersionCheck
    from src.versioning.parser import parse_check
    from src.versioning.sources import VersionsFile
except ImportError:  # Fall back when 'src' package is not available
    from versioning.buckets import BucketResult, select_latest
    from versioning.errors import ParseError, VersionsSourceError
    from versioning.models import VersionCheck
    from versioning.parser import parse_check
    from versioning.sources import VersionsFile

logger = logging.getLogger(__name__)


def parse_checks(tokens: List[str]) -> Tuple[List[VersionCheck], List[ParseError]]:
    """Parse every token, collecting failures instead of stopping at the first."""
    checks: List[VersionCheck] = []
    errors: List[ParseError] = []
    for token in tokens:
        try:
            checks.append(parse_check(token))
        except ParseError as e:
            logger.error("%s", e)
            errors.append(e)
    return checks, errors


def format_results(check: VersionCheck, results: BucketResult) -> List[str]:
    """Render one line per range."""
    lines = []
    for version_range, latest in results:
        if latest is None:
            lines.append(f"No version for {check.display_name} matching {version_range}")
        else:
            lines.append(f"Latest version for {check.display_name} matching {version_range}: {latest}")
    return lines


def run_check(check: VersionCheck, source: VersionsFile, include_pre_releases: bool) -> BucketResult:
    """Bucket the known versions of one check."""
    versions = source.versions_for(check)
    if is_debug_enabled(logger):
        logger.debug(
            "Running check",
            extra=extra_context(
                event="function_entry",
                component="cli",
                action="run_check",
                target=check.display_name,
                candidate_count=len(versions),
            ),
        )
    return select_latest(check.ranges, versions, include_pre_releases)


def _setup_logging(args) -> None:
    configure_logging(args.LOG_LEVEL)
    if args.LOG_FILE:
        add_file_handler(args.LOG_FILE)


def run(args) -> int:
    """Run all checks described by parsed ``args`` and return the exit code."""
    # CLI/env level first so config loading logs through the console format
    configure_logging(args.LOG_LEVEL)
    try:
        config = load_config(resolve_config_path(args.CONFIG))
    except ConfigError as e:
        logger.error("%s", e)
        return ExitCodes.FILE_ERROR.value
    apply_config_defaults(args, config)
    _setup_logging(args)

    checks, errors = parse_checks(args.CHECKS)

    if not args.VERSIONS_FILE:
        logger.error("No versions file given; use --versions or set versions_file in the config")
        return ExitCodes.FILE_ERROR.value
    try:
        source = VersionsFile.load(args.VERSIONS_FILE)
    except VersionsSourceError as e:
        logger.error("%s", e)
        return ExitCodes.FILE_ERROR.value

    for check in checks:
        results = run_check(check, source, args.INCLUDE_PRE_RELEASES)
        for line in format_results(check, results):
            print(line)

    if errors:
        logger.error("%d of %d checks could not be parsed.", len(errors), len(args.CHECKS))
        return ExitCodes.PARSE_ERROR.value
    return ExitCodes.SUCCESS.value


def main(argv: Optional[List[str]] = None) -> None:
    """Main function of the program."""
    args = parse_args(argv)
    sys.exit(run(args))


if __name__ == "__main__":
    main()
