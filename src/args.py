"""Argument parsing functionality for latest-version."""

import argparse
from typing import List, Optional

from constants import Constants


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog=Constants.PROG_NAME,
        description="Show the latest published version of packages, per version range.",
        epilog=(
            "Checks take the form [ecosystem:]coordinates[:range]*, e.g. "
            "maven:org.neo4j:neo4j:~4.2:^4, npm:@babel/core, cargo:serde:1.x, "
            "go:golang.org/x/net. Without an ecosystem the check is read as "
            "Maven groupId:artifactId. Ranges follow "
            f"{Constants.RANGE_SYNTAX_URL}. Each version is counted for the "
            "first range it matches only, so list ranges from most to least "
            "restrictive."
        ),
        add_help=True,
    )

    parser.add_argument("CHECKS",
                        metavar="CHECK",
                        help="Package coordinates with optional version ranges. Can be given multiple times.",
                        nargs="+",
                        type=str)
    parser.add_argument("-i", "--include-pre-releases",
                        dest="INCLUDE_PRE_RELEASES",
                        help="Also consider pre releases",
                        action="store_true",
                        default=None)
    parser.add_argument("--versions",
                        dest="VERSIONS_FILE",
                        help="YAML or JSON document with the published versions per package",
                        action="store",
                        type=str)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML, YML, or JSON)",
                        action="store",
                        type=str)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=Constants.LOG_LEVELS)
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parses the arguments passed to the program."""
    return build_parser().parse_args(argv)
