"""Argument parsing functionality for nodecompat."""

import argparse
from constants import Constants


def build_parser():
    """Build the argument parser for the program."""
    parser = argparse.ArgumentParser(
        prog="nodecompat",
        description=(
            "nodecompat - ECMAScript edition compatibility of Node.js releases"
        ),
        add_help=True,
    )

    parser.add_argument("-n", "--node",
                        dest="VERSIONS",
                        help="Node.js version to check, e.g. 14.0.0 or 14 (repeatable)",
                        action="append", type=str,
                        default=[])
    parser.add_argument("-m", "--mode",
                        dest="MODE",
                        help="one: full result per version; mutual, exclusive, all: combined editions (default: one)",
                        action="store", type=str,
                        choices=Constants.SUPPORTED_MODES)
    parser.add_argument("--flag",
                        dest="FLAG",
                        help="Node.js flag the results were produced with",
                        action="store", type=str,
                        choices=[f.lstrip("-") for f in Constants.SUPPORTED_FLAGS if f])
    parser.add_argument("-t", "--threshold",
                        dest="THRESHOLD",
                        help=f"Minimum pass rate for an edition, 0-1 (default: {Constants.DEFAULT_THRESHOLD})",
                        action="store", type=float)
    parser.add_argument("--fallback",
                        dest="FALLBACK",
                        help="ECMAScript edition to assume when results are unavailable, e.g. ES5",
                        action="store", type=str)

    parser.add_argument("--base-url",
                        dest="BASE_URL",
                        help="Base URL of the compat-table result documents",
                        action="store", type=str)
    parser.add_argument("--releases-url",
                        dest="RELEASES_URL",
                        help="URL of the Node.js release index",
                        action="store", type=str)
    parser.add_argument("--timeout",
                        dest="TIMEOUT",
                        help="HTTP timeout in seconds",
                        action="store", type=int)

    parser.add_argument("-o", "--output",
                        dest="OUTPUT",
                        help="Path to output JSON file",
                        action="store",
                        type=str)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default=None)
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML, YML, or JSON)",
                        action="store",
                        type=str)

    return parser


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    return build_parser().parse_args(argv)
