"""Argument parsing functionality for moddiff."""

import argparse
from constants import Constants

def build_parser():
    """Builds the argument parser for the program."""
    parser = argparse.ArgumentParser(
        prog="moddiff",
        description=(
            "moddiff - Report dependency changes between dep's Gopkg.lock "
            "and the output of 'go list -m all'"
        ),
        add_help=False,
    )

    parser.add_argument("-help", "--help", "-h",
                        help="print this help",
                        action="help")

    parser.add_argument("-d",
                        dest="GOPKG_LOCK",
                        help="dep Gopkg.lock file",
                        action="store", type=str)
    parser.add_argument("-m",
                        dest="GO_LIST",
                        help="file containing the output of 'go list -m all'",
                        action="store", type=str)
    parser.add_argument("-u",
                        dest="GITHUB_USERNAME",
                        help="username to auth with GitHub (optional)",
                        action="store", type=str)
    parser.add_argument("-p",
                        dest="GITHUB_PASSWORD",
                        help="password or personal access token to auth with GitHub (optional)",
                        action="store", type=str)

    parser.add_argument("-o", "--output",
                        dest="OUTPUT",
                        help="Path to output file (text or JSON)",
                        action="store",
                        type=str)
    parser.add_argument("-f", "--format",
                        dest="OUTPUT_FORMAT",
                        help="Output format (text or json). If not specified, inferred from --output extension; defaults to text.",
                        action="store",
                        type=str.lower,
                        choices=Constants.SUPPORTED_FORMATS)
    parser.add_argument("--offline",
                        dest="OFFLINE",
                        help="Do not query GitHub for tags; report every version change.",
                        action="store_true")
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
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'])
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)

    return parser


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    return build_parser().parse_args(argv)
