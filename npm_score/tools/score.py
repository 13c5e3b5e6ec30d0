"""Retrieves the npms.io score of an npm package and summarizes it."""

from __future__ import annotations
import sys
import logging
from argparse import Namespace
from importlib.metadata import PackageNotFoundError, version
from logging import error, exception, warning
from pathlib import Path
from typing import List, Tuple

from argparse_with_config import ArgumentParserWithConfig
from rich_argparse import RichHelpFormatter

from npm_score.config import Config
from npm_score.errors import ScoreError, fail
from npm_score.output.console import Console
from npm_score.packages import get_current_package_name, get_published_version
from npm_score.reports import PackageReport
from npm_score.score_config import ScoreConfig, NS_CFG
from npm_score.scoring import (
    fetch_package_report,
    load_package_report,
    save_package_report,
)
from npm_score.summary import summarize
from npm_score.vcs import commit_report

PROGRAM: str = "npm-score"


def program_version() -> str:
    try:
        return version(PROGRAM)
    except PackageNotFoundError:
        return "unknown"


def score_parse_args(argv: List[str] | None = None) -> Tuple[Config, Namespace]:
    """Parse the command line arguments."""
    if argv is None:
        argv = sys.argv[1:]

    config: Config = ScoreConfig()
    config.read_configfile_from_arguments(argv)
    default_file = config.get_dotnest(NS_CFG.REPORT_FILE)

    parser = ArgumentParserWithConfig(
        prog=PROGRAM,
        formatter_class=RichHelpFormatter,
        description=__doc__,
        epilog="Example Usage: npm-score -s -d left-pad",
        default_config=config,
        config_argument_names=Config.config_option_names,
    )

    parser.add_argument(
        "-s",
        "--save-report",
        metavar="file",
        nargs="?",
        const=default_file,
        default=None,
        help=f"Save report to file. Default: {default_file}",
    )

    parser.add_argument(
        "-d",
        "--diff",
        metavar="file",
        nargs="?",
        const=default_file,
        default=None,
        help=f"Report for comparison. Default: {default_file}",
    )

    parser.add_argument(
        "-c", "--commit", action="store_true", help="Commit saved report."
    )

    parser.add_argument("-q", "--quiet", action="store_true", help="Quiet mode.")

    service_group = parser.add_argument_group("Scoring service options")

    service_group.add_argument(
        "--registry-url",
        default=config.get_dotnest(NS_CFG.REGISTRY_URL),
        config_path=NS_CFG.REGISTRY_URL,
        help="Base URL of the package scoring service.",
    )

    service_group.add_argument(
        "--timeout",
        type=float,
        default=config.get_dotnest(NS_CFG.REGISTRY_TIMEOUT),
        config_path=NS_CFG.REGISTRY_TIMEOUT,
        help="Seconds to wait for the scoring service (default: no limit).",
    )

    debugging_group = parser.add_argument_group("Debugging options")

    debugging_group.add_argument(
        "--log-level",
        "--ll",
        default=config.get_dotnest(NS_CFG.LOG_LEVEL, "info"),
        config_path=NS_CFG.LOG_LEVEL,
        help="Define the logging verbosity level (debug, info, warning, error, ...).",
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {program_version()}"
    )

    parser.add_argument(
        "package",
        type=str,
        nargs="?",
        help="Name of package to score. Use current package when omitted.",
    )

    args = parser.parse_args(argv)
    log_level = args.log_level.upper()
    logging.basicConfig(level=log_level, format="%(levelname)-10s:\t%(message)s")

    return config, args


def run(args: Namespace, output: Console | None = None) -> None:
    """Fetch, store, compare and print a package score."""
    package_name = args.package or get_current_package_name()
    if not package_name:
        fail("no module name specified and no module found in current working directory")

    report = fetch_package_report(
        package_name, base_url=args.registry_url, timeout=args.timeout
    )

    if args.save_report:
        save_package_report(args.save_report, report)
        if args.commit:
            commit_report(args.save_report)

    reference = None
    if args.diff:
        if Path(args.diff).exists():
            reference = PackageReport(load_package_report(args.diff)["result"])
        else:
            warning(f"cannot display differences, {args.diff} not found.")

    published_version = get_published_version(package_name)

    if not args.quiet:
        summary = summarize(
            published_version, PackageReport(report["result"]), reference
        )
        if output is None:
            output = Console()
        output.output(summary)


def main(argv: List[str] | None = None) -> None:
    """Run npm-score."""
    try:
        _, args = score_parse_args(argv)
        run(args)
    except ScoreError as e:
        # known error, no stack trace
        error(f"{PROGRAM}: {e}")
        sys.exit(1)
    except Exception as e:
        exception(f"{PROGRAM}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
