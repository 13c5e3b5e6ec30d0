"""Dumps the effective npm-score configuration."""
import sys
import logging
from argparse import ArgumentParser, Namespace
from typing import List

from rich_argparse import RichHelpFormatter

from npm_score.config import Config
from npm_score.score_config import ScoreConfig, NS_CFG

# forces the scoring defaults to be registered
from npm_score.scoring import DEFAULT_REGISTRY_URL as DEFAULT_REGISTRY_URL


def score_config_parse_args(argv: List[str] | None = None) -> Config:
    """Parse the command line arguments."""
    if argv is None:
        argv = sys.argv[1:]

    config: Config = ScoreConfig()
    config.read_configfile_from_arguments(argv)

    parser = ArgumentParser(
        prog="npm-score-config",
        formatter_class=RichHelpFormatter,
        description=__doc__,
        epilog="Example Usage: npm-score-config > defaults.yml",
    )

    parser.add_argument(
        "-y",
        "--config",
        default=None,
        type=str,
        help="Configuration file (YAML) to load.",
    )

    parser.add_argument(
        "--log-level",
        "--ll",
        default=config.get_dotnest(NS_CFG.LOG_LEVEL, "info"),
        help="Define the logging verbosity level (debug, info, warning, error, fatal, critical).",
    )

    args: Namespace = parser.parse_args(argv)
    log_level = args.log_level.upper()
    logging.basicConfig(level=log_level, format="%(levelname)-10s:\t%(message)s")

    del args.config
    config.load_namespace(args)
    return config


def main(argv: List[str] | None = None) -> None:
    """Print the configuration as YAML."""
    config = score_config_parse_args(argv)

    print(config.dump(), end="")


if __name__ == "__main__":
    main()
