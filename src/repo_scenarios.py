"""Entry point to the repository scenario runner.

This source file contains entry point to the runner. It is implemented in the
main() function.
"""

import logging
import sys
from argparse import ArgumentParser
from typing import Optional, Sequence

from rich.logging import RichHandler

import constants
from client import GitHubClient
from configuration import configuration
from log import get_logger
from scenario.feature import load_feature
from scenario.runner import ScenarioRunner

FORMAT = "%(message)s"
logging.basicConfig(
    level="INFO", format=FORMAT, datefmt="[%X]", handlers=[RichHandler()]
)

logger = get_logger(__name__)


def create_argument_parser() -> ArgumentParser:
    """Create and configure argument parser object.

    The parser includes these options:
    - -v / --verbose: enable verbose output
    - -d / --dump-configuration: dump the loaded configuration to JSON and exit
    - -c / --config: path to the configuration file (default "repo-scenarios.yaml")
    - features: feature files to run

    Returns:
        Configured ArgumentParser for parsing the runner CLI options.
    """
    parser = ArgumentParser(description="Run GitHub repository scenarios")
    parser.add_argument(
        "-v",
        "--verbose",
        dest="verbose",
        help="make it verbose",
        action="store_true",
        default=False,
    )
    parser.add_argument(
        "-d",
        "--dump-configuration",
        dest="dump_configuration",
        help="dump actual configuration into JSON file and quit",
        action="store_true",
        default=False,
    )
    parser.add_argument(
        "-c",
        "--config",
        dest="config_file",
        help=f"path to configuration file (default: {constants.DEFAULT_CONFIGURATION_FILE})",
        default=constants.DEFAULT_CONFIGURATION_FILE,
    )
    parser.add_argument(
        "features",
        nargs="*",
        help="feature files with scenarios to run",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point to the scenario runner.

    Loads the configuration, then either dumps it (-d) or runs every given
    feature file with a fresh scenario context per scenario.

    Returns:
        int: 0 when all scenarios passed, 1 otherwise.
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.setLevel(logging.DEBUG)

    configuration.load_configuration(args.config_file)
    logger.info("Suite: %s", configuration.configuration.name)

    # -d or --dump-configuration CLI flags are used to dump the actual configuration
    # to a JSON file w/o doing any other operation
    if args.dump_configuration:
        try:
            configuration.configuration.dump()
            logger.info("Configuration dumped to %s", constants.CONFIGURATION_DUMP_FILE)
        except OSError as e:
            logger.error("Failed to dump configuration: %s", e)
            return 1
        return 0

    if not args.features:
        parser.error("at least one feature file is required")

    github = configuration.github_configuration
    runner = ScenarioRunner(
        configuration.scenario_parameters,
        client_factory=lambda: GitHubClient(str(github.url), github.timeout),
    )

    outcomes = []
    for path in args.features:
        feature = load_feature(path)
        if feature is None:
            logger.warning("No feature found in %s", path)
            continue
        outcomes.extend(runner.run_feature(feature))

    failed = [outcome for outcome in outcomes if not outcome.passed]
    logger.info(
        "%d scenarios passed, %d failed", len(outcomes) - len(failed), len(failed)
    )
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
