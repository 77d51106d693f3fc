import sys
from argparse import ArgumentParser, RawTextHelpFormatter
from typing import Optional

from decimal_matcher.adapters.inbound.cli import (
    EXIT_COMMAND_FAILED,
    add_match_arguments,
    run_match,
)
from decimal_matcher.shared.config import get_settings
from decimal_matcher.shared.logging import configure_logging, get_logger

logger = get_logger(__name__)


def setup_arg_parser() -> ArgumentParser:
    parser = ArgumentParser(
        description="Decimal Number Matcher Entrypoint",
        formatter_class=RawTextHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    match_parser = subparsers.add_parser(
        "match",
        help="Validate values as decimal numbers and print the results as JSON.",
    )
    add_match_arguments(match_parser)
    match_parser.set_defaults(func=run_match)

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    settings = get_settings()

    configure_logging(
        log_level=settings.LOG_LEVEL,
        json_logs=settings.JSON_LOGS
    )

    parser = setup_arg_parser()
    args = parser.parse_args(argv)

    logger.info("command_starting", command=args.command)

    try:
        exit_code = args.func(args)
    except Exception as e:
        logger.error(
            "command_failed",
            command=args.command,
            error=str(e),
            exc_info=True
        )
        sys.exit(EXIT_COMMAND_FAILED)

    logger.info("command_completed", command=args.command, exit_code=exit_code)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
