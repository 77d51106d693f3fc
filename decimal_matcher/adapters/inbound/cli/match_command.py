from argparse import ArgumentParser, Namespace
from typing import Optional

from decimal_matcher.app.queries import MatchValuesQuery, MatchValuesQueryHandler
from decimal_matcher.domain.exceptions import ConfigurationError
from decimal_matcher.shared.config import get_settings
from decimal_matcher.shared.logging import get_logger

from .schemas import MatchResponseMapper

logger = get_logger(__name__)

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_CONFIGURATION_ERROR = 2
EXIT_COMMAND_FAILED = 3


def add_match_arguments(parser: ArgumentParser) -> None:
    parser.add_argument("values", nargs="+", help="Values to validate.")
    parser.add_argument(
        "--max-digits",
        type=int,
        default=None,
        help="Maximum number of significant digits (default: 11).",
    )
    parser.add_argument(
        "--max-decimal-places",
        type=int,
        default=None,
        help="Maximum number of decimal places, requires --max-digits.",
    )


def build_params(
    max_digits: Optional[int], max_decimal_places: Optional[int]
) -> tuple[int, ...]:
    """
    Translate command line options into positional matcher parameters.

    :raises ConfigurationError: If decimal places are limited without a digit limit
    """
    if max_digits is None:
        if max_decimal_places is not None:
            raise ConfigurationError(
                "decimal number matcher",
                "--max-decimal-places requires --max-digits",
            )
        return ()

    if max_decimal_places is None:
        return (max_digits,)

    return (max_digits, max_decimal_places)


def run_match(args: Namespace) -> int:
    settings = get_settings()

    try:
        params = build_params(args.max_digits, args.max_decimal_places)
        result = MatchValuesQueryHandler().handle(
            MatchValuesQuery(values=tuple(args.values), params=params)
        )
    except ConfigurationError as e:
        logger.error("match_configuration_error", error=str(e))
        return EXIT_CONFIGURATION_ERROR

    response = MatchResponseMapper.map_result_to_response(result)

    print(response.model_dump_json(indent=settings.CLI_INDENT or None))

    return EXIT_VALID if result.all_valid else EXIT_INVALID
