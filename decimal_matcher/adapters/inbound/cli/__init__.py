from .match_command import (
    EXIT_COMMAND_FAILED,
    EXIT_CONFIGURATION_ERROR,
    EXIT_INVALID,
    EXIT_VALID,
    add_match_arguments,
    build_params,
    run_match,
)

__all__ = [
    "EXIT_COMMAND_FAILED",
    "EXIT_CONFIGURATION_ERROR",
    "EXIT_INVALID",
    "EXIT_VALID",
    "add_match_arguments",
    "build_params",
    "run_match",
]
