# topmark:header:start
#
#   project      : BBContent
#   file         : exit_codes.py
#   file_relpath : src/bbcontent/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Standardized exit codes used by the BBContent CLI."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the BBContent CLI.

    Attributes:
        SUCCESS (int): The command completed.
        FAILURE (int): Generic failure.
        USAGE_ERROR (int): Invalid flags or arguments (Click's own usage code).
        CONFIG_ERROR (int): Invalid configuration.
        SCENARIO_ERROR (int): The scenario file is missing or malformed.
        RESOLUTION_ERROR (int): Resolution aborted (invalid options, missing node,
            authorization failure).
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 2
    CONFIG_ERROR = 3
    SCENARIO_ERROR = 4
    RESOLUTION_ERROR = 5
