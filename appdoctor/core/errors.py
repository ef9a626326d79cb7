"""Exit codes for the CLI.

The doctor itself never fails for environmental reasons; these codes only
describe how a finished run is reported back to the shell.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes.

    Values are part of the CLI contract and should remain stable:
    - 0: Success (or non-strict run)
    - 1: User error (bad --config path, invalid config file)
    - 2: Environment error (a workflow is not fully installed, --strict)
    - 3: Internal error (validator logic broke a contract)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    INTERNAL_ERROR = 3
