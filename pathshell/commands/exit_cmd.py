"""
EXIT command - terminate the shell.

Note: Module name is exit_cmd.py to avoid shadowing the exit() builtin.
"""

import re
from typing import Optional

from ..process import Process
from ..command_decorators import command
from ..control_flow import ExitShell
from . import register_command

# ASCII digits only: int() would also take '1_0' and other scripts' digits
STATUS_PATTERN = re.compile(r'[+-]?[0-9]+\Z')

STATUS_MIN = -2 ** 31
STATUS_MAX = 2 ** 31 - 1


def parse_status(text: str) -> Optional[int]:
    """
    Parse an exit status as a signed 32-bit decimal integer.

    Returns:
        The value, or None if text is not such an integer

    Examples:
        parse_status('42')    -> 42
        parse_status('-1')    -> -1
        parse_status('1_0')   -> None
        parse_status('99999999999999999999') -> None
    """
    if not STATUS_PATTERN.match(text):
        return None
    value = int(text)
    if not STATUS_MIN <= value <= STATUS_MAX:
        return None
    return value


@register_command('exit')
@command()
def cmd_exit(process: Process) -> int:
    """
    Exit the shell with an optional status

    Usage: exit [n]

    Examples:
        exit        # Exit with status 0
        exit 42     # Exit with status 42
        exit abc    # Not a number, exit with status 0
    """
    exit_code = 0
    if process.args:
        exit_code = parse_status(process.args[0]) or 0

    raise ExitShell(exit_code)
