"""
Decorators applied to builtin command functions.
"""

import functools
from typing import Callable, Optional

from .exceptions import InvalidArgumentError


def command(min_args: int = 0, max_args: Optional[int] = None, usage: str = ""):
    """
    Declare the argument contract of a builtin.

    The wrapped function only runs when the argument count is within
    bounds; otherwise InvalidArgumentError is raised, which Process.execute()
    reports on stderr.

    Args:
        min_args: Minimum required arguments
        max_args: Maximum allowed arguments (None = unlimited)
        usage: Usage line appended to the error message

    Example:
        @register_command('type')
        @command(min_args=1, usage="type name [name ...]")
        def cmd_type(process): ...
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(process) -> int:
            arg_count = len(process.args)
            if arg_count < min_args:
                raise InvalidArgumentError(
                    process.command, "", _with_usage(f"{process.command}: missing operand", usage))
            if max_args is not None and arg_count > max_args:
                raise InvalidArgumentError(
                    process.command, process.args[max_args],
                    _with_usage(f"{process.command}: too many arguments", usage))
            return func(process)

        wrapper.usage = usage
        return wrapper
    return decorator


def _with_usage(message: str, usage: str) -> str:
    if usage:
        return f"{message}\nusage: {usage}"
    return message
