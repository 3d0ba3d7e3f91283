"""
Exception hierarchy for pathshell.

Every error the dispatch core can report derives from ShellError, so the
execution layer can catch them with a single except clause, print the
message and keep the read loop alive.

Usage:
    from pathshell.exceptions import CommandNotFoundError

    try:
        dispatcher.dispatch(command)
    except ShellError as e:
        stderr.write(f"{e}\\n")
        return e.exit_code
"""

from typing import Optional

from .exit_codes import (
    EXIT_CODE_CANNOT_EXECUTE,
    EXIT_CODE_FAILURE,
    EXIT_CODE_NOT_FOUND,
    EXIT_CODE_USAGE,
)


class ShellError(Exception):
    """
    Base class for all shell errors.

    Attributes:
        message: Error message
        exit_code: Suggested exit code (default: 1)
    """

    def __init__(self, message: str, exit_code: int = EXIT_CODE_FAILURE):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self):
        return self.message


# =============================================================================
# Command Errors
# =============================================================================

class CommandError(ShellError):
    """
    Base class for command-related errors.

    Raised when command execution fails.
    """

    def __init__(self, command: str, message: str, exit_code: int = EXIT_CODE_FAILURE):
        super().__init__(message, exit_code)
        self.command = command


class CommandNotFoundError(CommandError):
    """
    Raised when a name is neither a builtin nor an executable on PATH.

    Example:
        raise CommandNotFoundError("nonexistent")
    """

    def __init__(self, command: str):
        message = f"{command}: command not found"
        super().__init__(command, message, exit_code=EXIT_CODE_NOT_FOUND)


class InvalidArgumentError(CommandError):
    """
    Raised when a builtin is invoked with missing or malformed arguments.

    Example:
        raise InvalidArgumentError("type", "", "type: missing operand")
    """

    def __init__(self, command: str, argument: str, message: Optional[str] = None):
        if message is None:
            message = f"{command}: {argument}: invalid argument"
        super().__init__(command, message, exit_code=EXIT_CODE_USAGE)
        self.argument = argument


# =============================================================================
# Process Errors
# =============================================================================

class SpawnError(CommandError):
    """
    Raised when the OS refuses to create a child process.

    Example:
        raise SpawnError("ls", "Permission denied")
    """

    def __init__(self, command: str, reason: str):
        message = f"{command}: {reason}"
        super().__init__(command, message, exit_code=EXIT_CODE_CANNOT_EXECUTE)
        self.reason = reason


class OutputDecodeError(CommandError):
    """
    Raised when a child's captured output is not valid UTF-8.

    Example:
        raise OutputDecodeError("cat")
    """

    def __init__(self, command: str, message: Optional[str] = None):
        if message is None:
            message = f"{command}: output is not valid UTF-8"
        super().__init__(command, message)


# =============================================================================
# Environment Errors
# =============================================================================

class EnvironmentQueryError(CommandError):
    """
    Raised when process-wide state such as the working directory
    cannot be determined or is not valid text.

    Example:
        raise EnvironmentQueryError("pwd", "No such file or directory")
    """

    def __init__(self, command: str, reason: str):
        message = f"{command}: {reason}"
        super().__init__(command, message)
        self.reason = reason
