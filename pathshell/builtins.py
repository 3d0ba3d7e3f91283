"""
Built-in shell commands registry.

The commands themselves live in the commands/ directory. This module loads
them and exposes lookup helpers.
"""

from .commands import load_all_commands, BUILTINS as COMMANDS

# Load all command modules to populate the registry
load_all_commands()

BUILTINS = COMMANDS


def get_builtin(command: str):
    """
    Get a built-in command executor.

    Args:
        command: The command name to look up (case-sensitive)

    Returns:
        The command function, or None if not found

    Example:
        >>> executor = get_builtin('echo')
        >>> if executor:
        ...     executor(process)
    """
    return BUILTINS.get(command)


def is_builtin(command: str) -> bool:
    """Check whether a name is a shell builtin"""
    return command in BUILTINS
