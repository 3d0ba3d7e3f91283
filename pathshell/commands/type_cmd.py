"""
TYPE command - describe how a name would be interpreted.

Note: Module name is type_cmd.py because 'type' is a Python builtin.
"""

from ..process import Process
from ..command_decorators import command
from ..resolver import ExecutableResolver
from . import BUILTINS, register_command


@register_command('type')
@command(min_args=1, usage="type name [name ...]")
def cmd_type(process: Process) -> int:
    """
    Report whether each name is a builtin or an executable on PATH

    Usage: type name [name ...]

    Examples:
        type echo   # echo is a shell builtin
        type ls     # ls is /usr/bin/ls
        type cd     # cd: not found

    Returns:
        0 if every name was found, 1 otherwise
    """
    resolver = ExecutableResolver(process.context)
    exit_code = 0

    for name in process.args:
        if name in BUILTINS:
            process.stdout.write(f"{name} is a shell builtin\n")
            continue

        resolved = resolver.resolve(name)
        if resolved is not None:
            process.stdout.write(f"{name} is {resolved.path}\n")
        else:
            process.stderr.write(f"{name}: not found\n")
            exit_code = 1

    return exit_code
