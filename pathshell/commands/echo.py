"""
ECHO command - print arguments.
"""

from ..process import Process
from ..command_decorators import command
from . import register_command


@register_command('echo')
@command()
def cmd_echo(process: Process) -> int:
    """
    Print arguments separated by single spaces

    Usage: echo [arg ...]

    Note:
        No option or escape processing: '-n' and '\\t' are printed as is.
    """
    process.stdout.write(' '.join(process.args) + '\n')
    return 0
