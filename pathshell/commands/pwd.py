"""
PWD command - print working directory.
"""

from ..process import Process
from ..command_decorators import command
from ..exceptions import EnvironmentQueryError
from . import register_command


@register_command('pwd')
@command()
def cmd_pwd(process: Process) -> int:
    """
    Print working directory

    Usage: pwd

    Note:
        Reads process.context.cwd, which asks the OS every time.
    """
    try:
        cwd = process.context.cwd
    except OSError as e:
        raise EnvironmentQueryError('pwd', e.strerror or str(e)) from e

    try:
        data = f"{cwd}\n".encode('utf-8')
    except UnicodeEncodeError as e:
        raise EnvironmentQueryError('pwd', "working directory is not valid UTF-8") from e

    process.stdout.write(data)
    return 0
