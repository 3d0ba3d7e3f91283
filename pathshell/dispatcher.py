"""
Command dispatch: decides how a parsed command is executed.

For every command exactly one of three things happens, in this order:

1. the name is a builtin -> the builtin runs (builtins shadow executables
   of the same name on PATH);
2. the name resolves to an executable on PATH -> it is spawned;
3. otherwise "<name>: command not found" is reported on stderr.

The dispatcher keeps no state between commands.
"""

import logging
from typing import Optional

from .builtins import get_builtin
from .context import CommandContext
from .exceptions import CommandNotFoundError
from .executor import ProcessExecutor
from .lexer import Command
from .process import Process
from .resolver import ExecutableResolver, ResolvedExecutable
from .streams import ErrorStream, OutputStream

logger = logging.getLogger(__name__)


class Dispatcher:
    """Routes commands to builtins or external executables"""

    def __init__(
        self,
        stdout: Optional[OutputStream] = None,
        stderr: Optional[ErrorStream] = None,
        context: Optional[CommandContext] = None,
        resolver: Optional[ExecutableResolver] = None,
        executor: Optional[ProcessExecutor] = None,
    ):
        self.stdout = stdout or OutputStream.to_stdout()
        self.stderr = stderr or ErrorStream.to_stderr()
        self.context = context or CommandContext()
        self.resolver = resolver or ExecutableResolver(self.context)
        self.executor = executor or ProcessExecutor()

    def dispatch(self, command: Command) -> int:
        """
        Execute one command.

        Args:
            command: Parsed command

        Returns:
            Exit status of the command (127 when not found)

        Raises:
            ExitShell: The exit builtin was run
        """
        builtin = get_builtin(command.name)
        if builtin is not None:
            logger.debug("%s: builtin", command.name)
            return self._run(command, builtin)

        resolved = self.resolver.resolve(command.name)
        if resolved is not None:
            logger.debug("%s: external %s", command.name, resolved.path)
            return self._run(command, self._external(resolved))

        logger.debug("%s: not found", command.name)
        error = CommandNotFoundError(command.name)
        self.stderr.write(f"{error}\n")
        return error.exit_code

    def _external(self, resolved: ResolvedExecutable):
        def run_external(process: Process) -> int:
            return self.executor.run(
                resolved, process.args, process.stdout, env=process.env)
        return run_external

    def _run(self, command: Command, executor) -> int:
        process = Process(
            command=command.name,
            args=command.args,
            stdout=self.stdout,
            stderr=self.stderr,
            executor=executor,
            context=self.context,
        )
        return process.execute()
