"""
Interactive read loop.

Writes the prompt, reads one line, dispatches it, and repeats until the
exit builtin runs or input ends. Commands are executed strictly one after
the other.
"""

import logging
import sys
from typing import Optional, TextIO

from .context import CommandContext
from .control_flow import ExitShell
from .dispatcher import Dispatcher
from .lexer import tokenize
from .streams import ErrorStream, OutputStream

logger = logging.getLogger(__name__)

PROMPT = "$ "


def console_input() -> TextIO:
    """
    Get sys.stdin set up for reading command lines.

    Input is decoded as UTF-8 with surrogateescape, so a line holding bytes
    that are not UTF-8 still reaches the dispatcher (as an unknown name)
    instead of ending the loop.
    """
    stream = sys.stdin
    if hasattr(stream, 'reconfigure'):
        stream.reconfigure(encoding='utf-8', errors='surrogateescape')
    return stream


class Shell:
    """
    Interactive shell.

    Attributes:
        last_exit_code: Status of the most recently executed command
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[OutputStream] = None,
        stderr: Optional[ErrorStream] = None,
        context: Optional[CommandContext] = None,
        prompt: str = PROMPT,
    ):
        self.stdin = stdin or console_input()
        self.stdout = stdout or OutputStream.to_stdout()
        self.stderr = stderr or ErrorStream.to_stderr()
        self.context = context or CommandContext()
        self.prompt = prompt
        self.dispatcher = Dispatcher(
            stdout=self.stdout,
            stderr=self.stderr,
            context=self.context,
        )
        self.last_exit_code = 0

    def execute(self, line: str) -> int:
        """
        Execute one input line.

        Blank lines produce no output and leave last_exit_code untouched.

        Returns:
            Exit status of the command

        Raises:
            ExitShell: The exit builtin was run
        """
        command = tokenize(line)
        if command is None:
            return self.last_exit_code

        self.last_exit_code = self.dispatcher.dispatch(command)
        return self.last_exit_code

    def read_line(self) -> Optional[str]:
        """
        Show the prompt and read one line.

        Returns:
            The line, or None at end of input
        """
        self.stdout.write(self.prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line

    def repl(self) -> int:
        """
        Run the read loop.

        Returns:
            Status the shell process should exit with: the exit builtin's
            argument, or the last command's status at end of input
        """
        while True:
            line = self.read_line()
            if line is None:
                logger.debug("End of input")
                self.stdout.write("\n")
                self.stdout.flush()
                return self.last_exit_code

            try:
                self.execute(line)
            except ExitShell as e:
                logger.debug("exit requested with status %d", e.exit_code)
                return e.exit_code
