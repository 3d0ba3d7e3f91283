"""Process class: one command invocation with its streams and executor"""

import logging
from typing import Callable, List, Optional, Sequence

from .context import CommandContext
from .control_flow import ControlFlowException
from .exceptions import ShellError
from .exit_codes import EXIT_CODE_FAILURE
from .streams import ErrorStream, OutputStream

logger = logging.getLogger(__name__)


class Process:
    """Represents a single command invocation"""

    def __init__(
        self,
        command: str,
        args: Sequence[str],
        executor: Callable[["Process"], int],
        stdout: Optional[OutputStream] = None,
        stderr: Optional[ErrorStream] = None,
        context: Optional[CommandContext] = None,
    ):
        """
        Initialize a process

        Args:
            command: Command name
            args: Command arguments
            executor: Callable that runs the command and returns its exit code
            stdout: Output stream (default: in-memory buffer)
            stderr: Error stream (default: in-memory buffer)
            context: Environment and working directory view
        """
        self.command = command
        self.args: List[str] = list(args)
        self.stdout = stdout or OutputStream.to_buffer()
        self.stderr = stderr or ErrorStream.to_buffer()
        self.executor = executor
        self.context = context or CommandContext()

        self.exit_code = 0

    @property
    def env(self):
        """Environment variables from context"""
        return self.context.env

    def execute(self) -> int:
        """
        Execute the process

        Shell errors raised by the executor are reported on stderr and turned
        into an exit code. Control flow requests (exit) propagate.

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        try:
            self.exit_code = self.executor(self)
        except KeyboardInterrupt:
            raise
        except ControlFlowException:
            raise
        except ShellError as e:
            logger.debug("%s failed: %s", self.command, e)
            self.stderr.write(f"{e}\n")
            self.exit_code = e.exit_code
        except Exception as e:
            logger.debug("Unexpected error in %s", self.command, exc_info=True)
            self.stderr.write(f"Error executing '{self.command}': {str(e)}\n")
            self.exit_code = EXIT_CODE_FAILURE

        self.stdout.flush()
        self.stderr.flush()

        return self.exit_code

    def get_stdout(self) -> bytes:
        """Get stdout contents"""
        return self.stdout.get_value()

    def get_stderr(self) -> bytes:
        """Get stderr contents"""
        return self.stderr.get_value()

    def __repr__(self):
        args_str = ' '.join(self.args) if self.args else ''
        return f"Process({self.command} {args_str})"
