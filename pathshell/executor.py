"""
External command execution.

Runs a resolved executable as a child process and waits for it. The child
gets no input (stdin is the null device), its stdout is captured and its
stderr goes straight to the shell's own stderr.
"""

import logging
import subprocess
from typing import Mapping, Optional, Sequence

from .exceptions import OutputDecodeError, SpawnError
from .resolver import ResolvedExecutable
from .streams import OutputStream

logger = logging.getLogger(__name__)


class ProcessExecutor:
    """Spawns resolved executables and forwards their output"""

    def run(self, resolved: ResolvedExecutable, args: Sequence[str],
            stdout: OutputStream, env: Optional[Mapping[str, str]] = None) -> int:
        """
        Run an executable to completion.

        The child sees the typed command name as argv[0]; the file that is
        actually started is resolved.path. There is no timeout.

        Args:
            resolved: Executable found by the resolver
            args: Arguments, excluding the command name
            stdout: Stream receiving the trimmed output
            env: Environment for the child (default: inherit the shell's)

        Returns:
            The child's exit status

        Raises:
            SpawnError: The OS refused to start the child, or an argument
                cannot be passed to it
            OutputDecodeError: The child's output is not valid UTF-8
        """
        argv = [resolved.name, *args]
        logger.debug("Spawning %s as %r", resolved.path, argv)

        try:
            completed = subprocess.run(
                argv,
                executable=resolved.path,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=None,
                env=env,
                check=False,
            )
        except (OSError, ValueError) as e:
            # ValueError: an argument holds an embedded NUL
            logger.warning("Failed to spawn %s: %s", resolved.path, e)
            raise SpawnError(resolved.name, getattr(e, 'strerror', None) or str(e)) from e

        try:
            output = completed.stdout.decode('utf-8')
        except UnicodeDecodeError as e:
            logger.warning("%s produced non UTF-8 output", resolved.path)
            raise OutputDecodeError(resolved.name) from e

        output = output.strip()
        if output:
            stdout.write(f"{output}\n")

        status = completed.returncode
        if status < 0:
            # Killed by signal N
            status = 128 - status

        logger.debug("%s exited with status %d", resolved.path, status)
        return status
