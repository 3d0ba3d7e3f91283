"""
CommandContext - Encapsulates the process-wide state commands may read.

Commands receive the environment and the working directory through this
object instead of reaching for os.environ and os.getcwd() themselves,
which keeps them testable with a plain dict.
"""

import os
from dataclasses import dataclass, field
from typing import List, MutableMapping, Optional


@dataclass
class CommandContext:
    """
    Encapsulates all context needed for command execution.

    The environment mapping is held by reference: with the default
    (os.environ) changes made between commands are seen by the next
    command. Nothing here caches values derived from it.

    Example:
        >>> ctx = CommandContext(env={'PATH': '/usr/bin:/bin'})
        >>> ctx.search_path()
        ['/usr/bin', '/bin']
    """

    env: MutableMapping[str, str] = field(default_factory=lambda: os.environ)

    @property
    def cwd(self) -> str:
        """Current working directory of the shell process"""
        return os.getcwd()

    def get_variable(self, name: str) -> Optional[str]:
        """
        Get an environment variable.

        Returns:
            Variable value or None if not set
        """
        return self.env.get(name)

    def search_path(self) -> List[str]:
        """
        Directories listed in PATH, in order.

        Read from the environment on every call. Empty entries are dropped,
        an unset or empty PATH gives an empty list.

        Examples:
            >>> CommandContext(env={'PATH': '/a::/b'}).search_path()
            ['/a', '/b']
            >>> CommandContext(env={}).search_path()
            []
        """
        value = self.get_variable('PATH')
        if not value:
            return []
        return [entry for entry in value.split(os.pathsep) if entry]

    def __repr__(self):
        return f"CommandContext(env_vars={len(self.env)})"
