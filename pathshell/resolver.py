"""Executable resolution for pathshell.

This module provides the ExecutableResolver class which handles:
- Reading the search path (PATH) fresh on every lookup
- Finding the first directory holding an executable file of a given name
- Direct probing of names that already contain a path separator
"""

import logging
import os
import stat
from dataclasses import dataclass
from typing import List, Optional

from .context import CommandContext

logger = logging.getLogger(__name__)

EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


@dataclass(frozen=True)
class ResolvedExecutable:
    """An executable file found for a command name.

    Attributes:
        name: Command name as typed
        path: Canonical absolute path of the file
        mode: st_mode of the file (permission bits included)
    """

    name: str
    path: str
    mode: int

    @property
    def permissions(self) -> int:
        """Permission bits only (e.g. 0o755)"""
        return stat.S_IMODE(self.mode)


def is_executable(mode: int) -> bool:
    """Check that a stat mode describes a regular file with any execute bit.

    Examples:
        is_executable(stat.S_IFREG | 0o755) -> True
        is_executable(stat.S_IFREG | 0o644) -> False
        is_executable(stat.S_IFDIR | 0o755) -> False
    """
    return stat.S_ISREG(mode) and bool(mode & EXECUTE_BITS)


class ExecutableResolver:
    """Resolves command names to executables on the search path.

    Nothing is cached between calls: the search path and the filesystem
    are inspected anew by every resolve().

    Attributes:
        context: Context providing the environment and working directory
    """

    def __init__(self, context: Optional[CommandContext] = None):
        """Initialize the resolver.

        Args:
            context: Command context (default: one backed by os.environ)
        """
        self.context = context or CommandContext()

    def search_path(self) -> List[str]:
        """Get the directories to search, in order."""
        return self.context.search_path()

    def resolve(self, name: str) -> Optional[ResolvedExecutable]:
        """Resolve a command name to an executable file.

        The first directory in search path order holding a matching
        executable wins, even if a later directory holds one too.

        Args:
            name: Command name (e.g. 'ls', or a path such as './tool')

        Returns:
            ResolvedExecutable, or None if nothing matched

        Examples:
            With PATH='/usr/local/bin:/usr/bin' and ls only in /usr/bin:
                resolve('ls') -> ResolvedExecutable('ls', '/usr/bin/ls', ...)
            With a name containing '/':
                resolve('./tool') -> probes <cwd>/tool only
        """
        if not name:
            return None

        if os.sep in name or (os.altsep and os.altsep in name):
            return self.probe(name, os.path.abspath(name))

        for directory in self.search_path():
            resolved = self.probe(name, os.path.join(directory, name))
            if resolved is not None:
                return resolved

        logger.debug("%s: no executable on search path", name)
        return None

    def probe(self, name: str, candidate: str) -> Optional[ResolvedExecutable]:
        """Check a single candidate path.

        The candidate is canonicalized (symlinks and '..' resolved) before
        it is inspected. Any failure to canonicalize or stat it, including
        a path the OS rejects outright (embedded NUL), means "no match here".

        Args:
            name: Command name the candidate was built from
            candidate: Path to inspect

        Returns:
            ResolvedExecutable for the canonical path, or None
        """
        try:
            canonical = os.path.realpath(candidate)
            st = os.stat(canonical)
        except (OSError, ValueError) as e:
            logger.debug("%s: skipping %r (%s)", name, candidate, getattr(e, 'strerror', None) or e)
            return None

        if not is_executable(st.st_mode):
            logger.debug("%s: skipping %s (not an executable file)", name, canonical)
            return None

        logger.debug("%s: resolved to %s", name, canonical)
        return ResolvedExecutable(name=name, path=canonical, mode=st.st_mode)
