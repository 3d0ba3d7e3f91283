"""
Pytest configuration and shared fixtures for pathshell tests.

This module provides reusable test fixtures for:
- Captured output streams
- Processes wired to a plain-dict environment
- Temporary directories of executables and an isolated PATH
"""

import io

import pytest


# ============================================================================
# Executable Factory
# ============================================================================

class BinDir:
    """
    Helper that creates files in a temporary directory.

    Executables are tiny /bin/sh scripts so tests can control exactly what
    they print and which status they exit with.
    """

    def __init__(self, root):
        self.root = root

    @property
    def path(self) -> str:
        return str(self.root)

    def add_executable(self, name: str, body: str = 'exit 0', mode: int = 0o755) -> str:
        """Create a shell script and return its path."""
        script = self.root / name
        script.write_text(f"#!/bin/sh\n{body}\n")
        script.chmod(mode)
        return str(script)

    def add_file(self, name: str, content: str = '', mode: int = 0o644) -> str:
        """Create a non-executable file and return its path."""
        target = self.root / name
        target.write_text(content)
        target.chmod(mode)
        return str(target)


@pytest.fixture
def bin_dir(tmp_path):
    """
    Provides a directory for throwaway executables.

    Example:
        def test_resolve(bin_dir):
            bin_dir.add_executable('hello', 'echo hi')
    """
    root = tmp_path / "bin"
    root.mkdir()
    return BinDir(root)


@pytest.fixture
def bin_dir_factory(tmp_path):
    """
    Provides a function creating any number of separate bin directories.

    Example:
        def test_order(bin_dir_factory):
            first, second = bin_dir_factory('a'), bin_dir_factory('b')
    """
    def make(name: str) -> BinDir:
        root = tmp_path / name
        root.mkdir()
        return BinDir(root)
    return make


@pytest.fixture
def env():
    """
    Provides an isolated environment mapping with an empty PATH.

    Tests set env['PATH'] to the directories they need.
    """
    return {'PATH': '', 'HOME': '/home/test'}


# ============================================================================
# Streams and Processes
# ============================================================================

@pytest.fixture
def capture_output():
    """
    Provides buffer-backed streams for capturing command output.

    Returns:
        tuple: (stdout, stderr) streams

    Example:
        def test_command_output(capture_output):
            stdout, stderr = capture_output
            process = Process('echo', ['hi'], get_builtin('echo'), stdout=stdout, stderr=stderr)
            ...
            assert stdout.get_value() == b"hi\\n"
    """
    from pathshell.streams import OutputStream, ErrorStream

    stdout = OutputStream(io.BytesIO())
    stderr = ErrorStream(io.BytesIO())

    return stdout, stderr


@pytest.fixture
def context(env):
    """Provides a CommandContext over the isolated environment."""
    from pathshell.context import CommandContext

    return CommandContext(env=env)


@pytest.fixture
def make_process(capture_output, context):
    """
    Provides a factory for Process instances wired to a builtin.

    Example:
        def test_echo(make_process):
            process = make_process('echo', ['a', 'b'])
            assert process.execute() == 0
    """
    from pathshell.builtins import get_builtin
    from pathshell.process import Process

    stdout, stderr = capture_output

    def make(command: str, args=()):
        return Process(
            command=command,
            args=list(args),
            stdout=stdout,
            stderr=stderr,
            executor=get_builtin(command),
            context=context,
        )
    return make


@pytest.fixture
def dispatcher(capture_output, context):
    """Provides a Dispatcher over captured streams and the isolated env."""
    from pathshell.dispatcher import Dispatcher

    stdout, stderr = capture_output
    return Dispatcher(stdout=stdout, stderr=stderr, context=context)


# ============================================================================
# Helper Functions
# ============================================================================

def get_stdout(process) -> str:
    """Get stdout content as string."""
    return process.get_stdout().decode('utf-8', errors='replace')


def get_stderr(process) -> str:
    """Get stderr content as string."""
    return process.get_stderr().decode('utf-8', errors='replace')


pytest.get_stdout = get_stdout
pytest.get_stderr = get_stderr
