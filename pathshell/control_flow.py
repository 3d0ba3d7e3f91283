"""
Control flow exceptions.

These are not errors: they carry a request from a builtin up through the
execution layer to the read loop, which is the only place allowed to act
on them.
"""


class ControlFlowException(Exception):
    """Base class for exceptions that must propagate past Process.execute()"""
    pass


class ExitShell(ControlFlowException):
    """
    Raised by the exit builtin to terminate the shell.

    Attributes:
        exit_code: Status the shell process should terminate with
    """

    def __init__(self, exit_code: int = 0):
        super().__init__(exit_code)
        self.exit_code = exit_code
