"""Exit status values shared by the shell, the builtins and the dispatcher."""

EXIT_CODE_SUCCESS = 0
EXIT_CODE_FAILURE = 1

# Misuse of a builtin (missing operand, bad argument)
EXIT_CODE_USAGE = 2

# Found on PATH but could not be started
EXIT_CODE_CANNOT_EXECUTE = 126

# Neither a builtin nor an executable on PATH
EXIT_CODE_NOT_FOUND = 127
