"""
Splitting of input lines into commands.

Tokens are delimited by whitespace only: there is no quoting, escaping or
expansion.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Command:
    """
    A parsed input line.

    Attributes:
        name: First token, never empty
        args: Remaining tokens, in input order
    """

    name: str
    args: Tuple[str, ...] = ()

    def __str__(self):
        return ' '.join((self.name,) + self.args)


def tokenize(line: str) -> Optional[Command]:
    """
    Turn one input line into a Command.

    Args:
        line: Raw input line, trailing newline included or not

    Returns:
        Command, or None when the line holds no tokens

    Examples:
        >>> tokenize('echo  a   b\\n')
        Command(name='echo', args=('a', 'b'))
        >>> tokenize('   \\n') is None
        True
    """
    tokens = line.split()
    if not tokens:
        return None
    return Command(name=tokens[0], args=tuple(tokens[1:]))
