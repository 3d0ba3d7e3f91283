"""
Builtin command registry.

Each builtin lives in its own module and registers itself with
@register_command. load_all_commands() imports those modules once; after
that the registry is only ever read.
"""

import importlib
from types import MappingProxyType
from typing import Callable, Dict, Mapping

_REGISTRY: Dict[str, Callable] = {}

# Read-only view handed out to the rest of the shell
BUILTINS: Mapping[str, Callable] = MappingProxyType(_REGISTRY)

COMMAND_MODULES = (
    'echo',
    'exit_cmd',
    'pwd',
    'type_cmd',
)


def register_command(name: str):
    """
    Register a function as the builtin called `name`.

    Example:
        @register_command('pwd')
        def cmd_pwd(process: Process) -> int:
            ...
    """
    def decorator(func: Callable) -> Callable:
        _REGISTRY[name] = func
        return func
    return decorator


def load_all_commands():
    """Import every builtin module so each one registers itself"""
    for module_name in COMMAND_MODULES:
        importlib.import_module(f'{__name__}.{module_name}')


__all__ = ['BUILTINS', 'register_command', 'load_all_commands']
