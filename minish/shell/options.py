"""
Option Parser Module

Interprets hyphen-prefixed arguments as single-character flags.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass
from typing import FrozenSet, List, Mapping

from minish.exceptions import InvalidOptionError
from .parser import ArgumentVector


@dataclass(frozen=True)
class OptionFlags:
    """The set of effects enabled for one invocation."""
    enabled: FrozenSet[str] = frozenset()
    
    def __contains__(self, effect: str) -> bool:
        return effect in self.enabled
    
    def __bool__(self) -> bool:
        return bool(self.enabled)


def is_option(arg: str) -> bool:
    """True if ``arg`` starts with '-' and has more than one character."""
    return arg.startswith('-') and len(arg) > 1


def parse_options(
    argv: ArgumentVector,
    recognized_flags: Mapping[str, str],
    validate: bool = False
) -> OptionFlags:
    """
    Collect the flags given to a command.
    
    Every option argument after the command name contributes each
    character after its hyphen as an independent flag.
    
    Args:
        argv: The command's argument vector
        recognized_flags: Flag character -> effect name
        validate: Reject unknown flags instead of ignoring them
    
    Returns:
        OptionFlags with the effect names that were switched on
    
    Raises:
        InvalidOptionError: On the first unknown flag, when validating
    """
    enabled = set()
    for arg in argv.args:
        if not is_option(arg):
            continue
        for flag in arg[1:]:
            effect = recognized_flags.get(flag)
            if effect is not None:
                enabled.add(effect)
            elif validate:
                raise InvalidOptionError(arg, flag)
    return OptionFlags(frozenset(enabled))


def operands(argv: ArgumentVector) -> List[str]:
    """The non-option arguments after the command name, in order."""
    return [arg for arg in argv.args if not is_option(arg)]
