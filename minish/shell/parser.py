"""
Command Parser Module

Parses command lines into argument vectors.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple

from minish.exceptions import (
    ArgumentError,
    EmptyInputError,
    IndexOutOfRangeError,
    ParseError,
)


QUOTE = '"'


class TokenizerState(Enum):
    """States of the tokenizer."""
    NORMAL = "normal"
    QUOTED = "quoted"


@dataclass(frozen=True)
class Token:
    """A parsed token."""
    value: str
    quoted: bool = False


@dataclass(frozen=True)
class ArgumentVector:
    """
    The ordered arguments of one command line.
    
    Element 0 is the command name. The vector cannot be changed after
    construction.
    
    Example:
        >>> argv = ArgumentVector(('echo', 'hello world'))
        >>> argv.count()
        2
        >>> argv.at(1)
        'hello world'
    """
    arguments: Tuple[str, ...]
    
    def __post_init__(self):
        if not isinstance(self.arguments, tuple):
            object.__setattr__(self, 'arguments', tuple(self.arguments))
        if not self.arguments:
            raise ArgumentError("An argument vector needs at least a command name")
    
    def count(self) -> int:
        """Number of arguments, command name included."""
        return len(self.arguments)
    
    def at(self, index: int) -> str:
        """
        Get the argument at ``index``.
        
        Raises:
            IndexOutOfRangeError: If ``index`` is negative or >= ``count()``
        """
        if index < 0 or index >= len(self.arguments):
            raise IndexOutOfRangeError(index, len(self.arguments))
        return self.arguments[index]
    
    @property
    def name(self) -> str:
        return self.arguments[0]
    
    @property
    def args(self) -> Tuple[str, ...]:
        return self.arguments[1:]
    
    def __len__(self) -> int:
        return len(self.arguments)
    
    def __iter__(self) -> Iterator[str]:
        return iter(self.arguments)


class CommandParser:
    """
    Splits command lines into arguments.
    
    Handles:
    - Whitespace-separated words (runs of whitespace count once)
    - Double-quoted spans kept as one argument, quotes removed
    - Unterminated quotes: the rest of the line joins the last argument
    
    Example:
        >>> parser = CommandParser()
        >>> parser.parse('echo "hello world" foo').arguments
        ('echo', 'hello world', 'foo')
    """
    
    def parse(self, line: str) -> ArgumentVector:
        """
        Parse a command line.
        
        Args:
            line: Command line string
        
        Returns:
            ArgumentVector with at least one element
        
        Raises:
            EmptyInputError: If the line is empty or all whitespace
            ParseError: If the vector could not be built
        """
        tokens = self.tokenize(line)
        
        if not tokens:
            raise EmptyInputError()
        
        try:
            return ArgumentVector(tuple(token.value for token in tokens))
        except MemoryError as e:
            raise ParseError("Argument vector allocation failed") from e
    
    def tokenize(self, line: str) -> List[Token]:
        """Convert a line into tokens."""
        line = line.strip()
        
        try:
            return self._tokenize(line)
        except MemoryError as e:
            raise ParseError(
                "Token allocation failed",
                context={'length': len(line)}
            ) from e
    
    def _tokenize(self, line: str) -> List[Token]:
        tokens: List[Token] = []
        current: List[str] = []
        state = TokenizerState.NORMAL
        building = False
        quoted = False
        
        for char in line:
            if state is TokenizerState.QUOTED:
                if char == QUOTE:
                    state = TokenizerState.NORMAL
                else:
                    current.append(char)
                continue
            
            if char == QUOTE:
                state = TokenizerState.QUOTED
                building = True
                quoted = True
            elif char.isspace():
                if building:
                    tokens.append(Token(''.join(current), quoted))
                    current = []
                    building = False
                    quoted = False
            else:
                current.append(char)
                building = True
        
        # End of line flushes whatever is pending, open quote or not
        if building:
            tokens.append(Token(''.join(current), quoted))
        
        return tokens
