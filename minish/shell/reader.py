"""
Line Reader Module

Reads one bounded line of user input at a time.

Author: YSNRFD
Version: 1.0.0
"""

import sys
from typing import Optional, TextIO

from minish.exceptions import LineTooLongError, EmptyInputError


class LineReader:
    """
    Reads one line of text, bounded by a maximum length.
    
    When a line is too long, the remainder of that line is consumed
    and discarded before the error is raised, so the next read starts
    at the beginning of the next line.
    
    Example:
        >>> reader = LineReader(max_length=100)
        >>> line = reader.read_line('$ ')
    """
    
    def __init__(
        self,
        stream: Optional[TextIO] = None,
        output: Optional[TextIO] = None,
        max_length: int = 100
    ):
        if max_length < 1:
            raise ValueError("max_length must be positive")
        self._stream = stream if stream is not None else sys.stdin
        self._output = output if output is not None else sys.stdout
        self._max_length = max_length
    
    @property
    def max_length(self) -> int:
        return self._max_length
    
    def read_line(self, prompt: str = '') -> str:
        """
        Read and trim one line of input.
        
        Args:
            prompt: Text written before reading
        
        Returns:
            The line without its newline, trimmed of surrounding whitespace
        
        Raises:
            LineTooLongError: If the line exceeds ``max_length`` characters
            EmptyInputError: If nothing but whitespace was entered
            EOFError: If the stream is exhausted
        """
        if prompt:
            self._output.write(prompt)
            self._output.flush()
        
        # One extra character tells a full-length line from an overlong one
        raw = self._stream.readline(self._max_length + 1)
        if raw == '':
            raise EOFError
        
        if raw.endswith('\n'):
            raw = raw[:-1]
        elif len(raw) > self._max_length:
            self._discard_rest_of_line()
            raise LineTooLongError(self._max_length)
        
        line = raw.strip()
        if not line:
            raise EmptyInputError()
        return line
    
    def read_response(self, prompt: str = '') -> str:
        """
        Read a free-form answer, e.g. to a confirmation prompt.
        
        Unlike ``read_line`` this never raises for empty or overlong
        input; EOF reads as an empty answer.
        """
        if prompt:
            self._output.write(prompt)
            self._output.flush()
        
        raw = self._stream.readline(self._max_length + 1)
        if raw and not raw.endswith('\n') and len(raw) > self._max_length:
            self._discard_rest_of_line()
        return raw.strip()
    
    def _discard_rest_of_line(self) -> None:
        while True:
            chunk = self._stream.readline(self._max_length)
            if chunk == '' or chunk.endswith('\n'):
                return
