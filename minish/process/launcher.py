"""
Program Launcher Module

Starts external programs (user executables and the C compiler) and
waits for them to finish.

Author: YSNRFD
Version: 1.0.0
"""

import errno
import io
import subprocess
from typing import List, Optional, Sequence, TextIO

from minish.exceptions import ExecError, ForkError
from minish.logger import get_logger


# errno values that mean the child could not be created at all
FORK_ERRNOS = frozenset({errno.EAGAIN, errno.ENOMEM})


def _has_fileno(stream: TextIO) -> bool:
    try:
        stream.fileno()
    except (AttributeError, io.UnsupportedOperation, OSError):
        return False
    return True


class ProgramLauncher:
    """
    Runs a program in the foreground.
    
    The child inherits the shell's output streams when they are real
    files; otherwise (e.g. ``io.StringIO`` in tests) its output is
    captured and copied into them once it exits.
    
    Example:
        >>> launcher = ProgramLauncher(sys.stdout, sys.stderr)
        >>> launcher.run(['./a.out', 'arg'], cwd='/tmp')
        0
    """
    
    def __init__(self, stdout: TextIO, stderr: TextIO):
        self._stdout = stdout
        self._stderr = stderr
        self._logger = get_logger('process')
    
    def run(
        self,
        args: Sequence[str],
        cwd: str,
        executable: Optional[str] = None
    ) -> int:
        """
        Start a program and block until it exits.
        
        Args:
            args: Argument vector; ``args[0]`` is the program as typed
            cwd: Working directory for the child
            executable: Resolved program path, if different from ``args[0]``
        
        Returns:
            The child's exit status (130 when interrupted)
        
        Raises:
            ExecError: If the program cannot be executed
            ForkError: If no child process could be created
        """
        program = args[0]
        argv: List[str] = list(args)
        capture = not (_has_fileno(self._stdout) and _has_fileno(self._stderr))
        
        self._logger.debug(
            f"Starting {program}",
            context={'cwd': cwd, 'argc': len(argv)}
        )
        
        if not capture:
            self._stdout.flush()
            self._stderr.flush()
        
        try:
            completed = subprocess.run(
                argv,
                executable=executable,
                cwd=cwd,
                capture_output=capture,
                text=capture,
            )
        except KeyboardInterrupt:
            return 130
        except MemoryError as e:
            raise ForkError(program, "Cannot allocate memory") from e
        except OSError as e:
            reason = e.strerror or str(e)
            if e.errno in FORK_ERRNOS:
                raise ForkError(program, reason) from e
            raise ExecError(program, reason) from e
        
        if capture:
            if completed.stdout:
                self._stdout.write(completed.stdout)
            if completed.stderr:
                self._stderr.write(completed.stderr)
        
        self._logger.debug(
            f"{program} exited",
            context={'returncode': completed.returncode}
        )
        return completed.returncode
