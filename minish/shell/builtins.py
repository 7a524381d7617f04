"""
Shell Built-in Commands

Implements built-in shell commands.

Author: YSNRFD
Version: 1.0.0
"""

import os
import stat
from typing import List

from minish.exceptions import (
    CannotOpenDirectoryError,
    CompilationError,
    FilesystemError,
    PathTooLongError,
)
from minish.filesystem import PathResolver, RecursiveDeleter
from minish.logger import get_logger
from minish.process import ProgramLauncher
from .dispatcher import CommandDescriptor
from .options import operands, parse_options
from .parser import ArgumentVector


AFFIRMATIVE = ('y', 'yes')

LS_FLAGS = {
    'a': 'show_hidden',
    'l': 'long',
}

RM_FLAGS = {
    'i': 'confirm',
    'd': 'directories',
    'r': 'recursive',
}


class BuiltinCommands:
    """
    Built-in shell commands.

    Every handler takes the full argument vector, resolves relative
    paths against the shell's working directory and returns an exit
    code. Errors are raised and reported by the dispatcher; commands
    with several operands stop at the first failing one.
    """

    def __init__(self, shell):
        """
        Initialize built-in commands.

        Args:
            shell: The shell instance
        """
        self._shell = shell
        self._logger = get_logger('builtins')
        self._deleter = RecursiveDeleter()
        self._launcher = ProgramLauncher(shell.stdout, shell.stderr)
        self._descriptors = {
            d.name: d for d in [
                CommandDescriptor('echo', self.cmd_echo,
                                  usage='echo [text ...]',
                                  summary='Display a line of text'),
                CommandDescriptor('pwd', self.cmd_pwd, max_args=0,
                                  usage='pwd',
                                  summary='Print working directory'),
                CommandDescriptor('ls', self.cmd_ls,
                                  recognized_flags=LS_FLAGS,
                                  usage='ls [-a] [-l]',
                                  summary='List directory contents'),
                CommandDescriptor('cd', self.cmd_cd, min_args=1, max_args=1,
                                  usage='cd <path>',
                                  summary='Change directory'),
                CommandDescriptor('touch', self.cmd_touch, min_args=1,
                                  usage='touch <file> ...',
                                  summary='Create empty files'),
                CommandDescriptor('rm', self.cmd_rm, min_args=1,
                                  recognized_flags=RM_FLAGS,
                                  validate_flags=True,
                                  usage='rm [-i] [-d] [-r] <target> ...',
                                  summary='Remove files or directories'),
                CommandDescriptor('mkdir', self.cmd_mkdir, min_args=1,
                                  usage='mkdir <dir> ...',
                                  summary='Create directories'),
                CommandDescriptor('rmdir', self.cmd_rmdir, min_args=1,
                                  usage='rmdir <dir> ...',
                                  summary='Remove empty directories'),
                CommandDescriptor('mv', self.cmd_mv, min_args=2, max_args=2,
                                  usage='mv <source> <destination>',
                                  summary='Rename or move a file'),
                CommandDescriptor('cat', self.cmd_cat, min_args=1,
                                  usage='cat <file> ...',
                                  summary='Display file contents'),
                CommandDescriptor('make', self.cmd_make, min_args=1,
                                  usage='make <source.c> ...',
                                  summary='Compile C source files'),
                CommandDescriptor('help', self.cmd_help,
                                  usage='help',
                                  summary='Display this help'),
            ]
        }
        self._run_descriptor = CommandDescriptor(
            'run', self.cmd_run,
            usage='./<program> [args ...]',
            summary='Run a program'
        )

    def get_descriptors(self) -> List[CommandDescriptor]:
        """Descriptors of every named built-in command."""
        return list(self._descriptors.values())

    @property
    def run_descriptor(self) -> CommandDescriptor:
        """Descriptor routed for names that look like program paths."""
        return self._run_descriptor

    def _operands(self, argv: ArgumentVector) -> List[str]:
        descriptor = self._descriptors[argv.name]
        if descriptor.parses_options:
            found = operands(argv)
        else:
            found = list(argv.args)
        descriptor.check_operands(found)
        return found

    def _resolve(self, path: str) -> str:
        return PathResolver.resolve(path, self._shell.cwd)

    def _write(self, text: str = '') -> None:
        print(text, file=self._shell.stdout)

    # Command implementations

    def cmd_echo(self, argv: ArgumentVector) -> int:
        """Echo arguments."""
        self._write(' '.join(argv.args))
        return 0

    def cmd_pwd(self, argv: ArgumentVector) -> int:
        """Print working directory."""
        self._operands(argv)
        cwd = self._shell.cwd
        limit = self._shell.config.filesystem.path_max
        if len(cwd) > limit:
            raise PathTooLongError(cwd, limit)
        self._write(cwd)
        return 0

    def cmd_ls(self, argv: ArgumentVector) -> int:
        """
        List the working directory.

        Operands are ignored. ``-a`` includes hidden entries (and the
        ``.``/``..`` pseudo entries), ``-l`` adds mode and size columns.
        Unknown flags are ignored.
        """
        descriptor = self._descriptors['ls']
        flags = parse_options(argv, descriptor.recognized_flags, descriptor.validate_flags)
        cwd = self._shell.cwd

        try:
            names = sorted(os.listdir(cwd))
        except OSError as e:
            raise CannotOpenDirectoryError(cwd, e.strerror or str(e))

        if 'show_hidden' in flags:
            names = ['.', '..'] + names
        else:
            names = [name for name in names if not name.startswith('.')]

        if 'long' not in flags:
            for name in names:
                self._write(name)
            return 0

        self._write("mode\t\tsize\tname")
        for name in names:
            path = os.path.join(cwd, name)
            try:
                st = os.lstat(path)
            except OSError as e:
                raise FilesystemError.from_os_error(name, e, "cannot access")
            self._write(f"{stat.filemode(st.st_mode)}\t{st.st_size}\t{name}")
        return 0

    def cmd_cd(self, argv: ArgumentVector) -> int:
        """Change directory."""
        path = self._operands(argv)[0]
        resolved = self._resolve(path)

        try:
            st = os.stat(resolved)
        except OSError as e:
            raise FilesystemError.from_os_error(path, e)

        if not stat.S_ISDIR(st.st_mode):
            raise FilesystemError(f"{path}: Not a directory", path=path)
        if not os.access(resolved, os.X_OK):
            raise FilesystemError(f"{path}: Permission denied", path=path)

        self._shell.cwd = resolved
        return 0

    def cmd_touch(self, argv: ArgumentVector) -> int:
        """Create empty files, or update the timestamps of existing ones."""
        mode = self._shell.config.filesystem.file_mode

        for path in self._operands(argv):
            resolved = self._resolve(path)
            try:
                if os.path.lexists(resolved):
                    os.utime(resolved)
                else:
                    fd = os.open(resolved, os.O_WRONLY | os.O_CREAT | os.O_EXCL, mode)
                    os.close(fd)
            except OSError as e:
                raise FilesystemError.from_os_error(path, e, "cannot touch")

        return 0

    def cmd_rm(self, argv: ArgumentVector) -> int:
        """
        Remove files or directories.

        Flags are validated before anything is touched:
            -i  ask once for confirmation of all targets
            -d  also remove empty directories
            -r  also remove directories with their content
        """
        descriptor = self._descriptors['rm']
        flags = parse_options(argv, descriptor.recognized_flags, descriptor.validate_flags)
        targets = self._operands(argv)

        if 'confirm' in flags:
            for target in targets:
                self._write(f"Warning: Remove \t'{target}'?")
            answer = self._shell.reader.read_response(
                self._shell.config.shell.confirm_prompt
            )
            if answer.lower() not in AFFIRMATIVE:
                self._logger.info("Removal cancelled", context={'targets': len(targets)})
                return 0

        for target in targets:
            resolved = self._resolve(target)
            is_dir = os.path.isdir(resolved) and not os.path.islink(resolved)

            if is_dir and 'recursive' in flags:
                removed = self._deleter.delete(resolved)
                self._logger.info(
                    f"Removed {target} recursively",
                    context={'entries': len(removed)}
                )
                continue

            try:
                if is_dir and 'directories' in flags:
                    os.rmdir(resolved)
                elif is_dir:
                    raise FilesystemError(
                        f"cannot remove '{target}': Is a directory",
                        path=target
                    )
                else:
                    os.unlink(resolved)
            except OSError as e:
                raise FilesystemError.from_os_error(target, e, "cannot remove")

        return 0

    def cmd_mkdir(self, argv: ArgumentVector) -> int:
        """Create directories."""
        mode = self._shell.config.filesystem.directory_mode

        for path in self._operands(argv):
            try:
                os.mkdir(self._resolve(path), mode)
            except OSError as e:
                raise FilesystemError.from_os_error(path, e, "cannot create directory")

        return 0

    def cmd_rmdir(self, argv: ArgumentVector) -> int:
        """Remove empty directories."""
        for path in self._operands(argv):
            try:
                os.rmdir(self._resolve(path))
            except OSError as e:
                raise FilesystemError.from_os_error(path, e, "failed to remove")

        return 0

    def cmd_mv(self, argv: ArgumentVector) -> int:
        """Rename or move a file."""
        source, destination = self._operands(argv)

        try:
            os.rename(self._resolve(source), self._resolve(destination))
        except OSError as e:
            raise FilesystemError.from_os_error(source, e, "cannot move")

        return 0

    def cmd_cat(self, argv: ArgumentVector) -> int:
        """Display file contents, each file followed by a newline."""
        for path in self._operands(argv):
            try:
                with open(self._resolve(path), 'rb') as f:
                    content = f.read()
            except OSError as e:
                raise FilesystemError.from_os_error(path, e, "cannot open")

            self._write(content.decode('utf-8', errors='replace'))

        return 0

    def cmd_make(self, argv: ArgumentVector) -> int:
        """
        Compile C source files.

        ``make prog.c`` runs ``<compiler> -o prog prog.c`` in the working
        directory. Files without the source extension are reported and
        skipped; a failing compilation is reported and the next file
        is compiled.
        """
        compiler = self._shell.config.process.compiler
        extension = self._shell.config.process.source_extension
        exit_code = 0

        for source in self._operands(argv):
            name, ext = PathResolver.split_extension(source)
            if ext != extension:
                print(f"make: {source} is not a C source file", file=self._shell.stderr)
                exit_code = 1
                continue

            returncode = self._launcher.run(
                [compiler, '-o', name, source],
                cwd=self._shell.cwd
            )
            if returncode != 0:
                error = CompilationError(source, returncode)
                print(f"make: {error.message}", file=self._shell.stderr)
                self._logger.warning(str(error))
                exit_code = 1

        return exit_code

    def cmd_run(self, argv: ArgumentVector) -> int:
        """Run a program given by path, with the rest of the line as arguments."""
        program = argv.name
        return self._launcher.run(
            list(argv),
            cwd=self._shell.cwd,
            executable=self._resolve(program)
        )

    def cmd_help(self, argv: ArgumentVector) -> int:
        """Display help information."""
        descriptors = self.get_descriptors() + [self._run_descriptor]
        width = max(len(d.usage) for d in descriptors)

        self._write("minish - Built-in Commands")
        self._write()
        for d in descriptors:
            self._write(f"  {d.usage.ljust(width)}  {d.summary}")
        self._write(f"  {self._shell.config.shell.exit_keyword.ljust(width)}  Exit the shell")
        return 0
