"""CommandRunner: run external tools through the shell and report the outcome.

Provides module-level run_command() (buffered) and run_command_streaming()
(output goes straight to the terminal), plus a CommandRunner class that
delegates to them and relays results to the user.
"""

import subprocess
import sys
from dataclasses import dataclass
from typing import Optional

import click

from cppm.errors import ProcessExitedNonZero, ProcessSpawnFailed

# Exit status POSIX shells use when the program to run cannot be found.
SHELL_COMMAND_NOT_FOUND = 127


@dataclass
class CommandResult:
    """Exit status and captured output of one external command."""
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


def run_command(command_line: str, cwd: Optional[str] = None,
                shell: Optional[str] = None) -> CommandResult:
    """Run *command_line* through the shell and wait, capturing its output.

    Raises:
        ProcessSpawnFailed: If the shell itself could not be started.
    """
    try:
        result = subprocess.run(
            command_line,
            shell=True,
            executable=shell,
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            errors="replace",
        )
    except OSError as e:
        raise ProcessSpawnFailed(command_line, e) from e
    return CommandResult(result.returncode, result.stdout, result.stderr)


def run_command_streaming(command_line: str, cwd: Optional[str] = None,
                          shell: Optional[str] = None) -> CommandResult:
    """Run *command_line* through the shell, inheriting the terminal.

    The child's output is forwarded live, so nothing is captured.
    """
    try:
        result = subprocess.run(command_line, shell=True, executable=shell, cwd=cwd)
    except OSError as e:
        raise ProcessSpawnFailed(command_line, e) from e
    return CommandResult(result.returncode)


class CommandRunner:
    """Runs steps of a cppm command, stopping the command on the first failure."""

    def __init__(self, shell: Optional[str] = None, verbose: bool = False):
        self._shell = shell
        self._verbose = verbose

    def _announce(self, command_line):
        if self._verbose:
            print(f"Running: {command_line}", file=sys.stderr)

    def _check(self, command_line, result):
        if result.returncode == SHELL_COMMAND_NOT_FOUND:
            cause = result.stderr.strip() or "command not found"
            raise ProcessSpawnFailed(command_line, cause)
        if not result.succeeded:
            raise ProcessExitedNonZero(command_line, result.returncode, result.stderr)

    def run(self, command_line: str, cwd: Optional[str] = None) -> CommandResult:
        """Run a buffered step and relay its output.

        Stdout is echoed whether or not the step succeeded. On success stderr
        is echoed to stderr; a failure raises ProcessExitedNonZero carrying it
        instead, or ProcessSpawnFailed when the shell could not find the program.
        """
        self._announce(command_line)
        result = run_command(command_line, cwd=cwd, shell=self._shell)
        if result.stdout:
            click.echo(result.stdout, nl=not result.stdout.endswith("\n"))
        self._check(command_line, result)
        if result.stderr:
            click.echo(result.stderr, nl=not result.stderr.endswith("\n"), err=True)
        return result

    def stream(self, command_line: str, cwd: Optional[str] = None) -> CommandResult:
        """Run a step whose output goes straight to the terminal."""
        self._announce(command_line)
        result = run_command_streaming(command_line, cwd=cwd, shell=self._shell)
        self._check(command_line, result)
        return result
