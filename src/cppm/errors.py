"""Errors reported to the user by cppm commands.

All of them are click exceptions, so the CLI prints ``Error: <message>`` on
stderr and exits with status 1.
"""

import click


class ProjectAlreadyExists(click.ClickException):
    def __init__(self, name):
        super().__init__(f"Project '{name}' already exists")
        self.name = name


class UnsupportedExtension(click.ClickException):
    def __init__(self, token, allowed):
        quoted = " and ".join(f"'{a}'" for a in allowed)
        super().__init__(
            f"Unsupported file extension '{token}'. Valid file extensions are {quoted}"
        )
        self.token = token
        self.allowed = list(allowed)


class FilesystemError(click.ClickException):
    def __init__(self, operation, cause):
        super().__init__(f"Failed to {operation}: {cause}")
        self.operation = operation
        self.cause = cause


class ProcessSpawnFailed(click.ClickException):
    def __init__(self, command, cause):
        super().__init__(f"Failed to spawn command '{command}': {cause}")
        self.command = command
        self.cause = cause


class ProcessExitedNonZero(click.ClickException):
    """An external tool ran and reported failure."""

    def __init__(self, command, returncode, stderr=""):
        message = f"Command '{command}' exited with status {returncode}"
        if stderr and stderr.strip():
            message += f"\n{stderr.rstrip()}"
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
