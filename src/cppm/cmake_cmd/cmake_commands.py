"""Command lines for the external build tool and formatter, and the handlers
that run them for the init, build, run and format commands."""

import os
import shlex

import click

from cppm.errors import ProcessExitedNonZero


def _dir_arg(*segments):
    return shlex.quote("/".join(segments) + "/")


def configure_command(cmake, root_dir, build_dir):
    return f"{cmake} -S {_dir_arg(root_dir)} -B {_dir_arg(root_dir, build_dir)}"


def build_command(cmake, build_dir):
    return f"{cmake} --build {_dir_arg(build_dir)}"


def run_executable_command(runtime_dir, exec_name, args=()):
    command = f"cd {shlex.quote(runtime_dir)} && {shlex.quote('./' + exec_name)}"
    if args:
        command += " " + " ".join(shlex.quote(arg) for arg in args)
    return command


def format_command(clang_format, src_dir):
    # The glob stays unquoted so the shell expands it.
    return f"{clang_format} -i -style=file {shlex.quote('./' + src_dir)}/*"


def derive_exec_name(cwd):
    """Use the last segment of *cwd* as the executable name.

    Raises:
        click.UsageError: If *cwd* has no usable final segment (e.g. "/").
    """
    name = os.path.basename(cwd.rstrip(os.sep))
    if not name:
        raise click.UsageError(
            f"Cannot derive an executable name from '{cwd}'; pass --exec-name"
        )
    return name


def init_project(runner, tools, root_dir, build_dir):
    runner.run(configure_command(tools.cmake, root_dir, build_dir))
    click.secho(f"Initialized project in '{build_dir}'", fg="green", err=True)


def build_project(runner, tools, build_dir):
    runner.run(build_command(tools.cmake, build_dir))
    click.secho("Build successful", fg="green", err=True)


def run_project(runner, tools, opts, cwd):
    """Build, then launch the executable from the runtime directory.

    Returns the executable's exit status. A failed build raises before
    anything is launched.
    """
    build_project(runner, tools, opts.build_dir)
    exec_name = opts.exec_name or derive_exec_name(cwd)
    command = run_executable_command(opts.runtime_dir, exec_name, opts.args)
    try:
        runner.stream(command)
    except ProcessExitedNonZero as e:
        click.echo(f"Command '{command}' exited with status {e.returncode}", err=True)
        return e.returncode
    return 0


def format_project(runner, tools, src_dir):
    runner.run(format_command(tools.clang_format, src_dir))
    click.secho(f"Formatted sources in '{src_dir}'", fg="green", err=True)
