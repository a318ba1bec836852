"""Click commands that drive the build tool and formatter."""

import os
import sys

import click

from cppm.cmake_cmd.cmake_commands import (
    build_project,
    format_project,
    init_project,
    run_project,
)
from cppm.cmake_cmd.run_opts import RunOpts


@click.command("init")
@click.option("-r", "--root-dir", default=".", show_default=True,
              help="Project root containing CMakeLists.txt.")
@click.option("-b", "--build-dir", default="build", show_default=True, help="Build directory.")
@click.pass_obj
def init_cmd(app, root_dir, build_dir):
    """Configure the project's build directory."""
    init_project(app.runner, app.tools, root_dir, build_dir)


@click.command("build")
@click.option("-b", "--build-dir", default="build", show_default=True, help="Build directory.")
@click.pass_obj
def build_cmd(app, build_dir):
    """Build the project."""
    build_project(app.runner, app.tools, build_dir)


@click.command("run")
@click.option("-b", "--build-dir", default="build", show_default=True, help="Build directory.")
@click.option("-r", "--runtime-dir", default="bin", show_default=True,
              help="Directory the executable is launched from.")
@click.option("-e", "--exec-name", default=None,
              help="Executable name. Defaults to the current directory's name.")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def run_cmd(app, build_dir, runtime_dir, exec_name, args):
    """Build the project and run its executable.

    Arguments after -- are passed to the executable unchanged.
    """
    opts = RunOpts(
        build_dir=build_dir,
        runtime_dir=runtime_dir,
        exec_name=exec_name,
        args=tuple(args),
    )
    returncode = run_project(app.runner, app.tools, opts, cwd=os.getcwd())
    sys.exit(returncode)


@click.command("format")
@click.option("-s", "--src-dir", default="src", show_default=True, help="Source directory.")
@click.pass_obj
def format_cmd(app, src_dir):
    """Format the project's sources with clang-format."""
    format_project(app.runner, app.tools, src_dir)
