"""Top-level Click group for the cppm CLI."""

from dataclasses import dataclass

import click

from cppm.cmake_cmd.cli import build_cmd, format_cmd, init_cmd, run_cmd
from cppm.command_runner import CommandRunner
from cppm.new_cmd.cli import new_cmd
from cppm.tool_config import ToolConfig


@dataclass
class AppContext:
    """Collaborators shared by every subcommand."""
    tools: ToolConfig
    runner: CommandRunner


@click.group()
@click.version_option(package_name="cppm")
@click.option("-v", "--verbose", is_flag=True, help="Print each external command before running it.")
@click.pass_context
def main(ctx, verbose):
    """cppm - a simple C/C++ project manager built on CMake."""
    tools = ToolConfig.from_environ()
    ctx.obj = AppContext(tools=tools, runner=CommandRunner(shell=tools.shell, verbose=verbose))


main.add_command(new_cmd)
main.add_command(init_cmd)
main.add_command(build_cmd)
main.add_command(run_cmd)
main.add_command(format_cmd)
