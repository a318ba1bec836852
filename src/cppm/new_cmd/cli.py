"""Click command for creating a new project."""

import click

from cppm.new_cmd.new_opts import NewOpts
from cppm.new_cmd.new_project import NewProjectCommand
from cppm.new_cmd.version_control import GitInitializer


@click.command("new")
@click.option("-n", "--name", required=True, help="Name of the project (and its directory).")
@click.option("-f", "--file-ext", default="cpp", show_default=True,
              help="Source file extension: cpp or c.")
@click.option("-s", "--src-dir", default="src", show_default=True, help="Source directory.")
@click.option("-i", "--include-dir", default="include", show_default=True,
              help="Include directory.")
@click.option("-b", "--build-dir", default="build", show_default=True, help="Build directory.")
@click.option("-e", "--exec-dir", default="bin", show_default=True,
              help="Directory the executable is written to.")
@click.pass_obj
def new_cmd(app, name, file_ext, src_dir, include_dir, build_dir, exec_dir):
    """Create a new C/C++ project."""
    opts = NewOpts(
        name=name,
        file_ext=file_ext,
        src_dir=src_dir,
        include_dir=include_dir,
        build_dir=build_dir,
        exec_dir=exec_dir,
    )
    version_control = GitInitializer(app.tools.git_user_name, app.tools.git_user_email)
    NewProjectCommand(opts, app.runner, app.tools, version_control).execute()
