"""NewProjectCommand encapsulates the new-project workflow."""

import click

from cppm.cmake_cmd.cmake_commands import init_project
from cppm.language_variant import resolve_variant
from cppm.new_cmd.project_files import render_project_files
from cppm.new_cmd.scaffolder import ensure_project_absent, scaffold_project


class NewProjectCommand:
    """Generates, configures and commits a new C/C++ project.

    Each step runs only if the previous one succeeded: an existing project or
    an unknown extension is rejected before the filesystem is touched, and a
    failed configure step leaves the repository uninitialized.
    """

    def __init__(self, opts, runner, tools, version_control):
        self.opts = opts
        self.runner = runner
        self.tools = tools
        self.version_control = version_control

    def execute(self):
        layout = self.opts.layout()
        ensure_project_absent(layout)
        variant = resolve_variant(self.opts.file_ext)

        files = render_project_files(layout, variant)
        scaffold_project(layout, files)

        init_project(self.runner, self.tools, layout.project_name, layout.build_dir_name)
        self.version_control.initialize(layout.project_name)

        click.secho(f"Created new project '{layout.project_name}'", fg="green", err=True)
        return layout
