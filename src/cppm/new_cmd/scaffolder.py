"""Create a project's directory tree and write its rendered files."""

import os

from cppm.errors import FilesystemError, ProjectAlreadyExists


def ensure_project_absent(layout):
    """Raise ProjectAlreadyExists if anything already lives at the project root."""
    if os.path.lexists(layout.project_name):
        raise ProjectAlreadyExists(layout.project_name)


def scaffold_project(layout, files):
    """Create the source, include, build and exec directories, then write *files*.

    Nothing is rolled back if a later step fails.
    """
    ensure_project_absent(layout)

    for directory in layout.directories:
        try:
            os.makedirs(directory, exist_ok=True)
        except OSError as e:
            raise FilesystemError(f"create directory '{directory}'", e) from e

    for rendered in files:
        try:
            with open(rendered.target_path, "w", encoding="utf-8") as f:
                f.write(rendered.content)
        except OSError as e:
            raise FilesystemError(f"write '{rendered.target_path}'", e) from e
