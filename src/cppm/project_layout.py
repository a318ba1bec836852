"""ProjectLayout: directory names making up a generated project."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProjectLayout:
    """Names of the project root and its directories.

    Directory names are relative to the project root and joined to it with a
    single separator; the filesystem decides whether they are legal.
    """

    project_name: str
    src_dir_name: str = "src"
    include_dir_name: str = "include"
    build_dir_name: str = "build"
    exec_dir_name: str = "bin"

    def path(self, *segments):
        return "/".join((self.project_name,) + segments)

    @property
    def directories(self):
        """Directories created by the scaffolder, in creation order."""
        return [
            self.path(self.src_dir_name),
            self.path(self.include_dir_name),
            self.path(self.build_dir_name),
            self.path(self.exec_dir_name),
        ]

    def source_file_name(self, variant):
        return f"main.{variant.token}"
