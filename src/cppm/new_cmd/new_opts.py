"""Options dataclass for the new command."""

from dataclasses import dataclass

from cppm.project_layout import ProjectLayout


@dataclass
class NewOpts:
    """All options for the new command."""

    name: str
    file_ext: str = "cpp"
    src_dir: str = "src"
    include_dir: str = "include"
    build_dir: str = "build"
    exec_dir: str = "bin"

    def layout(self):
        return ProjectLayout(
            project_name=self.name,
            src_dir_name=self.src_dir,
            include_dir_name=self.include_dir,
            build_dir_name=self.build_dir,
            exec_dir_name=self.exec_dir,
        )
