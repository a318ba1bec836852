"""Render the files written into a freshly generated project."""

from dataclasses import dataclass

from cppm.templates.template_renderer import render_template

_TEMPLATE_PACKAGE = "cppm.new_cmd"


@dataclass(frozen=True)
class RenderedFile:
    """Content destined for *target_path*, relative to the working directory."""
    target_path: str
    content: str


@dataclass(frozen=True)
class ProjectFiles:
    ignore_file: RenderedFile
    build_descriptor: RenderedFile
    starter_source: RenderedFile

    def __iter__(self):
        return iter((self.ignore_file, self.build_descriptor, self.starter_source))


def _render(template_name, **kwargs):
    return render_template(template_name, package=_TEMPLATE_PACKAGE, **kwargs)


def render_project_files(layout, variant) -> ProjectFiles:
    """Render the ignore file, CMakeLists.txt and starter source in memory.

    Rendering is pure: the same layout and variant always produce the same
    bytes, and nothing touches the filesystem.
    """
    source_file_name = layout.source_file_name(variant)
    context = {
        "layout": layout,
        "variant": variant,
        "source_file_name": source_file_name,
    }
    return ProjectFiles(
        ignore_file=RenderedFile(
            layout.path(".gitignore"), _render("gitignore.j2", **context)
        ),
        build_descriptor=RenderedFile(
            layout.path("CMakeLists.txt"), _render("CMakeLists.txt.j2", **context)
        ),
        starter_source=RenderedFile(
            layout.path(layout.src_dir_name, source_file_name),
            _render("main.j2", **context),
        ),
    )
