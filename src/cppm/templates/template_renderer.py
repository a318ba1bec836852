"""Load and render the Jinja2 templates that ship inside a cppm package."""

import importlib.resources

import jinja2


def load_template_source(template_name: str, *, package: str) -> str:
    """Return the raw text of *template_name* from ``{package}.templates``.

    Raises:
        FileNotFoundError: If the package ships no such template.
    """
    templates = importlib.resources.files(f"{package}.templates")
    template_file = templates.joinpath(template_name)
    if not template_file.is_file():
        raise FileNotFoundError(f"Template not found: {template_name}")
    return template_file.read_text(encoding="utf-8")


def render_template(template_name: str, *, package: str, **kwargs) -> str:
    """Render a template with the given variables.

    Trailing newlines are kept, since the output is written verbatim to disk,
    and an undefined variable is an error rather than an empty string.

    Args:
        template_name: Template filename (e.g. "CMakeLists.txt.j2")
        package: The caller's package (pass __package__).
        **kwargs: Template variables.
    """
    source = load_template_source(template_name, package=package)
    template = jinja2.Template(
        source,
        keep_trailing_newline=True,
        undefined=jinja2.StrictUndefined,
    )
    return template.render(**kwargs)
