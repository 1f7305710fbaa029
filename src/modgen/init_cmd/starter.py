"""Write a starter template description for a new project."""

import os

import jinja2

from modgen.add_module.template_loader import DEFAULT_TEMPLATE_FILE
from modgen.errors import ModgenError

STARTER_TEMPLATE = "mgrc.yaml.j2"

# $name placeholders in the starter are modgen's, not Jinja2's; only the
# configs block is rendered.
_env = jinja2.Environment(
    loader=jinja2.PackageLoader("modgen.init_cmd", "templates"),
    keep_trailing_newline=True,
    undefined=jinja2.StrictUndefined,
)


def render_starter_template(root_dir: str, templates_dir: str | None = None) -> str:
    """Render the starter description with the given configs block values."""
    template = _env.get_template(STARTER_TEMPLATE)
    return template.render(root_dir=root_dir, templates_dir=templates_dir)


def write_starter_template(path: str | None = None, *, root_dir: str = "./src/modules",
                           templates_dir: str | None = None, force: bool = False,
                           cwd: str | None = None) -> str:
    """Render the bundled starter template description to *path*.

    Returns the absolute path written.

    Raises:
        ModgenError: If the file exists and *force* is not set, or it cannot
            be written.
    """
    target = os.path.abspath(os.path.join(cwd or os.getcwd(), path or DEFAULT_TEMPLATE_FILE))
    if os.path.exists(target) and not force:
        raise ModgenError(f"{target} already exists. Use --force to overwrite.")

    content = render_starter_template(root_dir, templates_dir)
    try:
        with open(target, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise ModgenError(f"Error writing template file: {target} ({e.strerror})") from e
    return target
