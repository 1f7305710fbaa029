"""Locate, read and parse the template description file."""

import os

import yaml

from modgen.errors import TemplateError
from modgen.template_domain.parser import parse
from modgen.template_domain.template import Template

ADD_MODULE_COMMAND = "add-module"
DEFAULT_TEMPLATE_FILE = "mgrc.yaml"


def resolve_template_path(command_or_path: str | None = None, custom_path: str | None = None,
                          cwd: str | None = None) -> str:
    """Return the absolute path of the template description to use.

    *command_or_path* is either the ``add-module`` keyword, in which case
    *custom_path* (or ``mgrc.yaml``) is used, or a path to the description.
    """
    cwd = cwd or os.getcwd()
    if not command_or_path:
        return os.path.abspath(os.path.join(cwd, DEFAULT_TEMPLATE_FILE))
    if command_or_path == ADD_MODULE_COMMAND:
        return os.path.abspath(os.path.join(cwd, custom_path or DEFAULT_TEMPLATE_FILE))
    return os.path.abspath(os.path.join(cwd, command_or_path))


def load_template(path: str) -> Template:
    """Read the YAML document at *path* and parse it into a Template.

    Raises:
        TemplateError: If the file cannot be read, is not valid YAML, or has
            the wrong shape.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise TemplateError(f"Error reading template file {path}: {e.strerror}") from e
    except yaml.YAMLError as e:
        raise TemplateError(f"Error parsing template file {path}: {e}") from e
    return parse(data)
