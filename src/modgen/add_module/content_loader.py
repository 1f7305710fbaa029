"""Content loader: returns the literal content of a FileSpec."""

import os

from modgen.errors import MissingFileError
from modgen.template_domain.file_spec import FileSpec


def resolve_template_file(path: str, templates_dir: str | None = None, cwd: str | None = None) -> str:
    """Resolve *path* against the templates directory, or the working directory."""
    base = templates_dir if templates_dir else (cwd or os.getcwd())
    return os.path.abspath(os.path.join(base, path))


def read_text_file(path: str, description: str) -> str:
    """Read *path* as UTF-8 text, raising MissingFileError if it cannot be read."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except OSError as e:
        raise MissingFileError(f"{description}: {path} ({e.strerror})", path) from e


def load_content(file_spec: FileSpec, templates_dir: str | None = None, cwd: str | None = None) -> str:
    """Return the inline content of *file_spec*, or the text of its filePath.

    Returns an empty string when neither is given.

    Raises:
        MissingFileError: If the filePath cannot be read.
    """
    if file_spec.file_path:
        full_path = resolve_template_file(file_spec.file_path, templates_dir, cwd)
        return read_text_file(full_path, "Error reading content from file path")
    return file_spec.content or ""
