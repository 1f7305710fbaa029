"""Tree materializer: writes a FolderSpec tree to disk with placeholders substituted."""

import os
import sys

import click

from modgen.add_module.content_loader import load_content
from modgen.errors import MaterializeError
from modgen.placeholders import substitute
from modgen.template_domain.file_spec import FileSpec
from modgen.template_domain.folder_spec import FolderSpec


class TreeMaterializer:
    """Creates the directories and files described by a folder tree.

    Folder names, file names and file contents all go through placeholder
    substitution with the same variable mapping. Existing directories are
    reused and existing files are overwritten.
    """

    def __init__(self, variables: dict[str, str], templates_dir: str | None = None,
                 cwd: str | None = None, *, output=None, dry_run: bool = False):
        self._variables = variables
        self._templates_dir = templates_dir
        self._cwd = cwd
        self._output = output or sys.stdout
        self._dry_run = dry_run

    def materialize(self, folder: FolderSpec, base_path: str) -> None:
        """Create *folder* under *base_path*, depth-first in declaration order.

        Raises:
            MissingFileError: If a file's content path cannot be read.
            MaterializeError: If a directory or file cannot be written.
        """
        folder_path = base_path
        if folder.name:
            folder_path = os.path.join(base_path, substitute(folder.name, self._variables))
            self.ensure_directory(folder_path)

        for file_spec in folder.files:
            self.write_file(file_spec, folder_path)
        for sub_folder in folder.folders:
            self.materialize(sub_folder, folder_path)

    def write_file(self, file_spec: FileSpec, folder_path: str) -> str:
        file_name = substitute(file_spec.name, self._variables)
        content = substitute(
            load_content(file_spec, self._templates_dir, self._cwd), self._variables
        )
        file_path = os.path.join(folder_path, file_name)

        if self._dry_run:
            self._echo(f"Would create file: {file_path}")
            return file_path
        try:
            with open(file_path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise MaterializeError(f"Error writing file: {file_path} ({e.strerror})", file_path) from e
        self._echo(f"Created file: {file_path}")
        return file_path

    def ensure_directory(self, folder_path: str) -> None:
        if os.path.isdir(folder_path):
            return
        if self._dry_run:
            self._echo(f"Would create folder: {folder_path}")
            return
        try:
            os.makedirs(folder_path, exist_ok=True)
        except OSError as e:
            raise MaterializeError(
                f"Error creating folder: {folder_path} ({e.strerror})", folder_path
            ) from e
        self._echo(f"Created folder: {folder_path}")

    def _echo(self, message: str) -> None:
        click.echo(message, file=self._output)
