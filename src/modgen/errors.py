"""Errors raised while loading a template description and generating a module."""


class ModgenError(Exception):
    """Base class for failures that abort a generation run."""


class TemplateError(ModgenError):
    """The template description cannot be read, parsed, or used as declared."""


class MissingFileError(ModgenError):
    """A referenced content file or filepath-variable file cannot be read."""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class MaterializeError(ModgenError):
    """Creating a directory or writing a file failed."""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path
