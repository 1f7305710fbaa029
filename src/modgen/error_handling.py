"""Turns ModgenError into a diagnostic on stderr and exit status 1."""

import sys
from contextlib import contextmanager

import click

from modgen.errors import ModgenError


@contextmanager
def with_error_handling():
    try:
        yield
    except ModgenError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
