"""Shared fixtures for add-module tests."""

import io

import pytest

from modgen.add_module.prompts import PromptConfig


def pytest_collection_modifyitems(items):
    for item in items:
        if "add-module" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


class ScriptedAnswers:
    """Input function that answers prompts from a queue and records them."""

    def __init__(self, answers=None, accept_defaults=False):
        self._answers = list(answers or [])
        self._accept_defaults = accept_defaults
        self.prompts = []

    def __call__(self, message, default):
        self.prompts.append((message, default))
        if self._accept_defaults:
            return default if default is not None else ""
        return self._answers.pop(0)


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def prompt_config_for(output):
    """Build a PromptConfig from scripted answers, writing the trace to *output*."""

    def build(answers=None, accept_defaults=False):
        scripted = ScriptedAnswers(answers, accept_defaults=accept_defaults)
        return PromptConfig(input_fn=scripted, output=output), scripted

    return build
