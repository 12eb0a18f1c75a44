"""Pytest configuration and shared fixtures for the md2html test suite."""

import os

import pytest
from hypothesis import HealthCheck, Phase, Verbosity, settings

from md2html import Md2HtmlOptions

settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50, suppress_health_check=[HealthCheck.too_slow])
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


class RecordingHighlighter:
    """Highlighter double that tags its output and records every call."""

    def __init__(self):
        self.calls = []

    def highlight(self, code, language):
        self.calls.append(("highlight", code, language))
        return f"HL[{language}]:{code}"

    def highlight_auto(self, code):
        self.calls.append(("highlight_auto", code))
        return f"AUTO:{code}"


class FailingHighlighter:
    """Highlighter double whose methods always raise."""

    def highlight(self, code, language):
        raise RuntimeError(f"cannot highlight {language}")

    def highlight_auto(self, code):
        raise RuntimeError("cannot guess language")


@pytest.fixture
def recording_highlighter():
    """Provide a fresh recording highlighter."""
    return RecordingHighlighter()


@pytest.fixture
def failing_highlighter():
    """Provide a highlighter that raises on every call."""
    return FailingHighlighter()


@pytest.fixture
def default_options():
    """Provide default conversion options."""
    return Md2HtmlOptions()
