"""Pytest configuration and shared fixtures for the diffview test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os
from typing import Any, Sequence

import pytest

from diffview.diff.models import DiffLine, DiffType
from diffview.viewport.window import ViewportWindow

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    # Register custom Hypothesis profiles
    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    # Load profile from environment or use default
    profile = os.getenv("HYPOTHESIS_PROFILE", "dev")
    settings.load_profile(profile)
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


class RecordingRenderLayer:
    """Render layer that records every frame it receives."""

    def __init__(self) -> None:
        self.frames: list[tuple[tuple[Any, ...], ViewportWindow]] = []

    def render(self, rows: Sequence[Any], window: ViewportWindow) -> None:
        self.frames.append((tuple(rows), window))

    @property
    def last_rows(self) -> tuple[Any, ...]:
        return self.frames[-1][0]

    @property
    def last_window(self) -> ViewportWindow:
        return self.frames[-1][1]


@pytest.fixture
def recording_layer() -> RecordingRenderLayer:
    """Provide a render layer that records frames.

    Returns
    -------
    RecordingRenderLayer
        Fresh recorder with no frames.

    """
    return RecordingRenderLayer()


@pytest.fixture
def layer_factory():
    """Provide a factory for independent recording render layers.

    Returns
    -------
    callable
        ``layer_factory()`` returning a new ``RecordingRenderLayer``.

    """
    return RecordingRenderLayer


@pytest.fixture
def make_lines():
    """Provide a factory for unchanged diff lines numbered from 1.

    Returns
    -------
    callable
        ``make_lines(count)`` returning a list of ``DiffLine`` objects.

    """

    def _make(count: int) -> list[DiffLine]:
        return [DiffLine(DiffType.UNCHANGED, f"Line {n} content", n, n) for n in range(1, count + 1)]

    return _make


@pytest.fixture
def sample_json_pair() -> tuple[str, str]:
    """Provide two JSON documents that differ only in key order.

    Returns
    -------
    tuple of (str, str)
        Left and right documents.

    """
    left = '{"name": "diffview", "version": 1, "tags": ["b", "a"], "meta": {"z": true, "a": null}}'
    right = '{"meta": {"a": null, "z": true}, "tags": ["b", "a"], "version": 1, "name": "diffview"}'
    return left, right


@pytest.fixture
def sample_xml_pair() -> tuple[str, str]:
    """Provide two XML documents that differ only in attribute order.

    Returns
    -------
    tuple of (str, str)
        Left and right documents.

    """
    left = '<config version="2" id="main"><item b="2" a="1">text</item><!-- note --></config>'
    right = '<config id="main" version="2"><item a="1" b="2">text</item><!-- note --></config>'
    return left, right
