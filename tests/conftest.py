"""Shared test fixtures for the scriptdiff test suite."""

from __future__ import annotations

import pytest

from scriptdiff.config import DiffConfig
from scriptdiff.diff.compare import TextDiffer
from scriptdiff.render import DiffHtmlRenderer, DiffTextRenderer


@pytest.fixture
def config() -> DiffConfig:
    """Default test configuration."""
    return DiffConfig()


@pytest.fixture
def differ(config: DiffConfig) -> TextDiffer:
    """Text differ using the default test config."""
    return TextDiffer(config)


@pytest.fixture
def text_renderer(config: DiffConfig) -> DiffTextRenderer:
    return DiffTextRenderer(config)


@pytest.fixture
def html_renderer(config: DiffConfig) -> DiffHtmlRenderer:
    return DiffHtmlRenderer(config)
