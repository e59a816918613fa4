"""Shared fixtures for the hyperscriptify test suite."""

import pytest


class WidgetComponent:
    """Stand-in for a framework component."""


class CardComponent:
    """Second stand-in component."""


@pytest.fixture
def components():
    """Registry with two components."""
    return {"my-widget": WidgetComponent, "my-card": CardComponent}
