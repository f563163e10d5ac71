"""
Pytest configuration and fixtures
"""
import pytest

from subzero.services.rendering import GlyphCompositor

# Two-letter font whose joints exercise the overwrite rule.
UNDERLINE_FONT = {
    "A": ("x_",) * 5,
    "B": ("\\y",) * 5,
}


@pytest.fixture
def compositor() -> GlyphCompositor:
    return GlyphCompositor()


@pytest.fixture
def underline_font() -> dict:
    return dict(UNDERLINE_FONT)
