"""Shared fixtures: the reference zinc/blue system and its scales."""

import pytest

from semantic_palette import build_color_system
from semantic_palette.palette import GenerationOptions, generate_scale

NEUTRAL_HEX = "#71717a"
PRIMARY_HEX = "#3b82f6"


@pytest.fixture
def neutral_scale():
    return generate_scale(NEUTRAL_HEX, "zinc")


@pytest.fixture
def primary_scale():
    return generate_scale(PRIMARY_HEX, "blue")


@pytest.fixture
def system():
    return build_color_system(("zinc", NEUTRAL_HEX), ("blue", PRIMARY_HEX))


@pytest.fixture
def dynamic_system():
    options = GenerationOptions(dynamic_status_chroma=True)
    return build_color_system(("zinc", NEUTRAL_HEX), ("blue", PRIMARY_HEX), options)
