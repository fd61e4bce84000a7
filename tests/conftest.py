"""Shared pytest fixtures."""

from __future__ import annotations

from typing import Callable

import pytest

from tests.helpers import make_wrapper
from tincture.core.ranges import ColorRange


@pytest.fixture
def red_blue_ranges() -> tuple[ColorRange, ...]:
    return (ColorRange(0, 5, "red"), ColorRange(10, 15, "blue"))


@pytest.fixture
def wrap_ten() -> Callable[[str], str]:
    return make_wrapper(10)
