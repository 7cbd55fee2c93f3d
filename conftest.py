"""Root pytest configuration and fixtures.

This module provides:
- Environment setup (loads .env)
- Fresh component classes for declaration tests
"""

from __future__ import annotations

import itertools

import pytest
from dotenv import load_dotenv

from spark_attrs.component import AttributeComponent

# Load environment variables from .env file
load_dotenv()

_class_ids = itertools.count()


@pytest.fixture
def component_cls() -> type[AttributeComponent]:
    """A new AttributeComponent subclass with an unfrozen registry.

    Declarations mutate class state, so every test gets its own class.
    """
    return type(f"TestComponent{next(_class_ids)}", (AttributeComponent,), {})
