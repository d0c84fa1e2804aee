"""Shared fixtures for setalgebra tests."""

from __future__ import annotations

import os
import sys

import pytest

from setalgebra._bundle import set_contracts_enabled
from setalgebra._strategies import _STRATEGY_FACTORY_OVERRIDES, _STRATEGY_OVERRIDES, register_element_strategy


@pytest.fixture
def tmp_out(tmp_path):
    """Temporary output directory for JSON reports."""
    return str(tmp_path / ".setalgebra")


@pytest.fixture(autouse=True)
def _add_examples_to_path():
    """Ensure examples/ is importable."""
    examples_dir = os.path.join(os.path.dirname(__file__), "..", "examples")
    examples_dir = os.path.abspath(examples_dir)
    if examples_dir not in sys.path:
        sys.path.insert(0, examples_dir)
    yield
    if examples_dir in sys.path:
        sys.path.remove(examples_dir)


@pytest.fixture(autouse=True)
def _reset_global_config():
    """Contracts on, default element strategy and no strategy overrides for every test."""
    set_contracts_enabled(True)
    register_element_strategy(None)
    yield
    set_contracts_enabled(True)
    register_element_strategy(None)
    _STRATEGY_OVERRIDES.clear()
    _STRATEGY_FACTORY_OVERRIDES.clear()
