"""
Pytest configuration and shared fixtures for toyrobot tests.

Provides command line options, controller fixtures wired to an in-memory
output sink, environment helpers, and marker registration.
"""

import io
import os
import sys
from dataclasses import dataclass

import pytest

# Add the parent directory to Python path so we can import the package
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from toyrobot.server.controller import Controller, ControllerConfig


@dataclass
class ControllerHarness:
    """Controller bound to a StringIO sink, with helpers to feed and read lines."""
    controller: Controller
    sink: io.StringIO

    def feed(self, *lines: str):
        """Run raw command lines through the controller."""
        return self.controller.run(lines)

    @property
    def lines(self) -> list[str]:
        return self.sink.getvalue().splitlines()


# ============================================================================
# PYTEST COMMAND LINE OPTIONS
# ============================================================================

def pytest_addoption(parser):
    """Add custom command line options for the test suite."""
    parser.addoption(
        "--skip-integration",
        action="store_true",
        default=False,
        help="Skip integration tests that launch the toyrobot CLI in a subprocess"
    )


# ============================================================================
# CONTROLLER FIXTURES
# ============================================================================

@pytest.fixture
def sink() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def controller(sink) -> Controller:
    """Controller on the default 5x5 table writing to ``sink``."""
    return Controller(ControllerConfig(table_size=5), output=sink)


@pytest.fixture
def harness(controller, sink) -> ControllerHarness:
    return ControllerHarness(controller=controller, sink=sink)


@pytest.fixture
def make_harness():
    """Factory for harnesses on other table sizes."""
    def _make(table_size: int = 5) -> ControllerHarness:
        out = io.StringIO()
        return ControllerHarness(Controller(ControllerConfig(table_size=table_size), output=out), out)
    return _make


@pytest.fixture
def temp_env():
    """
    Provide temporary environment variable context manager.

    Useful for tests that need to modify environment variables temporarily.
    """
    class TempEnv:
        def __init__(self):
            self.original = {}

        def set(self, key: str, value: str):
            """Set an environment variable temporarily."""
            if key not in self.original:
                self.original[key] = os.environ.get(key)
            os.environ[key] = value

        def restore(self):
            """Restore all modified environment variables."""
            for key, original_value in self.original.items():
                if original_value is None:
                    os.environ.pop(key, None)
                else:
                    os.environ[key] = original_value
            self.original.clear()

    temp = TempEnv()
    try:
        yield temp
    finally:
        temp.restore()


# ============================================================================
# PYTEST HOOKS
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests that test individual components in isolation"
    )
    config.addinivalue_line(
        "markers", "integration: End-to-end tests that run the toyrobot CLI in a subprocess"
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests when --skip-integration is given."""
    if config.getoption("--skip-integration"):
        skip_integration = pytest.mark.skip(reason="Integration tests disabled (--skip-integration)")
        for item in items:
            if item.get_closest_marker("integration"):
                item.add_marker(skip_integration)
