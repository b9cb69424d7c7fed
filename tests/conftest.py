"""Pytest configuration and shared fixtures for the mdfmt test suite."""

import logging
import os

import pytest
from hypothesis import Phase, Verbosity, settings


# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def restore_root_logger():
    """Restore logger handlers and levels after a test reconfigures logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    names = ["", "mdfmt", "chardet", "black", "blib2to3"]
    levels = {name: logging.getLogger(name).level for name in names}
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)
