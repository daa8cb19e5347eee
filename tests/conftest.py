"""
Pytest configuration and fixtures.

Add any shared fixtures or pytest configuration here.
"""

import logging
import sys

import pytest

from pyexpose import CallableObject, ResponseCollector

from .fixtures.sample_targets import Calculator, Widget


def pytest_configure(config):
    """Configure pytest with custom settings."""
    log_level = logging.DEBUG if config.getoption("--debug-pyexpose") else logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    logging.getLogger("pyexpose").setLevel(log_level)


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--debug-pyexpose",
        action="store_true",
        default=False,
        help="Enable debug logging for pyexpose (shows configuration and dispatch decisions)",
    )


@pytest.fixture
def collector():
    return ResponseCollector()


@pytest.fixture
def widget(collector):
    return CallableObject(Widget(), response=collector)


@pytest.fixture
def calculator(collector):
    return CallableObject(Calculator(), response=collector)
