"""Shared fixtures for BDD tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def locality_debug_logging(caplog: pytest.LogCaptureFixture):
    """Capture locality debug output so failing scenarios show decisions.

    Yields:
        The caplog fixture at DEBUG level for the 'locality' logger.
    """
    with caplog.at_level(logging.DEBUG, logger="locality"):
        yield caplog
