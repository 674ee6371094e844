"""
Pytest configuration and fixtures for Beacon tests.
"""

import logging
from collections.abc import Iterator
from typing import Any

import pytest

from beacon.config import Config
from beacon.core import Actor, RequestContext

from tests.helpers import RecordingPlatform


@pytest.fixture(autouse=True)
def reset_beacon_logger() -> Iterator[None]:
    """Undo setup_logging() so caplog keeps working across tests."""
    yield
    logger = logging.getLogger("beacon")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def admin() -> RequestContext:
    """Request context for an administrator with a display title."""
    return RequestContext(Actor(username="admin", title="Admin Person"))


@pytest.fixture
def home_page() -> dict[str, Any]:
    """A page document as the workflow reports it."""
    return {
        "title": "Modified",
        "type": "page",
        "slug": "/",
        "workflowLocale": "default-draft",
    }


@pytest.fixture
def slack_config() -> Config:
    """Configuration routing everything to #shared and exports to #export too."""
    return Config.model_validate({
        "platforms": {
            "slack": {
                "channel": "#shared",
                "events": {
                    "export": "#export",
                    "workflow:afterExport": "#export",
                    "workflow:afterForceExport": "#export",
                },
                "webhooks": {
                    "#shared": "https://hooks.slack.test/shared",
                    "#export": "https://hooks.slack.test/export",
                },
            }
        }
    })


@pytest.fixture
def recorder() -> RecordingPlatform:
    """Platform that records what it was asked to deliver."""
    return RecordingPlatform()
