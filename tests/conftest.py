# tests/conftest.py

"""Pytest configuration and fixtures for test suite"""

# Standard library imports
from json import dumps
from logging import getLogger

# Third party imports
import pytest

# Local imports
from dto_codec.core.domain.github_issues import Issue
from dto_codec.core.domain.github_issues import Label
from dto_codec.core.domain.github_issues import User
from dto_codec.infrastructure.config import reset_config


# Custom markers
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture(autouse=True, scope="function")
def basic_isolation():
    """Minimal isolation for most tests - reset logging and cached config"""
    root_logger = getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.setLevel(30)  # WARNING level
    reset_config()

    yield

    reset_config()


@pytest.fixture
def user_wire():
    """Wire form of a user"""
    return {"login": "octocat", "url": "https://api.github.com/users/octocat"}


@pytest.fixture
def issue_wire(user_wire):
    """Wire form of a fully populated issue"""
    return {
        "number": 1347,
        "url": "https://api.github.com/repos/octocat/Hello-World/issues/1347",
        "title": "Found a bug",
        "user": user_wire,
        "assignees": [
            {"login": "hubot", "url": "https://api.github.com/users/hubot"},
            {"login": "other", "url": "https://api.github.com/users/other"},
        ],
        "labels": [
            {"name": "bug", "color": "f29513"},
            {"name": "help wanted", "color": "008672"},
        ],
    }


@pytest.fixture
def issue_text(issue_wire):
    return dumps(issue_wire)


@pytest.fixture
def sample_issue():
    """Record equal to the issue_wire fixture"""
    return Issue(
        number=1347,
        url="https://api.github.com/repos/octocat/Hello-World/issues/1347",
        title="Found a bug",
        creator=User(name="octocat", url="https://api.github.com/users/octocat"),
        assignees=[
            User(name="hubot", url="https://api.github.com/users/hubot"),
            User(name="other", url="https://api.github.com/users/other"),
        ],
        labels=[
            Label(name="bug", color="f29513"),
            Label(name="help wanted", color="008672"),
        ],
    )
