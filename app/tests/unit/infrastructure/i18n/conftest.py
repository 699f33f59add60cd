"""Feature-level fixtures for i18n system tests."""

from dataclasses import dataclass

import pytest

from infrastructure.i18n import TemplateEngine, YAMLMessageLoader


@dataclass
class Profile:
    Name: str
    Height: str


@dataclass
class Account:
    Profile: Profile
    Count: float


@pytest.fixture
def engine():
    """Fresh engine with built-in formatters and an empty cache."""
    return TemplateEngine()


@pytest.fixture
def account():
    """Record-style argument value with capitalized field names."""
    return Account(Profile=Profile(Name="jane doe", Height="1234.5"), Count=3)


@pytest.fixture
def yaml_loader(messages_dir):
    """YAMLMessageLoader for the shared messages directory, without caching."""
    return YAMLMessageLoader(messages_dir, use_cache=False)
