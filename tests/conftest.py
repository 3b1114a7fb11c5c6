"""Shared pytest fixtures for the maildraft test suite."""

from __future__ import annotations

# Disable Rich colors BEFORE any imports
import os

os.environ["NO_COLOR"] = "1"
os.environ["TERM"] = "dumb"
os.environ["COLUMNS"] = "200"

from collections.abc import Iterator

import pytest

from maildraft.config import clear_config
from maildraft.environment import MailEnvironment

# pylint: disable=redefined-outer-name


@pytest.fixture(autouse=True)
def _isolated_config() -> Iterator[None]:
    """Make sure no test leaks a loaded configuration into another."""
    clear_config()
    yield
    clear_config()


@pytest.fixture
def environment() -> MailEnvironment:
    """Return a fixed environment so tests never resolve the host name."""
    return MailEnvironment(hostname="mail.example.test")
