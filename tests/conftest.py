"""Test configuration and fixtures for Community Market."""

from tests.fixtures import *  # noqa: F401,F403
