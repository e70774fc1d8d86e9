"""Pytest configuration and fixtures for cmdargs tests."""

import pytest

from cmdargs import Command


@pytest.fixture
def cmd():
    """A fresh root command with default settings."""
    return Command()


@pytest.fixture
def parse(cmd):
    """Parses a space-separated line of tokens against the `cmd` fixture."""
    def parse(line):
        return cmd.parse(line.split())
    return parse
