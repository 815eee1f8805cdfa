# The MIT License (MIT)
# Copyright © 2025 Entrius

"""Shared fixtures for CLI tests."""

import pytest
from click.testing import CliRunner

from review_request_status.cli.main import cli


@pytest.fixture
def cli_root():
    return cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def token_env(monkeypatch):
    monkeypatch.setenv('GITHUB_API_TOKEN', 'fake_github_token')
