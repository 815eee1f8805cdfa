# The MIT License (MIT)
# Copyright © 2025 Entrius

"""Shared fixtures for review request status tests."""

import pytest

from review_request_status.classes import Captions, Config


def _make_node(
    title='Fix bug',
    login='alice',
    url='https://x/1',
    branch='fix-1',
    state='SUCCESS',
):
    """Build a search result node shaped like GitHub's GraphQL response."""
    return {
        'title': title,
        'author': {'login': login},
        'url': url,
        'headRefName': branch,
        'commits': {'nodes': [{'commit': {'statusCheckRollup': {'state': state}}}]},
    }


def _make_document(nodes, errors=None):
    """Wrap search result nodes in a full response document."""
    document = {'data': {'search': {'nodes': nodes}}}
    if errors is not None:
        document['errors'] = errors
    return document


@pytest.fixture
def make_node():
    return _make_node


@pytest.fixture
def make_document():
    return _make_document


@pytest.fixture
def config():
    return Config(github_api_token='fake_github_token')


@pytest.fixture
def custom_config():
    return Config(
        github_api_token='fake_github_token',
        captions=Captions(
            done='done',
            todo='todo',
            expected='exp',
            error='err',
            failure='fail',
            pending='pend',
            success='ok',
        ),
    )


@pytest.fixture
def sample_node():
    return _make_node()


@pytest.fixture
def empty_document():
    return _make_document([])


@pytest.fixture
def sample_document(sample_node):
    return _make_document([sample_node])
