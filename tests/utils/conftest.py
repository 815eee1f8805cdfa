# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Pytest configuration for utils tests.
"""

from unittest.mock import Mock

import pytest


@pytest.fixture
def make_response():
    """Factory for ``requests.Response`` mocks."""

    def _make_response(status_code=200, payload=None, headers=None, reason='OK', json_error=None):
        response = Mock()
        response.status_code = status_code
        response.reason = reason
        response.headers = headers if headers is not None else {}
        if json_error is not None:
            response.json.side_effect = json_error
        else:
            response.json.return_value = payload
        return response

    return _make_response
