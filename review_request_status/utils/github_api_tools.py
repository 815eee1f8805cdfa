# The MIT License (MIT)
# Copyright © 2025 Entrius

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import requests

from review_request_status.constants import GITHUB_GRAPHQL_URL, USER_AGENT
from review_request_status.exceptions import (
    AuthHeaderError,
    BodyDecodeError,
    MalformedErrorsField,
    NotFound,
    TransportError,
)
from review_request_status.utils.navigate import kind_of, resolve
from review_request_status.utils.utils import mask_secret

logger = logging.getLogger(__name__)

# =============================================================================
# Rate Limit Configuration
# =============================================================================
RATE_LIMIT_MIN_REMAINING = 10  # Warn when this few requests remain in the window

QUERY_FILE = Path(__file__).resolve().parent.parent / 'queries' / 'review_requests.graphql'

# search for open pull requests requesting the viewer's review
QUERY = QUERY_FILE.read_text(encoding='utf-8')


@dataclass
class RateLimitInfo:
    """Represents GitHub API rate limit information extracted from response headers."""

    limit: int  # Maximum points allowed per hour
    remaining: int  # Points remaining in current window
    reset_timestamp: int  # Unix timestamp when the rate limit resets
    used: int  # Points used in current window

    def __str__(self) -> str:
        return f"RateLimit(remaining={self.remaining}/{self.limit}, used={self.used})"


def parse_rate_limit_headers(response: requests.Response) -> Optional[RateLimitInfo]:
    """
    Parse GitHub API rate limit information from response headers.

    Args:
        response: The HTTP response from GitHub API

    Returns:
        RateLimitInfo object if headers are present, None otherwise
    """
    headers = response.headers

    try:
        limit = int(headers.get('X-RateLimit-Limit', 0))
        remaining = int(headers.get('X-RateLimit-Remaining', 0))
        reset_timestamp = int(headers.get('X-RateLimit-Reset', 0))
        used = int(headers.get('X-RateLimit-Used', 0))
    except (ValueError, TypeError) as e:
        logger.debug(f"Could not parse rate limit headers: {e}")
        return None

    if limit == 0 and reset_timestamp == 0:
        return None

    return RateLimitInfo(limit=limit, remaining=remaining, reset_timestamp=reset_timestamp, used=used)


def log_rate_limit(response: requests.Response) -> None:
    """Log the rate limit status, warning when the window is nearly used up."""
    rate_limit_info = parse_rate_limit_headers(response)
    if rate_limit_info is None:
        return

    if rate_limit_info.remaining <= RATE_LIMIT_MIN_REMAINING:
        logger.warning(f"Approaching GitHub API rate limit: {rate_limit_info.remaining} points remaining")
    else:
        logger.debug(f"GitHub API rate limit status: {rate_limit_info}")


def check_header_value(value: str) -> None:
    """Raise AuthHeaderError unless every character is visible ASCII, space or tab."""
    for position, char in enumerate(value):
        if char == '\t' or ' ' <= char <= '~':
            continue
        raise AuthHeaderError(
            f'could not create an Authorization header from the specified token: '
            f'invalid character {char!r} at position {position}'
        )


def make_headers(token: str) -> Dict[str, str]:
    """Build the headers for a GraphQL request with a PAT.

    Args:
        token (str): Github pat
    Returns:
        Dict[str, str]: Mapping of HTTP header names to values.
    """
    authorization = f'Bearer {token}'
    check_header_value(authorization)
    return {
        'Authorization': authorization,
        'User-Agent': USER_AGENT,
    }


def _error_message(response: requests.Response) -> str:
    """Best-effort text describing a failed response."""
    try:
        body = response.json()
    except ValueError:
        return response.reason or ''
    if isinstance(body, dict) and isinstance(body.get('message'), str):
        return body['message']
    return response.reason or ''


def log_graphql_errors(document: Any) -> None:
    """Log each entry of the top-level ``errors`` array of a GraphQL response.

    GitHub can answer with both ``data`` and ``errors``; the errors are reported
    but the data is still usable, so nothing here is fatal except an ``errors``
    field that is not an array.

    Raises:
        MalformedErrorsField: ``errors`` is present, not null and not an array.
    """
    try:
        errors = resolve(document, '/errors')
    except NotFound:
        return

    if errors is None:
        return
    if not isinstance(errors, list):
        raise MalformedErrorsField(f'errors was not an array (found {kind_of(errors)})')

    for error in errors:
        if isinstance(error, dict) and isinstance(error.get('message'), str):
            logger.error(f"GraphQL error: {error['message']}")
        else:
            logger.error(f"GraphQL error: {json.dumps(error)}")


def fetch(token: str) -> Dict[str, Any]:
    """
    Fetch the viewer's open review requests with a single GraphQL query.

    No retries are made and no timeout is set.

    Args:
        token (str): GitHub PAT

    Returns:
        Dict[str, Any]: The decoded response document, including any partial ``errors``

    Raises:
        AuthHeaderError: the token cannot be sent as a header
        TransportError: the request failed or GitHub answered with a non-2xx status
        BodyDecodeError: the body was not JSON
        MalformedErrorsField: the ``errors`` field was not an array
    """
    headers = make_headers(token)
    logger.debug(f"Querying {GITHUB_GRAPHQL_URL} with token {mask_secret(token)}")

    try:
        response = requests.post(GITHUB_GRAPHQL_URL, headers=headers, json={'query': QUERY})
    except requests.exceptions.InvalidHeader as e:
        raise AuthHeaderError('could not create an Authorization header from the specified token') from e
    except requests.exceptions.RequestException as e:
        raise TransportError("could not request data from GitHub's API") from e

    log_rate_limit(response)

    if not 200 <= response.status_code < 300:
        raise TransportError(
            f"GitHub's API responded with status {response.status_code}: {_error_message(response)}"
        )

    try:
        document = response.json()
    except ValueError as e:
        raise BodyDecodeError('could not read JSON body') from e

    log_graphql_errors(document)
    return document
