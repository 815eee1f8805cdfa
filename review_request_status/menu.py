# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Render a GraphQL review request response as xbar menu lines.

An xbar line is ``text | key=value key=value``. The first line is shown in the
menu bar, ``---`` starts the dropdown, and lines starting with ``--`` are
nested under the line above them.
"""

from typing import Any, List

from review_request_status.classes import Config, ReviewRequest
from review_request_status.constants import MENU_SEPARATOR, REVIEW_REQUESTS_PATH, SUBMENU_PREFIX
from review_request_status.exceptions import NavigationError, RenderError
from review_request_status.utils.navigate import get_array


def shell_quote(value: str) -> str:
    """Wrap a value in single quotes for bash, escaping embedded single quotes."""
    return "'" + value.replace("'", "'\\''") + "'"


def attribute_quote(value: str) -> str:
    """Wrap a value in double quotes for an xbar attribute."""
    return '"' + value.replace('\\', '\\\\').replace('"', '\\"') + '"'


def copy_to_clipboard_action(text: str) -> str:
    """xbar attributes that copy ``text`` to the macOS clipboard when clicked."""
    command = f"printf '%s' {shell_quote(text)} | pbcopy"
    return f'shell=bash param1=-c param2={attribute_quote(command)}'


def format_review_request(review_request: ReviewRequest, config: Config) -> List[str]:
    """The pull request line followed by its branch line."""
    caption = config.captions.for_status(review_request.status)
    summary = f'{review_request.title} by {review_request.author}'
    if caption:
        summary = f'{caption} {summary}'

    return [
        f'{summary} | href={review_request.url}',
        f'{SUBMENU_PREFIX} {review_request.branch} | {copy_to_clipboard_action(review_request.branch)}',
    ]


def get_review_request_nodes(document: Any) -> List[Any]:
    try:
        return get_array(document, REVIEW_REQUESTS_PATH)
    except NavigationError as e:
        raise RenderError('could not find review requests in the response') from e


def render(document: Any, config: Config) -> List[str]:
    """Two menu lines per review request, in response order.

    Raises:
        RenderError: the review request array is missing or any request lacks a
            required field. Nothing is rendered in that case.
    """
    lines = []
    for index, node in enumerate(get_review_request_nodes(document)):
        try:
            review_request = ReviewRequest.from_node(node)
        except NavigationError as e:
            raise RenderError(
                f'could not read review request {index} ({REVIEW_REQUESTS_PATH}/{index})'
            ) from e
        lines.extend(format_review_request(review_request, config))
    return lines


def build_menu(document: Any, config: Config) -> List[str]:
    """The complete plugin output: the menu bar count, then the dropdown."""
    count = len(get_review_request_nodes(document))
    if count == 0:
        return [f'0 {config.captions.done}']

    return [f'{count} {config.captions.todo}', MENU_SEPARATOR, *render(document, config)]
