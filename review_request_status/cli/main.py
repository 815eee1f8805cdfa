# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Review request status CLI - Main entry point

Prints the open pull requests waiting on your review in xbar's plugin format.
Errors are printed to stdout as well so they show up in the menu bar.
"""

import logging
import os
from typing import List

import click
from dotenv import find_dotenv, load_dotenv
from rich.console import Console
from rich.markup import escape

from review_request_status import __version__
from review_request_status.classes import Captions, Config
from review_request_status.constants import (
    DEFAULT_DONE_CAPTION,
    DEFAULT_STATUS_ERROR_CAPTION,
    DEFAULT_STATUS_EXPECTED_CAPTION,
    DEFAULT_STATUS_FAILURE_CAPTION,
    DEFAULT_STATUS_PENDING_CAPTION,
    DEFAULT_STATUS_SUCCESS_CAPTION,
    DEFAULT_TODO_CAPTION,
    GITHUB_API_TOKEN_ENV,
    LOG_LEVEL_ENV,
    PROJECT_NAME,
)
from review_request_status.exceptions import FetchError, ReviewRequestStatusError
from review_request_status.menu import build_menu
from review_request_status.utils.github_api_tools import fetch
from review_request_status.utils.logging import setup_logging
from review_request_status.utils.utils import describe_chain

logger = logging.getLogger(__name__)

console = Console(emoji=False, highlight=False)


def print_error(error: BaseException) -> None:
    """Print an error and the chain of errors that caused it."""
    messages = describe_chain(error)
    console.print(f'[red]Error:[/red] {escape(messages[0])}', soft_wrap=True)
    if len(messages) > 1:
        console.print('\nCaused by:', soft_wrap=True)
        for index, message in enumerate(messages[1:]):
            console.print(f'    {index}: {escape(message)}', soft_wrap=True)


def validate_token(ctx, param, value: str) -> str:
    """Reject an empty token before any network work."""
    if not value or not value.strip():
        raise click.BadParameter('a GitHub API token is required', param_hint=GITHUB_API_TOKEN_ENV)
    return value


def run(config: Config) -> List[str]:
    """Fetch the review requests and build the menu lines."""
    try:
        document = fetch(config.github_api_token)
    except ReviewRequestStatusError as e:
        raise FetchError('could not fetch review requests') from e

    return build_menu(document, config)


@click.command(name=PROJECT_NAME)
@click.version_option(version=__version__, prog_name=PROJECT_NAME)
@click.argument('github_api_token', envvar=GITHUB_API_TOKEN_ENV, callback=validate_token)
@click.option(
    '--done-caption',
    default=DEFAULT_DONE_CAPTION,
    show_default=True,
    help='Printed by the count when you have no review requests',
)
@click.option(
    '--todo-caption',
    default=DEFAULT_TODO_CAPTION,
    show_default=True,
    help='Printed by the count when you have outstanding review requests',
)
@click.option(
    '--status-expected-caption',
    default=DEFAULT_STATUS_EXPECTED_CAPTION,
    show_default=True,
    help='Printed on PRs that have an "expected" status',
)
@click.option(
    '--status-error-caption',
    default=DEFAULT_STATUS_ERROR_CAPTION,
    show_default=True,
    help='Printed on PRs that have an "error" status',
)
@click.option(
    '--status-failure-caption',
    default=DEFAULT_STATUS_FAILURE_CAPTION,
    show_default=True,
    help='Printed on PRs that have a "failure" status',
)
@click.option(
    '--status-pending-caption',
    default=DEFAULT_STATUS_PENDING_CAPTION,
    show_default=True,
    help='Printed on PRs that have a "pending" status',
)
@click.option(
    '--status-success-caption',
    default=DEFAULT_STATUS_SUCCESS_CAPTION,
    show_default=True,
    help='Printed on PRs that have a "success" status',
)
def cli(
    github_api_token: str,
    done_caption: str,
    todo_caption: str,
    status_expected_caption: str,
    status_error_caption: str,
    status_failure_caption: str,
    status_pending_caption: str,
    status_success_caption: str,
):
    """List the pull requests waiting on your review.

    GITHUB_API_TOKEN is a GitHub access token with the `repo` and `read:user`
    scopes, created at https://github.com/settings/tokens. It is read from the
    environment variable of the same name when not given as an argument.
    """
    setup_logging(os.environ.get(LOG_LEVEL_ENV))

    config = Config(
        github_api_token=github_api_token,
        captions=Captions(
            done=done_caption,
            todo=todo_caption,
            expected=status_expected_caption,
            error=status_error_caption,
            failure=status_failure_caption,
            pending=status_pending_caption,
            success=status_success_caption,
        ),
    )
    logger.debug(f'Running with {config}')

    try:
        lines = run(config)
    except ReviewRequestStatusError as e:
        print_error(e)
        raise SystemExit(1)

    for line in lines:
        click.echo(line)


def main():
    """Main entry point for the CLI"""
    env_file = find_dotenv(usecwd=True)
    if env_file:
        load_dotenv(env_file)
    cli()


if __name__ == '__main__':
    main()
