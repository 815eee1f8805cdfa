# The MIT License (MIT)
# Copyright © 2025 Entrius

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from review_request_status.constants import (
    AUTHOR_LOGIN_PATH,
    DEFAULT_DONE_CAPTION,
    DEFAULT_STATUS_ERROR_CAPTION,
    DEFAULT_STATUS_EXPECTED_CAPTION,
    DEFAULT_STATUS_FAILURE_CAPTION,
    DEFAULT_STATUS_PENDING_CAPTION,
    DEFAULT_STATUS_SUCCESS_CAPTION,
    DEFAULT_TODO_CAPTION,
    HEAD_REF_NAME_PATH,
    STATUS_STATE_PATH,
    TITLE_PATH,
    URL_PATH,
)
from review_request_status.exceptions import ConfigError, NotFound
from review_request_status.utils.navigate import get_string
from review_request_status.utils.utils import mask_secret


class CommitStatusState(Enum):
    """State of a commit's status check rollup"""

    EXPECTED = "EXPECTED"
    ERROR = "ERROR"
    FAILURE = "FAILURE"
    PENDING = "PENDING"
    SUCCESS = "SUCCESS"


@dataclass(frozen=True)
class Captions:
    """Text printed for the menu title and in front of each pull request"""

    done: str = DEFAULT_DONE_CAPTION
    todo: str = DEFAULT_TODO_CAPTION
    expected: str = DEFAULT_STATUS_EXPECTED_CAPTION
    error: str = DEFAULT_STATUS_ERROR_CAPTION
    failure: str = DEFAULT_STATUS_FAILURE_CAPTION
    pending: str = DEFAULT_STATUS_PENDING_CAPTION
    success: str = DEFAULT_STATUS_SUCCESS_CAPTION

    def for_status(self, status: Optional[str]) -> str:
        """Map a status rollup state to its caption.

        Known states use the configured caption, unknown states are shown as-is
        and a missing state has no caption at all.
        """
        if status is None:
            return ''
        by_state: Dict[str, str] = {
            CommitStatusState.EXPECTED.value: self.expected,
            CommitStatusState.ERROR.value: self.error,
            CommitStatusState.FAILURE.value: self.failure,
            CommitStatusState.PENDING.value: self.pending,
            CommitStatusState.SUCCESS.value: self.success,
        }
        return by_state.get(status, status)


@dataclass(frozen=True)
class Config:
    """Everything one run needs, built once from flags and environment"""

    github_api_token: str = field(repr=False)
    captions: Captions = field(default_factory=Captions)

    def __post_init__(self):
        if not self.github_api_token:
            raise ConfigError('a GitHub API token is required')

    def __str__(self) -> str:
        return f"Config(github_api_token={mask_secret(self.github_api_token)}, captions={self.captions})"


@dataclass(frozen=True)
class ReviewRequest:
    """One pull request waiting on the user's review"""

    title: str
    author: str
    url: str
    branch: str
    status: Optional[str] = None

    @classmethod
    def from_node(cls, node: Any) -> 'ReviewRequest':
        """Project a search result node from the GraphQL response.

        The title, author login, url and head branch are required. A pull request
        without commits or without a status rollup has no status.
        """
        try:
            status = get_string(node, STATUS_STATE_PATH)
        except NotFound:
            status = None

        return cls(
            title=get_string(node, TITLE_PATH),
            author=get_string(node, AUTHOR_LOGIN_PATH),
            url=get_string(node, URL_PATH),
            branch=get_string(node, HEAD_REF_NAME_PATH),
            status=status,
        )
