# The MIT License (MIT)
# Copyright © 2025 Entrius

from review_request_status import __version__

# =============================================================================
# General
# =============================================================================
PROJECT_NAME = "xbar-review-request-status"
USER_AGENT = f"{PROJECT_NAME}/{__version__}"

# =============================================================================
# Environment
# =============================================================================
GITHUB_API_TOKEN_ENV = "GITHUB_API_TOKEN"
LOG_LEVEL_ENV = "XBAR_REVIEW_REQUEST_STATUS_LOG"
DEFAULT_LOG_LEVEL = "error"

# =============================================================================
# GitHub API
# =============================================================================
BASE_GITHUB_API_URL = "https://api.github.com"
GITHUB_GRAPHQL_URL = f"{BASE_GITHUB_API_URL}/graphql"

# =============================================================================
# Response paths
# =============================================================================
REVIEW_REQUESTS_PATH = "/data/search/nodes"
TITLE_PATH = "/title"
AUTHOR_LOGIN_PATH = "/author/login"
URL_PATH = "/url"
HEAD_REF_NAME_PATH = "/headRefName"
STATUS_STATE_PATH = "/commits/nodes/0/commit/statusCheckRollup/state"

# =============================================================================
# Captions
# =============================================================================
DEFAULT_DONE_CAPTION = "✨"
DEFAULT_TODO_CAPTION = "👀"
DEFAULT_STATUS_EXPECTED_CAPTION = "🕓"
DEFAULT_STATUS_ERROR_CAPTION = "🔥"
DEFAULT_STATUS_FAILURE_CAPTION = "🌑"
DEFAULT_STATUS_PENDING_CAPTION = "🌓"
DEFAULT_STATUS_SUCCESS_CAPTION = "🌕"

# =============================================================================
# Menu format
# =============================================================================
MENU_SEPARATOR = "---"
SUBMENU_PREFIX = "--"
