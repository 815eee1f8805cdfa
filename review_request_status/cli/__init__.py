# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Review request status command line entry point.

Usage:
    xbar-review-request-status [OPTIONS] [GITHUB_API_TOKEN]
"""
