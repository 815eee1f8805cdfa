# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
xbar plugin listing the GitHub pull requests waiting on your review.
"""

__version__ = '0.3.0'
