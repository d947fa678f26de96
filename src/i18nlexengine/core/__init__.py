"""Core utilities shared across syntax, introspection and validation layers.

By isolating these utilities here, we maintain a clean dependency graph:

    core <- syntax <- introspection, validation <- localization

Exports:
    DepthGuard: Context manager for recursion depth limiting
    DepthLimitExceededError: Exception raised when depth limit exceeded
    is_valid_identifier: Key name validation

Python 3.13+.
"""

from .depth_guard import DepthGuard, DepthLimitExceededError
from .identifier_validation import is_valid_identifier

__all__ = ["DepthGuard", "DepthLimitExceededError", "is_valid_identifier"]
