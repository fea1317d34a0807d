"""Core enums package.

Usage:
    from crud_backbone.core.enums import ErrorCode, Environment
"""

from crud_backbone.core.enums.environment import Environment
from crud_backbone.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
