# unifyerr/api/__init__.py
"""
unifyerr User-facing API

Two levels:
1. unify() - one call, strategy picked from the value's type
2. from_message / from_error / from_boxed - strategy picked by the caller
"""

from .unify import unify, from_message, from_error, from_boxed

__all__ = [
    "unify",
    "from_message",
    "from_error",
    "from_boxed",
]
