"""Destructive-operation guard.

The default policy is a string-length heuristic: an operation whose result
path is shorter than its source path is treated as an accidental escape to a
parent directory and refused.  It is not containment checking, and
``/a/../../etc`` passes it.  Swap in another :data:`GuardPolicy` to harden it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

GuardPolicy = Callable[[str, str, str], bool]
"""``(action, source_path, result_path) -> blocked``."""


def length_guard(action: str, source_path: str, result_path: str) -> bool:
    """Block when *result_path* is shorter than *source_path*."""
    if len(source_path) > len(result_path):
        logger.error(
            "Blocked dangerous %s: source=%s result=%s", action, source_path, result_path
        )
        return True
    return False


def blocked(action: str, source_path: str, result_path: str) -> bool:
    """Apply the default policy."""
    return length_guard(action, source_path, result_path)
