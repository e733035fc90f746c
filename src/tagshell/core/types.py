"""
Core type aliases for tagshell.

This module collects the callable shapes shared by the combinator engine so
that signatures stay readable across parsing modules.
"""

from collections.abc import Callable
from typing import Any

from tagshell.core.position import Position
from tagshell.core.result import Err, Ok

ParseFunction = Callable[[Position], Ok[Any] | Err]

Predicate = Callable[[Any], bool]
