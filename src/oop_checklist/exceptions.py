"""Errors raised by the dispatch helpers and the probe runner.

:class:`ChecklistError` is the common parent. Each concrete error also derives
from the builtin exception Python would raise for the same mistake.
"""

from __future__ import annotations

from typing import Iterable


class ChecklistError(Exception):
    """Base exception for all checklist operations."""


class AbstractInstantiationError(ChecklistError, TypeError):
    """Raised when an abstract capability is constructed directly.

    The check runs before the object is allocated, so no instance of the
    abstract class ever exists. The class also derives from
    :class:`TypeError`, which is what the interpreter raises for the same
    mistake, so ``except TypeError`` keeps working.
    """

    def __init__(self, class_name: str, missing: Iterable[str]) -> None:
        self.class_name = class_name
        self.missing = tuple(sorted(missing))
        super().__init__(
            f"Can't instantiate abstract class {class_name} "
            f"without an implementation for: {', '.join(self.missing)}"
        )


class UnknownModuleError(ChecklistError, LookupError):
    """Raised when the runner is asked for a probe that is not registered."""

    def __init__(self, module_name: str) -> None:
        self.module_name = module_name
        super().__init__(f"Unknown checklist module '{module_name}'.")
