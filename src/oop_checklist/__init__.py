"""Object-oriented language probes.

Each probe module prints numbered lines demonstrating one feature: abstract
classes, constructor execution order, method overriding with dynamic
dispatch, and modern syntax. The polymorphic dispatch helpers are exported
here for reuse.
"""

from __future__ import annotations

from .dispatch import Capability, construct, invoke, rebind
from .exceptions import (
    AbstractInstantiationError,
    ChecklistError,
    UnknownModuleError,
)

__all__ = [
    "Capability",
    "construct",
    "invoke",
    "rebind",
    "AbstractInstantiationError",
    "ChecklistError",
    "UnknownModuleError",
]

__version__ = "0.1.0"
