"""Polymorphic dispatch through a reference typed at an abstract capability.

:class:`Capability` declares one required operation, ``name``, and one shared
operation, ``print``. Concrete variants subclass it and implement ``name``.
A reference annotated as :class:`Capability` can be bound to any variant;
which ``name`` runs is decided by the bound instance at the moment of the
call, never by the annotation.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Iterable, TypeVar

from .exceptions import AbstractInstantiationError

logger = logging.getLogger(__name__)

CapabilityT = TypeVar("CapabilityT", bound="Capability")


class Capability(ABC):
    """Abstract root shared by every variant.

    Construction is rejected in ``__new__`` while any abstract operation is
    still unimplemented, so the failure happens before an object exists.
    """

    def __new__(cls, *args, **kwargs):
        missing = getattr(cls, "__abstractmethods__", frozenset())
        if missing:
            raise AbstractInstantiationError(cls.__name__, missing)
        return super().__new__(cls)

    @abstractmethod
    def name(self) -> None:
        """Print the label of the concrete variant."""

    def print(self, message: str) -> None:
        """Print *message* verbatim; inherited unchanged by every variant."""
        print(message)


def construct(variant: type[CapabilityT]) -> CapabilityT:
    """Instantiate *variant*.

    Raises:
        AbstractInstantiationError: If *variant* still has abstract operations.
    """

    instance = variant()
    logger.debug("constructed %s", type(instance).__name__)
    return instance


def invoke(reference: Capability) -> None:
    """Call ``name`` on whatever instance *reference* is bound to."""

    logger.debug("dispatching name() to %s", type(reference).__name__)
    reference.name()


def rebind(instances: Iterable[Capability]) -> None:
    """Bind one reference to each instance in turn and invoke it.

    The output follows the bound instances, which shows that resolution
    happens on every call rather than once for the reference.
    """

    reference: Capability
    for instance in instances:
        reference = instance
        invoke(reference)
