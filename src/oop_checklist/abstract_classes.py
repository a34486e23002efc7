"""Abstract classes: a generalized form that subclasses fill in.

A class with an abstract method cannot be instantiated. It still works as the
declared type of a reference, because run-time polymorphism goes through
superclass references that point at subclass objects.
"""

from __future__ import annotations

from .dispatch import Capability, construct, invoke
from .exceptions import AbstractInstantiationError


class B(Capability):
    def name(self) -> None:
        print("B")


class C(B):
    def name(self) -> None:
        print("C")


def demo_1_concrete_subclass() -> None:
    """A concrete subclass implements ``name`` and inherits ``print``."""
    print("1. concrete subclass:")
    b = B()
    b.name()
    b.print("Hello World!")


def demo_2_abstract_root_rejected() -> None:
    """Instantiating the abstract root fails before any object exists."""
    try:
        construct(Capability)
    except AbstractInstantiationError as exc:
        print("2. abstract root rejected:", exc.class_name, exc.missing)


def demo_3_abstract_reference() -> None:
    """A reference typed at the abstract class points at a subclass object."""
    print("3. abstract reference:")
    reference: Capability = C()
    invoke(reference)
    reference.print("Hello World!")  # unchanged by inheritance depth.


def run_all() -> None:
    """Execute all abstract class demos."""
    demo_1_concrete_subclass()
    demo_2_abstract_root_rejected()
    demo_3_abstract_reference()


if __name__ == "__main__":
    run_all()
