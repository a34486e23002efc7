"""Constructor execution order in a class hierarchy.

Initializers complete in order of derivation, from superclass to subclass.
Each ``__init__`` here calls its parent initializer as its first statement,
so constructing ``C`` prints::

    Inside A's constructor.
    Inside B's constructor.
    Inside C's constructor.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class A:
    def __init__(self) -> None:
        super().__init__()
        print("Inside A's constructor.")


class B(A):
    def __init__(self) -> None:
        super().__init__()
        print("Inside B's constructor.")


class C(B):
    def __init__(self) -> None:
        super().__init__()
        print("Inside C's constructor.")


def demo_1_construction_order() -> None:
    """Constructing the most-derived class runs the base initializer first."""
    print("1. construction order:")
    c = C()
    logger.debug("initializers ran along %s", [cls.__name__ for cls in type(c).__mro__])


def demo_2_intermediate_class() -> None:
    """Constructing a middle class only runs its own ancestors."""
    print("2. intermediate class:")
    B()


def run_all() -> None:
    """Execute all constructor order demos."""
    demo_1_construction_order()
    demo_2_intermediate_class()


if __name__ == "__main__":
    run_all()
