"""Method overriding and dynamic method dispatch.

When a subclass method has the same name and signature as one in its
superclass, the subclass version overrides it. A call through a superclass
reference is resolved at run time by the type of the object referred to at
the time of the call.
"""

from __future__ import annotations

from .dispatch import Capability, construct, invoke, rebind


class A(Capability):
    def name(self) -> None:
        print("A")


class B(A):
    def name(self) -> None:
        print("B")


class C(B):
    def name(self) -> None:
        print("C")


class D(A):
    def name(self) -> None:
        print("D")


class E(A):
    def name(self) -> None:
        print("E")


VARIANTS: tuple[type[A], ...] = (A, B, C, D, E)


def demo_1_override_hides_superclass() -> None:
    """The subclass version of ``name`` hides the superclass version."""
    print("1. override:")
    b = B()
    b.name()


def demo_2_dynamic_dispatch() -> None:
    """Rebinding one ``A`` reference prints A, D, E rather than A three times."""
    print("2. dynamic dispatch:")
    a = A()
    d = D()
    e = E()

    r: A  # reference of type A

    r = a
    r.name()

    r = d
    r.name()

    r = e
    r.name()


def demo_3_closed_variant_set() -> None:
    """Every variant in the closed set dispatches to its own ``name``."""
    print("3. variants:", [variant.__name__ for variant in VARIANTS])
    rebind(construct(variant) for variant in VARIANTS)


def demo_4_resolution_per_call() -> None:
    """The declared type of a reference never selects the implementation."""
    reference: A = construct(C)
    print("4. resolution per call:", isinstance(reference, A), type(reference).__name__)
    invoke(reference)


def run_all() -> None:
    """Execute all overriding and dispatch demos."""
    demo_1_override_hides_superclass()
    demo_2_dynamic_dispatch()
    demo_3_closed_variant_set()
    demo_4_resolution_per_call()


if __name__ == "__main__":
    run_all()
