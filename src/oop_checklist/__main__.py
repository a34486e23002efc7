"""Run the object-oriented probes from the command line.

``python -m oop_checklist`` calls ``run_all`` of every registered probe under
a ``== Running <name> ==`` header. Positional arguments restrict the run to
the named probes; the registration order below is kept either way.

A probe is any sibling module exposing ``run_all``; list its name below to
include it.
"""

from __future__ import annotations

import logging
import sys
from importlib import import_module
from typing import Callable, Sequence

from colored import fg, style

from .exceptions import UnknownModuleError
from .logs import setup_logging

logger = logging.getLogger(__name__)

MODULES: list[tuple[str, Callable[[], None]]] = []

HEADER_COLOR = fg("yellow")
RESET = style("reset")


def register(module_name: str) -> None:
    module = import_module(f"{__package__}.{module_name}")
    MODULES.append((module_name, module.run_all))


for name in [
    "abstract_classes",
    "constructor_execution",
    "method_overriding",
    "modern_syntax",
]:
    register(name)


def select(names: Sequence[str]) -> list[tuple[str, Callable[[], None]]]:
    """Return the registered modules named in *names*, in registration order.

    An empty *names* selects every module.
    """

    registered = {module_name for module_name, _ in MODULES}
    for requested in names:
        if requested not in registered:
            raise UnknownModuleError(requested)
    if not names:
        return list(MODULES)
    return [(module_name, runner) for module_name, runner in MODULES if module_name in names]


def header(module_name: str) -> str:
    text = f"== Running {module_name} =="
    if sys.stdout.isatty():
        return f"{HEADER_COLOR}{text}{RESET}"
    return text


def main(argv: list[str] | None = None) -> int:
    """Run the selected probes and return the process exit code."""

    setup_logging()
    args = argv if argv is not None else sys.argv[1:]
    try:
        selected = select(args)
    except UnknownModuleError as exc:
        print(f"error: {exc}", file=sys.stderr)
        print(
            f"available modules: {', '.join(module_name for module_name, _ in MODULES)}",
            file=sys.stderr,
        )
        return 2

    for module_name, runner in selected:
        logger.info("running %s", module_name)
        print(header(module_name))
        runner()
    return 0


if __name__ == "__main__":
    sys.exit(main())
