"""Modern syntax probes: switch-style matching, text blocks, immutable records."""

from __future__ import annotations

import logging
import textwrap
from dataclasses import dataclass
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

DEFAULT_TEXT_BLOCK_PATH = "demo.txt"

# Incidental indentation is stripped, relative indentation is kept.
HTML_TEXT_BLOCK = textwrap.dedent(
    """\
    <html>
      <body>
        <p>
          <div>Hello World!</div>
        </p>
      </body>
    </html>
    """
)


def switch_rule(value: int) -> str:
    """Labelled rules: each case maps straight to a value."""
    match abs(value):
        case 0:
            answer = "Zero"
        case 1 | 2 | 3 | 4 | 5:
            answer = "Five or less"
        case _:
            answer = "Not sure, but more than six."
    print(answer)
    return answer


def switch_group(value: int) -> str:
    """Statement groups: each case runs statements before yielding a value."""
    match abs(value):
        case 0:
            print("Value is zero.")
            answer = "Zero"
        case 1 | 2 | 3 | 4 | 5:
            print("Value is between 1 and 5.")
            answer = "Five or less."
        case _:
            print("Another value.")
            answer = "Not sure, but more than six."
    print(answer)
    return answer


def write_text_block(path: Union[str, Path] = DEFAULT_TEXT_BLOCK_PATH) -> Path:
    """Write :data:`HTML_TEXT_BLOCK` to *path* and release the handle."""
    target = Path(path)
    with target.open("w", encoding="utf-8", newline="") as handle:
        handle.write(HTML_TEXT_BLOCK)
    logger.debug("wrote %d characters to %s", len(HTML_TEXT_BLOCK), target)
    return target


@dataclass(frozen=True)
class PersonRecord:
    """Immutable record; fields cannot be reassigned after construction.

    The dataclass machinery generates ``__init__``, ``__repr__``, ``__eq__``
    and ``__hash__``.
    """

    name: str
    age: int


def demo_1_switch_rule() -> None:
    print("1. switch rule:")
    switch_rule(0)


def demo_2_switch_group() -> None:
    print("2. switch group:")
    switch_group(3)


def demo_3_text_block(path: Union[str, Path] = DEFAULT_TEXT_BLOCK_PATH) -> None:
    target = write_text_block(path)
    print("3. text block:", target, len(HTML_TEXT_BLOCK.splitlines()))


def demo_4_record() -> None:
    person1 = PersonRecord("John", 17)
    print("4. record:", person1)


def run_all() -> None:
    """Execute all modern syntax demos."""
    demo_1_switch_rule()
    demo_2_switch_group()
    demo_3_text_block()
    demo_4_record()


if __name__ == "__main__":
    run_all()
