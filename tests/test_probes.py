from __future__ import annotations

import dataclasses
import io
import sys
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from oop_checklist import abstract_classes, constructor_execution, method_overriding, modern_syntax


def capture(fn, *args) -> list[str]:
    buffer = io.StringIO()
    with redirect_stdout(buffer):
        fn(*args)
    return buffer.getvalue().splitlines()


class AbstractClassesTests(unittest.TestCase):
    def test_concrete_subclass_names_and_prints(self) -> None:
        lines = capture(abstract_classes.demo_1_concrete_subclass)
        self.assertEqual(lines[1:], ["B", "Hello World!"])

    def test_print_on_b_instance_is_verbatim(self) -> None:
        b = abstract_classes.B()
        self.assertEqual(capture(b.print, "Hello World!"), ["Hello World!"])

    def test_print_is_not_overridden_down_the_chain(self) -> None:
        self.assertIs(abstract_classes.C.print, abstract_classes.B.print)

    def test_abstract_root_demo_reports_rejection(self) -> None:
        lines = capture(abstract_classes.demo_2_abstract_root_rejected)
        self.assertEqual(lines, ["2. abstract root rejected: Capability ('name',)"])

    def test_abstract_reference_dispatches_to_subclass(self) -> None:
        lines = capture(abstract_classes.demo_3_abstract_reference)
        self.assertEqual(lines[1:], ["C", "Hello World!"])


class MethodOverridingTests(unittest.TestCase):
    def test_override_hides_superclass(self) -> None:
        lines = capture(method_overriding.demo_1_override_hides_superclass)
        self.assertEqual(lines[1:], ["B"])

    def test_dynamic_dispatch_outputs(self) -> None:
        lines = capture(method_overriding.demo_2_dynamic_dispatch)
        self.assertEqual(lines[1:], ["A", "D", "E"])

    def test_every_variant_prints_its_own_label(self) -> None:
        lines = capture(method_overriding.demo_3_closed_variant_set)
        self.assertEqual(lines[1:], ["A", "B", "C", "D", "E"])

    def test_declared_type_does_not_select_implementation(self) -> None:
        lines = capture(method_overriding.demo_4_resolution_per_call)
        self.assertEqual(lines, ["4. resolution per call: True C", "C"])


class ConstructorExecutionTests(unittest.TestCase):
    def test_deepest_class_prints_base_first(self) -> None:
        lines = capture(constructor_execution.C)
        self.assertEqual(
            lines,
            [
                "Inside A's constructor.",
                "Inside B's constructor.",
                "Inside C's constructor.",
            ],
        )

    def test_intermediate_class_skips_descendants(self) -> None:
        lines = capture(constructor_execution.demo_2_intermediate_class)
        self.assertEqual(lines[1:], ["Inside A's constructor.", "Inside B's constructor."])


class ModernSyntaxTests(unittest.TestCase):
    def test_switch_rule_cases(self) -> None:
        cases = {
            0: "Zero",
            1: "Five or less",
            5: "Five or less",
            -3: "Five or less",
            6: "Not sure, but more than six.",
            -40: "Not sure, but more than six.",
        }
        for value, expected in cases.items():
            with self.subTest(value=value):
                buffer = io.StringIO()
                with redirect_stdout(buffer):
                    answer = modern_syntax.switch_rule(value)
                self.assertEqual(answer, expected)
                self.assertEqual(buffer.getvalue().splitlines(), [expected])

    def test_switch_group_prints_branch_then_answer(self) -> None:
        cases = {
            0: ["Value is zero.", "Zero"],
            3: ["Value is between 1 and 5.", "Five or less."],
            -2: ["Value is between 1 and 5.", "Five or less."],
            9: ["Another value.", "Not sure, but more than six."],
        }
        for value, expected in cases.items():
            with self.subTest(value=value):
                self.assertEqual(capture(modern_syntax.switch_group, value), expected)

    def test_text_block_strips_incidental_indentation(self) -> None:
        lines = modern_syntax.HTML_TEXT_BLOCK.splitlines()
        self.assertEqual(lines[0], "<html>")
        self.assertEqual(lines[3], "      <div>Hello World!</div>")
        self.assertEqual(lines[-1], "</html>")
        self.assertTrue(modern_syntax.HTML_TEXT_BLOCK.endswith("</html>\n"))

    def test_write_text_block_writes_exact_payload(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = modern_syntax.write_text_block(Path(tmp) / "demo.txt")
            self.assertEqual(target.read_bytes(), modern_syntax.HTML_TEXT_BLOCK.encode("utf-8"))

    def test_person_record_is_immutable(self) -> None:
        person = modern_syntax.PersonRecord("John", 17)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            person.age = 18  # type: ignore[misc]
        self.assertEqual(person, modern_syntax.PersonRecord("John", 17))
        self.assertEqual(hash(person), hash(modern_syntax.PersonRecord("John", 17)))
        self.assertEqual(repr(person), "PersonRecord(name='John', age=17)")

    def test_record_demo_output(self) -> None:
        lines = capture(modern_syntax.demo_4_record)
        self.assertEqual(lines, ["4. record: PersonRecord(name='John', age=17)"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
