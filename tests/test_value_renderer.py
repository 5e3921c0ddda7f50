"""Capability dispatch of the value renderer and the priority between rules."""
from __future__ import annotations

import enum
import unittest
from collections import OrderedDict, deque, namedtuple

from qformat import FmtFlags, NumericLocale, OutputSettings, Pair, ValueKind, ValueRenderer, Verbatim


class NoConversion:
    """Plain object: no custom conversion, not iterable."""


class WithStr:
    def __str__(self) -> str:
        return "Type Y"


class BrokenStr:
    def __str__(self) -> str:
        raise RuntimeError("boom")


class Money:
    def __init__(self, amount: float) -> None:
        self.amount = amount

    def __qformat__(self, settings: OutputSettings) -> str:
        return f"{self.amount:.{settings.precision}f} EUR"


class Shelf:
    """Iterable that also defines its own text conversion."""

    def __init__(self, *items) -> None:
        self._items = list(items)

    def __iter__(self):
        return iter(self._items)

    def __str__(self) -> str:
        return f"Shelf({len(self._items)})"


class Color(enum.Enum):
    RED = 1


class Loud(str):
    def __str__(self) -> str:
        return self.upper()


Point = namedtuple("Point", "x y")
Point3 = namedtuple("Point3", "x y z")


# --------------------------------------------------------------------------- #
#  Classification                                                             #
# --------------------------------------------------------------------------- #
class KindOfTests(unittest.TestCase):
    def setUp(self) -> None:
        self.r = ValueRenderer()

    def test_closed_set_of_kinds(self) -> None:
        cases = [
            (True, ValueKind.BOOLEAN),
            ("abc", ValueKind.TEXT),
            (b"abc", ValueKind.TEXT),
            (10, ValueKind.TEXT),
            (2.5, ValueKind.TEXT),
            (Pair(1, 2), ValueKind.PAIR),
            ((1, 2), ValueKind.PAIR),
            (Point(1, 2), ValueKind.PAIR),
            (WithStr(), ValueKind.CUSTOM),
            (Money(1), ValueKind.CUSTOM),
            (Color.RED, ValueKind.CUSTOM),
            ([1, 2], ValueKind.SEQUENCE),
            ((1, 2, 3), ValueKind.SEQUENCE),
            ({"a": 1}, ValueKind.SEQUENCE),
            ({1, 2}, ValueKind.SEQUENCE),
            (NoConversion(), ValueKind.UNKNOWN),
            (None, ValueKind.UNKNOWN),
        ]
        for value, kind in cases:
            with self.subTest(value=value):
                self.assertIs(self.r.kind_of(value), kind)

    def test_boolean_beats_number(self) -> None:
        # bool is an int subclass
        self.assertIs(self.r.kind_of(False), ValueKind.BOOLEAN)

    def test_text_beats_custom_and_sequence(self) -> None:
        self.assertIs(self.r.kind_of(Loud("quiet")), ValueKind.TEXT)

    def test_pair_beats_sequence(self) -> None:
        self.assertIs(self.r.kind_of(Point(1, 2)), ValueKind.PAIR)
        self.assertIs(self.r.kind_of(Point3(1, 2, 3)), ValueKind.SEQUENCE)

    def test_custom_beats_sequence(self) -> None:
        self.assertIs(self.r.kind_of(Shelf(1, 2)), ValueKind.CUSTOM)

    def test_verbatim_is_custom(self) -> None:
        self.assertIs(self.r.kind_of(Verbatim([1, 2])), ValueKind.CUSTOM)
        self.assertIs(self.r.kind_of(Verbatim((1, 2))), ValueKind.CUSTOM)


# --------------------------------------------------------------------------- #
#  Rendering                                                                  #
# --------------------------------------------------------------------------- #
class RenderTests(unittest.TestCase):
    def setUp(self) -> None:
        self.r = ValueRenderer()
        self.s = OutputSettings()

    def test_booleans_ignore_settings(self) -> None:
        hexed = OutputSettings(flags=FmtFlags.HEX | FmtFlags.UPPERCASE)
        self.assertEqual(self.r.render(True, self.s), "true")
        self.assertEqual(self.r.render(False, hexed), "false")

    def test_text_is_verbatim(self) -> None:
        self.assertEqual(self.r.render("a \"quoted\" %? text", self.s), "a \"quoted\" %? text")
        self.assertEqual(self.r.render(Loud("quiet"), self.s), "quiet")
        self.assertEqual(self.r.render(b"abc", self.s), "abc")
        self.assertEqual(self.r.render(bytearray(b"\xff"), self.s), "�")

    def test_numbers(self) -> None:
        self.assertEqual(self.r.render(10, self.s), "10")
        self.assertEqual(self.r.render(100.1, self.s), "100.1")
        self.assertEqual(self.r.render(255, OutputSettings(flags=FmtFlags.HEX)), "ff")

    def test_pair(self) -> None:
        self.assertEqual(self.r.render(Pair(2.0, True), self.s), "{2 : true}")
        self.assertEqual(self.r.render(("k", [1, 2]), self.s), "{k : [1, 2]}")

    def test_sequence(self) -> None:
        self.assertEqual(self.r.render(["apple", "pear", "banana"], self.s), "[apple, pear, banana]")
        self.assertEqual(self.r.render([], self.s), "[]")
        self.assertEqual(self.r.render(range(0), self.s), "[]")
        self.assertEqual(self.r.render(deque([1]), self.s), "[1]")
        self.assertEqual(self.r.render((i for i in range(3)), self.s), "[0, 1, 2]")

    def test_nested_sequences(self) -> None:
        self.assertEqual(self.r.render([[1, 2], [3], []], self.s), "[[1, 2], [3], []]")
        self.assertEqual(self.r.render([(1, "a"), (2, "b")], self.s), "[{1 : a}, {2 : b}]")

    def test_mapping_renders_as_pairs(self) -> None:
        data = OrderedDict([(2.0, True), (4.5, False), (8, True)])
        self.assertEqual(self.r.render(data, self.s), "[{2 : true}, {4.5 : false}, {8 : true}]")
        self.assertEqual(self.r.render({}, self.s), "[]")

    def test_custom_conversion(self) -> None:
        self.assertEqual(self.r.render(WithStr(), self.s), "Type Y")
        self.assertEqual(self.r.render(Color.RED, self.s), "Color.RED")
        self.assertEqual(self.r.render(ValueError("bad input"), self.s), "bad input")
        self.assertEqual(self.r.render(Shelf(1, 2), self.s), "Shelf(2)")

    def test_settings_aware_conversion(self) -> None:
        self.assertEqual(self.r.render(Money(3.14159), self.s), "3.141590 EUR")
        self.assertEqual(self.r.render(Money(3.14159), self.s.evolve(precision=2)), "3.14 EUR")

    def test_failing_conversion_degrades_to_marker(self) -> None:
        with self.assertLogs("qformat.render", level="WARNING") as cm:
            self.assertEqual(self.r.render(BrokenStr(), self.s), "?")
        self.assertTrue(any("BrokenStr" in line for line in cm.output))

    def test_unknown(self) -> None:
        self.assertEqual(self.r.render(NoConversion(), self.s), "?")
        self.assertEqual(self.r.render(None, self.s), "?")
        self.assertEqual(self.r.render([NoConversion(), 1], self.s), "[?, 1]")

    def test_verbatim_forces_own_conversion(self) -> None:
        self.assertEqual(self.r.render(Verbatim((1, 2)), self.s), "(1, 2)")
        self.assertEqual(self.r.render(Verbatim(["a"]), self.s), "['a']")
        self.assertEqual(self.r.render(Verbatim(Money(1)), self.s.evolve(precision=1)), "1.0 EUR")

    def test_verbatim_numbers_honour_settings(self) -> None:
        fixed = OutputSettings(flags=FmtFlags.FIXED, precision=2)
        self.assertEqual(self.r.render(Verbatim(2.5), fixed), "2.50")
        self.assertEqual(self.r.render(Verbatim(255), OutputSettings(flags=FmtFlags.HEX)), "ff")
        german = NumericLocale(name="de_DE", decimal_point=",", thousands_sep=".", grouping=(3, 0))
        self.assertEqual(self.r.render(Verbatim(1234.5), self.s.evolve(locale=german)), "1.234,5")
        self.assertEqual(self.r.render(Verbatim("text"), fixed), "text")

    def test_deterministic(self) -> None:
        value = {"a": [1.5, True, ("x", None)]}
        self.assertEqual(self.r.render(value, self.s), self.r.render(value, self.s))
        self.assertEqual(self.r.render(value, self.s), "[{a : [1.5, true, {x : ?}]}]")


if __name__ == "__main__":
    unittest.main()
