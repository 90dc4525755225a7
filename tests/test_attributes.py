import unittest

from dotdsl import Atom, AttributeSet
from dotdsl.attributes import format_value, quote


class QuoteTest(unittest.TestCase):
    def test_plain_text(self):
        self.assertEqual(quote("example"), '"example"')

    def test_escapes(self):
        self.assertEqual(quote('say "hi"'), '"say \\"hi\\""')
        self.assertEqual(quote("a\nb"), '"a\\nb"')
        self.assertEqual(quote("a\tb"), '"a\\tb"')
        self.assertEqual(quote("C:\\temp"), '"C:\\\\temp"')

    def test_escape_character_becomes_left_justified_break(self):
        self.assertEqual(quote("left\x1bright\x1b"), '"left\\lright\\l"')


class FormatValueTest(unittest.TestCase):
    def test_atom_is_bare(self):
        self.assertEqual(format_value(Atom("box")), "box")

    def test_text_is_quoted(self):
        self.assertEqual(format_value("box"), '"box"')

    def test_numbers_and_booleans_are_bare(self):
        self.assertEqual(format_value(2), "2")
        self.assertEqual(format_value(1.5), "1.5")
        self.assertEqual(format_value(True), "true")
        self.assertEqual(format_value(False), "false")

    def test_atom_is_still_a_string(self):
        self.assertEqual(Atom("same"), "same")
        self.assertEqual(repr(Atom("same")), "Atom('same')")


class AttributeSetTest(unittest.TestCase):
    def test_empty(self):
        attrs = AttributeSet()
        self.assertEqual(attrs.render(), "")
        self.assertFalse(attrs)
        self.assertEqual(len(attrs), 0)

    def test_sorted_by_key(self):
        attrs = AttributeSet({"size": "1.5,2.5", "label": "example"})
        self.assertEqual(attrs.render(), '[label = "example", size = "1.5,2.5"]')

    def test_order_does_not_depend_on_insertion(self):
        first = AttributeSet({"b": Atom("x"), "a": Atom("y"), "c": 1})
        second = AttributeSet({"c": 1, "a": Atom("y"), "b": Atom("x")})
        self.assertEqual(first.render(), second.render())
        self.assertEqual(first.render(), "[a = y, b = x, c = 1]")

    def test_set_replaces(self):
        attrs = AttributeSet({"color": "red"})
        attrs.set({"shape": Atom("box")})
        self.assertEqual(attrs.render(), "[shape = box]")
        self.assertNotIn("color", attrs)

    def test_set_none_clears(self):
        attrs = AttributeSet({"color": "red"})
        attrs.set(None)
        self.assertEqual(attrs.render(), "")

    def test_mapping_access(self):
        attrs = AttributeSet({"color": "red"})
        self.assertEqual(attrs["color"], "red")
        self.assertEqual(list(attrs), ["color"])
        self.assertEqual(attrs, {"color": "red"})
        self.assertEqual(attrs, AttributeSet({"color": "red"}))

    def test_input_mapping_is_copied(self):
        source = {"color": "red"}
        attrs = AttributeSet(source)
        source["color"] = "blue"
        self.assertEqual(attrs["color"], "red")
