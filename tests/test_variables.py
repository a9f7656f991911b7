"""
Test suite for the variable table.

Tests cover:
- Upsert semantics and release of overwritten matrices
- Swap-and-pop deletion
- Capacity limits
- Variable printing
"""

import io
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from matlite.matrix import Matrix, ones, zeros, eye, scalar
from matlite.state import Variable, VariableTable, VariableTableFullError
from matlite.formatting import format_variable, print_variable


class TestVariableTable(unittest.TestCase):
    """Test cases for bindings."""

    def setUp(self):
        self.table = VariableTable()

    def test_find_missing(self):
        self.assertIsNone(self.table.find("nope"))
        self.assertNotIn("nope", self.table)

    def test_add_and_find(self):
        m = ones(2, 2)
        var = self.table.add("a", m)
        self.assertIsInstance(var, Variable)
        self.assertIs(self.table.find("a"), var)
        self.assertIs(var.value, m)
        self.assertEqual(len(self.table), 1)

    def test_reassign_overwrites_in_place(self):
        m1 = ones(2, 2)
        m2 = eye(3, 3)
        first = self.table.add("a", m1)
        second = self.table.add("a", m2)

        self.assertIs(first, second)
        self.assertEqual(self.table.find("a").value, eye(3, 3))
        self.assertEqual(self.table.names(), ["a"])
        self.assertTrue(m1.released)
        self.assertFalse(m2.released)

    def test_reassign_same_matrix_keeps_it(self):
        m = ones(2, 2)
        self.table.add("a", m)
        self.table.add("a", m)
        self.assertFalse(m.released)

    def test_reassign_keeps_matrix_shared_with_other_name(self):
        m = ones(2, 2)
        self.table.add("a", m)
        self.table.add("b", m)
        self.table.add("a", scalar(5))

        self.assertFalse(m.released)
        self.assertIs(self.table.find("b").value, m)
        self.assertEqual(self.table.find("b").value, ones(2, 2))
        self.assertEqual(self.table.find("a").value, scalar(5))

    def test_delete_keeps_matrix_shared_with_other_name(self):
        m = eye(2, 2)
        self.table.add("a", m)
        self.table.add("b", m)
        self.assertTrue(self.table.delete("a"))

        self.assertFalse(m.released)
        self.assertEqual(self.table.find("b").value, eye(2, 2))

        self.table.delete("b")
        self.assertTrue(m.released)

    def test_clear_releases_shared_matrix_once(self):
        m = ones(2, 2)
        self.table.add("a", m)
        self.table.add("b", m)
        self.table.clear()
        self.assertTrue(m.released)

    def test_delete_keeps_other_bindings(self):
        values = {"a": scalar(1), "b": ones(2, 2), "c": zeros(4, 4)}
        for name, value in values.items():
            self.table.add(name, value)

        self.assertTrue(self.table.delete("b"))

        self.assertIsNone(self.table.find("b"))
        self.assertEqual(self.table.find("a").value, scalar(1))
        self.assertEqual(self.table.find("c").value, zeros(4, 4))
        self.assertEqual(sorted(self.table.names()), ["a", "c"])
        self.assertTrue(values["b"].released)

    def test_delete_swaps_last_into_hole(self):
        for name in ("a", "b", "c"):
            self.table.add(name, scalar(0))
        self.table.delete("a")
        self.assertEqual(self.table.names(), ["c", "b"])

    def test_delete_last_and_only(self):
        self.table.add("a", scalar(0))
        self.assertTrue(self.table.delete("a"))
        self.assertEqual(len(self.table), 0)

    def test_delete_missing_is_noop(self):
        self.table.add("a", scalar(0))
        self.assertFalse(self.table.delete("zzz"))
        self.assertEqual(self.table.names(), ["a"])

    def test_capacity(self):
        table = VariableTable(max_variables=2)
        table.add("a", scalar(1))
        table.add("b", scalar(2))
        with self.assertRaises(VariableTableFullError):
            table.add("c", scalar(3))
        # Reassignment still works when full
        table.add("a", scalar(5))
        self.assertEqual(table.find("a").value, scalar(5))

    def test_empty_name_rejected(self):
        with self.assertRaises(ValueError):
            self.table.add("", scalar(1))

    def test_clear_releases(self):
        m = ones(3, 3)
        self.table.add("a", m)
        self.table.clear()
        self.assertEqual(len(self.table), 0)
        self.assertTrue(m.released)

    def test_iteration(self):
        self.table.add("x", scalar(1))
        self.table.add("y", scalar(2))
        self.assertEqual({v.name for v in self.table}, {"x", "y"})


class TestFormatVariable(unittest.TestCase):

    def test_print_variable_writes_formatted_block(self):
        var = Variable("a", Matrix.from_rows([[1, 2], [3, 4]]))
        out = io.StringIO()
        print_variable(var, out)
        self.assertEqual(out.getvalue(), format_variable(var))

    def test_format(self):
        var = Variable("a", Matrix.from_rows([[1, 2], [3, 4]]))
        self.assertEqual(
            format_variable(var),
            "Name: a\n"
            "Size = (2 X 2).\n"
            "Data = [1.000000 , 2.000000\n"
            "        3.000000 , 4.000000]\n"
        )

    def test_format_row_vector(self):
        var = Variable("v", Matrix(1, 3, [0.5, 1, 2]))
        self.assertIn("Data = [0.500000 , 1.000000 , 2.000000]", format_variable(var))

    def test_format_empty(self):
        var = Variable("e", Matrix(0, 0, []))
        self.assertIn("Data = []", format_variable(var))


if __name__ == '__main__':
    unittest.main()
