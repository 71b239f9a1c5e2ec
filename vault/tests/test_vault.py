#!/usr/bin/env python3
"""
Test Suite for Vault parsing

Tests:
- Typed values and column types
- Literal parsing (integers, strings, rows)
- Statement parsing (INSERT, SELECT)
- Row validation against a schema

Run: python -m pytest vault/tests -v
Or:  python vault/tests/test_vault.py
"""

import os
import sys
import unittest

# Add parent directories to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from vault import (
    Column, ColumnType, TableSchema, Value,
    Insert, Select, ParseError, RowParseError, UnrecognisedStatement,
    default_schema, parse_row, parse_statement, parse_value, validate_row,
)
from vault.parser.parser import StatementPrepareError


class TestValues(unittest.TestCase):
    """Test the typed value model"""

    def test_equality_includes_type(self):
        self.assertEqual(Value.integer(1), Value.integer(1))
        self.assertNotEqual(Value.integer(1), Value.text("1"))
        self.assertNotEqual(Value.text("a"), Value.text("b"))

    def test_integer_range(self):
        """Int values are signed 32-bit"""
        self.assertEqual(Value.integer(2147483647).data, 2147483647)
        self.assertEqual(Value.integer(-2147483648).data, -2147483648)
        with self.assertRaises(ValueError):
            Value.integer(2147483648)
        with self.assertRaises(ValueError):
            Value(ColumnType.INTEGER, "1")

    def test_immutable(self):
        value = Value.text("a")
        with self.assertRaises(AttributeError):
            value.data = "b"

    def test_render(self):
        self.assertEqual(Value.integer(42).render(), "42")
        self.assertEqual(Value.text("hi there").render(), '"hi there"')

    def test_to_dict(self):
        self.assertEqual(Value.integer(3).to_dict(), {'type': 'Int', 'value': 3})
        self.assertEqual(Value.text("x").to_dict(), {'type': 'String', 'value': 'x'})


class TestSchema(unittest.TestCase):
    """Test columns and table schemas"""

    def test_display(self):
        self.assertEqual(str(Column("id", ColumnType.INTEGER)), "id: Int")
        self.assertEqual(
            str(default_schema()),
            "| id: Int | username: String | email: String | "
        )

    def test_empty_schema_rejected(self):
        with self.assertRaises(ValueError):
            TableSchema([])

    def test_column_order(self):
        schema = default_schema()
        self.assertEqual(len(schema), 3)
        self.assertEqual(schema.get_column_names(), ['id', 'username', 'email'])


class TestParseValue(unittest.TestCase):
    """Test single literal parsing"""

    def test_integer(self):
        self.assertEqual(parse_value("0"), ("", Value.integer(0)))
        self.assertEqual(parse_value("123,4"), (",4", Value.integer(123)))
        self.assertEqual(parse_value("2147483647)"), (")", Value.integer(2147483647)))

    def test_leading_zeros(self):
        self.assertEqual(parse_value("007"), ("", Value.integer(7)))

    def test_string(self):
        self.assertEqual(parse_value('"james"'), ("", Value.text("james")))
        self.assertEqual(parse_value('"a, b")'), (")", Value.text("a, b")))

    def test_empty_string(self):
        self.assertEqual(parse_value('""'), ("", Value.text("")))

    def test_no_escape_processing(self):
        self.assertEqual(parse_value('"a\\n"'), ("", Value.text("a\\n")))

    def test_unterminated_string(self):
        with self.assertRaises(ParseError) as ctx:
            parse_value('"unterminated')
        self.assertEqual(ctx.exception.text, '"unterminated')

    def test_overflow(self):
        """Out of range integers fail instead of wrapping"""
        with self.assertRaises(ParseError):
            parse_value("99999999999")
        with self.assertRaises(ParseError):
            parse_value("2147483648")

    def test_no_literal(self):
        for text in ("", "abc", " 1", "-1", "'a'"):
            with self.subTest(text=text):
                with self.assertRaises(ParseError):
                    parse_value(text)

    def test_non_ascii_digits(self):
        with self.assertRaises(ParseError):
            parse_value("٣")


class TestParseRow(unittest.TestCase):
    """Test comma-separated literal rows"""

    def test_single_value(self):
        self.assertEqual(parse_row("1"), ("", [Value.integer(1)]))

    def test_mixed_values(self):
        remaining, row = parse_row('0,"james","sullyj3@gmail.com")')
        self.assertEqual(remaining, ")")
        self.assertEqual(row, [
            Value.integer(0),
            Value.text("james"),
            Value.text("sullyj3@gmail.com"),
        ])

    def test_round_trip(self):
        values = [Value.integer(5), Value.text("x y"), Value.text(""), Value.integer(0)]
        text = ",".join(value.render() for value in values)
        self.assertEqual(parse_row(text), ("", values))

    def test_empty_row(self):
        with self.assertRaises(ParseError):
            parse_row("")
        with self.assertRaises(ParseError):
            parse_row(")")

    def test_trailing_comma_left_unread(self):
        self.assertEqual(parse_row("1,2,)"), (",)", [Value.integer(1), Value.integer(2)]))

    def test_no_whitespace_around_commas(self):
        self.assertEqual(parse_row("1, 2"), (", 2", [Value.integer(1)]))


class TestParseStatement(unittest.TestCase):
    """Test INSERT and SELECT parsing"""

    def test_insert(self):
        statement = parse_statement('INSERT (1,"a")')
        self.assertEqual(statement, Insert([Value.integer(1), Value.text("a")]))

    def test_insert_case_insensitive(self):
        statement = parse_statement('insert (1,"a")')
        self.assertEqual(statement, Insert([Value.integer(1), Value.text("a")]))
        self.assertIsInstance(parse_statement('InSeRt\t(2)'), Insert)

    def test_insert_requires_whitespace(self):
        with self.assertRaises(UnrecognisedStatement):
            parse_statement('INSERT(1)')

    def test_insert_missing_paren(self):
        with self.assertRaises(UnrecognisedStatement):
            parse_statement('INSERT (1,2')
        with self.assertRaises(UnrecognisedStatement):
            parse_statement('INSERT 1,2)')

    def test_insert_malformed_row(self):
        for text in ('INSERT ()', 'INSERT (1,)', 'INSERT ("a)', 'INSERT (99999999999)'):
            with self.subTest(text=text):
                with self.assertRaises(UnrecognisedStatement):
                    parse_statement(text)

    def test_insert_row_is_immutable(self):
        """Parsed rows are tuples, so statements hash and cannot be edited"""
        statement = parse_statement('INSERT (1,"a")')
        self.assertEqual(statement.row, (Value.integer(1), Value.text("a")))
        self.assertEqual(hash(statement), hash(Insert([Value.integer(1), Value.text("a")])))
        with self.assertRaises(AttributeError):
            statement.row.append(Value.integer(2))
        with self.assertRaises(TypeError):
            Insert()

    def test_insert_not_schema_checked(self):
        """Any arity and types are accepted on the statement path"""
        statement = parse_statement('INSERT ("a","b","c","d")')
        self.assertEqual(len(statement.row), 4)

    def test_select(self):
        self.assertEqual(parse_statement("SELECT"), Select())
        self.assertEqual(parse_statement("select"), Select())

    def test_select_trailing_input_ignored(self):
        self.assertEqual(parse_statement("SELECT * FROM users"), Select())

    def test_unrecognised(self):
        for text in ("banana", "", "  SELECT", "UPDATE (1)"):
            with self.subTest(text=text):
                with self.assertRaises(UnrecognisedStatement):
                    parse_statement(text)

    def test_single_error_kind(self):
        with self.assertRaises(StatementPrepareError) as ctx:
            parse_statement('INSERT (1')
        self.assertIsInstance(ctx.exception.__cause__, ParseError)

    def test_to_dict(self):
        self.assertEqual(parse_statement("SELECT").to_dict(), {'kind': 'select'})
        self.assertEqual(
            parse_statement('INSERT (7,"z")').to_dict(),
            {'kind': 'insert', 'row': [
                {'type': 'Int', 'value': 7},
                {'type': 'String', 'value': 'z'},
            ]}
        )


class TestValidateRow(unittest.TestCase):
    """Test plain rows checked against a schema"""

    def setUp(self):
        self.schema = default_schema()

    def test_basic(self):
        row = validate_row("0,james,sullyj3@gmail.com", self.schema)
        self.assertEqual(row, [
            Value.integer(0),
            Value.text("james"),
            Value.text("sullyj3@gmail.com"),
        ])

    def test_signed_integer(self):
        row = validate_row("-12,a,b", self.schema)
        self.assertEqual(row[0], Value.integer(-12))
        row = validate_row("+3,a,b", self.schema)
        self.assertEqual(row[0], Value.integer(3))

    def test_text_fields_are_verbatim(self):
        row = validate_row('1, spaced ,"quoted"', self.schema)
        self.assertEqual(row[1], Value.text(" spaced "))
        self.assertEqual(row[2], Value.text('"quoted"'))

    def test_arity_mismatch(self):
        for line in ("", "0", "0,james", "0,james,a@b.c,extra", "0,a,b,c,d"):
            with self.subTest(line=line):
                with self.assertRaises(RowParseError):
                    validate_row(line, self.schema)

    def test_comma_inside_field_splits(self):
        """Fields are split on every comma, quoted or not"""
        with self.assertRaises(RowParseError):
            validate_row('0,"james, jr",a@b.c', self.schema)

    def test_bad_integer(self):
        for line in ("x,james,a", " 1,james,a", "1.5,james,a", ",james,a", "99999999999,james,a"):
            with self.subTest(line=line):
                with self.assertRaises(RowParseError):
                    validate_row(line, self.schema)

    def test_custom_schema(self):
        schema = TableSchema([Column("a", ColumnType.TEXT), Column("b", ColumnType.INTEGER)])
        self.assertEqual(
            validate_row("x,2", schema),
            [Value.text("x"), Value.integer(2)]
        )


def run_tests():
    """Run all tests"""
    loader = unittest.TestLoader()
    suite = unittest.TestSuite()

    suite.addTests(loader.loadTestsFromTestCase(TestValues))
    suite.addTests(loader.loadTestsFromTestCase(TestSchema))
    suite.addTests(loader.loadTestsFromTestCase(TestParseValue))
    suite.addTests(loader.loadTestsFromTestCase(TestParseRow))
    suite.addTests(loader.loadTestsFromTestCase(TestParseStatement))
    suite.addTests(loader.loadTestsFromTestCase(TestValidateRow))

    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(suite)

    return 0 if result.wasSuccessful() else 1


if __name__ == '__main__':
    sys.exit(run_tests())
