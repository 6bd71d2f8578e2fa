"""
Tests for the expression cursor.

Author: exprcalc contributors
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from exprcalc.lexer.cursor import Cursor
from exprcalc.lexer.errors import LexerError, LEXER_ERROR_CODES


class TestCursor(unittest.TestCase):
    """Test cases for position tracking."""

    def test_columns_advance_on_same_line(self):
        """Test column tracking within a line."""
        cursor = Cursor("abc")
        cursor.advance(2)
        self.assertEqual((cursor.pos, cursor.line, cursor.column), (2, 1, 3))

    def test_newline_starts_next_line(self):
        """Consuming a newline bumps the line and resets the column."""
        cursor = Cursor("ab\ncd")
        cursor.advance(3)
        self.assertEqual((cursor.line, cursor.column), (2, 1))
        cursor.advance()
        self.assertEqual((cursor.line, cursor.column), (2, 2))

    def test_peek_does_not_consume(self):
        """Test peek does not consume."""
        cursor = Cursor("**2")
        self.assertEqual(cursor.peek(2), "**")
        self.assertEqual(cursor.peek(), "*")
        self.assertEqual(cursor.pos, 0)

    def test_peek_at_end_is_empty(self):
        """Test peek at end is empty."""
        cursor = Cursor("x")
        cursor.advance()
        self.assertEqual(cursor.peek(), "")
        self.assertTrue(cursor.at_end())

    def test_skip_whitespace(self):
        """Test skip whitespace."""
        cursor = Cursor(" \t\n x")
        cursor.skip_whitespace()
        self.assertEqual(cursor.pos, 4)
        self.assertEqual(cursor.location().line, 2)
        self.assertEqual(cursor.location().column, 2)
        self.assertEqual(cursor.remaining(), "x")

    def test_skip_whitespace_ignores_other_characters(self):
        """Test skip whitespace ignores other characters."""
        cursor = Cursor("\r1")
        cursor.skip_whitespace()
        self.assertEqual(cursor.pos, 0)

    def test_advance_past_end_is_a_fault(self):
        """Overrunning the input is a programming error and changes nothing."""
        cursor = Cursor("12")
        cursor.advance()
        with self.assertRaises(LexerError) as raised:
            cursor.advance(2)
        self.assertEqual(cursor.pos, 1)
        self.assertIn(raised.exception.diagnostic.code, LEXER_ERROR_CODES)

    def test_empty_input(self):
        """Test empty input."""
        cursor = Cursor("")
        self.assertTrue(cursor.at_end())
        self.assertEqual(cursor.location().offset, 0)
        with self.assertRaises(LexerError):
            cursor.advance()


if __name__ == '__main__':
    unittest.main()
