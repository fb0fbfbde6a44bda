import io
import unittest

from calc.lexer import Lexer
from calc.reporter import Reporter, LexError
from calc.tokens import (
    Structural, Identifier, Literal,
    UnaryArithmetic, UnaryBoolean, BinaryArithmetic, Bitwise,
    Comparison, BinaryBoolean, Assignment,
)
from calc.values import Integer, Float, TRUE, FALSE, NULL, INT_MAX

LP, RP = Structural.LEFT_PAREN, Structural.RIGHT_PAREN

def _int(n):
    return Literal(Integer(n))

class LexerTestCase(unittest.TestCase):
    def setUp(self):
        self.reporter = Reporter(stream = io.StringIO())
        self.lexer    = Lexer(self.reporter)

    def lex(self, text):
        return self.lexer.lex(text)

class LiteralTests(LexerTestCase):
    def test_integer_and_float(self):
        self.assertEqual([_int(42)], self.lex("42"))
        self.assertEqual([Literal(Float(1.5))], self.lex("1.5"))
        self.assertEqual([Literal(Float(2.0))], self.lex("2."))

    def test_too_many_decimal_points(self):
        with self.assertRaises(LexError) as cm:
            self.lex("1.2.3")
        self.assertIn("too many decimal points", str(cm.exception))

    def test_integer_range(self):
        self.assertEqual([_int(INT_MAX)], self.lex(str(INT_MAX)))
        with self.assertRaises(LexError):
            self.lex(str(INT_MAX + 1))

    def test_keywords(self):
        self.assertEqual([Literal(TRUE)], self.lex("true"))
        self.assertEqual([Literal(FALSE)], self.lex("false"))
        self.assertEqual([Literal(NULL)], self.lex("null"))

    def test_keyword_prefix_is_an_identifier(self):
        self.assertEqual([Identifier("truex")], self.lex("truex"))
        self.assertEqual([Identifier("nul")], self.lex("nul"))
        self.assertEqual([Identifier("fals")], self.lex("fals"))

    def test_identifiers(self):
        self.assertEqual([Identifier("_a1_b")], self.lex("_a1_b"))
        self.assertEqual([_int(2), Identifier("x")], self.lex("2x"))

class OperatorTests(LexerTestCase):
    def test_fixed_operators(self):
        table = {
            "a * b"     : BinaryArithmetic.TIMES,
            "a / b"     : BinaryArithmetic.DIVIDE,
            "a ** b"    : BinaryArithmetic.POWER,
            "a & b"     : Bitwise.AND,
            "a | b"     : Bitwise.OR,
            "a ^ b"     : Bitwise.XOR,
            "a == b"    : Comparison.EQUALS,
            "a != b"    : Comparison.NOT_EQUAL,
            "a < b"     : Comparison.LT,
            "a <= b"    : Comparison.LE,
            "a > b"     : Comparison.GT,
            "a >= b"    : Comparison.GE,
            "a && b"    : BinaryBoolean.AND,
            "a || b"    : BinaryBoolean.OR,
        }
        for text, operator in table.items():
            with self.subTest(text):
                self.assertEqual([Identifier("a"), operator, Identifier("b")], self.lex(text))

    def test_compound_assignments(self):
        table = {
            "x += 1"    : Assignment.PLUS,
            "x -= 1"    : Assignment.MINUS,
            "x *= 1"    : Assignment.TIMES,
            "x /= 1"    : Assignment.DIVIDE,
            "x **= 1"   : Assignment.POWER,
            "x &= 1"    : Assignment.BITWISE_AND,
            "x |= 1"    : Assignment.BITWISE_OR,
            "x ^= 1"    : Assignment.BITWISE_XOR,
        }
        for text, operator in table.items():
            with self.subTest(text):
                self.assertEqual([Identifier("x"), operator, _int(1)], self.lex(text))

    def test_not(self):
        self.assertEqual([UnaryBoolean.NOT, Literal(TRUE)], self.lex("!true"))

    def test_incomplete_operator(self):
        for text in ["1 +", "2 *", "x =", "a <", "!", "b -"]:
            with self.subTest(text):
                with self.assertRaises(LexError) as cm:
                    self.lex(text)
                self.assertIn("incomplete operator", str(cm.exception))

class SignTests(LexerTestCase):
    def test_binary_minus_then_negate(self):
        self.assertEqual(
            [_int(3), BinaryArithmetic.MINUS, UnaryArithmetic.NEGATE, _int(2)],
            self.lex("3 - -2"),
        )

    def test_leading_signs_are_unary(self):
        self.assertEqual([UnaryArithmetic.NEGATE, _int(1)], self.lex("-1"))
        self.assertEqual([UnaryArithmetic.PLUS, _int(1)], self.lex("+1"))

    def test_minus_around_parens(self):
        self.assertEqual([LP, UnaryArithmetic.NEGATE, _int(1), RP], self.lex("(-1)"))
        self.assertEqual([LP, _int(1), RP, BinaryArithmetic.MINUS, _int(2)], self.lex("(1) - 2"))

    def test_plus_after_paren_is_unary(self):
        self.assertEqual([LP, _int(1), RP, UnaryArithmetic.PLUS, _int(2)], self.lex("(1) + 2"))

    def test_minus_after_newline(self):
        with self.assertRaises(LexError) as cm:
            self.lex("\n-1")
        self.assertIn("unexpected token before '-'", str(cm.exception))

class AssignmentTests(LexerTestCase):
    def test_leading_assignment(self):
        self.assertEqual([Identifier("x"), Assignment.ASSIGNMENT, _int(5)], self.lex("x = 5"))

    def test_on_the_fly(self):
        self.assertEqual(
            [LP, Identifier("y"), Assignment.ON_THE_FLY, _int(2), RP],
            self.lex("(y = 2)"),
        )
        self.assertEqual(
            [_int(1), BinaryArithmetic.PLUS, LP, Identifier("y"), Assignment.ON_THE_FLY, _int(2), RP],
            self.lex("1 + (y = 2)"),
        )

    def test_other_equals_signs_are_dropped(self):
        self.assertEqual([_int(1), _int(2)], self.lex("1 = 2"))
        self.assertEqual(
            [Identifier("a"), Assignment.ASSIGNMENT, Identifier("b"), Identifier("c")],
            self.lex("a = b = c"),
        )

    def test_equals_is_not_assignment(self):
        self.assertEqual([Identifier("x"), Comparison.EQUALS, _int(5)], self.lex("x == 5"))

class ScanTests(LexerTestCase):
    def test_newline_token(self):
        self.assertEqual([_int(1), Structural.NEWLINE], self.lex("1\n"))

    def test_illegal_character_is_skipped(self):
        self.assertEqual([_int(1), BinaryArithmetic.PLUS, _int(2)], self.lex("1 + $2"))
        self.assertEqual(1, len(self.reporter.errors))
        self.assertIn("illegal character '$'", self.reporter.errors[0])
        self.assertEqual(0, self.reporter.failed)

    def test_lexer_is_reusable(self):
        with self.assertRaises(LexError):
            self.lex("1..")
        self.assertEqual([_int(7)], self.lex("7"))


if __name__ == '__main__':
    unittest.main()
