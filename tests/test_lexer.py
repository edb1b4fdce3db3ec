"""
Test suite for the Monkey lexer.

Tests cover:
- The full token set on a representative program
- '=' / '==' and '!' / '!=' disambiguation
- Keyword lookup and identifier boundaries
- Illegal characters and end-of-input behaviour
"""

import unittest
import sys
import os
import tempfile

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from monkey.lexer.lexer import Lexer, tokenize_string, tokenize_file
from monkey.parser.parser import Parser
from monkey.lexer.tokens import Token, TokenType, KEYWORDS, lookup_ident
from monkey.lexer.errors import LexerError


def _pairs(source: str):
    """(type, literal) for every token including EOF."""
    return [(token.type, token.literal) for token in Lexer(source).tokenize()]


class TestNextToken(unittest.TestCase):
    """Token-by-token scanning of a complete program."""

    def test_next_token(self):
        source = """
        let five = 5;
        let ten = 10;

        let add = fn(x, y) {
            x + y;
        };

        let result = add(five, ten);
        !-/*5;
        5 < 10 > 5;

        if (5 < 10) {
            return true;
        } else {
            return false;
        }

        10 == 10;
        10 != 9;
        """

        T = TokenType
        expected = [
            (T.LET, "let"), (T.IDENT, "five"), (T.ASSIGN, "="), (T.INT, "5"), (T.SEMICOLON, ";"),
            (T.LET, "let"), (T.IDENT, "ten"), (T.ASSIGN, "="), (T.INT, "10"), (T.SEMICOLON, ";"),

            (T.LET, "let"), (T.IDENT, "add"), (T.ASSIGN, "="), (T.FUNCTION, "fn"),
            (T.LPAREN, "("), (T.IDENT, "x"), (T.COMMA, ","), (T.IDENT, "y"), (T.RPAREN, ")"),
            (T.LBRACE, "{"), (T.IDENT, "x"), (T.PLUS, "+"), (T.IDENT, "y"), (T.SEMICOLON, ";"),
            (T.RBRACE, "}"), (T.SEMICOLON, ";"),

            (T.LET, "let"), (T.IDENT, "result"), (T.ASSIGN, "="), (T.IDENT, "add"),
            (T.LPAREN, "("), (T.IDENT, "five"), (T.COMMA, ","), (T.IDENT, "ten"),
            (T.RPAREN, ")"), (T.SEMICOLON, ";"),

            (T.BANG, "!"), (T.MINUS, "-"), (T.SLASH, "/"), (T.ASTERISK, "*"), (T.INT, "5"),
            (T.SEMICOLON, ";"),

            (T.INT, "5"), (T.LT, "<"), (T.INT, "10"), (T.GT, ">"), (T.INT, "5"), (T.SEMICOLON, ";"),

            (T.IF, "if"), (T.LPAREN, "("), (T.INT, "5"), (T.LT, "<"), (T.INT, "10"), (T.RPAREN, ")"),
            (T.LBRACE, "{"), (T.RETURN, "return"), (T.TRUE, "true"), (T.SEMICOLON, ";"),
            (T.RBRACE, "}"), (T.ELSE, "else"), (T.LBRACE, "{"), (T.RETURN, "return"),
            (T.FALSE, "false"), (T.SEMICOLON, ";"), (T.RBRACE, "}"),

            (T.INT, "10"), (T.EQ, "=="), (T.INT, "10"), (T.SEMICOLON, ";"),
            (T.INT, "10"), (T.NOT_EQ, "!="), (T.INT, "9"), (T.SEMICOLON, ";"),

            (T.EOF, ""),
        ]

        lexer = Lexer(source)
        for i, (expected_type, expected_literal) in enumerate(expected):
            token = lexer.next_token()
            self.assertEqual(token.type, expected_type,
                             f"tests[{i}] - token type wrong. expected={expected_type}, got={token.type}")
            self.assertEqual(token.literal, expected_literal,
                             f"tests[{i}] - literal wrong. expected={expected_literal!r}, got={token.literal!r}")

    def test_let_five_token_sequence(self):
        tokens = Lexer("let five = 5;").tokenize()
        self.assertEqual(tokens, [
            Token(TokenType.LET, "let"),
            Token(TokenType.IDENT, "five"),
            Token(TokenType.ASSIGN, "="),
            Token(TokenType.INT, "5"),
            Token(TokenType.SEMICOLON, ";"),
            Token(TokenType.EOF, ""),
        ])

    def test_equality_statement_token_sequence(self):
        self.assertEqual(_pairs("10 == 10;"), [
            (TokenType.INT, "10"),
            (TokenType.EQ, "=="),
            (TokenType.INT, "10"),
            (TokenType.SEMICOLON, ";"),
            (TokenType.EOF, ""),
        ])


class TestOperators(unittest.TestCase):
    """Lookahead for two-character operators."""

    def test_double_equals_is_one_token(self):
        self.assertEqual(_pairs("=="), [(TokenType.EQ, "=="), (TokenType.EOF, "")])

    def test_bang_equals_is_one_token(self):
        self.assertEqual(_pairs("!="), [(TokenType.NOT_EQ, "!="), (TokenType.EOF, "")])

    def test_bare_assign_does_not_merge(self):
        self.assertEqual(_pairs("=+"), [
            (TokenType.ASSIGN, "="), (TokenType.PLUS, "+"), (TokenType.EOF, ""),
        ])

    def test_bare_bang_does_not_merge(self):
        self.assertEqual(_pairs("!x"), [
            (TokenType.BANG, "!"), (TokenType.IDENT, "x"), (TokenType.EOF, ""),
        ])

    def test_triple_equals(self):
        self.assertEqual(_pairs("==="), [
            (TokenType.EQ, "=="), (TokenType.ASSIGN, "="), (TokenType.EOF, ""),
        ])

    def test_separated_equals_stay_separate(self):
        self.assertEqual(_pairs("= ="), [
            (TokenType.ASSIGN, "="), (TokenType.ASSIGN, "="), (TokenType.EOF, ""),
        ])

    def test_assign_at_end_of_input(self):
        self.assertEqual(_pairs("x ="), [
            (TokenType.IDENT, "x"), (TokenType.ASSIGN, "="), (TokenType.EOF, ""),
        ])


class TestIdentifiersAndKeywords(unittest.TestCase):
    """Reserved words and identifier boundaries."""

    def test_keywords(self):
        for word, token_type in KEYWORDS.items():
            with self.subTest(word=word):
                self.assertEqual(_pairs(word), [(token_type, word), (TokenType.EOF, "")])

    def test_lookup_ident(self):
        self.assertEqual(lookup_ident("let"), TokenType.LET)
        self.assertEqual(lookup_ident("fn"), TokenType.FUNCTION)
        self.assertEqual(lookup_ident("lettuce"), TokenType.IDENT)
        self.assertEqual(lookup_ident("Let"), TokenType.IDENT)

    def test_underscores_in_identifiers(self):
        self.assertEqual(_pairs("_foo_bar"), [(TokenType.IDENT, "_foo_bar"), (TokenType.EOF, "")])

    def test_digits_end_an_identifier(self):
        self.assertEqual(_pairs("x1"), [
            (TokenType.IDENT, "x"), (TokenType.INT, "1"), (TokenType.EOF, ""),
        ])

    def test_integers_have_no_sign_or_fraction(self):
        self.assertEqual(_pairs("-12.5"), [
            (TokenType.MINUS, "-"), (TokenType.INT, "12"), (TokenType.ILLEGAL, "."),
            (TokenType.INT, "5"), (TokenType.EOF, ""),
        ])


class TestIllegalAndEof(unittest.TestCase):
    """Recovery from bad characters and behaviour at end of input."""

    def test_illegal_character_does_not_stop_scanning(self):
        lexer = Lexer("let @ = 5;")
        self.assertEqual([(t.type, t.literal) for t in lexer], [
            (TokenType.LET, "let"), (TokenType.ILLEGAL, "@"), (TokenType.ASSIGN, "="),
            (TokenType.INT, "5"), (TokenType.SEMICOLON, ";"), (TokenType.EOF, ""),
        ])
        self.assertTrue(lexer.has_warnings())
        self.assertEqual(lexer.warnings[0].message, "Illegal character: '@'")
        self.assertEqual(lexer.warnings[0].diagnostic.code, "L001")

    def test_nul_character_is_illegal_not_eof(self):
        self.assertEqual(_pairs("a\0b"), [
            (TokenType.IDENT, "a"), (TokenType.ILLEGAL, "\0"), (TokenType.IDENT, "b"),
            (TokenType.EOF, ""),
        ])

    def test_empty_input(self):
        self.assertEqual(_pairs(""), [(TokenType.EOF, "")])

    def test_whitespace_only(self):
        self.assertEqual(_pairs(" \t\r\n  "), [(TokenType.EOF, "")])

    def test_eof_is_idempotent(self):
        lexer = Lexer("x")
        self.assertEqual(lexer.next_token().type, TokenType.IDENT)
        for _ in range(5):
            token = lexer.next_token()
            self.assertEqual(token.type, TokenType.EOF)
            self.assertEqual(token.literal, "")

    def test_strict_tokenize_raises(self):
        with self.assertRaises(LexerError) as ctx:
            tokenize_string("let x = $;", strict=True)
        self.assertEqual(ctx.exception.diagnostic.message, "Illegal character: '$'")

    def test_tokenize_restarts_from_beginning(self):
        lexer = Lexer("let x;")
        first = lexer.tokenize()
        second = lexer.tokenize()
        self.assertEqual(first, second)

    def test_tokenize_leaves_cursor_alone(self):
        lexer = Lexer("let a = 1; let b = 2;")
        parser = Parser(lexer)
        self.assertEqual(len(lexer.tokenize()), 11)

        program = parser.parse_program()
        self.assertEqual(parser.errors, [])
        self.assertEqual(program.print(), "let a = None;let b = None;")

    def test_tokenize_keeps_collected_warnings(self):
        lexer = Lexer("@ x #")
        self.assertEqual(lexer.next_token().type, TokenType.ILLEGAL)
        self.assertEqual(len(lexer.warnings), 1)

        tokens = lexer.tokenize()
        self.assertEqual([t.literal for t in tokens], ["@", "x", "#", ""])
        self.assertEqual(len(lexer.warnings), 1)
        self.assertEqual(lexer.next_token().literal, "x")


class TestTokenizeFile(unittest.TestCase):
    """Reading and tokenizing source files."""

    def _write(self, text: str) -> str:
        with tempfile.NamedTemporaryFile("w", suffix=".monkey", delete=False, encoding="utf-8") as f:
            f.write(text)
            path = f.name
        self.addCleanup(os.unlink, path)
        return path

    def test_tokenize_file(self):
        path = self._write("let é = 5;\n")
        tokens = tokenize_file(path)
        self.assertEqual([(t.type, t.literal) for t in tokens], [
            (TokenType.LET, "let"), (TokenType.ILLEGAL, "é"), (TokenType.ASSIGN, "="),
            (TokenType.INT, "5"), (TokenType.SEMICOLON, ";"), (TokenType.EOF, ""),
        ])
        self.assertEqual(tokens[0].location.filename, path)
        self.assertEqual(tokens[2].location.column, 7)

    def test_tokenize_file_strict_raises(self):
        path = self._write("let x = 5;\nlet y = ~;\n")
        with self.assertRaises(LexerError) as ctx:
            tokenize_file(path, strict=True)
        self.assertEqual(ctx.exception.diagnostic.message, "Illegal character: '~'")
        self.assertEqual(ctx.exception.diagnostic.location.line, 2)

    def test_tokenize_missing_file(self):
        with self.assertRaises(OSError):
            tokenize_file(os.path.join(tempfile.gettempdir(), "no-such-file.monkey"))


class TestSourceLocations(unittest.TestCase):
    """Line and column tracking."""

    def test_locations(self):
        tokens = Lexer("let x\n  = 10;", "sample.monkey").tokenize()
        positions = [(t.location.line, t.location.column) for t in tokens]
        self.assertEqual(positions, [(1, 1), (1, 5), (2, 3), (2, 5), (2, 7), (2, 8)])
        self.assertEqual(str(tokens[3].location), "sample.monkey:2:5")

    def test_location_does_not_affect_equality(self):
        a = Lexer("  let").next_token()
        b = Lexer("let").next_token()
        self.assertEqual(a, b)
        self.assertNotEqual(a.location, b.location)


class TestTokenDisplay(unittest.TestCase):
    """Display spellings used in diagnostics."""

    def test_display_spellings(self):
        self.assertEqual(str(TokenType.ASSIGN), "=")
        self.assertEqual(str(TokenType.EQ), "==")
        self.assertEqual(str(TokenType.NOT_EQ), "!=")
        self.assertEqual(str(TokenType.LBRACE), "{")
        self.assertEqual(str(TokenType.FUNCTION), "fn")
        self.assertEqual(str(TokenType.IDENT), "Ident")
        self.assertEqual(str(TokenType.INT), "Int")
        self.assertEqual(str(TokenType.EOF), "EOF")
        self.assertEqual(str(TokenType.ILLEGAL), "Illegal")

    def test_every_type_has_a_display(self):
        for token_type in TokenType:
            with self.subTest(token_type=token_type.name):
                self.assertTrue(token_type.display)

    def test_token_predicates(self):
        let_token, ident, assign = Lexer("let x =").tokenize()[:3]
        self.assertTrue(let_token.is_keyword)
        self.assertTrue(ident.is_identifier)
        self.assertTrue(assign.is_operator)
        self.assertFalse(ident.is_keyword)


if __name__ == '__main__':
    unittest.main()
