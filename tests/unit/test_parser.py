"""Tests for the Lox expression parser.

Covers:
- Literals and grouping
- Precedence ladder and associativity
- Unary chaining
- Parse errors with lexeme and line
"""

from __future__ import annotations

import pytest

from jlox.core.errors import ParseError, ScanError
from jlox.core.expression_lang.parser import MAX_NESTING, Parser, parse, parse_source
from jlox.core.expression_lang.scanner import scan
from jlox.core.ir.expressions import Binary, Grouping, Literal, Unary
from jlox.core.ir.tokens import TokenKind


class TestParserLiterals:
    """Parser handles all literal types."""

    def test_number(self) -> None:
        expr = parse_source("42")
        assert isinstance(expr, Literal)
        assert expr.token.kind == TokenKind.NUMBER
        assert expr.token.literal == 42.0

    def test_string(self) -> None:
        expr = parse_source('"hello"')
        assert isinstance(expr, Literal)
        assert expr.token.literal == "hello"

    def test_keyword_literals(self) -> None:
        for source, kind in [
            ("true", TokenKind.TRUE),
            ("false", TokenKind.FALSE),
            ("nil", TokenKind.NIL),
        ]:
            expr = parse_source(source)
            assert isinstance(expr, Literal)
            assert expr.token.kind == kind

    def test_grouping(self) -> None:
        expr = parse_source("(1)")
        assert isinstance(expr, Grouping)
        assert isinstance(expr.expression, Literal)

    def test_nested_grouping(self) -> None:
        expr = parse_source("((1))")
        assert isinstance(expr, Grouping)
        assert isinstance(expr.expression, Grouping)


class TestParserPrecedence:
    """Each ladder level binds tighter than the one below it."""

    def test_factor_before_term(self) -> None:
        # 2 + 3 * 4 is 2 + (3 * 4)
        expr = parse_source("2 + 3 * 4")
        assert isinstance(expr, Binary)
        assert expr.operator.kind == TokenKind.PLUS
        assert isinstance(expr.right, Binary)
        assert expr.right.operator.kind == TokenKind.STAR

    def test_parentheses_override_precedence(self) -> None:
        expr = parse_source("(2 + 3) * 4")
        assert isinstance(expr, Binary)
        assert expr.operator.kind == TokenKind.STAR
        assert isinstance(expr.left, Grouping)

    def test_term_before_comparison(self) -> None:
        expr = parse_source("1 + 2 < 4")
        assert isinstance(expr, Binary)
        assert expr.operator.kind == TokenKind.LESS
        assert isinstance(expr.left, Binary)

    def test_comparison_before_equality(self) -> None:
        expr = parse_source("1 < 2 == true")
        assert isinstance(expr, Binary)
        assert expr.operator.kind == TokenKind.EQUAL_EQUAL
        assert isinstance(expr.left, Binary)
        assert expr.left.operator.kind == TokenKind.LESS

    def test_unary_before_factor(self) -> None:
        expr = parse_source("-2 * 3")
        assert isinstance(expr, Binary)
        assert isinstance(expr.left, Unary)


class TestParserAssociativity:
    def test_subtraction_is_left_associative(self) -> None:
        # 10 - 3 - 2 is (10 - 3) - 2
        expr = parse_source("10 - 3 - 2")
        assert isinstance(expr, Binary)
        assert isinstance(expr.left, Binary)
        assert isinstance(expr.right, Literal)
        assert expr.right.token.lexeme == "2"

    def test_equality_is_left_associative(self) -> None:
        expr = parse_source("1 == 1 != false")
        assert isinstance(expr, Binary)
        assert expr.operator.kind == TokenKind.BANG_EQUAL
        assert isinstance(expr.left, Binary)

    def test_unary_chains(self) -> None:
        expr = parse_source("!!true")
        assert isinstance(expr, Unary)
        assert isinstance(expr.right, Unary)
        assert isinstance(expr.right.right, Literal)

    def test_double_negation(self) -> None:
        expr = parse_source("--5")
        assert isinstance(expr, Unary)
        assert expr.operator.kind == TokenKind.MINUS
        assert isinstance(expr.right, Unary)


class TestParserErrors:
    def test_missing_right_paren(self) -> None:
        with pytest.raises(ParseError, match="Expect '\\)' after expression") as exc_info:
            parse_source("(1 + 2")
        err = exc_info.value
        assert err.line == 1
        assert err.lexeme == ""
        assert str(err) == "[line 1] Error at end: Expect ')' after expression."

    def test_wrong_token_instead_of_right_paren(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_source("(1 ;")
        assert exc_info.value.lexeme == ";"
        assert str(exc_info.value) == "[line 1] Error at ';': Expect ')' after expression."

    def test_unrecognized_primary(self) -> None:
        with pytest.raises(ParseError, match="Unrecognized primary") as exc_info:
            parse_source("foo")
        assert exc_info.value.lexeme == "foo"

    def test_operator_without_operand(self) -> None:
        with pytest.raises(ParseError, match="Expect expression"):
            parse_source("1 +")

    def test_empty_input(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_source("")
        assert str(exc_info.value) == "[line 1] Error at end: Expect expression."

    def test_error_line_follows_source(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_source("(1 +\n\n2")
        assert exc_info.value.line == 3

    def test_scan_error_propagates(self) -> None:
        with pytest.raises(ScanError):
            parse_source("1 + ?")

    def test_trailing_tokens_are_left_unconsumed(self) -> None:
        tokens = scan("1 2")
        parser = Parser(tokens)
        expr = parser.parse()
        assert isinstance(expr, Literal)
        assert parser.peek().lexeme == "2"

    def test_token_list_must_end_with_eof(self) -> None:
        with pytest.raises(ValueError):
            parse(scan("1")[:-1])


class TestParserCursor:
    def test_advance_never_passes_eof(self) -> None:
        parser = Parser(scan("1"))
        assert parser.advance().lexeme == "1"
        assert parser.is_at_end()
        assert parser.advance().kind == TokenKind.EOF
        assert parser.current == 1

    def test_previous_returns_consumed_token(self) -> None:
        parser = Parser(scan("1 + 2"))
        parser.advance()
        parser.advance()
        assert parser.previous().kind == TokenKind.PLUS

    def test_match_does_not_consume_on_miss(self) -> None:
        parser = Parser(scan("1"))
        assert parser.match(TokenKind.PLUS) is None
        assert parser.current == 0


class TestSynchronize:
    """Recovery routine for the future statement grammar."""

    def test_stops_after_semicolon(self) -> None:
        parser = Parser(scan("1 2 ; 3"))
        parser.synchronize()
        assert parser.peek().lexeme == "3"

    def test_stops_before_statement_keyword(self) -> None:
        parser = Parser(scan("1 2 var x"))
        parser.synchronize()
        assert parser.peek().kind == TokenKind.VAR

    def test_runs_to_end(self) -> None:
        parser = Parser(scan("1 2 3"))
        parser.synchronize()
        assert parser.is_at_end()


class TestParserNesting:
    """Groupings and prefix operators share one nesting limit."""

    def test_nesting_at_the_limit_parses(self) -> None:
        expr = parse_source("(" * MAX_NESTING + "1" + ")" * MAX_NESTING)
        assert isinstance(expr, Grouping)
        assert isinstance(parse_source("-" * MAX_NESTING + "1"), Unary)

    def test_deep_grouping(self) -> None:
        with pytest.raises(ParseError, match="Too much nesting") as exc_info:
            parse_source("(" * 200 + "1" + ")" * 200)
        assert exc_info.value.lexeme == "("
        assert str(exc_info.value) == "[line 1] Error at '(': Too much nesting."

    def test_long_unary_chain(self) -> None:
        with pytest.raises(ParseError, match="Too much nesting"):
            parse_source("!" * 600 + "true")

    def test_mixed_nesting_counts_together(self) -> None:
        half = MAX_NESTING // 2 + 1
        with pytest.raises(ParseError, match="Too much nesting"):
            parse_source("(-" * half + "1" + ")" * half)

    def test_depth_resets_between_siblings(self) -> None:
        deep = "(" * MAX_NESTING + "1" + ")" * MAX_NESTING
        expr = parse_source(f"{deep} + {deep}")
        assert isinstance(expr, Binary)

    def test_depth_unwinds_after_error(self) -> None:
        parser = Parser(scan("(" * 200 + "1"))
        with pytest.raises(ParseError):
            parser.parse()
        assert parser.depth == 0
