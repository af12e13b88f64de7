import pytest

from calcc.lexer import Lexer, Token, TokenTag, is_letter, is_whitespace


def test_token_sequence():
    tags = [token.tag for token in Lexer("with a, b: (a + 1) * b / 2 - 3")]
    assert tags == [
        TokenTag.WITH,
        TokenTag.IDENTIFIER,
        TokenTag.COMMA,
        TokenTag.IDENTIFIER,
        TokenTag.COLON,
        TokenTag.L_PAREN,
        TokenTag.IDENTIFIER,
        TokenTag.PLUS,
        TokenTag.NUMBER,
        TokenTag.R_PAREN,
        TokenTag.STAR,
        TokenTag.IDENTIFIER,
        TokenTag.SLASH,
        TokenTag.NUMBER,
        TokenTag.MINUS,
        TokenTag.NUMBER,
    ]


@pytest.mark.parametrize("word", ["w", "wi", "wit", "with"])
def test_prefixes_of_keyword_are_keyword(word):
    assert Lexer(word).next().tag is TokenTag.WITH


@pytest.mark.parametrize("word", ["withx", "x", "value", "With"])
def test_other_words_are_identifiers(word):
    assert Lexer(word).next().tag is TokenTag.IDENTIFIER


def test_source_reference_matches_position():
    source = "  abc + 12 * (x)"
    lexer = Lexer(source)
    tokens = list(lexer)
    assert all(t.source_reference == source[t.position:] for t in tokens)


def test_number_token_consumes_all_digits():
    source = "  123+"
    lexer = Lexer(source)
    token = lexer.next()
    assert token.tag is TokenTag.NUMBER
    assert token.position == source.index("123")
    assert lexer.index == source.index("+")


def test_peek_does_not_advance():
    lexer = Lexer("  foo bar")
    start = lexer.index
    peeked = lexer.peek()
    assert lexer.index == start
    assert lexer.next() == peeked


def test_source_reference_skips_whitespace():
    lexer = Lexer(" \t\n abc")
    assert lexer.source_reference() == "abc"
    assert lexer.index == len(" \t\n ")


def test_unknown_character_then_end():
    lexer = Lexer("#")
    assert lexer.next().tag is TokenTag.UNKNOWN
    assert lexer.next().tag is TokenTag.EOI


def test_end_of_input_repeats():
    lexer = Lexer("   ")
    first = lexer.next()
    second = lexer.next()
    assert first.tag is TokenTag.EOI
    assert second == first


def test_nul_ends_the_text():
    tags = [token.tag for token in Lexer("a\0b")]
    assert tags == [TokenTag.IDENTIFIER]


def test_token_is():
    token = Lexer(",").next()
    assert token.is_(TokenTag.COMMA)
    assert not token.is_(TokenTag.COLON)


def test_token_equality_is_by_value():
    assert Lexer("x").next() == Token(TokenTag.IDENTIFIER, 0, "x")


@pytest.mark.parametrize("c", [" ", "\t", "\f", "\v", "\r", "\n"])
def test_whitespace_characters(c):
    assert is_whitespace(c)


@pytest.mark.parametrize("c", ["a", "0", "", "\0", "_"])
def test_not_whitespace(c):
    assert not is_whitespace(c)


@pytest.mark.parametrize("c", ["a", "z", "A", "Z", "m"])
def test_letters(c):
    assert is_letter(c)


@pytest.mark.parametrize("c", ["0", "_", "é", "", " ", "["])
def test_not_letters(c):
    assert not is_letter(c)