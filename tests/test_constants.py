from ezc.ezc_constants import (
    BINARY_OPERATORS,
    FACTOR_OPERATORS,
    TERM_OPERATORS,
    SyntaxKind,
    token_hashmap,
)


def test_kind_renders_as_its_name() -> None:
    assert str(SyntaxKind.CLOSE_PAREN) == "CloseParen"
    assert f"<{SyntaxKind.END_OF_FILE}>" == "<EndOfFile>"


def test_precedence_levels_are_disjoint() -> None:
    assert not TERM_OPERATORS & FACTOR_OPERATORS
    assert BINARY_OPERATORS == {
        SyntaxKind.PLUS,
        SyntaxKind.MINUS,
        SyntaxKind.STAR,
        SyntaxKind.SLASH,
    }


def test_token_hashmap_covers_single_char_tokens() -> None:
    assert "".join(sorted(token_hashmap)) == "()*+-/"
    assert set(token_hashmap.values()) == BINARY_OPERATORS | {
        SyntaxKind.OPEN_PAREN,
        SyntaxKind.CLOSE_PAREN,
    }
