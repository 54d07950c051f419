"""Byte-offset tracking lexer for QMK keymap sources."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator


class TokenKind(Enum):
    LPAREN = "("
    RPAREN = ")"
    LBRACKET = "["
    RBRACKET = "]"
    LBRACE = "{"
    RBRACE = "}"
    COMMA = ","
    EQUALS = "="
    IDENT = "ident"
    BLANK = "blank"
    LAYOUT = "LAYOUT"
    CONST = "const"
    PROGMEM = "PROGMEM"
    COMMENT = "comment"
    EOF = "eof"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    offset: int
    text: str = ""


_PUNCTUATION = {
    ord("("): TokenKind.LPAREN,
    ord(")"): TokenKind.RPAREN,
    ord("["): TokenKind.LBRACKET,
    ord("]"): TokenKind.RBRACKET,
    ord("{"): TokenKind.LBRACE,
    ord("}"): TokenKind.RBRACE,
    ord(","): TokenKind.COMMA,
    ord("="): TokenKind.EQUALS,
}

_KEYWORDS = {
    "LAYOUT": TokenKind.LAYOUT,
    "const": TokenKind.CONST,
    "PROGMEM": TokenKind.PROGMEM,
}

_WHITESPACE = frozenset(b" \t\n\r")
_SLASH = ord("/")
_NEWLINE = ord("\n")


def _is_ident_byte(b: int) -> bool:
    return (48 <= b <= 57) or (65 <= b <= 90) or (97 <= b <= 122) or b == 95


class Lexer:
    """Turns source text into tokens carrying their starting byte offset.

    Never fails: a byte that starts no known token becomes a one-character
    identifier.
    """

    def __init__(self, source: str | bytes) -> None:
        if isinstance(source, str):
            source = source.encode("utf-8")
        self._data = source
        self._pos = 0

    def next_token(self) -> Token:
        data = self._data
        n = len(data)
        while self._pos < n and data[self._pos] in _WHITESPACE:
            self._pos += 1
        if self._pos >= n:
            return Token(TokenKind.EOF, n)

        start = self._pos
        b = data[start]

        kind = _PUNCTUATION.get(b)
        if kind is not None:
            self._pos += 1
            return Token(kind, start, chr(b))

        if b == _SLASH and start + 1 < n and data[start + 1] == _SLASH:
            end = data.find(b"\n", start)
            if end == -1:
                end = n
            self._pos = end
            return Token(TokenKind.COMMENT, start, self._decode(start, end))

        if not _is_ident_byte(b):
            # Unknown byte: permissive one-character identifier
            self._pos += 1
            return Token(TokenKind.IDENT, start, self._decode(start, start + 1))

        end = start
        while end < n and _is_ident_byte(data[end]):
            end += 1
        self._pos = end
        text = self._decode(start, end)

        if text in _KEYWORDS:
            return Token(_KEYWORDS[text], start, text)
        if not text.strip("_"):
            return Token(TokenKind.BLANK, start, text)
        return Token(TokenKind.IDENT, start, text)

    def tokens(self) -> Iterator[Token]:
        """Yield every token up to and including the EOF token."""
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenKind.EOF:
                return

    def _decode(self, start: int, end: int) -> str:
        return self._data[start:end].decode("utf-8", errors="replace")


def tokenize(source: str | bytes) -> list[Token]:
    """Convenience wrapper returning the full token list (EOF included)."""
    return list(Lexer(source).tokens())
