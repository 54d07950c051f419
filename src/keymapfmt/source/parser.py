"""Recursive-descent parser for the QMK ``keymaps`` array literal.

Recognizes exactly one idiom::

    const <type> PROGMEM <name>[][<rows>][<cols>] = {
        [<table>] = LAYOUT(<key>, <key>, ...),
        ...
    };

and records the byte offsets needed to rewrite the block in place.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator

from keymapfmt.source.lexer import Lexer, Token, TokenKind

logger = logging.getLogger(__name__)

# Header tokens after `const`, up to and including the `=` before `{`
_HEADER = (
    TokenKind.IDENT,
    TokenKind.PROGMEM,
    TokenKind.IDENT,
    TokenKind.LBRACKET,
    TokenKind.RBRACKET,
    TokenKind.LBRACKET,
    TokenKind.IDENT,
    TokenKind.RBRACKET,
    TokenKind.LBRACKET,
    TokenKind.IDENT,
    TokenKind.RBRACKET,
    TokenKind.EQUALS,
)


@dataclass(frozen=True)
class KeyTable:
    name: Token
    keys: tuple[str, ...]
    start_offset: int = 0
    end_offset: int = 0


@dataclass(frozen=True)
class KeymapsBlock:
    """The brace pair around all key tables. Offsets point at ``{`` and ``}``."""

    start_offset: int
    end_offset: int
    key_tables: tuple[KeyTable, ...] = field(default_factory=tuple)
    # `[` entries that did not parse as a key table
    unparsed: int = 0


class Parser:
    def __init__(self, tokens: Iterator[Token]) -> None:
        self._tokens = tokens
        self._eof: Token | None = None
        self.curr = self._pull()
        self.next = self._pull()

    @classmethod
    def from_source(cls, source: str | bytes) -> Parser:
        return cls(Lexer(source).tokens())

    def _pull(self) -> Token:
        if self._eof is not None:
            return self._eof
        token = next(self._tokens)
        if token.kind is TokenKind.EOF:
            self._eof = token
        return token

    def advance(self) -> None:
        self.curr = self.next
        self.next = self._pull()

    def expect_peek(self, kind: TokenKind) -> bool:
        """Advance if the next token is of ``kind``, otherwise leave the cursor."""
        if self.next.kind is kind:
            self.advance()
            return True
        logger.debug(
            "Expected %s at offset %d, found %s %r",
            kind.name, self.next.offset, self.next.kind.name, self.next.text,
        )
        return False

    def parse(self) -> KeymapsBlock | None:
        """Return the first keymaps block in the stream, or None."""
        while self.curr.kind is not TokenKind.EOF:
            if self.curr.kind is TokenKind.CONST:
                block = self.parse_keymaps_block()
                if block is not None:
                    return block
            self.advance()
        return None

    def parse_keymaps_block(self) -> KeymapsBlock | None:
        for kind in _HEADER:
            if not self.expect_peek(kind):
                return None
        if not self.expect_peek(TokenKind.LBRACE):
            return None
        start = self.curr.offset

        tables: list[KeyTable] = []
        unparsed = 0
        while True:
            self.advance()
            kind = self.curr.kind
            if kind is TokenKind.RBRACE:
                return KeymapsBlock(start, self.curr.offset, tuple(tables), unparsed)
            if kind is TokenKind.EOF:
                logger.debug("Keymaps block opened at offset %d is never closed", start)
                return None
            if kind is TokenKind.LBRACKET:
                table = self.parse_key_table()
                if table is None:
                    unparsed += 1
                else:
                    tables.append(table)

    def parse_key_table(self) -> KeyTable | None:
        """Parse ``[NAME] = LAYOUT(...)`` with the cursor on ``[``."""
        start = self.curr.offset
        if not self.expect_peek(TokenKind.IDENT):
            return None
        name = self.curr
        for kind in (TokenKind.RBRACKET, TokenKind.EQUALS, TokenKind.LAYOUT, TokenKind.LPAREN):
            if not self.expect_peek(kind):
                return None

        keys = self.parse_key_list()
        if keys is None:
            return None

        # cursor sits on the closing paren
        end = self.curr.offset + 1
        # a comment may sit between the closing paren and its comma
        while self.next.kind is TokenKind.COMMENT:
            self.advance()
        if self.next.kind is TokenKind.COMMA:
            self.advance()
            end = self.curr.offset + 1
        return KeyTable(name, tuple(keys), start, end)

    def parse_key_list(self) -> list[str] | None:
        """Collect keys with the cursor on ``(``; stops on the matching ``)``."""
        keys: list[str] = []
        self.advance()
        while self.curr.kind is not TokenKind.RPAREN:
            kind = self.curr.kind
            if kind is TokenKind.EOF:
                return None
            if kind is TokenKind.BLANK:
                keys.append("")
            elif kind is TokenKind.IDENT:
                if self.next.kind is TokenKind.LPAREN:
                    key = self.parse_compound_key()
                    if key is None:
                        return None
                    keys.append(key)
                else:
                    keys.append(self.curr.text)
            self.advance()
        return keys

    def parse_compound_key(self) -> str | None:
        """Join ``WRAP(...)`` into one key, leaving the cursor on its last ``)``."""
        parts = [self.curr.text]
        depth = 0
        while True:
            self.advance()
            kind = self.curr.kind
            if kind is TokenKind.EOF:
                return None
            if kind is TokenKind.COMMENT:
                continue
            parts.append(self.curr.text)
            if kind is TokenKind.LPAREN:
                depth += 1
            elif kind is TokenKind.RPAREN:
                depth -= 1
                if depth == 0:
                    return "".join(parts)


def parse_keymaps(source: str | bytes) -> KeymapsBlock | None:
    """Locate and parse the keymaps block of ``source``."""
    return Parser.from_source(source).parse()
