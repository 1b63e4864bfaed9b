"""
Tokenizer for SMARTS patterns.

>>> [str(t) for t in scan("[#6H3:1]-[#8]")]
['[', '#6', 'H3', ':', '1', ']', '-', '[', '#8', ']', '$']
"""

from enum import Enum
from typing import NamedTuple, Optional
import logging

from .exceptions import ScanError

logger = logging.getLogger(__name__)


class TokenType(str, Enum):
    # punctuation
    LBRACK = "["
    RBRACK = "]"
    LPAREN = "("
    RPAREN = ")"
    COLON = ":"
    DASH = "-"  # single bond, or negative charge inside an atom
    AT = "@"  # ring bond, or chirality inside an atom

    # counts
    ATOMIC_NUMBER = "#n"
    HCOUNT = "Hn"
    DIGIT = "n"
    PLUS = "+n"

    # bonds
    DOUBLE = "="
    TRIPLE = "#"
    UP = "/"
    DOWN = "\\"

    END = "$"


class Token(NamedTuple):
    type: TokenType
    value: Optional[int] = None

    def is_end(self) -> bool:
        return self.type == TokenType.END

    def __str__(self) -> str:
        t = self.type
        if t == TokenType.ATOMIC_NUMBER:
            return f"#{self.value}"
        if t == TokenType.HCOUNT:
            return f"H{self.value}"
        if t == TokenType.PLUS:
            return f"+{self.value}"
        if t == TokenType.DIGIT:
            return str(self.value)
        return t.value


_PUNCTUATION = {
    "[": TokenType.LBRACK,
    "]": TokenType.RBRACK,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ":": TokenType.COLON,
    "-": TokenType.DASH,
    "@": TokenType.AT,
    "=": TokenType.DOUBLE,
    "\\": TokenType.DOWN,
    "/": TokenType.UP,
}


def _digits(pattern: str, i: int) -> int:
    """Index just past the run of decimal digits starting at i."""
    while i < len(pattern) and pattern[i] in "0123456789":
        i += 1
    return i


def scan(pattern: str) -> list[Token]:
    """
    Split a SMARTS pattern into tokens, ending with a single END token.

    :param pattern: SMARTS string, e.g. the output of ``Chem.MolToSmarts``.
    :type pattern: str

    :raises ScanError: On any character outside the supported subset.

    :return: Materialized token list.
    :rtype: list[Token]
    """
    out: list[Token] = []
    i = 0
    n = len(pattern)

    while i < n:
        c = pattern[i]

        if c in _PUNCTUATION:
            out.append(Token(_PUNCTUATION[c]))
            i += 1

        elif c == "#":
            # [#6] is an atomic number, a bare # is a triple bond
            j = _digits(pattern, i + 1)
            if j == i + 1:
                out.append(Token(TokenType.TRIPLE))
            else:
                out.append(Token(TokenType.ATOMIC_NUMBER, int(pattern[i + 1 : j])))
            i = j

        elif c == "H" or c == "+":
            j = _digits(pattern, i + 1)
            count = int(pattern[i + 1 : j]) if j > i + 1 else 1
            out.append(Token(TokenType.HCOUNT if c == "H" else TokenType.PLUS, count))
            i = j

        elif c in "0123456789":
            j = _digits(pattern, i)
            out.append(Token(TokenType.DIGIT, int(pattern[i:j])))
            i = j

        else:
            raise ScanError(c, i, pattern)

    out.append(Token(TokenType.END))

    logger.debug(f"scanned {len(out)} tokens from {pattern}")
    return out
