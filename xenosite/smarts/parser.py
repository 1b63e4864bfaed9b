"""
Parser for SMARTS token streams. Grammar:

    pattern  -> item*
    item     -> atom | grouping | connect | bond
    atom     -> "[" atom_field* "]"
    grouping -> "(" pattern ")"
    connect  -> DIGIT
    bond     -> "-" | "=" | "#" | ":" | "@" | "/" | "\\"

The parser only recovers structure. Which atoms a bond joins is decided
later by the evaluator, so bonds come out as bare ``BondOrder`` values and
ring-closure digits as separate ``Connect`` expressions.

Logical operators and recursive SMARTS are not part of this grammar and
are rejected.
"""

from typing import NamedTuple, Sequence, Union
import logging

from .exceptions import ParseError
from .scanner import Token, TokenType
from .types import Atom, BondOrder, Chiral

logger = logging.getLogger(__name__)


class Grouping(NamedTuple):
    exprs: tuple


class Connect(NamedTuple):
    label: int


Expr = Union[Atom, BondOrder, Grouping, Connect]


_BOND_ORDERS = {
    TokenType.DASH: BondOrder.SINGLE,
    TokenType.DOUBLE: BondOrder.DOUBLE,
    TokenType.TRIPLE: BondOrder.TRIPLE,
    TokenType.COLON: BondOrder.AROMATIC,
    TokenType.AT: BondOrder.RING,
    TokenType.UP: BondOrder.UP,
    TokenType.DOWN: BondOrder.DOWN,
}


class Parser:
    def __init__(self, tokens: Sequence[Token], window: int = 3):
        if not tokens or not tokens[-1].is_end():
            tokens = list(tokens) + [Token(TokenType.END)]

        self.tokens = list(tokens)
        self.window = window
        self.cur = 0
        self.depth = 0

    def peek(self) -> Token:
        return self.tokens[self.cur]

    def next(self) -> Token:
        tok = self.tokens[self.cur]
        if not tok.is_end():
            self.cur += 1
        return tok

    def error(self, message: str, position: int) -> ParseError:
        lo = max(position - self.window, 0)
        hi = position + self.window + 1
        return ParseError(message, position, self.tokens[lo:hi])

    def parse(self) -> list[Expr]:
        exprs = self._pattern()
        logger.debug(f"parsed {len(exprs)} top-level expressions")
        return exprs

    def _pattern(self) -> list[Expr]:
        out: list[Expr] = []

        while True:
            tok = self.peek()
            t = tok.type

            if t == TokenType.END:
                if self.depth:
                    raise self.error("unterminated grouping", self.cur)
                break

            if t == TokenType.RPAREN:
                if not self.depth:
                    raise self.error("unmatched ')'", self.cur)
                # the caller consumes the close
                break

            if t == TokenType.LBRACK:
                self.next()
                out.append(self._atom())

            elif t == TokenType.LPAREN:
                self.next()
                self.depth += 1
                inner = self._pattern()
                self.next()  # ')'
                self.depth -= 1
                out.append(Grouping(tuple(inner)))

            elif t == TokenType.DIGIT:
                self.next()
                out.append(Connect(tok.value))  # type: ignore

            else:
                out.append(self._bond())

        return out

    def _atom(self) -> Atom:
        atomic_number = 0
        n_hydrogens = 0
        charge = 0
        chiral = Chiral.NONE
        mol_index = 0

        while True:
            pos = self.cur
            tok = self.next()
            t = tok.type

            if t == TokenType.RBRACK:
                break

            if t == TokenType.ATOMIC_NUMBER:
                atomic_number = tok.value

            elif t == TokenType.HCOUNT:
                n_hydrogens = tok.value

            elif t == TokenType.COLON:
                if self.peek().type != TokenType.DIGIT:
                    raise self.error("expected atom index after ':'", self.cur)
                mol_index = self.next().value

            elif t == TokenType.PLUS:
                charge = tok.value

            elif t == TokenType.DASH:
                if self.peek().type == TokenType.DIGIT:
                    charge = -self.next().value  # type: ignore
                else:
                    charge = -1

            elif t == TokenType.AT:
                if self.peek().type == TokenType.AT:
                    self.next()
                    chiral = Chiral.CLOCKWISE
                else:
                    chiral = Chiral.ANTICLOCKWISE

            elif t == TokenType.END:
                raise self.error("unterminated atom", pos)

            else:
                raise self.error(f"unknown atom component {tok}", pos)

        return Atom(atomic_number, n_hydrogens, charge, chiral, mol_index)  # type: ignore

    def _bond(self) -> BondOrder:
        pos = self.cur
        tok = self.next()
        try:
            return _BOND_ORDERS[tok.type]
        except KeyError:
            raise self.error(f"unknown bond component {tok}", pos) from None


def parse(tokens: Sequence[Token]) -> list[Expr]:
    return Parser(tokens).parse()
