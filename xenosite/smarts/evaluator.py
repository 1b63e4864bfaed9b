"""
Resolve parsed SMARTS expressions into atoms and bonds.

Bonds in the expression list only know their order. Their endpoints come
from the surrounding expressions: the atom before the bond (or, at the start
of a branch, the atom before the branch) and either the atom after it or the
atom that opened the ring-closure label after it.

>>> from xenosite.smarts.scanner import scan
>>> from xenosite.smarts.parser import parse
>>> atoms, bonds = evaluate(parse(scan("[#6:1]1-[#6:2]-[#8:3]-1")))
>>> [(b.atom1, b.atom2) for b in bonds]
[(1, 2), (2, 3), (1, 3)]
"""

from typing import Optional, Sequence
import logging

from .exceptions import EvaluationError
from .parser import Connect, Expr, Grouping
from .types import Atom, Bond, BondOrder

logger = logging.getLogger(__name__)


class ConnectionTable:
    """
    Ring-closure labels mapped to a stack of atoms waiting to be closed. A label
    pushed twice before it is popped holds two different rings; the later one
    closes first.
    """

    def __init__(self):
        self._table: dict[int, list[int]] = {}

    def push(self, label: int, mol_index: int) -> None:
        self._table.setdefault(label, []).append(mol_index)

    def pop(self, label: int) -> int:
        stack = self._table.get(label)
        if not stack:
            raise EvaluationError(f"ring closure {label} was never opened")
        return stack.pop()

    def pending(self) -> dict[int, list[int]]:
        return {k: list(v) for k, v in self._table.items() if v}


class Evaluator:
    def __init__(self, exprs: Sequence[Expr], strict: bool = False):
        self.exprs = list(exprs)
        self.strict = strict

        self.atoms: list[Atom] = []
        self.bonds: list[Bond] = []
        self.ctab = ConnectionTable()

    def eval(self) -> tuple[list[Atom], list[Bond]]:
        self.atoms = []
        self.bonds = []
        self.ctab = ConnectionTable()

        self._sequence(self.exprs, anchor=None)

        pending = self.ctab.pending()
        if pending:
            if self.strict:
                raise EvaluationError(f"unclosed ring labels {sorted(pending)}")
            logger.warning(f"unclosed ring labels: {pending}")

        return self.atoms, self.bonds

    def _add_bond(self, atom1: int, atom2: int, order: BondOrder) -> None:
        # direction carries no meaning, only the pair does
        self.bonds.append(Bond(min(atom1, atom2), max(atom1, atom2), order))

    def _sequence(self, exprs: Sequence[Expr], anchor: Optional[int]) -> None:
        """
        Evaluate one level of expressions. ``anchor`` is the atom preceding the
        opening parenthesis when ``exprs`` is a branch.
        """
        # nearest atom before the cursor at this level, falling back to the anchor
        prev = anchor
        i = 0
        n = len(exprs)

        while i < n:
            expr = exprs[i]
            i += 1

            if isinstance(expr, Atom):
                if prev is not None and not (i >= 2 and isinstance(exprs[i - 2], BondOrder)):
                    self._add_bond(prev, expr.mol_index, BondOrder.SINGLE)

                if i < n and isinstance(exprs[i], Connect):
                    self.ctab.push(exprs[i].label, expr.mol_index)  # type: ignore
                    i += 1

                self.atoms.append(expr)
                prev = expr.mol_index

            elif isinstance(expr, BondOrder):
                if prev is None:
                    raise EvaluationError(f"bond {expr.value} has no preceding atom")

                nxt = exprs[i] if i < n else None

                if isinstance(nxt, Atom):
                    atom2 = nxt.mol_index
                elif isinstance(nxt, Connect):
                    i += 1
                    atom2 = self.ctab.pop(nxt.label)
                else:
                    raise EvaluationError(
                        f"bond {expr.value} from atom {prev} is not followed by an atom or ring closure"
                    )

                self._add_bond(prev, atom2, expr)

            elif isinstance(expr, Grouping):
                self._sequence(expr.exprs, prev)

            elif isinstance(expr, Connect):
                raise EvaluationError(
                    f"unreachable: ring closure {expr.label} not attached to an atom or bond"
                )

            else:
                raise EvaluationError(f"unknown expression {expr!r}")


def evaluate(exprs: Sequence[Expr], strict: bool = False) -> tuple[list[Atom], list[Bond]]:
    return Evaluator(exprs, strict=strict).eval()
