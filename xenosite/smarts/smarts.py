from typing import Optional
import networkx as nx
import pandas as pd

from .evaluator import Evaluator
from .parser import Parser
from .scanner import scan
from .types import Atom, Bond


class Smarts:
    """
    Atoms and bonds read from a SMARTS pattern.

    Atoms are kept in order of appearance. Bonds are kept in the order they
    were resolved and always have ``atom1 <= atom2``.
    """

    def __init__(
        self,
        atoms: Optional[list[Atom]] = None,
        bonds: Optional[list[Bond]] = None,
        pattern: Optional[str] = None,
    ):
        self.atoms: list[Atom] = atoms or []
        self.bonds: list[Bond] = bonds or []
        self.pattern = pattern

    @classmethod
    def parse(cls, pattern: str, strict: bool = False) -> "Smarts":
        """
        Read a SMARTS pattern.

        :param pattern: SMARTS string with bracketed, indexed atoms.
        :type pattern: str

        :param strict: Fail on ring-closure labels left open, defaults to False
        :type strict: bool, optional

        :raises SmartsError: On malformed input (``ScanError``, ``ParseError`` or ``EvaluationError``).

        :return: The parsed pattern.
        :rtype: Smarts
        """
        tokens = scan(pattern)
        exprs = Parser(tokens).parse()
        atoms, bonds = Evaluator(exprs, strict=strict).eval()
        return cls(atoms, bonds, pattern)

    @classmethod
    def from_smiles(cls, smiles: str, strict: bool = False) -> "Smarts":
        from .chem import to_smarts  # lazy import to prevent load of rdkit unless needed

        return cls.parse(to_smarts(smiles), strict=strict)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(atoms={len(self.atoms)}, bonds={len(self.bonds)}, pattern={self.pattern!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Smarts):
            return NotImplemented
        return self.atoms == other.atoms and self.bonds == other.bonds

    def to_networkx(self) -> nx.Graph:
        g = nx.Graph()
        for a in self.atoms:
            g.add_node(
                a.mol_index,
                atomic_number=a.atomic_number,
                n_hydrogens=a.n_hydrogens,
                charge=a.charge,
                chiral=a.chiral,
            )
        for b in self.bonds:
            g.add_edge(b.atom1, b.atom2, order=b.order)
        return g

    def to_pandas(self) -> tuple[pd.DataFrame, pd.DataFrame]:
        atoms = pd.DataFrame(
            [a._asdict() for a in self.atoms], columns=list(Atom._fields)
        ).set_index("mol_index")
        bonds = pd.DataFrame([b._asdict() for b in self.bonds], columns=list(Bond._fields))
        return atoms, bonds
