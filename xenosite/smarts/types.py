from enum import Enum
from typing import NamedTuple


class Chiral(int, Enum):
    NONE = 0
    CLOCKWISE = 1  # @@
    ANTICLOCKWISE = 2  # @


class BondOrder(str, Enum):
    SINGLE = "-"
    DOUBLE = "="
    TRIPLE = "#"
    AROMATIC = ":"
    RING = "@"
    UP = "/"
    DOWN = "\\"


class Atom(NamedTuple):
    atomic_number: int = 0
    n_hydrogens: int = 0
    charge: int = 0
    chiral: Chiral = Chiral.NONE
    mol_index: int = 0


class Bond(NamedTuple):
    atom1: int
    atom2: int
    order: BondOrder = BondOrder.SINGLE
