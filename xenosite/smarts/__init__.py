"""
Library for reading SMARTS patterns into atoms and bonds.

Parse an atom-mapped SMARTS pattern, like the ones RDKit writes for
atom-mapped molecules:

>>> from xenosite.smarts import Smarts
>>> s = Smarts.parse("[#6H3:1]-[#6H2:2]-[#8H:3]")
>>> s.atoms[0]
Atom(atomic_number=6, n_hydrogens=3, charge=0, chiral=<Chiral.NONE: 0>, mol_index=1)
>>> [(b.atom1, b.atom2, b.order.name) for b in s.bonds]
[(1, 2, 'SINGLE'), (2, 3, 'SINGLE')]

Branches hang off the atom before the parenthesis, and ring-closure
digits bond back to the atom that opened the label:

>>> s = Smarts.parse("[#6:1](-[#8:2])=[#7:3]")
>>> [(b.atom1, b.atom2, b.order.name) for b in s.bonds]
[(1, 2, 'SINGLE'), (1, 3, 'DOUBLE')]

>>> s = Smarts.parse("[#6:1]1:[#6:2]:[#6:3]:1")
>>> [(b.atom1, b.atom2) for b in s.bonds]
[(1, 2), (2, 3), (1, 3)]

Or start from SMILES, which RDKit converts to SMARTS first:

>>> len(Smarts.from_smiles("[CH3:1][CH2:2][OH:3]").atoms)
3

Malformed patterns raise a ``SmartsError`` (a ``ValueError``):

>>> Smarts.parse("[#6H3:1]-")
Traceback (most recent call last):
...
xenosite.smarts.exceptions.EvaluationError: bond - from atom 1 is not followed by an atom or ring closure
"""

from .types import Atom, Bond, BondOrder, Chiral
from .exceptions import SmartsError, ScanError, ParseError, EvaluationError
from .scanner import scan, Token, TokenType
from .parser import parse, Parser, Grouping, Connect
from .evaluator import evaluate, Evaluator, ConnectionTable
from .smarts import Smarts
from .dataset import Dataset
from ._version import __version__
