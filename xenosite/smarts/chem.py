from typing import Union, TYPE_CHECKING
from rdkit import Chem, RDLogger
import networkx as nx

from .types import BondOrder

if TYPE_CHECKING:
    from .smarts import Smarts

Mol = Chem.rdchem.Mol


_bond_order = {
    Chem.BondType.SINGLE: BondOrder.SINGLE,
    Chem.BondType.DOUBLE: BondOrder.DOUBLE,
    Chem.BondType.TRIPLE: BondOrder.TRIPLE,
    Chem.BondType.AROMATIC: BondOrder.AROMATIC,
}

# directional bonds are single bonds carrying double-bond stereo
_undirected = {BondOrder.UP: BondOrder.SINGLE, BondOrder.DOWN: BondOrder.SINGLE}


def rdkit_warnings(log: bool = True) -> None:
    """Turn the RDKit C++ log on or off."""
    if log:
        RDLogger.EnableLog("rdApp.*")  # type: ignore
    else:
        RDLogger.DisableLog("rdApp.*")  # type: ignore


def smiles_to_mol(smiles: str) -> Mol:
    mol = Chem.MolFromSmiles(smiles)  # type: ignore
    if not mol:
        raise ValueError(f"Not a valid SMILES string: {smiles}")
    return mol


def to_smarts(mol: Union[Mol, str]) -> str:
    """
    Convert a molecule to a SMARTS pattern with RDKit. Atom map numbers in the
    input become the molecule-local atom indices of the pattern.

    >>> to_smarts("[CH3:1][CH2:2][OH:3]")
    '[#6H3:1]-[#6H2:2]-[#8H:3]'

    :param mol: SMILES string or RDKit molecule.
    :type mol: Union[Mol, str]

    :raises ValueError: If the SMILES string cannot be read.

    :return: Isomeric SMARTS string.
    :rtype: str
    """
    if isinstance(mol, str):
        mol = smiles_to_mol(mol)

    return Chem.MolToSmarts(mol, isomericSmiles=True)  # type: ignore


def mol_to_smarts_graph(mol: Union[Mol, str]) -> nx.Graph:
    """
    Graph of an RDKit molecule keyed by atom-map number, labeled like the
    graph of a parsed pattern (see ``Smarts.to_networkx``).

    :param mol: Atom-mapped SMILES string or RDKit molecule.
    :type mol: Union[Mol, str]

    :raises ValueError: If any atom has no map number.

    :return: Undirected graph with ``atomic_number`` node and ``order`` edge labels.
    :rtype: nx.Graph
    """
    if isinstance(mol, str):
        mol = smiles_to_mol(mol)

    g = nx.Graph()
    for a in mol.GetAtoms():
        idx = a.GetAtomMapNum()
        if not idx:
            raise ValueError(f"atom {a.GetIdx()} ({a.GetSymbol()}) has no map number")
        g.add_node(idx, atomic_number=a.GetAtomicNum(), charge=a.GetFormalCharge())

    for b in mol.GetBonds():
        i = b.GetBeginAtom().GetAtomMapNum()
        j = b.GetEndAtom().GetAtomMapNum()
        bt = b.GetBondType()
        g.add_edge(i, j, order=_bond_order.get(bt, str(bt)))

    return g


def _labeled_edges(g: nx.Graph) -> set[tuple[int, int, BondOrder]]:
    out = set()
    for i, j, order in g.edges(data="order"):
        order = _undirected.get(order, order)
        out.add((min(i, j), max(i, j), order))
    return out


def bond_mismatches(smarts: "Smarts", mol: Union[Mol, str]) -> list[tuple[int, int, BondOrder]]:
    """
    Bonds (with their order) present in only one of a parsed pattern and the
    RDKit molecule it was written from. Empty when the two agree.
    """
    ours = _labeled_edges(smarts.to_networkx())
    theirs = _labeled_edges(mol_to_smarts_graph(mol))
    return sorted(ours ^ theirs)
