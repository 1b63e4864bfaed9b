from hypothesis import strategies as st
from xenosite.smarts import Atom, BondOrder, Chiral

CHAIN_BONDS = [BondOrder.SINGLE, BondOrder.DOUBLE, BondOrder.TRIPLE, BondOrder.AROMATIC, BondOrder.UP, BondOrder.DOWN]


def atom_smarts(a: Atom) -> str:
    out = f"[#{a.atomic_number}"

    if a.chiral == Chiral.ANTICLOCKWISE:
        out += "@"
    elif a.chiral == Chiral.CLOCKWISE:
        out += "@@"

    if a.n_hydrogens:
        out += f"H{a.n_hydrogens}"

    if a.charge == 1:
        out += "+"
    elif a.charge > 1:
        out += f"+{a.charge}"
    elif a.charge == -1:
        out += "-"
    elif a.charge < -1:
        out += f"-{-a.charge}"

    return out + f":{a.mol_index}]"


@st.composite
def random_atom(draw, mol_index: int = 1):
    return Atom(
        atomic_number=draw(st.integers(min_value=1, max_value=118)),
        n_hydrogens=draw(st.integers(min_value=0, max_value=4)),
        charge=draw(st.integers(min_value=-3, max_value=3)),
        chiral=draw(st.sampled_from(list(Chiral))),
        mol_index=mol_index,
    )


@st.composite
def random_chain(draw, max_size: int = 12):
    """A linear pattern with explicit bonds: (pattern, atoms, bond orders)."""
    n = draw(st.integers(min_value=1, max_value=max_size))
    atoms = [draw(random_atom(i + 1)) for i in range(n)]
    orders = [draw(st.sampled_from(CHAIN_BONDS)) for _ in range(n - 1)]

    pattern = atom_smarts(atoms[0])
    for order, atom in zip(orders, atoms[1:]):
        pattern += order.value + atom_smarts(atom)

    return pattern, atoms, orders
