import logging
import pytest
from xenosite.smarts import (
    scan,
    parse,
    evaluate,
    Evaluator,
    ConnectionTable,
    Atom,
    Bond,
    BondOrder as B,
    Chiral,
    Connect,
    Grouping,
    EvaluationError,
)


def run(pattern, strict=False):
    return evaluate(parse(scan(pattern)), strict=strict)


def pairs(bonds):
    return [(b.atom1, b.atom2) for b in bonds]


def test_chain():
    atoms, bonds = run("[#6H3:1]-[#6H2:2]-[#7H:3]-[#7H:4]-[#6H3:5]")
    assert atoms == [
        (6, 3, 0, Chiral.NONE, 1),
        (6, 2, 0, Chiral.NONE, 2),
        (7, 1, 0, Chiral.NONE, 3),
        (7, 1, 0, Chiral.NONE, 4),
        (6, 3, 0, Chiral.NONE, 5),
    ]
    assert bonds == [
        (1, 2, B.SINGLE),
        (2, 3, B.SINGLE),
        (3, 4, B.SINGLE),
        (4, 5, B.SINGLE),
    ]


def test_branch_without_bond_symbol():
    _, bonds = run("[#6:1]([#8:2])=[#7:3]")
    assert bonds == [Bond(1, 2, B.SINGLE), Bond(1, 3, B.DOUBLE)]


def test_branch_with_bond_symbol():
    _, bonds = run("[#6:1](=[#8:2])-[#7:3]")
    assert bonds == [Bond(1, 2, B.DOUBLE), Bond(1, 3, B.SINGLE)]


def test_sibling_branches():
    _, bonds = run("[#6:1](-[#8:2])(-[#8:3])-[#7:4]")
    assert pairs(bonds) == [(1, 2), (1, 3), (1, 4)]


def test_branch_anchor_is_atom_before_parenthesis():
    _, bonds = run("[#6:1]-[#6:2](-[#6:3]-[#6:4])-[#6:5]")
    assert pairs(bonds) == [(1, 2), (2, 3), (3, 4), (2, 5)]


def test_nested_branches_and_ring():
    pattern = (
        "[#6H3:1]-[#6H:2](-[#6:3](=[#8:4])-[#6:5]1=[#7:6]-[#16:7](=[#8:8])"
        "-[#8:9]-[#7H:10]-1)-[#8H:11]"
    )
    atoms, bonds = run(pattern)

    assert atoms == [
        Atom(6, 3, 0, Chiral.NONE, 1),
        Atom(6, 1, 0, Chiral.NONE, 2),
        Atom(6, 0, 0, Chiral.NONE, 3),
        Atom(8, 0, 0, Chiral.NONE, 4),
        Atom(6, 0, 0, Chiral.NONE, 5),
        Atom(7, 0, 0, Chiral.NONE, 6),
        Atom(16, 0, 0, Chiral.NONE, 7),
        Atom(8, 0, 0, Chiral.NONE, 8),
        Atom(8, 0, 0, Chiral.NONE, 9),
        Atom(7, 1, 0, Chiral.NONE, 10),
        Atom(8, 1, 0, Chiral.NONE, 11),
    ]
    assert bonds == [
        Bond(1, 2, B.SINGLE),
        Bond(2, 3, B.SINGLE),
        Bond(3, 4, B.DOUBLE),
        Bond(3, 5, B.SINGLE),
        Bond(5, 6, B.DOUBLE),
        Bond(6, 7, B.SINGLE),
        Bond(7, 8, B.DOUBLE),
        Bond(7, 9, B.SINGLE),
        Bond(9, 10, B.SINGLE),
        Bond(5, 10, B.SINGLE),
        Bond(2, 11, B.SINGLE),
    ]


def test_ring_closure():
    atoms, bonds = run("[#6:5]1=[#7:6]-[#6:7]-1")
    assert [a.mol_index for a in atoms] == [5, 6, 7]
    assert bonds == [Bond(5, 6, B.DOUBLE), Bond(6, 7, B.SINGLE), Bond(5, 7, B.SINGLE)]
    assert not any(isinstance(b, Connect) for b in bonds)


def test_ring_closure_bond_order():
    _, bonds = run("[#6:1]1:[#6:2]:[#6:3]:[#6:4]:[#6:5]:[#6:6]:1")
    assert len(bonds) == 6
    assert bonds[-1] == Bond(1, 6, B.AROMATIC)
    assert all(b.order == B.AROMATIC for b in bonds)


@pytest.mark.parametrize(
    "pattern",
    ["[#6:1]1-[#6:2]-[#6:3]-1", "[#6:3]1-[#6:2]-[#6:1]-1"],
    ids=["low-opens", "high-opens"],
)
def test_ring_closure_symmetry(pattern):
    _, bonds = run(pattern)
    assert bonds[-1][:2] == (1, 3)
    assert all(b.atom1 <= b.atom2 for b in bonds)


def test_ring_closure_inside_branch():
    _, bonds = run("[#6:1]1-[#6:2](-[#6:3]-1)-[#8:4]")
    assert pairs(bonds) == [(1, 2), (2, 3), (1, 3), (2, 4)]


def test_label_reuse_after_close():
    _, bonds = run("[#6:1]1-[#6:2]-[#6:3]-1-[#6:4]1-[#6:5]-[#6:6]-1")
    assert pairs(bonds) == [(1, 2), (2, 3), (1, 3), (3, 4), (4, 5), (5, 6), (4, 6)]


def test_label_reuse_is_lifo():
    _, bonds = run("[#6:1]1-[#6:2]-[#6:3]1-[#6:4]-[#6:5]-1-[#6:6]-1")
    # the second opening of label 1 (atom 3) closes first
    assert (3, 5) in pairs(bonds)
    assert (1, 6) in pairs(bonds)
    assert pairs(bonds).index((3, 5)) < pairs(bonds).index((1, 6))


def test_implicit_bonds():
    _, bonds = run("[#6:1][#6:2][#8:3]")
    assert bonds == [Bond(1, 2), Bond(2, 3)]


def test_implicit_bond_after_ring_digit():
    _, bonds = run("[#6:1]1[#6:2][#6:3]-1")
    assert pairs(bonds) == [(1, 2), (2, 3), (1, 3)]


def test_implicit_bond_after_ring_closure():
    _, bonds = run("[#6:1]1-[#6:2]-[#6:3]-1[#8:4]")
    assert pairs(bonds) == [(1, 2), (2, 3), (1, 3), (3, 4)]


def test_single_atom():
    atoms, bonds = run("[#8H2:1]")
    assert atoms == [Atom(8, 2, 0, Chiral.NONE, 1)]
    assert bonds == []


def test_empty():
    assert run("") == ([], [])


def test_dangling_bond():
    with pytest.raises(EvaluationError):
        run("[#6H3:1]-")


def test_leading_bond():
    with pytest.raises(EvaluationError, match="no preceding atom"):
        run("-[#6:1]")


def test_bond_into_grouping():
    with pytest.raises(EvaluationError):
        run("[#6:1]-([#6:2])")


def test_double_bond_symbol():
    with pytest.raises(EvaluationError):
        run("[#6:1]-=[#6:2]")


def test_unopened_ring_label():
    with pytest.raises(EvaluationError, match="never opened"):
        run("[#6:1]-[#6:2]-2")


def test_unreachable_connector():
    with pytest.raises(EvaluationError, match="unreachable"):
        evaluate([Connect(1)])

    with pytest.raises(EvaluationError, match="unreachable"):
        evaluate([Atom(6, mol_index=1), Connect(1), Connect(2)])

    with pytest.raises(EvaluationError, match="unreachable"):
        evaluate([Atom(6, mol_index=1), Grouping((Connect(1),))])


def test_unclosed_label_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="xenosite.smarts"):
        atoms, bonds = run("[#6:1]1-[#6:2]")

    assert len(atoms) == 2
    assert pairs(bonds) == [(1, 2)]
    assert "unclosed" in caplog.text


def test_unclosed_label_strict():
    with pytest.raises(EvaluationError, match="unclosed"):
        run("[#6:1]1-[#6:2]", strict=True)


def test_eval_twice():
    E = Evaluator(parse(scan("[#6:1]1-[#6:2]-[#6:3]-1")))
    first = E.eval()
    second = E.eval()
    assert first == second


def test_connection_table():
    T = ConnectionTable()
    T.push(1, 4)
    T.push(1, 7)
    T.push(2, 9)

    assert T.pending() == {1: [4, 7], 2: [9]}
    assert T.pop(1) == 7
    assert T.pop(1) == 4
    assert T.pending() == {2: [9]}

    with pytest.raises(EvaluationError):
        T.pop(1)

    with pytest.raises(EvaluationError):
        T.pop(3)
