"""
Tests for the Graph model: counts, unified access, equality, containment,
canonical form.
"""

import pytest

from aegraph import EMPTY_SHEET, Graph, canonicalize, parse
from aegraph.core.canon import is_canonical


class TestCounts:
    def test_size_is_atoms_plus_children(self):
        g = parse("(A, B, [C], [[D]])")
        assert g.num_atoms() == 2
        assert g.num_children() == 2
        assert g.size() == 4

    def test_depth_and_node_count(self):
        g = parse("(A, [B, [C]])")
        assert g.depth() == 2
        assert g.count_nodes() == 3
        assert parse("(A)").depth() == 0


class TestChildOrAtomAt:
    def setup_method(self):
        self.g = parse("([B], A, C)")

    def test_child_index(self):
        assert self.g.child_or_atom_at(0) == parse("[B]")
        assert self.g.child_or_atom_at(0).polarity is False

    def test_atom_index_wraps_in_sheet(self):
        a = self.g.child_or_atom_at(1)
        assert a.polarity is True
        assert str(a) == "(A)"
        assert str(self.g.child_or_atom_at(2)) == "(C)"

    def test_out_of_range_is_empty_sheet(self):
        assert self.g.child_or_atom_at(3) == EMPTY_SHEET
        assert str(self.g.child_or_atom_at(99)) == "()"
        assert self.g.child_or_atom_at(-1).size() == 0


class TestEquality:
    def test_order_of_input_does_not_matter(self):
        assert parse("(B, A, [D, C])") == parse("(A, [C, D], B)")
        assert hash(parse("(B, A)")) == hash(parse("(A, B)"))

    def test_different_content(self):
        assert parse("(A)") != parse("(B)")
        assert parse("(A, [B])") != parse("(A, [[B]])")

    def test_polarity_of_compared_nodes_is_ignored(self):
        assert parse("(A, B)") == parse("[A, B]")

    def test_ordering_follows_text(self):
        assert parse("[A]") < parse("[B]")
        assert sorted([parse("[[D]]"), parse("[B, C]")]) == [parse("[B, C]"), parse("[[D]]")]

    def test_not_equal_to_other_types(self):
        assert parse("(A)") != "(A)"


class TestConstruction:
    def test_constructor_sorts(self):
        g = Graph(["B", "A"], [Graph(["Z"], polarity=False), Graph(["Y"], polarity=False)])
        assert str(g) == "([Y], [Z], A, B)"

    def test_nested_sheets_become_cuts(self):
        g = Graph(children=[Graph(["A"])])
        assert g.children[0].polarity is False
        assert str(g) == "([A])"

    def test_children_must_be_graphs(self):
        with pytest.raises(TypeError):
            Graph(children=["[A]"])

    def test_is_immutable_value(self):
        g = parse("(A, [B])")
        g2 = g.replace(atoms=["C"])
        assert str(g) == "([B], A)"
        assert str(g2) == "([B], C)"


class TestCanonicalize:
    def test_idempotent(self):
        g = parse("([[D], C], B, A, [A])")
        once = canonicalize(g)
        assert canonicalize(once) == once
        assert str(canonicalize(once)) == str(once)
        assert is_canonical(once)

    def test_parsed_graph_is_canonical(self):
        assert is_canonical(parse("(Z, [Y, X], [[W, V]])"))


class TestContains:
    def setup_method(self):
        self.g = parse("(A, [B, [C]])")

    def test_atoms_at_any_depth(self):
        assert self.g.contains("A")
        assert self.g.contains("C")
        assert not self.g.contains("D")

    def test_subgraphs_at_any_depth(self):
        assert self.g.contains(parse("[C]"))
        assert self.g.contains(parse("[B, [C]]"))
        assert not self.g.contains(parse("[B]"))

    def test_sheet_query_matches_cut(self):
        assert self.g.contains(parse("(C)"))

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            self.g.contains(3)
