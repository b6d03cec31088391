"""Tests for cycle detection."""

import pytest

from gql_pybuild.core import Field, check_cycle, fields
from gql_pybuild.core.errors import CyclicFieldError, NilFieldError


class TestCheckCycle:
    """Tests for check_cycle."""

    def test_tree_passes(self, courses_field):
        check_cycle(courses_field)

    def test_shared_child_is_not_a_cycle(self):
        shared = Field("id")
        root = Field("root", fields=[Field("a", fields=[shared]), Field("b", fields=[shared])])
        check_cycle(root)

    def test_equal_but_distinct_fields_are_not_a_cycle(self):
        root = Field("a", fields=[Field("a", fields=[Field("a")])])
        check_cycle(root)

    def test_two_field_cycle(self, cyclic_pair):
        f, f2 = cyclic_pair
        with pytest.raises(CyclicFieldError):
            check_cycle(f)
        with pytest.raises(CyclicFieldError):
            f2.check_cycle()

    def test_self_reference(self):
        f = Field("node")
        f.add_fields(f)
        with pytest.raises(CyclicFieldError) as exc_info:
            check_cycle(f)
        assert exc_info.value.field is f

    def test_deep_cycle(self):
        root = Field("a")
        node = root
        for name in ("b", "c", "d"):
            child = Field(name)
            node.add_fields(child)
            node = child
        node.add_fields(root)
        with pytest.raises(CyclicFieldError):
            check_cycle(root)

    def test_nil_child(self):
        f = Field(fields=[None])
        with pytest.raises(NilFieldError):
            f.check_cycle()

    def test_nested_nil_child(self):
        f = Field("a", fields=[Field("b", fields=fields("c") + [None])])
        with pytest.raises(NilFieldError):
            check_cycle(f)


class TestDeepTrees:
    """Tests for trees deeper than the interpreter's recursion limit."""

    @staticmethod
    def chain(depth):
        root = Field("a0")
        node = root
        for i in range(1, depth):
            child = Field(f"a{i}")
            node.add_fields(child)
            node = child
        return root, node

    def test_deep_chain_passes(self):
        root, _ = self.chain(1500)
        check_cycle(root)

    def test_cycle_at_bottom_of_deep_chain(self):
        root, leaf = self.chain(1500)
        leaf.add_fields(root)
        with pytest.raises(CyclicFieldError) as exc_info:
            check_cycle(root)
        assert exc_info.value.field is root

    def test_nil_at_bottom_of_deep_chain(self):
        root, leaf = self.chain(1500)
        leaf.fields.append(None)
        with pytest.raises(NilFieldError):
            check_cycle(root)
