"""Unit tests for the traversal support components."""

import pytest

from beangraph.core.walker import RelationTrail, TraversalProtection, WorkStack
from beangraph.exceptions import TraversalLimitError


def trail_of(*relations):
    trail = RelationTrail()
    for document, relation in relations:
        trail = trail.extend("admin", document, relation)
    return trail


class TestRelationTrail:
    """Test structural repeat detection on relation trails."""

    def test_empty_and_single_step(self):
        assert RelationTrail().ends_in_repeat() is False
        assert trail_of(("Employee", "manager")).ends_in_repeat() is False

    def test_immediate_repeat(self):
        """Test the same step twice in a row is a repeat."""
        trail = trail_of(("Employee", "manager"), ("Employee", "manager"))
        assert trail.ends_in_repeat() is True

    def test_two_step_repeat(self):
        """Test a repeated run of two steps is a repeat."""
        trail = trail_of(
            ("OrderLine", "parent"),
            ("Order", "lines"),
            ("OrderLine", "parent"),
            ("Order", "lines"),
        )
        assert trail.ends_in_repeat() is True
        shorter = trail_of(
            ("OrderLine", "parent"), ("Order", "lines"), ("OrderLine", "parent")
        )
        assert shorter.ends_in_repeat() is False

    def test_recurrence_without_repeat(self):
        """Test a step occurring twice with different runs is not a repeat."""
        trail = trail_of(
            ("Braid", "a"), ("Braid", "b"), ("Braid", "c"), ("Braid", "b")
        )
        assert trail.ends_in_repeat() is False

    def test_same_relation_name_on_other_document(self):
        """Test relation names only match together with their document."""
        trail = trail_of(("Party", "contact"), ("Person", "contact"))
        assert trail.ends_in_repeat() is False

    def test_extend_is_immutable(self):
        trail = RelationTrail()
        longer = trail.extend("admin", "Employee", "manager")

        assert len(trail) == 0
        assert list(longer) == [("admin", "Employee", "manager")]


class TestWorkStack:
    """Test the lazy depth-first work stack."""

    def test_depth_first_order(self):
        """Test children pushed after an item are taken before its siblings."""
        stack = WorkStack(["a", "b"])
        order = []
        item = stack.pop_next()
        while item is not None:
            order.append(item)
            if item == "a":
                stack.push(["a1", "a2"])
            item = stack.pop_next()

        assert order == ["a", "a1", "a2", "b"]

    def test_children_are_consumed_lazily(self):
        """Test child iterators are only advanced when needed."""
        produced = []

        def children():
            for name in ("x", "y"):
                produced.append(name)
                yield name

        stack = WorkStack()
        stack.push(children())
        assert produced == []
        assert stack.pop_next() == "x"
        assert produced == ["x"]

    def test_depth_and_exhaustion(self):
        stack = WorkStack(["root"])
        assert stack.depth == 1
        assert stack.pop_next() == "root"
        stack.push([])
        assert stack.depth == 2
        assert stack.pop_next() is None
        assert stack.depth == 0


class TestTraversalProtection:
    """Test protection limits."""

    def test_step_limit(self):
        protection = TraversalProtection(max_steps=2)
        protection.increment_step()
        protection.increment_step()

        with pytest.raises(TraversalLimitError) as exc_info:
            protection.increment_step("a.b")

        assert exc_info.value.protection_type == "max_steps"
        assert exc_info.value.details["binding"] == "a.b"
        assert protection.step_count == 3

    def test_depth_limit(self):
        protection = TraversalProtection(max_depth=3)
        protection.check_depth(3)

        with pytest.raises(TraversalLimitError):
            protection.check_depth(4)

        assert protection.deepest == 4

    def test_limits_off_by_default(self):
        protection = TraversalProtection()
        protection.check_depth(50000)

        assert protection.max_depth == 0
        assert protection.max_steps == 0
        assert protection.deepest == 50000

    def test_zero_disables_limits(self):
        protection = TraversalProtection(max_depth=0, max_steps=0)
        for depth in range(1, 100):
            protection.check_depth(depth)
            protection.increment_step()

        assert protection.step_count == 99

    def test_negative_limits_clamped(self):
        protection = TraversalProtection(max_depth=-5, max_steps=-1)
        assert protection.max_depth == 0
        assert protection.max_steps == 0
