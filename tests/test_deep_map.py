# tests/test_deep_map.py
"""
Tests for deep_map.

Verifies:
1. Nodes are visited pre-order with their field path and ancestors
2. Recursion follows the container the visitor returns
3. The input is never mutated
"""

import copy

from sitepull.core.deep_map import deep_map


def identity(value, field_path, ancestors, root):
    return value


class TestTraversal:
    """Visiting order and visitor arguments."""

    def test_identity_preserves_shape(self):
        data = {"a": 1, "b": [1, {"c": "x"}], "d": None}
        assert deep_map(data, identity) == data

    def test_pre_order_parent_before_child(self):
        seen = []

        def visit(value, field_path, ancestors, root):
            seen.append(field_path)
            return value

        deep_map({"a": {"b": 1}, "c": [2]}, visit)

        assert seen == [(), ("a",), ("a", "b"), ("c",), ("c", 0)]

    def test_each_node_visited_once(self):
        count = []
        deep_map({"a": [1, 2, {"b": 3}]}, lambda v, *_: count.append(1) or v)
        # root, list, 1, 2, dict, 3
        assert len(count) == 6

    def test_ancestors_chain(self):
        captured = {}

        def visit(value, field_path, ancestors, root):
            if field_path == ("a", "b"):
                captured["ancestors"] = ancestors
                captured["root"] = root
            return value

        data = {"a": {"b": 1}}
        deep_map(data, visit)

        assert len(captured["ancestors"]) == 2
        assert captured["ancestors"][1] == {"b": 1}
        assert captured["root"] is data

    def test_list_indices_in_path(self):
        paths = []

        def visit(value, field_path, ancestors, root):
            paths.append(field_path)
            return value

        deep_map(["x", ["y"]], visit)
        assert (1, 0) in paths


class TestSubstitution:
    """Visitor return values steer the recursion."""

    def test_scalar_substitution(self):
        result = deep_map({"a": 1, "b": [2]}, lambda v, *_: v * 10 if isinstance(v, int) else v)
        assert result == {"a": 10, "b": [20]}

    def test_returned_container_is_recursed(self):
        target = {"name": "ada", "age": 36}

        def visit(value, field_path, ancestors, root):
            if value == {"ref": "ada"}:
                return target
            if isinstance(value, str):
                return value.upper()
            return value

        result = deep_map({"author": {"ref": "ada"}}, visit)

        assert result == {"author": {"name": "ADA", "age": 36}}
        assert target == {"name": "ada", "age": 36}

    def test_scalar_return_stops_recursion(self):
        visited = []

        def visit(value, field_path, ancestors, root):
            visited.append(field_path)
            if field_path == ("a",):
                return "flat"
            return value

        result = deep_map({"a": {"deep": {"deeper": 1}}}, visit)

        assert result == {"a": "flat"}
        assert ("a", "deep") not in visited

    def test_input_not_mutated(self):
        data = {"a": {"b": [1, 2]}, "c": "x"}
        before = copy.deepcopy(data)
        deep_map(data, lambda v, *_: v + 1 if isinstance(v, int) else v)
        assert data == before

    def test_deep_nesting(self):
        data = current = {}
        for _ in range(200):
            current["n"] = {}
            current = current["n"]
        current["leaf"] = 1

        result = deep_map(data, identity)
        assert result == data


class TestIterationOptions:
    """iterate_collections / iterate_primitives select visited nodes."""

    def test_skip_primitives(self):
        seen = []
        deep_map({"a": [1]}, lambda v, *_: seen.append(v) or v, iterate_primitives=False)
        assert all(isinstance(v, (dict, list)) for v in seen)
        assert len(seen) == 2

    def test_skip_collections(self):
        seen = []
        deep_map({"a": [1, "x"]}, lambda v, *_: seen.append(v) or v, iterate_collections=False)
        assert seen == [1, "x"]
