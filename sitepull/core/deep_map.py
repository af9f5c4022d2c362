# sitepull/core/deep_map.py
"""
Generic recursive tree transform.

deep_map() walks nested dicts/lists depth-first and passes each node to a
visitor *before* its children. Recursion continues into whatever container
the visitor returns, so a visitor may swap a node for a different container
(e.g. a reference marker for the referenced document) and still have the
substituted children visited.

Visitor signature:
    visitor(value, field_path, ancestors, root) -> new value

    value:      the current node
    field_path: tuple of keys/indices from the root to this node
    ancestors:  tuple of already-visited containers above this node
    root:       the original input value

The input is never mutated. Cyclic input recurses without bound.
"""

from __future__ import annotations

from typing import Any, Callable, Tuple, Union

FieldPath = Tuple[Union[str, int], ...]
Visitor = Callable[[Any, FieldPath, Tuple[Any, ...], Any], Any]


def is_collection(value: Any) -> bool:
    return isinstance(value, (dict, list))


def deep_map(
    value: Any,
    visitor: Visitor,
    *,
    iterate_collections: bool = True,
    iterate_primitives: bool = True,
) -> Any:
    """
    Map every node of a nested structure through a visitor.

    Args:
        value: Scalar, list, or dict to transform.
        visitor: Called for each selected node, pre-order.
        iterate_collections: Pass dicts and lists to the visitor.
        iterate_primitives: Pass non-container values to the visitor.

    Returns:
        A new structure of the same shape with visited values substituted.

    Example:
        >>> deep_map({"a": [1, 2]}, lambda v, *_: v * 10 if isinstance(v, int) else v)
        {'a': [10, 20]}
    """
    root = value

    def _map(node: Any, field_path: FieldPath, ancestors: Tuple[Any, ...]) -> Any:
        invoke = iterate_collections if is_collection(node) else iterate_primitives
        if invoke:
            node = visitor(node, field_path, ancestors, root)

        if isinstance(node, dict):
            stack = ancestors + (node,)
            return {key: _map(child, field_path + (key,), stack) for key, child in node.items()}

        if isinstance(node, list):
            stack = ancestors + (node,)
            return [_map(child, field_path + (index,), stack) for index, child in enumerate(node)]

        return node

    return _map(value, (), ())


__all__ = ["deep_map", "FieldPath", "Visitor"]
