# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""SelectiveView - filtered pre-order flattening of a tree.

The view is a read-only index of node references. It is rebuilt from
scratch every time apply_filter() runs and is never updated incrementally.

Example:
    >>> tree = {'root': ['a', 'b'], 'a': ['a1'], 'b': [], 'a1': []}
    >>> view = SelectiveView(tree.__getitem__, 'root')
    >>> list(view)
    ['a', 'a1', 'b']
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Sequence

from .filters import Filter

ChildrenAccessor = Callable[[Any], Sequence[Any]]


class SelectiveView:
    """Ordered selection of the descendants of a root node.

    Attributes:
        children: Callable returning the ordered children of a node.
            It must return them in a stable order.
    """

    __slots__ = ('children', '_nodes')

    def __init__(
        self,
        children: ChildrenAccessor,
        root: Any = None,
        filters: Iterable[Filter] | None = None,
    ) -> None:
        """Initialize a SelectiveView.

        Args:
            children: Child accessor of the tree.
            root: If given, apply_filter(root, filters) runs immediately.
            filters: Filters to apply together with root.
        """
        self.children = children
        self._nodes: list[Any] = []
        if root is not None:
            self.apply_filter(root, filters)

    def __repr__(self) -> str:
        return f"SelectiveView({len(self._nodes)} nodes)"

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._nodes)

    def __getitem__(self, index: int) -> Any:
        return self._nodes[index]

    @property
    def nodes(self) -> list[Any]:
        """Copy of the selected nodes in view order."""
        return list(self._nodes)

    def descendants(self, root: Any) -> Iterator[Any]:
        """Iterate over the descendants of root in pre-order (root excluded)."""
        stack = list(reversed(self.children(root)))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(self.children(node)))

    def apply_filter(
        self, root: Any, filters: Iterable[Filter] | None = None
    ) -> list[Any]:
        """Replace the selection with the descendants of root passing all filters.

        Filters are evaluated in order and evaluation stops at the first
        one rejecting the node. With no filters every descendant is kept.

        Returns:
            Copy of the new selection.
        """
        filters = list(filters or ())
        self._nodes.clear()
        for node in self.descendants(root):
            if all(f.accepts(node) for f in filters):
                self._nodes.append(node)
        return self.nodes
