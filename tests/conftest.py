# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures built on the nodetree helpers."""

from __future__ import annotations

from typing import Any

import pytest

from genro_treetable import AttributePath, SelectiveView

from nodetree import Node, attr_path, children


@pytest.fixture
def make_tree():
    """Factory building root -> one child per value of attribute 'size'."""
    def factory(*values: Any, name: str = 'size') -> tuple[Node, list[Node]]:
        root = Node('root')
        nodes = [root.add(f'n{i}', **{name: value}) for i, value in enumerate(values, 1)]
        return root, nodes
    return factory


@pytest.fixture
def sizes(make_tree):
    """Root with three children whose 'size' is 5, 7 and 9."""
    return make_tree(5, 7, 9)


@pytest.fixture
def size_view(sizes) -> SelectiveView:
    root, _ = sizes
    return SelectiveView(children, root)


@pytest.fixture
def size_path() -> AttributePath:
    return attr_path('size')
