# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for TreeTable."""

import pytest

from genro_treetable import (
    AttributeFilter,
    Column,
    FunctionFilter,
    SelectiveView,
    TreeTable,
    identity,
    int_to_str,
)

from nodetree import Node, attr_path, children


@pytest.fixture
def shapes():
    """root -> s1, s2 (box with width/height/label) and a line."""
    root = Node('root')
    s1 = root.add('s1', kind='box', width=1, height=10, label='A')
    root.add('l1', kind='line', width=5, height=0, label='')
    s2 = root.add('s2', kind='box', width=2, height=20, label='B')
    return root, [s1, s2]


@pytest.fixture
def table(shapes):
    root, _ = shapes
    table = TreeTable(SelectiveView(children))
    table.refresh(root, [AttributeFilter(attr_path('kind'), ['box'])])
    table.register_column(Column(attr_path('width'), int_to_str(), 'W'))
    table.register_column(Column(attr_path('height'), int_to_str(), 'H'))
    table.register_column(Column(attr_path('label'), identity(), 'Label'))
    return table


def dims(nodes):
    return [(n.attrs['width'], n.attrs['height'], n.attrs['label']) for n in nodes]


class TestBuild:
    """Tests for apply, is_valid and helpers."""

    def test_apply(self, table):
        """Test every column is built against the shared view."""
        assert table.apply() == [
            ['W', '1', '2'],
            ['H', '10', '20'],
            ['Label', 'A', 'B'],
        ]

    def test_apply_no_columns(self, shapes):
        """Test a table without columns builds nothing."""
        root, _ = shapes
        assert TreeTable(SelectiveView(children, root)).apply() == []

    def test_headers_and_len(self, table):
        """Test headers() and len()."""
        assert table.headers() == ['W', 'H', 'Label']
        assert len(table) == 3

    def test_register_returns_column(self, table):
        """Test register_column returns the column."""
        column = Column(attr_path('kind'), identity(), 'Kind')
        assert table.register_column(column) is column
        assert table.columns[-1] is column

    def test_is_valid(self, table):
        """Test a table of valid columns is valid."""
        assert table.is_valid() is True

    def test_is_valid_fails_with_one_column(self, table):
        """Test one invalid column invalidates the table."""
        table.register_column(Column(attr_path('color'), identity(), 'Color'))
        assert table.is_valid() is False

    def test_refresh(self, table, shapes):
        """Test refresh re-selects the rows."""
        root, _ = shapes
        table.refresh(root, [FunctionFilter.accept_all()])
        assert len(table.view) == 3
        assert table.apply()[0] == ['W', '1', '5', '2']

    def test_factories(self, shapes):
        """Test make_path, make_transform and make_column."""
        root, nodes = shapes
        table = TreeTable(SelectiveView(children, root))
        path = table.make_path(lambda n: n.attrs['width'], name='width')
        transform = table.make_transform(lambda v: str(v * 2), lambda s: int(s) // 2)
        column = table.make_column(path, transform)
        assert column.header == 'colname not set'
        assert column.build(table.view) == ['colname not set', '2', '10', '4']
        assert path.is_readonly is True
        assert table.columns == []


class TestSync:
    """Tests for TreeTable.sync_with."""

    def test_noop_sync(self, table, shapes):
        """Test syncing the built table changes nothing."""
        root, nodes = shapes
        assert table.sync_with(root, table.apply()) is True
        assert dims(nodes) == [(1, 10, 'A'), (2, 20, 'B')]

    def test_edit(self, table, shapes):
        """Test edits in several columns are written."""
        root, nodes = shapes
        edited = table.apply()
        edited[0][2] = '3'
        edited[2][1] = 'E'
        assert table.sync_with(root, edited) is True
        assert dims(nodes) == [(1, 10, 'E'), (3, 20, 'B')]

    def test_unselected_nodes_untouched(self, table, shapes):
        """Test nodes outside the view are never written."""
        root, _ = shapes
        line = root.children[1]
        table.sync_with(root, [['W', '7', '8'], ['H', '1', '2'], ['Label', 'x', 'y']])
        assert line.attrs == {'kind': 'line', 'width': 5, 'height': 0, 'label': ''}

    def test_positional_mapping(self, shapes):
        """Test columns are matched by position, not by header."""
        root, nodes = shapes
        width = Column(attr_path('width'), int_to_str(), 'W')
        height = Column(attr_path('height'), int_to_str(), 'H')
        boxes = [AttributeFilter(attr_path('kind'), ['box'])]

        ordered = TreeTable(SelectiveView(children, root, boxes), [width, height])
        content = ordered.apply()

        swapped = TreeTable(SelectiveView(children, root, boxes), [height, width])
        assert swapped.sync_with(root, content) is True
        assert [(n.attrs['width'], n.attrs['height']) for n in nodes] == [(10, 1), (20, 2)]

    def test_column_count_mismatch(self, table, shapes):
        """Test a table with a different column count is rejected."""
        root, nodes = shapes
        assert table.sync_with(root, [['W', '7', '8'], ['H', '1', '2']]) is False
        assert dims(nodes) == [(1, 10, 'A'), (2, 20, 'B')]

    def test_cell_count_mismatch_checked_first(self, table, shapes):
        """Test a short last column rejects the table before any write."""
        root, nodes = shapes
        edited = [['W', '7', '8'], ['H', '1', '2'], ['Label', 'x']]
        assert table.sync_with(root, edited) is False
        assert dims(nodes) == [(1, 10, 'A'), (2, 20, 'B')]

    def test_invalid_table_rejected(self, table, shapes):
        """Test an invalid table refuses to sync."""
        root, nodes = shapes
        del nodes[0].attrs['label']
        edited = [['W', '7', '8'], ['H', '1', '2'], ['Label', 'x', 'y']]
        assert table.sync_with(root, edited) is False
        assert (nodes[0].attrs['width'], nodes[1].attrs['width']) == (1, 2)

    def test_partial_application(self, table, shapes):
        """Test a failing column keeps earlier writes and later columns run."""
        root, nodes = shapes
        edited = [
            ['W', '7', '8'],
            ['H', '010', '20'],  # '010' is not reachable: column rejected
            ['Label', 'x', 'y'],
        ]
        assert table.sync_with(root, edited) is False
        assert dims(nodes) == [(7, 10, 'x'), (8, 20, 'y')]

    def test_refused_write_in_middle_column(self, table, shapes):
        """Test a setter refusal fails the sync without stopping it."""
        root, nodes = shapes
        nodes[0].readonly.add('height')
        edited = [['W', '7', '8'], ['H', '11', '21'], ['Label', 'x', 'y']]
        assert table.sync_with(root, edited) is False
        assert dims(nodes) == [(7, 10, 'x'), (8, 21, 'y')]

    def test_empty_view(self, shapes):
        """Test a table over an empty view syncs header-only columns."""
        root, _ = shapes
        table = TreeTable(SelectiveView(children, root, [FunctionFilter.accept_none()]))
        table.register_column(Column(attr_path('width'), int_to_str(), 'W'))
        assert table.apply() == [['W']]
        assert table.sync_with(root, [['W']]) is True
