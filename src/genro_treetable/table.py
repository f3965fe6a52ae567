# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeTable - columns of node attributes built and synced over one view.

Usage:
    1. Build AttributePaths for the attributes to show (or take them from
       an AttributeRegistry).
    2. Select the rows: apply Filters to the table's SelectiveView.
    3. Build ValueTransforms ending in strings, chaining them if needed.
    4. Register one Column per attribute, check is_valid(), then apply()
       to get the table and sync_with() to write an edited table back.

Example:
    >>> table = TreeTable(SelectiveView(graph.children))
    >>> table.refresh(graph.root, [AttributeFilter(vertex, ['1'])])
    >>> table.register_column(table.make_column(label, identity(), 'Label'))
    >>> rows = table.apply()
    >>> rows[0][1] = 'renamed'
    >>> table.sync_with(graph.root, rows)
    True
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Sequence

from .column import Column
from .filters import Filter
from .path import MISSING, AttributePath, Getter, Setter
from .transform import ValueTransform
from .view import SelectiveView

logger = logging.getLogger(__name__)


class TreeTable:
    """A view plus an ordered list of columns.

    Table I/O is column-major: ``table[i]`` is ``[header, cell_1, ...]`` for
    the i-th registered column. Supplied tables are matched to columns by
    position, never by header text.

    Attributes:
        view: SelectiveView shared by all columns.
        columns: Registered columns in registration order.
    """

    __slots__ = ('view', 'columns')

    def __init__(
        self, view: SelectiveView, columns: Iterable[Column] | None = None
    ) -> None:
        self.view = view
        self.columns: list[Column] = list(columns or ())

    def __repr__(self) -> str:
        return f"TreeTable({self.headers()}, {len(self.view)} rows)"

    def __len__(self) -> int:
        return len(self.columns)

    def register_column(self, column: Column) -> Column:
        """Append column to the table."""
        self.columns.append(column)
        return column

    def headers(self) -> list[str]:
        """Headers of the registered columns in order."""
        return [column.header for column in self.columns]

    def refresh(self, root: Any, filters: Iterable[Filter] | None = None) -> list[Any]:
        """Re-select the rows of the table from root."""
        return self.view.apply_filter(root, filters)

    def apply(self) -> list[list[str]]:
        """Build every column against the current view."""
        return [column.build(self.view) for column in self.columns]

    def is_valid(self) -> bool:
        """True if every column is valid for the current view."""
        return all(column.is_valid(self.view) for column in self.columns)

    def sync_with(self, root: Any, table: Sequence[Sequence[str]]) -> bool:
        """Write an edited table back into the tree.

        The table must have one column per registered column and one cell
        per view row in each column. Columns are then synced in order;
        a failing column does not stop the following ones, and columns
        already written are not rolled back.

        Args:
            root: Root of the tree the view was selected from. The view is
                not re-selected; call refresh() for that.
            table: Column-major table as returned by apply().

        Returns:
            True if every column synced successfully.
        """
        if not self.is_valid():
            logger.debug("Sync rejected: table is not valid for its view")
            return False

        if len(table) != len(self.columns):
            logger.debug(
                "Sync rejected: %d columns supplied, %d registered",
                len(table), len(self.columns),
            )
            return False

        view_size = len(self.view)
        for index, column_cells in enumerate(table):
            if len(column_cells) != view_size + 1:
                logger.debug(
                    "Sync rejected: column %d has %d cells for %d rows",
                    index, max(len(column_cells) - 1, 0), view_size,
                )
                return False

        success = True
        for column, column_cells in zip(self.columns, table):
            if not column.sync_with(self.view, column_cells):
                logger.debug("Column %r failed to sync", column.header)
                success = False
        return success

    # ==================== Factories ====================

    @staticmethod
    def make_path(
        getter: Getter,
        setter: Setter | None = None,
        default: Any = MISSING,
        name: str | None = None,
    ) -> AttributePath:
        """Create an AttributePath."""
        return AttributePath(getter, setter, default=default, name=name)

    @staticmethod
    def make_transform(
        func_apply: Callable[[Any], Any],
        func_revert: Callable[[Any], Any],
        name: str | None = None,
    ) -> ValueTransform:
        """Create a ValueTransform."""
        return ValueTransform(func_apply, func_revert, name=name)

    @staticmethod
    def make_column(
        path: AttributePath,
        transform: ValueTransform,
        header: str = 'colname not set',
    ) -> Column:
        """Create a Column (not registered)."""
        return Column(path, transform, header)
