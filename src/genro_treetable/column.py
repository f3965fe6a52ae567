# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Column - one attribute rendered as strings aligned to a view."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Sequence

from .path import AttributePath
from .transform import ValueTransform
from .view import SelectiveView

logger = logging.getLogger(__name__)


class Column:
    """An attribute, a transform to strings and a header.

    A built column is ``[header, cell_1, ..., cell_n]`` with one cell per
    node of the view, in view order.

    Attributes:
        path: AttributePath of the rendered attribute.
        transform: ValueTransform from the attribute's values to strings.
        header: Display name, written as row 0 of the column.
    """

    __slots__ = ('path', 'transform', 'header')

    def __init__(
        self,
        path: AttributePath,
        transform: ValueTransform,
        header: str = 'colname not set',
    ) -> None:
        self.path = path
        self.transform = transform
        self.header = header

    def __repr__(self) -> str:
        return f"Column({self.header!r}, {self.path!r}, {self.transform!r})"

    def build(self, view: SelectiveView) -> list[str]:
        """Render the column for view, header first.

        Raises:
            AttributeMissingError: If a node lacks the attribute and the
                path has no default.
        """
        cells = [self.transform.apply(self.path.get_value(node)) for node in view]
        return [self.header] + cells

    def is_valid(self, view: SelectiveView) -> bool:
        """True if build() can run and the transform is bijective over view."""
        if not self.path.has_default:
            for node in view:
                if not self.path.has_value(node):
                    logger.debug("Column %r: %r has no value and no default", self.header, node)
                    return False
        return self.transform.is_bijective_over(self.path, view)

    def sync_with(self, view: SelectiveView, edited: Sequence[str]) -> bool:
        """Write an edited column back into the nodes of view.

        Cells equal to the currently built cell set are accepted as they
        are. Every other cell is a newly introduced value and must be a
        fixed point of revert then apply, must not revert onto a value
        already stored in the column, and the introduced values must map
        one to one onto their strings.

        The edit is rejected as a whole (nothing written) when any of these
        checks fails. Once writing starts every row is attempted; rows
        whose setter refuses the value make the result False but earlier
        writes stay in place.

        Args:
            view: The view the column was built against.
            edited: ``[header, cell_1, ..., cell_n]``; the header is ignored.

        Returns:
            True if every needed write succeeded.
        """
        if not self.is_valid(view):
            return False

        if len(edited) != len(view) + 1:
            logger.debug(
                "Column %r: %d cells for %d nodes",
                self.header, max(len(edited) - 1, 0), len(view),
            )
            return False

        current_cells = self.build(view)[1:]
        current_values = [self.transform.revert(cell) for cell in current_cells]
        known_cells = set(current_cells)
        cells = list(edited[1:])

        introduced: list[tuple[Any, str]] = []
        for cell in cells:
            if cell in known_cells:
                continue
            reverted = self.transform.revert(cell)
            applied = self.transform.apply(reverted)
            if applied != cell:
                logger.debug(
                    "Column %r: %r is not reachable (renders as %r)",
                    self.header, cell, applied,
                )
                return False
            if reverted in current_values:
                logger.debug(
                    "Column %r: %r collides with stored value %r",
                    self.header, cell, reverted,
                )
                return False
            introduced.append((reverted, applied))

        if not self._is_consistent(introduced):
            logger.debug("Column %r: introduced values are ambiguous", self.header)
            return False

        success = True
        for node, cell in zip(view, cells):
            new_value = self.transform.revert(cell)
            if new_value == self.path.get_value(node):
                continue
            if not self.path.set_value(node, new_value):
                logger.info(
                    "Column %r: %r refused value %r", self.header, node, new_value
                )
                success = False
        return success

    @staticmethod
    def _is_consistent(introduced: list[tuple[Any, str]]) -> bool:
        """True if each introduced value occurs as often as its string."""
        value_counts = Counter(value for value, _ in introduced)
        key_counts = Counter(key for _, key in introduced)
        return all(
            value_counts[value] == key_counts[key] for value, key in introduced
        )
