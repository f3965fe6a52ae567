# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Node filters used to select the rows of a view."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable

from .path import AttributePath


class Filter(ABC):
    """Predicate over a node. Filters never modify the nodes they inspect."""

    @abstractmethod
    def accepts(self, node: Any) -> bool:
        """True if node passes this filter."""

    def __call__(self, node: Any) -> bool:
        return self.accepts(node)


class FunctionFilter(Filter):
    """Filter delegating to an arbitrary boolean function.

    Example:
        >>> even = FunctionFilter(lambda node: node % 2 == 0)
        >>> even.accepts(4)
        True
    """

    __slots__ = ('func',)

    def __init__(self, func: Callable[[Any], bool]) -> None:
        self.func = func

    def __repr__(self) -> str:
        return f"FunctionFilter({getattr(self.func, '__name__', self.func)!r})"

    def accepts(self, node: Any) -> bool:
        return bool(self.func(node))

    @classmethod
    def accept_all(cls) -> FunctionFilter:
        """Filter accepting every node."""
        return cls(lambda node: True)

    @classmethod
    def accept_none(cls) -> FunctionFilter:
        """Filter rejecting every node."""
        return cls(lambda node: False)


class AttributeFilter(Filter):
    """Accepts nodes whose attribute value is one of a fixed set.

    The value is read with ``AttributePath.get_value``: on a node without
    the attribute the path's default is compared, and without a default
    the ``AttributeMissingError`` reaches the caller.

    Attributes:
        path: AttributePath to read.
        allowed: Values accepted, compared with ``==``.
    """

    __slots__ = ('path', 'allowed')

    def __init__(self, path: AttributePath, allowed: Iterable[Any] = ()) -> None:
        self.path = path
        self.allowed = list(allowed)

    def __repr__(self) -> str:
        return f"AttributeFilter({self.path!r}, {self.allowed!r})"

    def accepts(self, node: Any) -> bool:
        value = self.path.get_value(node)
        return value in self.allowed
