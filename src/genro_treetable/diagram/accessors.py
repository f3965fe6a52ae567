# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Attribute accessors for draw.io diagram graphs.

Nodes are element handles; every accessor closes over the graph that owns
them.
"""

from __future__ import annotations

from typing import Any, Callable

from ..path import MISSING
from ..registry import AttributeRegistry
from .element import DiagramGraph


def property_getter(graph: DiagramGraph, key: str) -> Callable[[int], Any]:
    """Getter reading a local style property."""
    def getter(handle: int) -> Any:
        return graph[handle].properties.get(key, MISSING)
    return getter


def property_setter(graph: DiagramGraph, key: str) -> Callable[[int, Any], bool]:
    """Setter writing a local style property."""
    def setter(handle: int, value: Any) -> bool:
        graph[handle].properties[key] = value
        return True
    return setter


def style_getter(graph: DiagramGraph, key: str) -> Callable[[int], Any]:
    """Getter reading a draw.io style key of cells and arrows."""
    def getter(handle: int) -> Any:
        element = graph[handle]
        if not element.has_style:
            return MISSING
        return element.style.get(key, MISSING)
    return getter


def style_setter(graph: DiagramGraph, key: str) -> Callable[[int, Any], bool]:
    """Setter writing a draw.io style key; refuses kinds without a style."""
    def setter(handle: int, value: Any) -> bool:
        element = graph[handle]
        if not element.has_style:
            return False
        element.style[key] = value
        return True
    return setter


def int_property_getter(graph: DiagramGraph, key: str) -> Callable[[int], Any]:
    """Getter reading a local style property holding an integer."""
    def getter(handle: int) -> Any:
        raw = graph[handle].properties.get(key)
        if raw is None:
            return MISSING
        try:
            return int(raw)
        except ValueError:
            return MISSING
    return getter


def drawio_registry(graph: DiagramGraph) -> AttributeRegistry:
    """Registry of the standard draw.io attributes of graph.

    - id: integer element id, read-only
    - value: cell label, defaults to ''
    - vertex: vertex flag ('1' for shapes), defaults to '', read-only
    - fillColor: style fill color of cells and arrows
    """
    registry = AttributeRegistry()
    registry.register('id', int_property_getter(graph, 'id'))
    registry.register(
        'value',
        property_getter(graph, 'value'),
        property_setter(graph, 'value'),
        default='',
    )
    registry.register('vertex', property_getter(graph, 'vertex'), default='')
    registry.register(
        'fillColor',
        style_getter(graph, 'fillColor'),
        style_setter(graph, 'fillColor'),
    )
    return registry
