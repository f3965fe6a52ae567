# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Diagram elements and the arena holding them.

Elements refer to each other by integer handle only. The DiagramGraph owns
every element; parent and children relations are handle fields.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterator


class ElementKind(Enum):
    """Closed set of diagram element variants."""

    DIAGRAM = 'diagram'
    GRAPH_MODEL = 'mxGraphModel'
    CELL = 'mxCell'
    ARROW = 'arrow'
    GEOMETRY = 'mxGeometry'


class DiagramElement:
    """An element of a diagram-interchange graph.

    Each element has:
    - handle: Its key in the owning DiagramGraph
    - kind: The ElementKind variant
    - properties: Local style, string keys to string values
    - style: draw.io style (cells and arrows only)
    - parent: Handle of the owning element, None for the root
    - children: Handles of the owned elements, in document order
    - source, target: Handles of the arrow ends (arrows only)
    """

    __slots__ = (
        'handle', 'kind', 'properties', 'style', 'parent', 'children',
        'source', 'target',
    )

    def __init__(
        self,
        handle: int,
        kind: ElementKind,
        properties: dict[str, str] | None = None,
        parent: int | None = None,
    ) -> None:
        self.handle = handle
        self.kind = kind
        self.properties = properties or {}
        self.style: dict[str, str] = {}
        self.parent = parent
        self.children: list[int] = []
        self.source: int | None = None
        self.target: int | None = None

    def __repr__(self) -> str:
        element_id = self.properties.get('id')
        id_repr = f", id={element_id!r}" if element_id is not None else ''
        return f"DiagramElement(#{self.handle}, {self.kind.name}{id_repr})"

    @property
    def has_style(self) -> bool:
        """True for the kinds carrying a draw.io style."""
        return self.kind in (ElementKind.CELL, ElementKind.ARROW)


class DiagramGraph:
    """Arena of DiagramElements addressed by integer handle.

    The root element (a DIAGRAM) is created with the graph. Handles are
    allocated in creation order and never reused.

    Example:
        >>> graph = DiagramGraph()
        >>> cell = graph.add(ElementKind.CELL, graph.root, id='2', value='A')
        >>> graph.children(graph.root) == [cell]
        True
        >>> graph[cell].properties['value']
        'A'
    """

    __slots__ = ('_elements', 'root')

    def __init__(self) -> None:
        self._elements: dict[int, DiagramElement] = {}
        self.root = self._new(ElementKind.DIAGRAM, None, {})

    def __repr__(self) -> str:
        return f"DiagramGraph({len(self._elements)} elements)"

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[DiagramElement]:
        return iter(self._elements.values())

    def __contains__(self, handle: int) -> bool:
        return handle in self._elements

    def __getitem__(self, handle: int) -> DiagramElement:
        return self.get(handle)

    def _new(
        self, kind: ElementKind, parent: int | None, properties: dict[str, Any]
    ) -> int:
        handle = len(self._elements)
        self._elements[handle] = DiagramElement(handle, kind, properties, parent)
        return handle

    def get(self, handle: int) -> DiagramElement:
        """Return the element for handle.

        Raises:
            KeyError: If handle is unknown.
        """
        try:
            return self._elements[handle]
        except KeyError:
            raise KeyError(f"Unknown element handle #{handle}") from None

    def add(self, kind: ElementKind, parent: int, **properties: str) -> int:
        """Create an element owned by parent and return its handle."""
        owner = self.get(parent)
        handle = self._new(kind, parent, properties)
        owner.children.append(handle)
        return handle

    def children(self, handle: int) -> list[int]:
        """Handles owned by handle, in document order."""
        return list(self.get(handle).children)

    def walk(self, start: int | None = None) -> Iterator[int]:
        """Iterate over start and its descendants in pre-order."""
        stack = [self.root if start is None else start]
        while stack:
            handle = stack.pop()
            yield handle
            stack.extend(reversed(self.get(handle).children))

    def find(self, key: str, value: str, start: int | None = None) -> int | None:
        """First element in pre-order whose property key equals value."""
        for handle in self.walk(start):
            if self._elements[handle].properties.get(key) == value:
                return handle
        return None
