# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Diagram-interchange graphs usable as TreeTable trees.

The package is organized into:
- element: ElementKind, DiagramElement and the DiagramGraph arena
- accessors: attribute getters/setters and the standard draw.io registry
- drawio: reader for uncompressed draw.io documents

Example:
    >>> from genro_treetable.diagram import drawio_registry, load_drawio
    >>> graph = load_drawio('diagram.drawio')
    >>> registry = drawio_registry(graph)
    >>> label = registry.path('value')
"""

from .accessors import drawio_registry
from .drawio import load_drawio, parse_drawio, parse_style
from .element import DiagramElement, DiagramGraph, ElementKind

__all__ = [
    "DiagramElement",
    "DiagramGraph",
    "ElementKind",
    "drawio_registry",
    "load_drawio",
    "parse_drawio",
    "parse_style",
]
