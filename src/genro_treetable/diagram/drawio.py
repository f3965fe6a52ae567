# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Reader for uncompressed draw.io documents.

Builds a DiagramGraph from the XML written by draw.io::

    <mxfile>
      <diagram id="d1" name="Page-1">
        <mxGraphModel dx="..." ...>
          <root>
            <mxCell id="0"/>
            <mxCell id="1" parent="0"/>
            <mxCell id="2" value="A" vertex="1" parent="1" style="fillColor=#fff;">
              <mxGeometry x="10" y="10" width="80" height="40" as="geometry"/>
            </mxCell>
            <mxCell id="3" value="B" vertex="1" parent="1"/>
            <mxCell id="4" edge="1" source="2" target="3" parent="1"/>
          </root>
        </mxGraphModel>
      </diagram>
    </mxfile>

Cells with a source or target become ARROW elements whose ends are resolved
once the whole document has been read.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from ..exceptions import DrawioParseError
from .element import DiagramGraph, ElementKind

logger = logging.getLogger(__name__)

GRAPH_MODEL_ATTRS = (
    'dx', 'dy', 'grid', 'gridSize', 'guides', 'tooltips', 'connect', 'arrows',
    'fold', 'page', 'pageScale', 'pageWidth', 'pageHeight', 'math', 'shadow',
)
CELL_OPTIONAL_ATTRS = ('value', 'vertex')
GEOMETRY_OPTIONAL_ATTRS = ('x', 'y', 'width', 'height', 'relative')


def parse_style(style: str) -> dict[str, str]:
    """Split a draw.io style string ``"key=value;key=value;"`` into a dict.

    Empty fragments are skipped, a fragment without '=' maps to '' and
    anything after a second '=' is dropped.
    """
    result: dict[str, str] = {}
    for fragment in style.split(';'):
        if not fragment:
            continue
        parts = fragment.split('=')
        result[parts[0]] = parts[1] if len(parts) > 1 else ''
    return result


def parse_drawio(text: str | bytes, graph: DiagramGraph | None = None) -> DiagramGraph:
    """Read a draw.io document into graph (a new one if None).

    Raises:
        DrawioParseError: If the XML is malformed or does not follow the
            draw.io structure.
    """
    try:
        document = ET.fromstring(text)
    except ET.ParseError as e:
        raise DrawioParseError(f"Invalid draw.io XML: {e}") from e

    if graph is None:
        graph = DiagramGraph()
    reader = _DrawioReader(graph)
    reader.read_children(document, graph.root, graph.root)
    reader.resolve_arrows()
    return graph


def load_drawio(path: str | Path, graph: DiagramGraph | None = None) -> DiagramGraph:
    """Read a draw.io file into graph (a new one if None)."""
    return parse_drawio(Path(path).read_bytes(), graph)


class _DrawioReader:
    """Walks the XML tree and fills a DiagramGraph."""

    def __init__(self, graph: DiagramGraph) -> None:
        self.graph = graph
        self.arrows: list[tuple[int, int]] = []

    def read_children(self, xml: ET.Element, context: int, scope: int) -> None:
        """Read the children of xml into context.

        Args:
            xml: XML element whose children are read.
            context: Handle receiving elements without an explicit parent.
            scope: Handle of the enclosing diagram; parent ids resolve
                within it.
        """
        if xml.text and xml.text.strip() and len(xml) == 0:
            logger.warning(
                "Skipping text payload of <%s> (compressed diagrams are not supported)",
                xml.tag,
            )

        for child in xml:
            next_context, next_scope = context, scope
            tag = child.tag

            if tag == 'mxGraphModel':
                next_context = self._add(child, ElementKind.GRAPH_MODEL, context, GRAPH_MODEL_ATTRS)
            elif tag == 'diagram':
                next_context = self._add(child, ElementKind.DIAGRAM, context, ('id', 'name'))
                next_scope = next_context
            elif tag == 'mxCell' and ('source' in child.attrib or 'target' in child.attrib):
                next_context = self._add_cell(child, ElementKind.ARROW, context, scope)
                self._copy(child, next_context, ('source', 'target', 'edge'), required=True)
                self.arrows.append((next_context, scope))
            elif tag == 'mxCell':
                next_context = self._add_cell(child, ElementKind.CELL, context, scope)
                self._copy(child, next_context, CELL_OPTIONAL_ATTRS)
            elif tag == 'mxGeometry':
                geometry = self._add(child, ElementKind.GEOMETRY, context, ('as',))
                self._copy(child, geometry, GEOMETRY_OPTIONAL_ATTRS)
                # waypoints and offsets are not part of the element model
                continue
            elif tag == 'root':
                pass
            else:
                raise DrawioParseError(f"Unexpected XML tag '{tag}'")

            if len(child) or (child.text and child.text.strip()):
                self.read_children(child, next_context, next_scope)

    def resolve_arrows(self) -> None:
        """Replace the source/target ids of arrows with element handles."""
        for handle, scope in self.arrows:
            arrow = self.graph[handle]
            for end in ('source', 'target'):
                end_id = arrow.properties.pop(end)
                end_handle = self._find_cell(end_id, scope)
                if end_handle is None:
                    raise DrawioParseError(
                        f"Arrow '{arrow.properties['id']}': {end} '{end_id}' could not be resolved"
                    )
                setattr(arrow, end, end_handle)

    def _find_cell(self, cell_id: str, scope: int) -> int | None:
        """First cell or arrow below scope whose id is cell_id.

        Pages and models carry ids of their own and are never matched.
        """
        for handle in self.graph.walk(scope):
            element = self.graph[handle]
            if element.has_style and element.properties.get('id') == cell_id:
                return handle
        return None

    def _add(
        self,
        xml: ET.Element,
        kind: ElementKind,
        parent: int,
        required: tuple[str, ...],
    ) -> int:
        handle = self.graph.add(kind, parent)
        self._copy(xml, handle, required, required=True)
        return handle

    def _add_cell(
        self, xml: ET.Element, kind: ElementKind, context: int, scope: int
    ) -> int:
        parent = context
        parent_id = xml.get('parent')
        if parent_id is not None:
            parent = self._find_cell(parent_id, scope)
            if parent is None:
                raise DrawioParseError(
                    f"<mxCell id='{xml.get('id')}'>: parent '{parent_id}' not found"
                )
        handle = self._add(xml, kind, parent, ('id',))
        style = xml.get('style')
        if style is not None:
            self.graph[handle].style = parse_style(style)
        return handle

    def _copy(
        self,
        xml: ET.Element,
        handle: int,
        names: tuple[str, ...],
        required: bool = False,
    ) -> None:
        properties = self.graph[handle].properties
        for name in names:
            value = xml.get(name)
            if value is None:
                if required:
                    raise DrawioParseError(
                        f"'{xml.tag}' does not contain attribute '{name}'"
                    )
                continue
            properties[name] = value
