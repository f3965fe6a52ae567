# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-TreeTable - Edit tree node attributes as a table of strings.

Attributes of the nodes of any tree are shown as string columns. An edited
table is written back only where each column's string form is a bijection
over the values present in the selected nodes, so an edit can never merge
two distinct values into one.
"""

import logging

__version__ = "0.1.0"

from .column import Column
from .exceptions import (
    AttributeMissingError,
    DrawioParseError,
    TransformError,
    TreeTableError,
)
from .filters import AttributeFilter, Filter, FunctionFilter
from .path import MISSING, AttributePath
from .registry import AttributeRegistry, AttributeSpec
from .table import TreeTable
from .transform import ValueTransform, float_to_str, identity, int_to_str, offset
from .view import SelectiveView

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core classes
    "TreeTable",
    "Column",
    "SelectiveView",
    # Accessors
    "AttributePath",
    "AttributeRegistry",
    "AttributeSpec",
    "MISSING",
    # Filters
    "Filter",
    "FunctionFilter",
    "AttributeFilter",
    # Transforms
    "ValueTransform",
    "identity",
    "int_to_str",
    "float_to_str",
    "offset",
    # Exceptions
    "TreeTableError",
    "AttributeMissingError",
    "TransformError",
    "DrawioParseError",
]
