# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeTable exceptions."""

from __future__ import annotations


class TreeTableError(Exception):
    """Base exception for TreeTable errors."""

    pass


class AttributeMissingError(TreeTableError):
    """Raised when an attribute is absent and no default is configured."""

    pass


class TransformError(TreeTableError):
    """Raised when an apply or revert function of a transform fails."""

    pass


class DrawioParseError(TreeTableError):
    """Raised when a draw.io document cannot be read into a diagram graph."""

    pass
