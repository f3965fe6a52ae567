# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""AttributePath - typed read/write access to one attribute of a node.

Getters never raise to say "there is no value": they return the ``MISSING``
sentinel instead. ``AttributePath`` turns that result into the configured
default or into an ``AttributeMissingError``.

Example:
    >>> colors = {}
    >>> path = AttributePath(
    ...     lambda node: colors.get(node, MISSING),
    ...     lambda node, value: colors.__setitem__(node, value) or True,
    ...     default='none',
    ... )
    >>> path.get_value('a')
    'none'
    >>> path.has_value('a')
    False
"""

from __future__ import annotations

from typing import Any, Callable

from .exceptions import AttributeMissingError


class _Missing:
    """Marker for an absent attribute value."""

    __slots__ = ()

    def __repr__(self) -> str:
        return 'MISSING'

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()

Getter = Callable[[Any], Any]
Setter = Callable[[Any, Any], bool]


class AttributePath:
    """Accessor for one logical attribute of a node.

    Attributes:
        getter: Callable returning the stored value or ``MISSING``.
        setter: Callable storing a value and returning True on success.
            None makes the path read-only.
        default: Value returned by get_value() when the getter reports
            ``MISSING``. Assign ``MISSING`` to remove it.
        name: Optional name used in error messages.
    """

    __slots__ = ('getter', 'setter', 'default', 'name')

    def __init__(
        self,
        getter: Getter,
        setter: Setter | None = None,
        default: Any = MISSING,
        name: str | None = None,
    ) -> None:
        self.getter = getter
        self.setter = setter
        self.default = default
        self.name = name

    def __repr__(self) -> str:
        default_repr = '' if self.default is MISSING else f", default={self.default!r}"
        return f"AttributePath({self.name or '<anonymous>'}{default_repr})"

    @property
    def has_default(self) -> bool:
        """True if a default value is configured."""
        return self.default is not MISSING

    @property
    def is_readonly(self) -> bool:
        """True if the path has no setter."""
        return self.setter is None

    def get_value(self, node: Any) -> Any:
        """Return the attribute value of node.

        Raises:
            AttributeMissingError: If the node has no value and no default
                is configured.
        """
        value = self.getter(node)
        if value is not MISSING:
            return value
        if self.default is not MISSING:
            return self.default
        raise AttributeMissingError(
            f"Attribute '{self.name or '<anonymous>'}' not present on {node!r}"
        )

    def set_value(self, node: Any, value: Any) -> bool:
        """Store value on node, returning the setter's verdict."""
        if self.setter is None:
            return False
        return self.setter(node, value)

    def has_value(self, node: Any) -> bool:
        """True if a real value is stored on node (the default is ignored)."""
        return self.getter(node) is not MISSING
