# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""AttributeRegistry - named accessors built once at configuration time."""

from __future__ import annotations

from typing import Any, Iterator, NamedTuple

from .path import MISSING, AttributePath, Getter, Setter


class AttributeSpec(NamedTuple):
    """Getter, setter and default of one registered attribute."""

    getter: Getter
    setter: Setter | None = None
    default: Any = MISSING


class AttributeRegistry:
    """Mapping from attribute name to its accessor record.

    The registry is filled once and then handed to whoever builds paths,
    filters and columns. Paths created from it are independent objects:
    changing a path's default does not touch the registry.

    Example:
        >>> registry = AttributeRegistry()
        >>> registry.register('label', get_label, set_label, default='')
        >>> path = registry.path('label')
        >>> path.default
        ''
    """

    __slots__ = ('_specs',)

    def __init__(self, specs: dict[str, AttributeSpec] | None = None) -> None:
        self._specs: dict[str, AttributeSpec] = dict(specs or {})

    def __repr__(self) -> str:
        return f"AttributeRegistry({list(self._specs)})"

    def __len__(self) -> int:
        return len(self._specs)

    def __iter__(self) -> Iterator[str]:
        return iter(self._specs)

    def __contains__(self, name: str) -> bool:
        return name in self._specs

    def __getitem__(self, name: str) -> AttributeSpec:
        try:
            return self._specs[name]
        except KeyError:
            raise KeyError(f"Attribute '{name}' is not registered") from None

    def register(
        self,
        name: str,
        getter: Getter,
        setter: Setter | None = None,
        default: Any = MISSING,
    ) -> AttributeSpec:
        """Register (or replace) the accessors of an attribute."""
        spec = AttributeSpec(getter, setter, default)
        self._specs[name] = spec
        return spec

    def names(self) -> list[str]:
        """Registered attribute names in registration order."""
        return list(self._specs)

    def path(self, name: str, default: Any = MISSING) -> AttributePath:
        """Build an AttributePath for a registered attribute.

        Args:
            name: Registered attribute name.
            default: Overrides the registered default when given.
        """
        spec = self[name]
        if default is MISSING:
            default = spec.default
        return AttributePath(spec.getter, spec.setter, default=default, name=name)
