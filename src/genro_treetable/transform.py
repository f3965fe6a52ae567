# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ValueTransform - apply/revert function pairs between two value domains.

A transform is not bijective by construction. Bijectivity is checked with
is_bijective_over() against the values actually stored on the nodes of a
view, and holds only for that value set.

Example:
    >>> pipeline = offset(1) >> int_to_str()
    >>> pipeline.apply(41)
    '42'
    >>> pipeline.revert('42')
    41
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from .exceptions import TransformError

if TYPE_CHECKING:
    from .path import AttributePath
    from .view import SelectiveView

logger = logging.getLogger(__name__)


class ValueTransform:
    """Pair of pure functions ``apply: In -> Out`` and ``revert: Out -> In``.

    Exceptions raised by the wrapped functions are re-raised as
    TransformError chained to the original exception.
    """

    __slots__ = ('func_apply', 'func_revert', 'name')

    def __init__(
        self,
        func_apply: Callable[[Any], Any],
        func_revert: Callable[[Any], Any],
        name: str | None = None,
    ) -> None:
        self.func_apply = func_apply
        self.func_revert = func_revert
        self.name = name

    def __repr__(self) -> str:
        return f"ValueTransform({self.name or '<anonymous>'})"

    def __rshift__(self, other: ValueTransform) -> ValueTransform:
        return self.compose(other)

    def apply(self, value: Any) -> Any:
        """Transform value from the input domain to the output domain."""
        return self._call(self.func_apply, value, 'apply')

    def revert(self, value: Any) -> Any:
        """Transform value from the output domain back to the input domain."""
        return self._call(self.func_revert, value, 'revert')

    def _call(self, func: Callable[[Any], Any], value: Any, direction: str) -> Any:
        try:
            return func(value)
        except TransformError:
            raise
        except Exception as exc:
            raise TransformError(
                f"{self!r} failed to {direction} {value!r}: {exc}"
            ) from exc

    def compose(self, other: ValueTransform) -> ValueTransform:
        """Chain other after this transform.

        The result applies self then other, and reverts other then self.
        """
        first, second = self, other
        name = f"{first.name or '<anonymous>'} >> {second.name or '<anonymous>'}"
        return ValueTransform(
            lambda value: second.apply(first.apply(value)),
            lambda value: first.revert(second.revert(value)),
            name=name,
        )

    def is_bijective_over(self, path: AttributePath, view: SelectiveView) -> bool:
        """Check that this transform is a bijection over the values in view.

        For every node the stored value must survive apply then revert, and
        the value <-> applied value pairs collected so far must not
        contradict each other in either direction. Values must be hashable.

        Raises:
            AttributeMissingError: If a node lacks the attribute and the
                path has no default.
            TransformError: If apply or revert fails.
        """
        applied_by_value: dict[Any, Any] = {}
        value_by_applied: dict[Any, Any] = {}

        for node in view:
            value = path.get_value(node)
            applied = self.apply(value)
            reverted = self.revert(applied)

            if reverted != value:
                logger.debug(
                    "%r does not round-trip %r (got %r back)", self, value, reverted
                )
                return False

            if applied_by_value.setdefault(value, applied) != applied:
                logger.debug(
                    "%r maps %r to both %r and %r",
                    self, value, applied_by_value[value], applied,
                )
                return False

            if value_by_applied.setdefault(applied, value) != value:
                logger.debug(
                    "%r maps both %r and %r to %r",
                    self, value_by_applied[applied], value, applied,
                )
                return False

        return True

    @classmethod
    def passthrough(cls, func: Callable[[Any], Any], name: str | None = None) -> ValueTransform:
        """Transform using the same function in both directions."""
        return cls(func, func, name=name or 'passthrough')


def identity() -> ValueTransform:
    """Transform leaving values untouched."""
    return ValueTransform.passthrough(lambda value: value, name='identity')


def int_to_str() -> ValueTransform:
    """Integers rendered as decimal strings."""
    return ValueTransform(str, int, name='int_to_str')


def float_to_str() -> ValueTransform:
    """Floats rendered as their shortest round-tripping repr."""
    return ValueTransform(repr, float, name='float_to_str')


def offset(delta: int | float) -> ValueTransform:
    """Numbers shifted by delta."""
    return ValueTransform(
        lambda value: value + delta,
        lambda value: value - delta,
        name=f'offset({delta})',
    )
