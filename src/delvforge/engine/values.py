"""
Utility table values.

A utility table maps a class suffix to one of:

- ``Literal``: a fixed CSS value
- ``Computed``: ``fn(theme_name, options) -> value``; the only way a value may
  depend on the active theme
- ``Declarations``: an explicit ordered list of ``(property, value)`` pairs
  that replaces the target-property fan-out for that entry

Raw table values are wrapped by ``as_value``: callables become ``Computed``,
mappings become ``Declarations``, anything else becomes ``Literal``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from delvforge.core.units import stringify

if TYPE_CHECKING:
    from delvforge.core.options import Options


@dataclass(frozen=True)
class Literal:
    value: str


@dataclass(frozen=True)
class Computed:
    fn: Callable[[str, "Options"], Any]


@dataclass(frozen=True)
class Declarations:
    items: tuple[tuple[str, Any], ...]

    @classmethod
    def of(cls, mapping: Mapping[str, Any] | Sequence[tuple[str, Any]]) -> Declarations:
        pairs = mapping.items() if isinstance(mapping, Mapping) else mapping
        return cls(tuple((str(prop), value) for prop, value in pairs))


Value = Literal | Computed | Declarations


def as_value(raw: Any) -> Value:
    """Wrap a raw utility table value in its tagged variant."""
    if isinstance(raw, Literal | Computed | Declarations):
        return raw
    if callable(raw):
        return Computed(raw)
    if isinstance(raw, Mapping):
        return Declarations.of(raw)
    return Literal(stringify(raw))


def _finish(raw: Any) -> str | None:
    if raw is None:
        return None
    return stringify(raw)


def resolve_value(value: Any, theme_name: str, options: Options) -> str | None:
    """Resolve a Literal or Computed value for one theme variant."""
    value = as_value(value)
    if isinstance(value, Computed):
        return _finish(value.fn(theme_name, options))
    if isinstance(value, Literal):
        return value.value
    raise TypeError("Declarations values carry their own properties; use resolve_declarations")


def resolve_declarations(
    value: Any,
    properties: Sequence[str],
    theme_name: str,
    options: Options,
) -> list[tuple[str, str]]:
    """
    Resolve one table entry into ordered ``(property, value)`` pairs.

    Literal and Computed values attach the same resolved value to every target
    property, in the order given. Pairs whose value resolves to None or an
    empty string are dropped.
    """
    value = as_value(value)
    if isinstance(value, Declarations):
        pairs = [(prop, resolve_value(raw, theme_name, options)) for prop, raw in value.items]
    else:
        resolved = resolve_value(value, theme_name, options)
        pairs = [(prop, resolved) for prop in properties]
    return [(prop, resolved) for prop, resolved in pairs if resolved]
