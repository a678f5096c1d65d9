"""
Style rule types and stylesheet rendering.

Rules are immutable once created and are appended to a ``Stylesheet`` in
generation order. Rules are never merged: two rules with the same selector
stay two adjacent blocks and the cascade resolves them by source order.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair."""

    prop: str
    value: str
    important: bool = False

    def to_css(self) -> str:
        suffix = " !important" if self.important else ""
        return f"{self.prop}: {self.value}{suffix}"


@dataclass(frozen=True)
class StyleRule:
    """A selector with an ordered sequence of declarations."""

    selector: str
    declarations: tuple[Declaration, ...] = ()

    def get(self, prop: str) -> str | None:
        """Return the value of the last declaration of ``prop``."""
        for declaration in reversed(self.declarations):
            if declaration.prop == prop:
                return declaration.value
        return None

    def render(self, indent: int = 0, minify: bool = False) -> str:
        if minify:
            body = ";".join(d.to_css().replace(": ", ":", 1) for d in self.declarations)
            return f"{self.selector}{{{body}}}"
        pad = " " * indent
        lines = [f"{pad}{self.selector} {{"]
        lines.extend(f"{pad}  {d.to_css()};" for d in self.declarations)
        lines.append(f"{pad}}}")
        return "\n".join(lines)


@dataclass(frozen=True)
class AtRule:
    """A conditional group (``@media``, ``@container``) holding style rules."""

    name: str
    params: str
    rules: tuple[StyleRule, ...] = ()

    @property
    def header(self) -> str:
        return f"@{self.name} {self.params}"

    def render(self, indent: int = 0, minify: bool = False) -> str:
        if minify:
            inner = "".join(rule.render(minify=True) for rule in self.rules)
            return f"{self.header}{{{inner}}}"
        pad = " " * indent
        lines = [f"{pad}{self.header} {{"]
        lines.extend(rule.render(indent + 2) for rule in self.rules)
        lines.append(f"{pad}}}")
        return "\n".join(lines)


Node = StyleRule | AtRule


@dataclass
class Stylesheet:
    """Append-only, ordered output of a generation pass."""

    nodes: list[Node] = field(default_factory=list)

    def append(self, node: Node) -> None:
        self.nodes.append(node)

    def extend(self, nodes: list[Node] | tuple[Node, ...]) -> None:
        self.nodes.extend(nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def iter_rules(self) -> Iterator[StyleRule]:
        """Iterate every style rule, descending into at-rules, in order."""
        for node in self.nodes:
            if isinstance(node, AtRule):
                yield from node.rules
            else:
                yield node

    def rule_count(self) -> int:
        return sum(1 for _ in self.iter_rules())

    def selectors(self) -> list[str]:
        return [rule.selector for rule in self.iter_rules()]

    def find(self, selector: str) -> list[StyleRule]:
        """Return every rule (at any depth) with exactly this selector."""
        return [rule for rule in self.iter_rules() if rule.selector == selector]

    def at_rules(self, name: str | None = None) -> list[AtRule]:
        return [
            node
            for node in self.nodes
            if isinstance(node, AtRule) and (name is None or node.name == name)
        ]

    def to_css(self, minify: bool = False) -> str:
        """Render the stylesheet to CSS text."""
        if minify:
            return "".join(node.render(minify=True) for node in self.nodes)
        return "\n\n".join(node.render() for node in self.nodes) + ("\n" if self.nodes else "")
