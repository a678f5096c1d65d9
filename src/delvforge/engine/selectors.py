"""
Selector-name builder.

Class names are composed as ``<prefix>[<variant><sep>...]<suffix>`` and then
escaped as CSS identifiers, so the default separator ``:`` and suffixes such
as ``primary-500/10`` or ``p-0.5`` produce valid selectors
(``.df-hover\\:red:hover``, ``.df-p-0\\.5``).

Theme-scoped selectors match an element carrying the theme-qualified class
that either sits inside, or itself carries, ``[data-theme="<name>"]``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

THEME_ATTRIBUTE = "data-theme"

_WIDTH_VALUE = re.compile(r"^[\d.]")


def escape_identifier(name: str) -> str:
    """Escape a string for use as a CSS identifier (class name)."""
    if name == "-":
        return "\\-"
    out: list[str] = []
    for index, ch in enumerate(name):
        if ch == "\0":
            out.append("�")
        elif not ch.isascii():
            out.append(ch)
        elif ch.isdigit() and (index == 0 or (index == 1 and name[0] == "-")):
            # Identifiers may not start with a digit (or "-" then a digit)
            out.append(f"\\{ord(ch):x} ")
        elif ch.isalnum() or ch in "-_":
            out.append(ch)
        else:
            out.append("\\" + ch)
    return "".join(out)


def theme_attribute_selector(theme_name: str) -> str:
    """``[data-theme="<name>"]``"""
    escaped = theme_name.replace("\\", "\\\\").replace('"', '\\"')
    return f'[{THEME_ATTRIBUTE}="{escaped}"]'


def theme_root_selector(theme_name: str) -> str:
    """Selector for a theme's custom properties: ``:root`` for the default theme."""
    if not theme_name:
        return ":root"
    return theme_attribute_selector(theme_name)


def media_params(width: str) -> str:
    """
    Media query parameters for a breakpoint value.

    Widths (values starting with a digit or ``.``) become
    ``screen and (min-width: <width>)``; anything else, such as ``print``, is
    used verbatim as the query.
    """
    width = width.strip()
    if _WIDTH_VALUE.match(width):
        return f"screen and (min-width: {width})"
    if width.startswith("@media "):
        return width[len("@media ") :].strip()
    return width


def container_params(width: str) -> str:
    return f"(min-width: {width.strip()})"


@dataclass(frozen=True)
class SelectorBuilder:
    """Builds class names and selectors for one prefix/separator pair."""

    prefix: str
    separator: str

    def class_name(self, suffix: str, *variants: str) -> str:
        """Unescaped class name: prefix, then each variant and separator, then suffix."""
        parts = "".join(f"{variant}{self.separator}" for variant in variants if variant)
        return f"{self.prefix}{parts}{suffix}"

    def selector(
        self,
        suffix: str,
        *variants: str,
        theme: str = "",
        pseudo: str = "",
    ) -> str:
        """
        Full selector for a utility.

        Args:
            suffix: Utility table key (``"red-500"``).
            *variants: Breakpoint / state / container tokens, outermost first.
            theme: Theme variant name; empty means unscoped.
            pseudo: Pseudo-class appended to the selector (``":hover"``).
        """
        class_name = self.class_name(suffix, *variants)
        if not theme:
            return f".{escape_identifier(class_name)}{pseudo}"

        scoped = escape_identifier(f"{theme}{self.separator}{class_name}")
        attribute = theme_attribute_selector(theme)
        return f":is({attribute} .{scoped}{pseudo}, {attribute}.{scoped}{pseudo})"
