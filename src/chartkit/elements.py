"""Drawable element tree and its HTML/SVG serialization."""

from __future__ import annotations

import html
from collections.abc import Iterator
from dataclasses import dataclass, field

from .styles import PropertyList

# Tags written as <tag .../> when they have no content
VOID_SVG_TAGS = frozenset({"circle", "polyline", "path", "rect", "line"})


@dataclass(frozen=True, slots=True)
class Element:
    """One node of a rendered chart.

    Attributes:
        tag: Markup tag name (``div``, ``svg``, ``circle``...)
        region: Style region whose properties make up ``style``; None for
            structural nodes with no presentation of their own
        style: Resolved property list of ``region``
        layout: Per-element geometry (bar extent, label transform...)
        attrs: Markup attributes (SVG geometry)
        text: Text content
        children: Child elements in document order
    """

    tag: str
    region: str | None = None
    style: PropertyList = ()
    layout: PropertyList = ()
    attrs: tuple[tuple[str, str], ...] = ()
    text: str = ""
    children: tuple[Element, ...] = field(default_factory=tuple)

    def attr(self, name: str) -> str | None:
        """Value of one markup attribute, or None."""
        return dict(self.attrs).get(name)

    def layout_value(self, name: str) -> str | None:
        """Value of one layout property, or None."""
        return dict(self.layout).get(name)

    def walk(self) -> Iterator[Element]:
        """Yield this element and all descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find_all(self, region: str) -> list[Element]:
        """All elements in this subtree styled by ``region``."""
        return [element for element in self.walk() if element.region == region]


def style_attribute(element: Element) -> str:
    """CSS declaration string: region properties first, then layout."""
    return "; ".join(f"{name}: {value}" for name, value in (*element.style, *element.layout))


def to_html(element: Element, indent: int = 2) -> str:
    """Serialize an element tree to HTML with inline SVG."""
    lines: list[str] = []
    _write(element, lines, 0, indent)
    return "\n".join(lines) + "\n"


def _open_tag(element: Element) -> str:
    parts = [element.tag]
    if element.region:
        parts.append(f'class="{html.escape(element.region)}"')
    style = style_attribute(element)
    if style:
        parts.append(f'style="{html.escape(style)}"')
    for name, value in element.attrs:
        parts.append(f'{name}="{html.escape(value)}"')
    return " ".join(parts)


def _write(element: Element, lines: list[str], depth: int, indent: int) -> None:
    pad = " " * (depth * indent)
    opening = _open_tag(element)

    if not element.children and not element.text and element.tag in VOID_SVG_TAGS:
        lines.append(f"{pad}<{opening}/>")
        return

    if not element.children:
        lines.append(f"{pad}<{opening}>{html.escape(element.text)}</{element.tag}>")
        return

    lines.append(f"{pad}<{opening}>")
    if element.text:
        lines.append(f"{pad}{' ' * indent}{html.escape(element.text)}")
    for child in element.children:
        _write(child, lines, depth + 1, indent)
    lines.append(f"{pad}</{element.tag}>")
