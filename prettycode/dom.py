#==============================================================================#
#     .;.      silent-tower prettycode                                         #
#    [ |*]     Syntax-highlighted code blocks with line and word highlights.   #
#  .-=\|/=-.   License: MIT <https://mit-license.org/>                         #
#==============================================================================#
"""
dom: The tree of styled inline nodes that highlighted code is rendered to.

Unlike ElementTree, text is stored in its own leaf nodes instead of .text and
.tail, which makes it possible to split, reparent and wrap runs of text
without juggling tails. Trees are converted to ElementTree only at the end, for
serialization.

Elements exclusively own their children and their properties. Every operation
that produces new elements from an existing one copies its properties.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union
import xml.etree.ElementTree as etree

from markdown.serializers import to_html_string

@dataclass
class Text:
    value: str

@dataclass
class Element:
    tag: str
    properties: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)

    def append(self, child: Node) -> Node:
        self.children.append(child)
        return child

Node = Union[Text, Element]

def to_string(node: Node) -> str:
    if isinstance(node, Text):
        return node.value
    return "".join(to_string(child) for child in node.children)

def has_class(el: Element, name: str) -> bool:
    return name in el.properties.get("class", "").split()

def walk(node: Node) -> Iterator[tuple[Element, Element | None, int]]:
    """Yields (element, parent, index in parent) for all elements in document
       order, starting with `node` itself. Children are snapshotted before
       being visited, so the caller may mutate the element it just got."""
    def aux(el, parent, index):
        yield el, parent, index
        for i, child in enumerate(list(el.children)):
            if isinstance(child, Element):
                yield from aux(child, el, i)
    if isinstance(node, Element):
        yield from aux(node, None, 0)

#---
# Splitting
#---

def split_node(node: Node, offset: int) -> tuple[Node | None, Node | None]:
    """Splits a node in two at `offset` characters of its flattened text.
       Elements are split recursively and both halves get a copy of the
       original properties. When the split point is at either end, the
       original node is returned whole on one side and None on the other."""
    length = len(to_string(node))
    if offset <= 0:
        return None, node
    if offset >= length:
        return node, None

    if isinstance(node, Text):
        return Text(node.value[:offset]), Text(node.value[offset:])

    left = Element(node.tag, dict(node.properties))
    right = Element(node.tag, dict(node.properties))
    position = 0
    for child in node.children:
        child_length = len(to_string(child))
        if position + child_length <= offset:
            left.children.append(child)
        elif position >= offset:
            right.children.append(child)
        else:
            l, r = split_node(child, offset - position)
            left.children.append(l)
            right.children.append(r)
        position += child_length
    return left, right

def slice_node(node: Node, start: int, end: int) \
        -> tuple[Node | None, Node | None, Node | None]:
    """Splits a node into the parts before `start`, between `start` and `end`,
       and after `end`. Missing parts are None."""
    prefix, rest = split_node(node, start)
    if rest is None:
        return prefix, None, None
    middle, suffix = split_node(rest, end - max(start, 0))
    return prefix, middle, suffix

#---
# Serialization
#---

def to_etree(el: Element) -> etree.Element:
    e = etree.Element(el.tag, {k: str(v) for k, v in el.properties.items()
                               if v is not None})
    last = None
    for child in el.children:
        if isinstance(child, Text):
            if last is None:
                e.text = (e.text or "") + child.value
            else:
                last.tail = (last.tail or "") + child.value
        else:
            last = to_etree(child)
            e.append(last)
    return e

def to_html(el: Element) -> str:
    return to_html_string(to_etree(el))
