#==============================================================================#
#     .;.      silent-tower prettycode                                         #
#    [ |*]     Syntax-highlighted code blocks with line and word highlights.   #
#  .-=\|/=-.   License: MIT <https://mit-license.org/>                         #
#==============================================================================#
"""
lines: Walking the lines of a highlighted tree.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from prettycode.dom import Element, Text, has_class, to_string
from prettycode.words import (Callbacks, OccurrenceContext, WordSpec,
                              highlight_words)

HIGHLIGHTED_LINE = "data-highlighted-line"

def is_line(el: Element) -> bool:
    return has_class(el, "line")

def iter_lines(tree: Element) -> Iterator[Element]:
    """Yields line elements in document order. Lines are not searched for
       nested lines."""
    def aux(el):
        if is_line(el):
            yield el
            return
        for child in list(el.children):
            if isinstance(child, Element):
                yield from aux(child)
    yield from aux(tree)

def annotate(tree: Element, highlighted_lines: Iterable[int],
             words: list[WordSpec], callbacks: Callbacks | None = None) -> None:
    """Runs the line callbacks and highlights words on every line of the tree.
       Line numbers in `highlighted_lines` are 1-based. Occurrences of words
       are counted across the whole tree."""
    if callbacks is None:
        callbacks = Callbacks()
    highlighted_lines = set(highlighted_lines)
    context = OccurrenceContext()

    for number, line in enumerate(iter_lines(tree), start=1):
        if callbacks.on_visit_line is not None:
            callbacks.on_visit_line(line)
        if number in highlighted_lines \
                and callbacks.on_visit_highlighted_line is not None:
            callbacks.on_visit_highlighted_line(line)
        highlight_words(line, words, context, callbacks)

#---
# Default hooks used by the Markdown extensions
#---

def keep_empty_line(line: Element) -> None:
    # An empty line would collapse to zero height in the rendered block
    if not to_string(line):
        line.children = [Text(" ")]

def mark_highlighted_line(line: Element) -> None:
    line.properties[HIGHLIGHTED_LINE] = ""

def default_callbacks() -> Callbacks:
    return Callbacks(on_visit_line=keep_empty_line,
                     on_visit_highlighted_line=mark_highlighted_line)
