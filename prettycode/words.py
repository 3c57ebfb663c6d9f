#==============================================================================#
#     .;.      silent-tower prettycode                                         #
#    [ |*]     Syntax-highlighted code blocks with line and word highlights.   #
#  .-=\|/=-.   License: MIT <https://mit-license.org/>                         #
#==============================================================================#
"""
words: Highlighting words and substrings in already-highlighted lines.

The highlighter produces one span per token, so a word requested by the user
rarely coincides with a single node. For every occurrence of the word in the
text of a line, the children of the line that cover it are split exactly at
the edges of the match (keeping their style on both sides) and the covered
pieces are wrapped in a new span, or marked in place if there is only one.

Wrapped content is permanently excluded from later searches on the same line,
so the first word in the list wins when several words overlap. Occurrences are
numbered across the whole block, which allows highlighting e.g. only the 2nd
and 4th occurrence of a word with an occurrence filter.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from prettycode.dom import Element, Node, Text, to_string, slice_node
from prettycode.util import debug

# Permanent marker on wrapped nodes; their text is never searched again
WRAPPER = "data-pretty-code-wrapper"
# Properties added to every highlighted occurrence
HIGHLIGHTED = "data-highlighted-chars"
CHARS_ID = "data-chars-id"

@dataclass(frozen=True)
class WordSpec:
    pattern: str
    # 1-based occurrence numbers to highlight; empty means all of them
    occurrences: frozenset[int] = frozenset()
    id: str | None = None

    def __post_init__(self):
        if not self.pattern:
            raise ValueError("word pattern must not be empty")
        object.__setattr__(self, "occurrences", frozenset(self.occurrences))

class OccurrenceContext:
    """Occurrence counters for one highlighted tree, keyed by pattern and
       position in the word list. Shared by all lines of the tree; a new tree
       needs a new context."""

    def __init__(self):
        self._counters: dict[tuple[str, int], int] = dict()

    def advance(self, key: tuple[str, int]) -> int:
        self._counters[key] = self._counters.get(key, 0) + 1
        return self._counters[key]

Hook = Callable[..., Any]

@dataclass
class Callbacks:
    on_visit_line: Hook | None = None
    on_visit_highlighted_line: Hook | None = None
    # Called with the wrapped node and the word's id (or None)
    on_visit_highlighted_word: Hook | None = None

@dataclass
class MatchedNode:
    node: Node
    # Position of the node in the children of the line
    index: int

def is_wrapper(node: Node) -> bool:
    return isinstance(node, Element) and WRAPPER in node.properties

def flatten(line: Element) -> tuple[str, list[bool]]:
    """Returns the text of the line along with a per-character flag telling
       whether the character is still available, ie. not inside a wrapper."""
    text: list[str] = []
    available: list[bool] = []

    def aux(node, wrapped):
        wrapped = wrapped or is_wrapper(node)
        if isinstance(node, Text):
            text.append(node.value)
            available.extend([not wrapped] * len(node.value))
        else:
            for child in node.children:
                aux(child, wrapped)

    for child in line.children:
        aux(child, False)
    return "".join(text), available

def find_matches(text: str, available: list[bool], pattern: str) \
        -> list[tuple[int, int]]:
    """Leftmost-first, non-overlapping matches of `pattern` that lie entirely
       within available text."""
    matches = []
    position = 0
    while True:
        start = text.find(pattern, position)
        if start < 0:
            break
        end = start + len(pattern)
        if all(available[start:end]):
            matches.append((start, end))
            position = end
        else:
            position = start + 1
    return matches

def resolve_match(line: Element, start: int, end: int) -> list[MatchedNode]:
    """Finds the children of the line covering [start, end) of its text,
       splitting the children at both ends of the range if they stick out. The
       split pieces replace the original child in the line. Returns the
       covering pieces in order, or an empty list if there are none."""
    new_children: list[Node] = []
    matched: list[MatchedNode] = []
    position = 0

    for child in line.children:
        length = len(to_string(child))
        child_start = position
        position += length

        if length == 0:
            covered = start < child_start < end
        else:
            covered = child_start < end and child_start + length > start
        if not covered:
            new_children.append(child)
            continue

        prefix, middle, suffix = slice_node(child, start - child_start,
                                            end - child_start)
        if prefix is not None:
            new_children.append(prefix)
        if middle is not None:
            matched.append(MatchedNode(middle, len(new_children)))
            new_children.append(middle)
        if suffix is not None:
            new_children.append(suffix)

    if matched:
        line.children[:] = new_children
    return matched

def wrap_match(line: Element, matched: list[MatchedNode], word: WordSpec,
               callbacks: Callbacks) -> Element:
    """Marks a match as highlighted. A match made of a single element is
       marked in place; otherwise the matched nodes are moved to a new span
       that takes their place in the line."""
    first = matched[0]
    if len(matched) == 1 and isinstance(first.node, Element):
        target = first.node
    else:
        target = Element("span", children=[m.node for m in matched])
        line.children[first.index:first.index + len(matched)] = [target]

    target.properties[HIGHLIGHTED] = ""
    target.properties[WRAPPER] = ""
    if word.id is not None:
        target.properties[CHARS_ID] = word.id

    if callbacks.on_visit_highlighted_word is not None:
        callbacks.on_visit_highlighted_word(target, word.id)
    return target

def highlight_word(line: Element, word: WordSpec, index: int,
                   context: OccurrenceContext, callbacks: Callbacks) -> None:
    text, available = flatten(line)
    if word.pattern not in text:
        return

    # Wrapping never changes the text of the line, only its structure, so the
    # offsets computed here stay valid for the whole loop.
    key = (word.pattern, index)
    for start, end in find_matches(text, available, word.pattern):
        occurrence = context.advance(key)
        if word.occurrences and occurrence not in word.occurrences:
            continue

        matched = resolve_match(line, start, end)
        if not matched:
            debug(f"no nodes cover {word.pattern!r} at [{start}:{end}] in "
                  f"{text!r}, giving up on this word")
            return
        wrap_match(line, matched, word, callbacks)

def highlight_words(line: Element, words: list[WordSpec],
                    context: OccurrenceContext,
                    callbacks: Callbacks | None = None) -> None:
    """Highlights every word of the list in the line, in list order."""
    if callbacks is None:
        callbacks = Callbacks()
    for index, word in enumerate(words):
        highlight_word(line, word, index, context, callbacks)
