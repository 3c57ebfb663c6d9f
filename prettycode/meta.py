#==============================================================================#
#     .;.      silent-tower prettycode                                         #
#    [ |*]     Syntax-highlighted code blocks with line and word highlights.   #
#  .-=\|/=-.   License: MIT <https://mit-license.org/>                         #
#==============================================================================#
"""
meta: Parsing the options written after the language of a code fence.

    ```py title="example.py" caption="Fig. 1" {1,3-4} /count/2-3#c showLineNumbers
    ...
    ```

- `title="..."` and `caption="..."` are displayed above and below the block.
- `{1,3-4}` highlights lines 1, 3 and 4.
- `/word/` highlights every occurrence of "word". It can be followed by a range
  of occurrences to highlight (counted in the whole block), an id that is
  attached to the highlighted nodes, or both: `/word/1,3`, `/word/#id`,
  `/word/1-2#id`.
- `showLineNumbers` enables line numbers; `showLineNumbers{10}` starts them at
  10.

Inline code can be highlighted by ending it with `{:lang}`, or colored like a
token of the theme with `{:.token}`, for instance `` `print(x){:py}` ``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import re

from prettycode.util import warn
from prettycode.words import WordSpec

RE_TITLE = re.compile(r'title="([^"]*)"')
RE_CAPTION = re.compile(r'caption="([^"]*)"')
RE_WORD = re.compile(r'/(.*?)/(\S*)')
RE_LINES = re.compile(r'(?:^|\s)\{(.*?)\}')
RE_LINE_NUMBERS = re.compile(r'(?:^|\s)showLineNumbers(?:\{(\d+)\})?(?=\s|$)')
RE_INLINE = re.compile(r'\{:([a-zA-Z.-]+)\}$')
RE_RANGE = re.compile(r'(-?\d+)\s*(\.\.\.|\.\.|-)\s*(-?\d+)')

@dataclass
class CodeMeta:
    title: str | None = None
    caption: str | None = None
    lines: set[int] = field(default_factory=set)
    words: list[WordSpec] = field(default_factory=list)
    show_line_numbers: bool = False
    line_numbers_start: int = 1

def parse_numeric_range(text: str) -> list[int]:
    """Parses "1,3-5" into [1, 3, 4, 5]. Ranges are written N-M or N..M
       (inclusive) or N...M (exclusive) and count down if N > M. Items that
       cannot be parsed are ignored."""
    result: list[int] = []
    for item in text.split(","):
        item = item.strip()
        if not item:
            continue
        try:
            result.append(int(item))
            continue
        except ValueError:
            pass

        m = RE_RANGE.fullmatch(item)
        if m is None:
            warn(f"ignoring invalid range item '{item}'")
            continue
        start, end = int(m[1]), int(m[3])
        step = 1 if end >= start else -1
        if m[2] != "...":
            end += step
        result.extend(range(start, end, step))
    return result

def parse_word(pattern: str, suffix: str) -> WordSpec:
    occurrences, _, id = suffix.partition("#")
    return WordSpec(pattern,
                    frozenset(parse_numeric_range(occurrences)),
                    id or None)

def parse_meta(meta: str) -> CodeMeta:
    result = CodeMeta()

    m = RE_TITLE.search(meta)
    if m is not None:
        result.title = m[1]
        meta = meta.replace(m[0], "", 1)
    m = RE_CAPTION.search(meta)
    if m is not None:
        result.caption = m[1]
        meta = meta.replace(m[0], "", 1)

    # Words go first so that their contents can't be mistaken for other
    # options, eg. /{1}/ or /showLineNumbers/.
    for m in RE_WORD.finditer(meta):
        if not m[1]:
            warn(f"ignoring empty word pattern '{m[0]}'")
            continue
        result.words.append(parse_word(m[1], m[2]))
    meta = RE_WORD.sub(" ", meta)

    m = RE_LINES.search(meta)
    if m is not None:
        result.lines = set(parse_numeric_range(m[1]))

    m = RE_LINE_NUMBERS.search(meta)
    if m is not None:
        result.show_line_numbers = True
        if m[1] is not None:
            result.line_numbers_start = int(m[1])

    return result

def parse_inline(value: str) -> tuple[str, str | None]:
    """Splits inline code into its text and the {:...} suffix, if any."""
    m = RE_INLINE.search(value)
    if m is None:
        return value, None
    return value[:m.start()], m[1]
