#==============================================================================#
#     .;.      silent-tower prettycode                                         #
#    [ |*]     Syntax-highlighted code blocks with line and word highlights.   #
#  .-=\|/=-.   License: MIT <https://mit-license.org/>                         #
#==============================================================================#
"""
fragment: Putting highlighted code blocks together.

A code block is highlighted once per theme mode (eg. "light" and "dark"), and
all variants are emitted next to each other inside a fragment element, tagged
with `data-theme` so that a stylesheet can show only one of them:

    <div data-pretty-code-fragment="">
      <div data-pretty-code-title="" data-theme="light">title</div>
      <pre data-theme="light"><code data-theme="light">...</code></pre>
      <div data-pretty-code-caption="" data-theme="light">caption</div>
      <div data-pretty-code-title="" data-theme="dark">title</div>
      ...
    </div>
"""

from __future__ import annotations

from prettycode.dom import Element, Text, walk
from prettycode.highlighter import Highlighter
from prettycode.lines import annotate, default_callbacks, iter_lines
from prettycode.meta import CodeMeta, parse_inline, parse_meta
from prettycode.words import Callbacks

FRAGMENT = "data-pretty-code-fragment"
TITLE = "data-pretty-code-title"
CAPTION = "data-pretty-code-caption"

def _code_of(pre: Element) -> Element | None:
    return next((el for el, _, _ in walk(pre) if el.tag == "code"), None)

def _label(kind: str, text: str, lang: str, mode: str) -> Element:
    props = {kind: "", "data-language": lang, "data-theme": mode}
    return Element("div", props, [Text(text)])

def to_fragment(trees: dict[str, Element], lang: str,
                title: str | None = None, caption: str | None = None,
                inline: bool = False, keep_background: bool = False,
                line_numbers_max_digits: int = 1) -> Element:
    """Assembles the highlighted <pre> trees of every theme mode into a single
       fragment. Inline fragments keep only the <code> elements."""
    children: list = []

    for mode, pre in trees.items():
        code = _code_of(pre)
        if code is None:
            continue
        background = pre.properties.get("style")
        pre.properties.pop("class", None)
        if not keep_background:
            pre.properties = dict()
        pre.properties["data-language"] = lang
        pre.properties["data-theme"] = mode
        code.properties["data-language"] = lang
        code.properties["data-theme"] = mode

        if inline:
            if keep_background and background:
                code.properties["style"] = background
            children.append(code)
            continue

        if "data-line-numbers" in code.properties:
            code.properties["data-line-numbers-max-digits"] = \
                str(len(str(line_numbers_max_digits)))

        if title:
            children.append(_label(TITLE, title, lang, mode))
        children.append(pre)
        if caption:
            children.append(_label(CAPTION, caption, lang, mode))

    return Element("span" if inline else "div", {FRAGMENT: ""}, children)

def highlight_block(code: str, lang: str | None, meta: str | CodeMeta,
                    highlighters: dict[str, Highlighter],
                    callbacks: Callbacks | None = None,
                    keep_background: bool = False) -> Element:
    """Highlights a fenced code block with every highlighter, applies line and
       word highlights from the meta string, and returns the fragment."""
    if isinstance(meta, str):
        meta = parse_meta(meta)
    if callbacks is None:
        callbacks = default_callbacks()
    lang = lang or "text"
    code = code[:-1] if code.endswith("\n") else code

    trees: dict[str, Element] = dict()
    last_line = 1
    for mode, highlighter in highlighters.items():
        pre = highlighter.highlight(code, lang)
        code_el = _code_of(pre)
        if code_el is not None and meta.show_line_numbers:
            code_el.properties["data-line-numbers"] = ""
            if meta.line_numbers_start != 1:
                code_el.properties["style"] = \
                    f"counter-set: line {meta.line_numbers_start - 1};"

        line_count = sum(1 for _ in iter_lines(pre))
        last_line = meta.line_numbers_start - 1 + line_count
        annotate(pre, meta.lines, meta.words, callbacks)
        trees[mode] = pre

    return to_fragment(trees, lang, meta.title, meta.caption,
                       keep_background=keep_background,
                       line_numbers_max_digits=last_line)

def highlight_inline(value: str, highlighters: dict[str, Highlighter],
                     tokens_map: dict[str, str] | None = None,
                     keep_background: bool = False) -> Element | None:
    """Highlights inline code ending with {:lang} or {:.token}. Returns None
       if there is no such suffix."""
    code, meta = parse_inline(value)
    if meta is None:
        return None
    tokens_map = tokens_map or dict()
    is_lang = not meta.startswith(".")

    trees: dict[str, Element] = dict()
    for mode, highlighter in highlighters.items():
        if is_lang:
            trees[mode] = highlighter.highlight(code, meta)
        else:
            color = highlighter.token_color(meta[1:], tokens_map)
            span = Element("span", {"style": f"color: {color}"}, [Text(code)])
            trees[mode] = Element("pre", {}, [Element("code", {}, [span])])

    return to_fragment(trees, meta if is_lang else ".token", inline=True,
                       keep_background=keep_background)
