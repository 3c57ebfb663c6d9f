#==============================================================================#
#     .;.      silent-tower prettycode                                         #
#    [ |*]     Syntax-highlighted code blocks with line and word highlights.   #
#  .-=\|/=-.   License: MIT <https://mit-license.org/>                         #
#==============================================================================#
"""
highlighter: Syntax highlighting with Pygments into a dom tree.

The output has the same shape regardless of the language:

    <pre style="background-color: ...">
      <code>
        <span class="line"><span style="color: ...">def</span>...</span>
        <span class="line">...</span>
      </code>
    </pre>

with lines separated by newline text nodes. Styles are inlined from the
Pygments style instead of using CSS classes, so that blocks highlighted with
different themes can be put side by side on the same page.
"""

from __future__ import annotations

from typing import Any

from pygments.lexers import get_lexer_by_name
from pygments.styles import get_style_by_name
from pygments.token import Token, string_to_tokentype
from pygments.util import ClassNotFound

from prettycode.dom import Element, Text
from prettycode.util import warn

class ThemeError(Exception):
    pass

class Highlighter:
    def __init__(self, style_name: str):
        try:
            self.style = get_style_by_name(style_name)
        except ClassNotFound as e:
            raise ThemeError(f"unknown Pygments style '{style_name}'") from e
        self.style_name = style_name
        self._css: dict[Any, str] = dict()

    def __repr__(self):
        return f"<Highlighter '{self.style_name}'>"

    def _lexer(self, lang: str | None):
        # stripnl would remove leading empty lines and shift line numbers
        if not lang:
            return get_lexer_by_name("text", stripnl=False)
        try:
            return get_lexer_by_name(lang, stripnl=False)
        except ClassNotFound:
            warn(f"unknown language '{lang}', highlighting as plain text")
            return get_lexer_by_name("text", stripnl=False)

    def _style_for_token(self, ttype) -> dict[str, Any]:
        while ttype is not None and not self.style.styles_token(ttype):
            ttype = ttype.parent
        return self.style.style_for_token(ttype or Token)

    def token_css(self, ttype) -> str:
        if ttype in self._css:
            return self._css[ttype]
        s = self._style_for_token(ttype)
        decls = []
        if s["color"]:
            decls.append(f"color: #{s['color']}")
        if s["bgcolor"]:
            decls.append(f"background-color: #{s['bgcolor']}")
        if s["bold"]:
            decls.append("font-weight: bold")
        if s["italic"]:
            decls.append("font-style: italic")
        if s["underline"]:
            decls.append("text-decoration: underline")
        self._css[ttype] = "; ".join(decls)
        return self._css[ttype]

    def pre_css(self) -> str:
        css = f"background-color: {self.style.background_color}"
        color = self._style_for_token(Token.Text)["color"]
        if color:
            css += f"; color: #{color}"
        return css

    def tokenize_lines(self, code: str, lang: str | None) \
            -> list[list[tuple[str, str]]]:
        """Returns, for each line of the code, the list of (css, text) runs
           that compose it. Adjacent tokens with the same style are merged."""
        lines: list[list[tuple[str, str]]] = [[]]
        for ttype, value in self._lexer(lang).get_tokens(code):
            css = self.token_css(ttype)
            for i, part in enumerate(value.split("\n")):
                if i > 0:
                    lines.append([])
                if not part:
                    continue
                line = lines[-1]
                if line and line[-1][0] == css:
                    line[-1] = (css, line[-1][1] + part)
                else:
                    line.append((css, part))

        # The lexer always ends the input with a newline
        return lines[:code.count("\n") + 1]

    def highlight(self, code: str, lang: str | None) -> Element:
        code_el = Element("code")
        for i, runs in enumerate(self.tokenize_lines(code, lang)):
            if i > 0:
                code_el.append(Text("\n"))
            line = code_el.append(Element("span", {"class": "line"}))
            for css, text in runs:
                props = {"style": css} if css else {}
                line.append(Element("span", props, [Text(text)]))
        return Element("pre", {"style": self.pre_css()}, [code_el])

    def token_color(self, name: str, tokens_map: dict[str, str]) -> str:
        """Color of a token type named like "keyword" or "name.function",
           possibly through an alias of `tokens_map`."""
        name = tokens_map.get(name, name)
        try:
            ttype = string_to_tokentype(
                ".".join(part.capitalize() for part in name.split(".")))
        except AttributeError:
            return "inherit"
        color = self._style_for_token(ttype)["color"]
        return f"#{color}" if color else "inherit"

# Highlighters are shared by all documents and extensions using the same
# style. They are only written to before a block starts being processed.
_highlighter_cache: dict[str, Highlighter] = dict()

def get_highlighter(style_name: str) -> Highlighter:
    if style_name not in _highlighter_cache:
        _highlighter_cache[style_name] = Highlighter(style_name)
    return _highlighter_cache[style_name]

def get_highlighters(theme: str | dict[str, str] | None) \
        -> dict[str, Highlighter]:
    """Returns one highlighter per theme mode. A single style name gives a
       single mode called "default"."""
    if theme is None or isinstance(theme, str):
        return {"default": get_highlighter(theme or "default")}
    if not theme:
        raise ThemeError("theme mapping has no modes")
    return {mode: get_highlighter(name) for mode, name in theme.items()}
