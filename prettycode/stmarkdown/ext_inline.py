"""
ext_inline: Syntax highlighting for inline code.

Inline code ending with `{:lang}` is highlighted in that language, and inline
code ending with `{:.token}` is colored like the named token type, so that
`` `count{:.name.variable}` `` in a paragraph matches the color of `count` in
the code block next to it. Other inline code is left alone.

Takes the same `conf` dictionary as ext_code, plus:
- tokens_map: dictionary of aliases for token names, e.g. { "fn":
  "name.function" }.
"""

from markdown.treeprocessors import Treeprocessor
from markdown.extensions import Extension
import html

from prettycode.dom import to_etree
from prettycode.fragment import highlight_inline
from prettycode.highlighter import get_highlighters

class InlineCodeExtension(Extension):
    def __init__(self, conf, **kwargs):
        self.conf = conf
        super().__init__(**kwargs)

    def extendMarkdown(self, md):
        md.registerExtension(self)
        # After "inline" (20) which creates the <code> elements
        md.treeprocessors.register(InlineCodeTreeprocessor(md, self.conf), 'inline_code', 15)

class InlineCodeTreeprocessor(Treeprocessor):
    def __init__(self, md, conf):
        super().__init__(md)
        self.highlighters = get_highlighters(conf.get("theme"))
        self.keep_background = conf.get("keep_background", False)
        self.tokens_map = conf.get("tokens_map") or dict()

    def run(self, root):
        # Collect first, the tree can't be modified while iterating on it
        candidates = [(parent, i, child)
            for parent in root.iter() if parent.tag != "pre"
            for i, child in enumerate(parent)
            if child.tag == "code" and not len(child) and child.text]

        for parent, i, child in candidates:
            # The backtick pattern has already escaped the code
            value = html.unescape(child.text)
            fragment = highlight_inline(value, self.highlighters,
                self.tokens_map, self.keep_background)
            if fragment is None:
                continue
            el = to_etree(fragment)
            el.tail = child.tail
            parent[i] = el
