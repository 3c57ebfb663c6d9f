"""
ext_code: An extension for triple-backtick code blocks.

Similar to the official extension, with a few differences.
- Fences are found by scanning the source lines one at a time, so an opening
  fence is closed by the first line made of exactly the same backticks.
- Highlights with inline styles in one or more themes, and supports line and
  word highlights in the fence line, e.g. ```c {2} /buf/ showLineNumbers. See
  prettycode.meta for the syntax.

Options (the `conf` dictionary):
- theme: Pygments style name, or dictionary of mode -> style name.
- keep_background: whether to keep the theme's background on <pre>.
- callbacks: a prettycode.words.Callbacks to run on lines and words; defaults
  to prettycode.lines.default_callbacks().
- filter_meta: function applied to the meta string before parsing.
"""

from markdown.preprocessors import Preprocessor
from markdown.extensions import Extension
import re

from prettycode.dom import to_html
from prettycode.fragment import highlight_block
from prettycode.highlighter import get_highlighters

class FencedCodeExtension(Extension):
    def __init__(self, conf, **kwargs):
        self.conf = conf
        super().__init__(**kwargs)

    def extendMarkdown(self, md):
        md.registerExtension(self)
        md.preprocessors.register(FencedBlockPreprocessor(md, self.conf), 'fenced_code_block', 25)

class FencedBlockPreprocessor(Preprocessor):
    RE_FENCE = re.compile(r'(`{3,})[ ]*([\w#.+-]*)[ ]*([^\n]*)')

    def __init__(self, md, conf):
        super().__init__(md)
        self.highlighters = get_highlighters(conf.get("theme"))
        self.keep_background = conf.get("keep_background", False)
        self.callbacks = conf.get("callbacks")
        self.filter_meta = conf.get("filter_meta") or (lambda meta: meta)

    def match_fence(self, lines, index):
        m = self.RE_FENCE.fullmatch(lines[index])
        start_index = index
        if not m:
            return index+1, (None, None, None)
        index += 1
        while index < len(lines) and lines[index] != m[1]:
            index += 1
        code = "\n".join(lines[start_index+1:index])
        return index+1, (m[2], m[3], code)

    def run(self, lines):
        out_lines = []
        index = 0

        while index < len(lines):
            # Is there a fenced block at the current line?
            next_index, (lang, meta, code) = self.match_fence(lines, index)
            if code is None:
                out_lines.append(lines[index])
                index += 1
                continue

            fragment = highlight_block(code, lang,
                self.filter_meta(meta.strip()),
                self.highlighters,
                callbacks=self.callbacks,
                keep_background=self.keep_background)

            # Blank lines keep the placeholder out of surrounding paragraphs
            out_lines.extend(["", self.md.htmlStash.store(to_html(fragment)), ""])
            index = next_index

        return out_lines
