"""
End-to-end tests of the Markdown extensions.
"""

import textwrap

from prettycode.stmarkdown import make_Markdown, page_title
from prettycode.words import Callbacks


def convert(source, conf=None):
    return make_Markdown(conf).convert(textwrap.dedent(source))


class TestFencedCode:
    def test_block_is_highlighted(self):
        html = convert("""\
            Some text.

            ```python
            def f():
                return 1
            ```
            """)
        assert "<p>Some text.</p>" in html
        assert "data-pretty-code-fragment" in html
        assert 'class="line"' in html
        assert 'data-language="python"' in html
        assert "```" not in html

    def test_word_and_line_highlights(self):
        html = convert("""\
            ```js {1} /count/#c
            let count = 0
            count++
            ```
            """)
        assert html.count("data-highlighted-chars") == 2
        assert html.count('data-chars-id="c"') == 2
        assert html.count("data-highlighted-line") == 1

    def test_title_and_caption(self):
        html = convert("""\
            ```text title="notes.txt" caption="Some notes"
            hello
            ```
            """)
        assert "data-pretty-code-title" in html
        assert ">notes.txt</div>" in html
        assert ">Some notes</div>" in html

    def test_code_is_escaped(self):
        html = convert("""\
            ```html
            <b>&</b>
            ```
            """)
        assert "<b>" not in html
        assert "&lt;" in html

    def test_block_right_after_paragraph(self):
        html = convert("""\
            Look:
            ```text
            x
            ```
            """)
        assert "<p>Look:</p>" in html
        assert "<p><div" not in html

    def test_theme_modes(self):
        html = convert("""\
            ```text
            x
            ```
            """, {"theme": {"light": "default", "dark": "monokai"}})
        assert 'data-theme="light"' in html
        assert 'data-theme="dark"' in html

    def test_custom_callbacks(self):
        words = []
        callbacks = Callbacks(on_visit_highlighted_word=lambda node, id: words.append(id))
        convert("""\
            ```text /a/#x
            a a
            ```
            """, {"callbacks": callbacks})
        assert words == ["x", "x"]

    def test_filter_meta(self):
        html = convert("""\
            ```text [[x]]
            x
            ```
            """, {"filter_meta": lambda meta: meta.replace("[[", "/").replace("]]", "/")})
        assert "data-highlighted-chars" in html

    def test_shorter_fence_inside_longer_fence(self):
        html = convert("""\
            ````text
            ```python
            x
            ```
            ````

            after
            """)
        assert html.count("data-pretty-code-fragment") == 1
        assert "```python" in html
        assert "<p>after</p>" in html

    def test_unterminated_fence(self):
        html = convert("""\
            ```text
            x
            """)
        assert "data-pretty-code-fragment" in html


class TestInlineCode:
    def test_language_suffix(self):
        html = convert("Call `len(x){:python}` here.\n")
        assert "data-pretty-code-fragment" in html
        assert "{:python}" not in html
        assert html.endswith(" here.</p>")

    def test_token_suffix(self):
        html = convert("The `count{:.keyword}` variable.\n", {"theme": "monokai"})
        assert 'style="color: #' in html
        assert ">count</span>" in html

    def test_plain_inline_code(self):
        html = convert("Just `code` here.\n")
        assert "<code>code</code>" in html
        assert "data-pretty-code-fragment" not in html

    def test_escaped_inline_code(self):
        html = convert("`a < b{:python}`\n")
        assert "&lt;" in html
        assert "{:python}" not in html


class TestPageTitle:
    def test_title_from_metadata(self):
        md = make_Markdown()
        md.convert("title: Hello\n\nText\n")
        assert page_title(md) == "Hello"

    def test_default_title(self):
        md = make_Markdown()
        md.convert("Text\n")
        assert page_title(md, "Default") == "Default"
