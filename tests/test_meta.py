"""
Tests for fence meta string parsing.
"""

from prettycode.meta import (CodeMeta, parse_inline, parse_meta,
                             parse_numeric_range)
from prettycode.words import WordSpec


class TestParseNumericRange:
    def test_single_numbers(self):
        assert parse_numeric_range("1,3,7") == [1, 3, 7]

    def test_inclusive_ranges(self):
        assert parse_numeric_range("1-3") == [1, 2, 3]
        assert parse_numeric_range("2..4") == [2, 3, 4]

    def test_exclusive_range(self):
        assert parse_numeric_range("1...4") == [1, 2, 3]

    def test_reverse_range(self):
        assert parse_numeric_range("5-3") == [5, 4, 3]

    def test_mixed_with_spaces(self):
        assert parse_numeric_range(" 1, 3-5 ,8") == [1, 3, 4, 5, 8]

    def test_empty(self):
        assert parse_numeric_range("") == []

    def test_invalid_items_are_skipped(self, capsys):
        assert parse_numeric_range("1,x,3") == [1, 3]
        assert "invalid range item 'x'" in capsys.readouterr().err


class TestParseMeta:
    def test_empty(self):
        assert parse_meta("") == CodeMeta()

    def test_title_and_caption(self):
        meta = parse_meta('title="app.py" caption="The main file"')
        assert meta.title == "app.py"
        assert meta.caption == "The main file"

    def test_line_ranges(self):
        assert parse_meta("{1,3-4}").lines == {1, 3, 4}
        assert parse_meta('title="x" {2}').lines == {2}

    def test_words(self):
        meta = parse_meta("/foo/ /bar/2-3 /baz/#id /qux/1#v")
        assert meta.words == [
            WordSpec("foo"),
            WordSpec("bar", frozenset({2, 3})),
            WordSpec("baz", id="id"),
            WordSpec("qux", frozenset({1}), "v"),
        ]

    def test_word_with_spaces(self):
        assert parse_meta("/a b/").words == [WordSpec("a b")]

    def test_empty_word_is_ignored(self, capsys):
        assert parse_meta("// /x/").words == [WordSpec("x")]
        assert "empty word pattern" in capsys.readouterr().err

    def test_braces_inside_words_are_not_line_ranges(self):
        meta = parse_meta("/{1}/")
        assert meta.lines == set()
        assert meta.words == [WordSpec("{1}")]

    def test_show_line_numbers(self):
        meta = parse_meta("showLineNumbers")
        assert meta.show_line_numbers
        assert meta.line_numbers_start == 1

    def test_show_line_numbers_with_start(self):
        meta = parse_meta("{2} showLineNumbers{10}")
        assert meta.show_line_numbers
        assert meta.line_numbers_start == 10
        assert meta.lines == {2}

    def test_show_line_numbers_inside_word(self):
        meta = parse_meta("/showLineNumbers/")
        assert not meta.show_line_numbers
        assert meta.words == [WordSpec("showLineNumbers")]

    def test_slashes_in_title(self):
        meta = parse_meta('title="src/app/main.py" /x/')
        assert meta.title == "src/app/main.py"
        assert meta.words == [WordSpec("x")]

    def test_everything(self):
        meta = parse_meta('title="t" {1} /count/2#c caption="c" showLineNumbers{3}')
        assert meta.title == "t"
        assert meta.caption == "c"
        assert meta.lines == {1}
        assert meta.words == [WordSpec("count", frozenset({2}), "c")]
        assert meta.line_numbers_start == 3


class TestParseInline:
    def test_language_suffix(self):
        assert parse_inline("print(1){:python}") == ("print(1)", "python")

    def test_token_suffix(self):
        assert parse_inline("count{:.name.variable}") == ("count", ".name.variable")

    def test_no_suffix(self):
        assert parse_inline("plain code") == ("plain code", None)

    def test_suffix_must_be_at_end(self):
        assert parse_inline("a{:py} b") == ("a{:py} b", None)
