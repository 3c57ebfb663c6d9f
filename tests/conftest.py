"""
Pytest fixtures for prettycode tests.
"""

import pytest

from prettycode.dom import Element, Text


@pytest.fixture
def make_line():
    """Build a line element from (text, style) tokens, one span per token,
    the way the highlighter does."""
    def make(*tokens):
        line = Element("span", {"class": "line"})
        for text, style in tokens:
            line.append(Element("span", {"style": style}, [Text(text)]))
        return line
    return make


@pytest.fixture
def make_block(make_line):
    """Build a pre > code tree holding the given lines."""
    def make(*lines):
        code = Element("code")
        for i, tokens in enumerate(lines):
            if i > 0:
                code.append(Text("\n"))
            code.append(make_line(*tokens))
        return Element("pre", {}, [code])
    return make


@pytest.fixture
def recorder():
    """Callback recorder: returns (calls, hook) where hook appends its
    arguments to calls."""
    def make():
        calls = []
        def hook(*args):
            calls.append(args)
        return calls, hook
    return make
