#==============================================================================#
#     .;.      silent-tower prettycode                                         #
#    [ |*]     Syntax-highlighted code blocks with line and word highlights.   #
#  .-=\|/=-.   License: MIT <https://mit-license.org/>                         #
#==============================================================================#
"""
Utility functions independent of any application logic.
"""

import sys

# Set to True to trace the word highlighter (see prettycode.words)
DEBUG = False

def warn(*args, **kwargs):
    print("\x1b[33mwarning:\x1b[0m ", end="", file=sys.stderr)
    print(*args, **kwargs, file=sys.stderr)

def err(*args, **kwargs):
    print("\x1b[31merror:\x1b[0m ", end="", file=sys.stderr)
    print(*args, **kwargs, file=sys.stderr)

def debug(*args, **kwargs):
    if DEBUG:
        print(style("[debug] ", "D"), end="", file=sys.stderr)
        print(*args, **kwargs, file=sys.stderr)

def print_with_guard(s: str, guard: str) -> None:
    lines = s.splitlines()
    print("\n".join(guard + s for s in lines), file=sys.stderr)

def style(s: str, style_spec: str) -> str:
    if not style_spec:
        return s
    styles = {
        "B": "1", "D": "2", "I": "3", "U": "4",
        "k": "30", "r": "31", "g": "32", "y": "33", "b": "34", "m": "35",
        "c": "36",
    }
    before = ""
    for c in style_spec:
        if c in styles:
            before += "\x1b[" + styles[c] + "m"

    return before + s + "\x1b[0m"
