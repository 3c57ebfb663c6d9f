#==============================================================================#
#     .;.      silent-tower prettycode                                         #
#    [ |*]     Syntax-highlighted code blocks with line and word highlights.   #
#  .-=\|/=-.   License: MIT <https://mit-license.org/>                         #
#==============================================================================#
"""
Syntax-highlighted code blocks for Python-Markdown, with line highlights and
word highlights that can span any number of tokens.
"""

from prettycode.lines import annotate
from prettycode.words import (Callbacks, OccurrenceContext, WordSpec,
                              highlight_words)
