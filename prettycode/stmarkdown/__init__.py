from markdown import Markdown
from typing import Any

from .ext_code import FencedCodeExtension
from .ext_inline import InlineCodeExtension

_md_ext_std = [
  'tables', 'sane_lists', 'meta', 'attr_list', 'def_list', 'md_in_html',
]

def make_Markdown(conf: dict[str, Any] | None = None):
    """Builds a Markdown instance with code highlighting. See ext_code and
       ext_inline for the options in `conf`."""
    conf = conf or dict()
    return Markdown(extensions=[
        *_md_ext_std,
        FencedCodeExtension(conf),
        InlineCodeExtension(conf),
    ])

def page_title(md, default: str = "") -> str:
    """Title from the `title:` metadata of the last converted document."""
    title = getattr(md, "Meta", dict()).get("title", [])
    return title[0] if len(title) == 1 else default
