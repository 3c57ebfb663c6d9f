#==============================================================================#
#     .;.      silent-tower prettycode                                         #
#    [ |*]     Syntax-highlighted code blocks with line and word highlights.   #
#  .-=\|/=-.   License: MIT <https://mit-license.org/>                         #
#==============================================================================#
"""
Renders a Markdown file with highlighted code blocks into an HTML page.
"""

import os
import sys
import jinja2
import prettycode.stmarkdown
from prettycode.config import load_config, ConfigError
from prettycode.highlighter import ThemeError
from prettycode.util import *

USAGE = """\
prettycode -- Markdown to HTML with highlighted code blocks
usage: prettycode [-c <config>] <input.md> [<output.html>]
"""

TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), "templates")

def usage(exitcode):
    print(USAGE, end="")
    return exitcode

def parse_args(argv):
    """Returns (config path, input path, output path) or None if the command
       line is invalid."""
    args = argv[1:]
    config = None
    if len(args) >= 2 and args[0] == "-c":
        config = args[1]
        args = args[2:]
    if len(args) not in [1, 2] or any(a.startswith("-") for a in args):
        return None
    return config, args[0], (args[1] if len(args) == 2 else None)

def render_page(conf, source):
    md = prettycode.stmarkdown.make_Markdown(conf.extension_conf())
    body = md.convert(source)
    title = prettycode.stmarkdown.page_title(md, conf.get("output.title"))

    # Folders listed first take precedence
    templatePaths = [TEMPLATE_DIR]
    if conf.get("output.template"):
        templatePaths.insert(0, conf.path("output.template"))
    j = jinja2.Environment(
        loader=jinja2.FileSystemLoader(templatePaths),
        autoescape=jinja2.select_autoescape(),
        keep_trailing_newline=True)

    template = j.get_template("page.html")
    return template.render(
        PRETTYCODE_TITLE = title,
        PRETTYCODE_BODY = body)

def main(argv):
    if "-h" in argv or "--help" in argv:
        return usage(0)
    args = parse_args(argv)
    if args is None:
        return usage(1)
    config_path, input_path, output_path = args

    try:
        conf = load_config(config_path)
    except ConfigError as e:
        err("cannot load configuration")
        print_with_guard(str(e), style("| ", "r"))
        return 1

    try:
        with open(input_path, "r") as fp:
            source = fp.read()
    except OSError as e:
        err(f"{input_path}: {e.strerror}")
        return 1

    try:
        html = render_page(conf, source)
    except (ThemeError, jinja2.TemplateError) as e:
        err(str(e))
        return 1

    if output_path is None:
        sys.stdout.write(html)
        return 0
    with open(output_path, "w") as fp:
        fp.write(html)
    print(f"Wrote {output_path}", file=sys.stderr)
    return 0

def entry():
    sys.exit(main(sys.argv))

if __name__ == "__main__":
    entry()
