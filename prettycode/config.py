#==============================================================================#
#     .;.      silent-tower prettycode                                         #
#    [ |*]     Syntax-highlighted code blocks with line and word highlights.   #
#  .-=\|/=-.   License: MIT <https://mit-license.org/>                         #
#==============================================================================#
"""
Configuration files.

The configuration is a YAML file, usually called `prettycode.conf`:

    theme:                  # a Pygments style name, or one per mode
      light: friendly
      dark: monokai
    keep_background: false  # keep the theme's background color on <pre>
    tokens_map:             # aliases for inline `code{:.token}`
      fn: name.function
    output:
      title: My document    # page title for the command-line tool
      template: _templates  # folder with a page.html to use instead

Any missing key takes its default value.
"""

import os
import yaml
from typing import Any

DEFAULTS: dict[str, Any] = {
    "theme": "default",
    "keep_background": False,
    "tokens_map": {},
    "output": {
        "title": "",
        "template": None,
    },
}

class ConfigError(Exception):
    pass

class Config:
    _data: dict[str, Any]
    _dir: str

    def __init__(self, data: dict[str, Any] | None = None, dirpath: str = "."):
        self._data = data or dict()
        self._dir = dirpath

    def get(self, query: str = "", default: Any = None) -> Any:
        """Queries the config with a dot-path like "key.subkey.field". Missing
           fields take their value from DEFAULTS, or `default` if there is
           none."""
        def lookup(dic: Any, fields: list[str], i: int) -> tuple[bool, Any]:
            if i >= len(fields):
                return (True, dic)
            if not isinstance(dic, dict) or fields[i] not in dic:
                return (False, default)
            return lookup(dic[fields[i]], fields, i+1)
        fields = query.split(".") if query else []
        found, value = lookup(self._data, fields, 0)
        if not found:
            found, value = lookup(DEFAULTS, fields, 0)
        return value if found else default

    def path(self, query: str) -> str | None:
        """Like get(), for paths relative to the configuration file."""
        value = self.get(query)
        if value is None:
            return None
        return os.path.normpath(os.path.join(self._dir, value))

    def extension_conf(self) -> dict[str, Any]:
        """Options for the Markdown extensions."""
        return {
            "theme": self.get("theme"),
            "keep_background": bool(self.get("keep_background")),
            "tokens_map": dict(self.get("tokens_map") or {}),
        }

def load_config(path: str | None = None) -> Config:
    """Loads the config from a YAML file. Without a path the defaults are
       used. Raises ConfigError if the file can't be read or isn't a
       mapping."""
    if path is None:
        return Config()
    try:
        with open(path) as fp:
            data = yaml.safe_load(fp.read())
    except FileNotFoundError as e:
        raise ConfigError(f"{path}: no such config file") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"{path}: invalid YAML\n{e}") from e

    # Empty file
    if data is None:
        data = dict()
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at top level")
    return Config(data, os.path.dirname(path) or ".")
