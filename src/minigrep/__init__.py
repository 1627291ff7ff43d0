"""minigrep - 在单个文本文件中按行查找子串。

Lines containing the query are reported verbatim and in file order.
Set the ``IGNORE_CASE`` environment variable to match case-insensitively.
"""

__version__ = "0.1.0"

__all__ = [
    "SearchConfig",
    "resolve",
    "build_config",
    "search",
    "MinigrepError",
    "ConfigError",
    "MissingArgument",
    "FileReadError",
]

from .config import SearchConfig, resolve, build_config  # noqa: E402
from .errors import ConfigError, FileReadError, MinigrepError, MissingArgument  # noqa: E402
from .matcher import search  # noqa: E402
