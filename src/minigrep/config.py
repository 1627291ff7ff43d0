from __future__ import annotations

"""Turn raw command-line arguments into a :class:`SearchConfig`."""

import os
from dataclasses import dataclass
from typing import Mapping, Sequence

from .errors import MissingArgument

__all__ = [
    "IGNORE_CASE_ENV",
    "SearchConfig",
    "resolve",
    "ignore_case_from_env",
    "build_config",
]

IGNORE_CASE_ENV = "IGNORE_CASE"


@dataclass(frozen=True, slots=True)
class SearchConfig:
    query: str
    file_path: str
    case_insensitive: bool = False


def resolve(args: Sequence[str], case_insensitive_flag_present: bool) -> SearchConfig:
    """Build a configuration from ``args`` as found in ``sys.argv``.

    ``args[0]`` is the program name. The query and the file path follow it;
    anything after those two is ignored.

    Raises:
        MissingArgument: when the query or the file path is absent.
    """

    positional = iter(args)
    next(positional, None)  # program name

    query = next(positional, None)
    if query is None:
        raise MissingArgument("query", "Didn't get a query string")

    file_path = next(positional, None)
    if file_path is None:
        raise MissingArgument("file_path", "Didn't get a file path")

    return SearchConfig(
        query=query,
        file_path=file_path,
        case_insensitive=case_insensitive_flag_present,
    )


def ignore_case_from_env(environ: Mapping[str, str] | None = None) -> bool:
    # 只看变量是否存在，不解析取值：IGNORE_CASE=0 同样开启忽略大小写
    env = os.environ if environ is None else environ
    return IGNORE_CASE_ENV in env


def build_config(args: Sequence[str], environ: Mapping[str, str] | None = None) -> SearchConfig:
    return resolve(args, ignore_case_from_env(environ))
