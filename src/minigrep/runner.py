from __future__ import annotations

from pathlib import Path
from typing import TextIO

from loguru import logger

from .config import SearchConfig
from .errors import FileReadError
from .matcher import search
from .output import write_matches


def read_contents(path: str | Path, encoding: str | None = None) -> str:
    """Read the whole file as text (universal newlines).

    ``encoding=None`` uses the platform default encoding.
    """
    try:
        with open(path, "r", encoding=encoding) as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as error:
        raise FileReadError(path, error) from error


def run(config: SearchConfig, encoding: str | None = None, out: TextIO | None = None) -> list[str]:
    logger.debug(
        f"搜索 {config.query!r} in {config.file_path} (case_insensitive={config.case_insensitive})"
    )
    contents = read_contents(config.file_path, encoding)
    logger.debug(f"读取 {len(contents)} 个字符")

    matches = search(config.query, contents, config.case_insensitive)
    logger.debug(f"匹配 {len(matches)} 行")

    # 全部读完并搜索后才输出，失败时不会留下部分结果
    write_matches(matches, out)
    return matches
