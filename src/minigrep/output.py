from __future__ import annotations
import sys
from typing import Iterable, TextIO

from rich.console import Console
from rich.markup import escape

console = Console(stderr=True)


def write_matches(lines: Iterable[str], stream: TextIO | None = None) -> None:
    # 原样输出，不加行号/文件名前缀
    out = stream if stream is not None else sys.stdout
    for line in lines:
        out.write(line)
        out.write("\n")
    out.flush()


def report_error(prefix: str, error: BaseException) -> None:
    console.print(f"[red]{escape(prefix)}:[/red] {escape(str(error))}", soft_wrap=True)
