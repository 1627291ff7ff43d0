from __future__ import annotations

"""Command line entry point for minigrep."""

import argparse
import sys
from typing import Mapping, Sequence

from loguru import logger
from rich.markup import escape

from .config import build_config
from .errors import ConfigError, FileReadError, SettingsError
from .logging_setup import LOG_LEVELS, setup_logger
from .output import console, report_error
from .runner import run
from .settings import default_settings_path, load_settings, write_default_settings

PROG = "minigrep"

_VALUE_OPTIONS = ("-c", "--config", "--log-level")
_OPTIONAL_VALUE_OPTIONS = ("--init-config",)
_FLAG_OPTIONS = ("-h", "--help")


def main(argv: Sequence[str] | None = None, environ: Mapping[str, str] | None = None) -> int:
    parser = _create_parser()
    option_args, terms = _split_options(list(argv) if argv is not None else sys.argv[1:])
    args = parser.parse_args(option_args)

    if args.init_config is not None:
        target = args.init_config or default_settings_path()
        try:
            path = write_default_settings(target)
        except OSError as error:
            report_error("Cannot write settings", error)
            return 1
        console.print(f"[green]默认配置已写入[/green] {escape(str(path))}", soft_wrap=True)
        return 0

    try:
        settings = load_settings(args.config, environ)
    except SettingsError as error:
        report_error("Invalid settings", error)
        return 1

    try:
        setup_logger(level=args.log_level or settings.log_level, log_file=settings.log_file)
    except OSError as error:
        report_error("Cannot open log file", error)
        return 1

    try:
        config = build_config([PROG, *terms], environ)
    except ConfigError as error:
        logger.debug(f"参数解析失败: {error!r}")
        report_error("Problem parsing arguments", error)
        return 1

    logger.debug(f"配置: {config}")

    try:
        run(config, encoding=settings.encoding)
    except FileReadError as error:
        logger.debug(f"读取失败: {error.cause!r}")
        report_error("Application error", error)
        return 1
    return 0


def _split_options(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split leading options from the search terms.

    Option parsing stops at ``--`` or at the first token that is not one of
    our options, so a query such as ``-x`` is searched for as-is.
    """
    options: list[str] = []
    i = 0
    while i < len(argv):
        token = argv[i]
        if token == "--":
            return options, list(argv[i + 1:])
        name, has_value = token.split("=", 1)[0], "=" in token
        if name in _VALUE_OPTIONS:
            take = 1 if has_value else 2
        elif name in _OPTIONAL_VALUE_OPTIONS:
            follows = i + 1 < len(argv) and not argv[i + 1].startswith("-")
            take = 2 if follows and not has_value else 1
        elif token in _FLAG_OPTIONS:
            take = 1
        else:
            break
        options.extend(argv[i:i + take])
        i += take
    return options, list(argv[i:])


def _create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        usage="%(prog)s [options] [--] QUERY FILE_PATH [ARG ...]",
        description="Print every line of a file that contains QUERY. "
        "Set IGNORE_CASE to any value for case-insensitive matching. "
        "Options must come before QUERY; extra positional arguments are ignored.",
        allow_abbrev=False,
    )
    parser.add_argument("--config", "-c", help="配置文件路径 (toml)")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="日志级别 (默认取配置文件，否则 WARNING)",
    )
    parser.add_argument(
        "--init-config",
        nargs="?",
        const="",
        help="生成默认配置文件，可指定输出路径 (默认: ~/.config/minigrep/config.toml)",
    )
    return parser


if __name__ == "__main__":
    try:
        raise SystemExit(main())
    except KeyboardInterrupt:
        console.print("\n[yellow]用户中断[/yellow]")
        raise SystemExit(130)
