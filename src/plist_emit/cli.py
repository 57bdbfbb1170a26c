"""
`plist-emit` 的命令行入口模块。

读取 plist 或 JSON 输入，重新编码为规范化的 XML plist（键排序、Tab 缩进）。
输入中没有 plist 对应类型的值（如 JSON `null`）直接报错，不做 pickle 快照。
"""

import argparse
import os
import sys
from collections.abc import Sequence
from xml.parsers.expat import ExpatError

from .emit import dump, save_plist
from .loaders import FORMATS, load_file, load_input
from .types import PlistEmitError


def _log_step(message: str, *, verbose: bool) -> None:
    """输出简洁的流程阶段提示（仅 `--verbose`，写到 stderr 以免混入 plist 输出）。"""
    if verbose:
        print(f"[plist-emit] {message}", file=sys.stderr)


def _indent_unit(raw: str) -> str:
    """展开 `\\t` 转义，便于在 shell 中传入 Tab。"""
    return raw.replace("\\t", "\t")


def build_parser() -> argparse.ArgumentParser:
    """构建并返回 `plist-emit` 命令行参数解析器。"""
    p = argparse.ArgumentParser(
        prog="plist-emit",
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "Re-encode a plist (XML or binary) or JSON document as an XML plist.\n"
            "Dictionary keys are sorted, nesting is indented and <data> payloads\n"
            "are wrapped at 68 columns."
        ),
    )
    p.add_argument("-i", "--input", default="", help="Input file path (default: stdin)")
    p.add_argument("-o", "--output", default="", help="Output file path (default: stdout)")
    p.add_argument(
        "-f",
        "--format",
        default="auto",
        choices=FORMATS,
        help="Input format (default: auto, by extension or first byte)",
    )
    p.add_argument(
        "--no-envelope",
        action="store_true",
        help="Emit only the plist fragment, without XML header and <plist> root",
    )
    p.add_argument("--indent", default="\t", help="Indent unit per nesting level (default: tab)")
    p.add_argument("--verbose", action="store_true", help="Verbose logging")
    return p


def _read_value(ns: argparse.Namespace) -> object:
    """按参数读取并解析输入，解析失败转为可读的错误提示。"""
    try:
        if ns.input and ns.input != "-":
            path = os.path.abspath(os.path.expanduser(ns.input))
            if not os.path.isfile(path):
                raise SystemExit(f"Error: input not found: {path}")
            _log_step(f"Reading {ns.format} input: {path}", verbose=ns.verbose)
            return load_file(path, fmt=ns.format)
        _log_step(f"Reading {ns.format} input from stdin", verbose=ns.verbose)
        return load_input(sys.stdin.buffer.read(), fmt=ns.format)
    except (ValueError, ExpatError) as e:
        raise SystemExit(f"Error: failed to parse input: {e}") from e


def main(argv: Sequence[str] | None = None) -> int:
    """CLI 入口：解析参数、读取输入并输出 XML plist。"""
    parser = build_parser()
    ns = parser.parse_args(argv)
    verbose = bool(ns.verbose)

    value = _read_value(ns)
    indent = _indent_unit(ns.indent)
    envelope = not ns.no_envelope

    _log_step("Encoding plist" if envelope else "Encoding plist fragment", verbose=verbose)
    try:
        if ns.output and envelope:
            output = os.path.abspath(os.path.expanduser(ns.output))
            save_plist(value, output, indent=indent, snapshot=None)
            _log_step(f"Wrote: {output}", verbose=verbose)
            return 0
        text = dump(value, envelope, indent=indent, snapshot=None)
    except PlistEmitError as e:
        raise SystemExit(f"Error: cannot encode input: {e}") from e

    if ns.output:
        output = os.path.abspath(os.path.expanduser(ns.output))
        with open(output, "wb") as f:
            f.write(text.encode("utf-8"))
        _log_step(f"Wrote: {output}", verbose=verbose)
    else:
        sys.stdout.write(text)
    return 0
