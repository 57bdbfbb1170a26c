"""
命令行输入读取：plist（XML/Binary 自动识别）或 JSON。
"""

from __future__ import annotations

import json
import plistlib
from typing import Any

FORMATS = ("auto", "plist", "json")


def load_plist_bytes(data: bytes) -> Any:
    return plistlib.loads(data)


def load_json_bytes(data: bytes) -> Any:
    return json.loads(data.decode("utf-8"))


def detect_format(data: bytes, path: str = "") -> str:
    """按扩展名判断格式；无扩展名线索时看首个非空白字节。"""
    if path.lower().endswith(".json"):
        return "json"
    if path:
        return "plist"
    head = data.lstrip()[:1]
    if head in (b"{", b"["):
        return "json"
    return "plist"


def load_input(data: bytes, *, fmt: str = "auto", path: str = "") -> Any:
    """把原始字节解析成 Python 对象。"""
    if fmt not in FORMATS:
        raise ValueError(f"unknown input format: {fmt}")
    if fmt == "auto":
        fmt = detect_format(data, path)
    if fmt == "json":
        return load_json_bytes(data)
    return load_plist_bytes(data)


def load_file(path: str, *, fmt: str = "auto") -> Any:
    """从磁盘读取输入文件并解析。"""
    with open(path, "rb") as f:
        data = f.read()
    return load_input(data, fmt=fmt, path=path)
