"""
对外入口：把值编码成 XML plist 文本或写入文件。

用法：
- `dump(obj)`：返回带文档外壳的完整 plist 文本。
- `dump(obj, envelope=False)`：只返回片段。
- `save_plist(obj, path)`：写入文件（覆盖已有内容）。
"""

from __future__ import annotations

from typing import Any

from .encode import Snapshot, default_snapshot, encode_node
from .envelope import wrap


def dump(
    obj: Any,
    envelope: bool = True,
    *,
    indent: str = "\t",
    snapshot: Snapshot | None = default_snapshot,
) -> str:
    """编码 `obj`；`envelope` 为假时不加 XML 声明与 `<plist>` 根元素。"""
    output = encode_node(obj, indent=indent, snapshot=snapshot)
    if envelope:
        output = wrap(output)
    return output


def save_plist(
    obj: Any,
    filename: str,
    *,
    indent: str = "\t",
    snapshot: Snapshot | None = default_snapshot,
) -> None:
    """把完整 plist 文档以 UTF-8 写入 `filename`。"""
    data = dump(obj, True, indent=indent, snapshot=snapshot).encode("utf-8")
    with open(filename, "wb") as f:
        f.write(data)


class PlistEmitMixin:
    """为任意类提供 `to_plist()` / `save_plist()` 便捷方法。"""

    def to_plist(self, envelope: bool = True) -> str:
        return dump(self, envelope)

    def save_plist(self, filename: str) -> None:
        save_plist(self, filename)
