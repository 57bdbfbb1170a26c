"""
编码流程共享的轻量类型定义：可选能力协议与错误类型。
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class PlistNode(Protocol):
    """自行负责序列化的对象：直接返回一段 plist XML 片段。"""

    def to_plist_node(self) -> str: ...


@runtime_checkable
class AttributeMapping(Protocol):
    """记录类对象：把自身属性映射成字典后再按 `dict` 编码。"""

    def plist_attributes(self) -> Mapping[str, Any]: ...


class PlistEmitError(Exception):
    """plist 编码错误的基类。"""


class UnclassifiableScalarError(PlistEmitError, TypeError):
    """标量类型无法映射到 `string`/`integer`/`real`；出现即说明分类逻辑有缺陷。"""


class SnapshotUnavailableError(PlistEmitError, TypeError):
    """无法为不识别的对象生成二进制快照。"""


class DuplicateKeyError(PlistEmitError, ValueError):
    """字典中不同的键转成文本后相同。"""


class ControlCharacterError(PlistEmitError, ValueError):
    """文本含有 XML 1.0 不允许的控制字符（Tab、LF、CR 以外）。"""
