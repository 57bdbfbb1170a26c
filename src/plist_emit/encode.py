"""
值到 plist XML 片段的递归编码。

按值的动态类型分派到对应元素：
- `str` / 枚举成员 -> `<string>`，`int` -> `<integer>`，`float` -> `<real>`
- `bool` -> `<true/>` / `<false/>`，`datetime` / `date` -> `<date>`
- `list` / `tuple` -> `<array>`，映射 -> `<dict>`（键按文本排序）
- 二进制流与 `bytes` -> `<data>`
- 其余对象先尝试 `to_plist_node()` / `plist_attributes()` / dataclass，
  最后回退为快照字节放入 `<data>`。
"""

from __future__ import annotations

import dataclasses
import datetime
import io
import pickle
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

from .b64wrap import wrap_base64
from .escape import xml_escape
from .indented import IndentedText
from .types import (
    AttributeMapping,
    DuplicateKeyError,
    PlistNode,
    SnapshotUnavailableError,
    UnclassifiableScalarError,
)

Snapshot = Callable[[Any], bytes]


def default_snapshot(obj: Any) -> bytes:
    """默认的通用二进制快照：`pickle`。"""
    return pickle.dumps(obj, protocol=pickle.HIGHEST_PROTOCOL)


def tag(name: str, contents: str = "") -> str:
    """输出单行元素；`contents` 须已转义。"""
    return f"<{name}>{contents}</{name}>\n"


def comment(content: str) -> str:
    return f"<!-- {content} -->\n"


def _is_symbol(value: object) -> bool:
    return isinstance(value, Enum) and not isinstance(value, (str, int, float))


def element_type(value: object) -> str:
    """返回标量对应的元素名；调用方应已完成分类。"""
    if isinstance(value, str) or _is_symbol(value):
        return "string"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "real"
    raise UnclassifiableScalarError(
        f"cannot map {type(value).__name__} to a plist scalar element"
    )


def scalar_text(value: object) -> str:
    """标量的文本形式（未转义）。"""
    if isinstance(value, str):
        return str.__str__(value)
    if _is_symbol(value):
        return value.name
    if isinstance(value, int):
        return int_text(value)
    if isinstance(value, float):
        return float.__repr__(value)
    return str(value)


# 小于解释器 int->str 位数上限（默认 4300 位）的分段宽度。
_DIGIT_CHUNK = 1000
_DIGIT_CHUNK_BASE = 10 ** _DIGIT_CHUNK


def int_text(value: int) -> str:
    """任意精度整数的十进制文本，不受 `sys.set_int_max_str_digits` 限制。"""
    value = int(value)
    if value < 0:
        return "-" + int_text(-value)
    if value < _DIGIT_CHUNK_BASE:
        return int.__repr__(value)
    chunks: list[int] = []
    while value:
        value, rem = divmod(value, _DIGIT_CHUNK_BASE)
        chunks.append(rem)
    head = int.__repr__(chunks.pop())
    return head + "".join(int.__repr__(c).zfill(_DIGIT_CHUNK) for c in reversed(chunks))


def key_text(key: object) -> str:
    """字典键的文本形式，决定排序与去重：枚举成员取 `name`，其余取 `str(key)`。"""
    if isinstance(key, Enum):
        return key.name
    return str(key)


def format_date(value: datetime.date) -> str:
    """格式化为 `YYYY-MM-DDTHH:MM:SSZ`；无时区的 `datetime` 视为 UTC。"""
    if isinstance(value, datetime.datetime):
        if value.utcoffset() is not None:
            value = value.astimezone(datetime.timezone.utc)
        hour, minute, second = value.hour, value.minute, value.second
    else:
        hour = minute = second = 0
    return "%04d-%02d-%02dT%02d:%02d:%02dZ" % (
        value.year, value.month, value.day, hour, minute, second,
    )


def _implements(value: object, protocol: type) -> bool:
    # 只认实例：类对象本身也带有同名方法，不能算实现了协议。
    return not isinstance(value, type) and isinstance(value, protocol)


def record_attributes(value: object) -> Mapping[Any, Any] | None:
    """记录类对象的属性映射；不是记录类时返回 `None`。"""
    if _implements(value, AttributeMapping):
        attrs = value.plist_attributes()
        if not isinstance(attrs, Mapping):
            raise TypeError(
                f"{type(value).__name__}.plist_attributes() must return a mapping, "
                f"got {type(attrs).__name__}"
            )
        return attrs
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    return None


def sorted_items(mapping: Mapping[Any, Any]) -> list[tuple[str, Any]]:
    """按键文本排序；不同键文本相同时抛出 `DuplicateKeyError`。"""
    by_text: dict[str, Any] = {}
    for key, item in mapping.items():
        text = key_text(key)
        if text in by_text:
            raise DuplicateKeyError(f"duplicate plist key: {text!r}")
        by_text[text] = item
    return sorted(by_text.items(), key=lambda kv: kv[0])


def read_stream(stream: io.IOBase) -> bytes:
    """从头读取整个流；文本流按 UTF-8 编码。"""
    stream.seek(0)
    contents = stream.read()
    if isinstance(contents, str):
        contents = contents.encode("utf-8")
    return contents


def write_node(out: IndentedText, value: Any, *, snapshot: Snapshot | None) -> None:
    """把 `value` 编码后写入 `out`（当前缩进层级）。"""
    if _implements(value, PlistNode):
        out.append(value.to_plist_node())
        return

    attrs = record_attributes(value)
    if attrs is not None:
        _write_dict(out, attrs, snapshot=snapshot)
    elif isinstance(value, bool):
        out.append("<true/>" if value else "<false/>")
    elif isinstance(value, datetime.date):
        out.append(tag("date", format_date(value)))
    elif isinstance(value, (str, int, float)) or _is_symbol(value):
        name = element_type(value)
        out.append(tag(name, xml_escape(scalar_text(value))), reindent=False)
    elif isinstance(value, (list, tuple)):
        if not value:
            out.append("<array/>")
            return
        with out.block("array"):
            for item in value:
                write_node(out, item, snapshot=snapshot)
    elif isinstance(value, Mapping):
        _write_dict(out, value, snapshot=snapshot)
    elif isinstance(value, io.IOBase):
        out.append(tag("data", wrap_base64(read_stream(value))))
    elif isinstance(value, (bytes, bytearray, memoryview)):
        out.append(tag("data", wrap_base64(value)))
    else:
        _write_opaque(out, value, snapshot=snapshot)


def _write_dict(out: IndentedText, mapping: Mapping[Any, Any], *, snapshot: Snapshot | None) -> None:
    if not mapping:
        out.append("<dict/>")
        return
    items = sorted_items(mapping)
    with out.block("dict"):
        for text, item in items:
            out.append(tag("key", xml_escape(text)), reindent=False)
            write_node(out, item, snapshot=snapshot)


def _write_opaque(out: IndentedText, value: Any, *, snapshot: Snapshot | None) -> None:
    type_name = type(value).__name__
    if snapshot is None:
        raise SnapshotUnavailableError(f"no snapshot serializer for {type_name} value")
    try:
        payload = snapshot(value)
    except (pickle.PicklingError, TypeError, AttributeError) as e:
        raise SnapshotUnavailableError(f"cannot snapshot {type_name} value: {e}") from e

    serializer = "pickle" if snapshot is default_snapshot else "a custom serializer"
    out.append(comment(
        "The <data> element below contains a Python object "
        f"which has been serialized with {serializer}."
    ))
    out.append(tag("data", wrap_base64(payload)))


def encode_node(
    value: Any,
    *,
    indent: str = "\t",
    snapshot: Snapshot | None = default_snapshot,
) -> str:
    """把单个值编码为不带文档外壳的 plist 片段。"""
    out = IndentedText(indent)
    write_node(out, value, snapshot=snapshot)
    return out.text()
