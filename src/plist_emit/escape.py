"""XML 文本转义。"""

from __future__ import annotations

import re

from .types import ControlCharacterError

# XML 1.0 只允许 Tab、LF、CR 三个控制字符。
_CONTROL_CHAR_RE = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f]")


def xml_escape(value: str) -> str:
    """转义 XML 保留字符，结果可安全放入元素内容或引号属性中。

    含非法控制字符时抛出 `ControlCharacterError`，二进制内容应改用 `bytes`（`<data>`）。
    """
    m = _CONTROL_CHAR_RE.search(value)
    if m is not None:
        raise ControlCharacterError(
            f"control character {m.group()!r} at index {m.start()} cannot appear in plist text; "
            "use bytes for binary content"
        )
    return (
        value.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )
