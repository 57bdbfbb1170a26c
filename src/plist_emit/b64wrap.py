"""
`<data>` 元素的 base64 折行编码。
"""

from __future__ import annotations

import base64

# Apple plist 约定每行 68 列，与 base64 模块默认的 76 列不同。
LINE_WIDTH = 68


def wrap_base64(data: bytes, width: int = LINE_WIDTH) -> str:
    """把字节编码为 base64，并按 `width` 列折行；首行前额外带一个换行。"""
    encoded = base64.b64encode(bytes(data)).decode("ascii")
    lines = [encoded[i:i + width] for i in range(0, len(encoded), width)]
    return "\n" + "".join(f"{line}\n" for line in lines)
